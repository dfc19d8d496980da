"""EXPERIMENT — Trial records and the in-memory bench session."""

from resonance_lab.experiment.trials import TrialRecord, record_trial
from resonance_lab.experiment.session import ExperimentSession

__all__ = [
    "TrialRecord",
    "record_trial",
    "ExperimentSession",
]
