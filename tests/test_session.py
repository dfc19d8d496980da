"""Resonance Lab session tests — bench controls, trial workflow, fit, quiz."""

from __future__ import annotations

import numpy as np
import pytest

from resonance_lab.assessment.challenge import GradeStatus
from resonance_lab.config import Settings
from resonance_lab.errors import InvalidArgument
from resonance_lab.experiment.session import ExperimentSession
from resonance_lab.physics.scoring import QualityLabel


@pytest.fixture
def session() -> ExperimentSession:
    return ExperimentSession(Settings())


# ── Bench Controls ───────────────────────────────────────


def test_initial_state(session: ExperimentSession) -> None:
    assert session.frequency_hz == 320
    assert session.length_m == 0.55
    assert session.trials == ()
    assert session.fit_result is None
    assert session.challenge is None


def test_fine_adjust_clamped_to_band(session: ExperimentSession) -> None:
    session.select_preset(480)
    assert session.set_fine_adjust(300) == 700
    session.select_preset(256)
    assert session.set_fine_adjust(-100) == 180
    assert session.set_fine_adjust(3) == 259


def test_unknown_preset_rejected(session: ExperimentSession) -> None:
    with pytest.raises(InvalidArgument, match="not one of the presets"):
        session.select_preset(300)
    assert session.frequency_hz == 320


def test_length_clamped_to_slider(session: ExperimentSession) -> None:
    assert session.set_length(5.0) == 1.0
    assert session.set_length(-1.0) == 0.1


def test_nudge_length(session: ExperimentSession) -> None:
    session.nudge_length(2)
    assert session.length_m == pytest.approx(0.554)
    session.nudge_length(-3)
    assert session.length_m == pytest.approx(0.548)


def test_current_resonance(session: ExperimentSession) -> None:
    target, score = session.current_resonance()
    assert target == pytest.approx(0.25296875)
    assert score.quality == QualityLabel.POOR

    session.set_length(target)
    _, score = session.current_resonance()
    assert score.strength == 1.0
    assert score.accepted


# ── Trial Workflow ───────────────────────────────────────


def _record_at_resonance(session: ExperimentSession, preset: int) -> None:
    session.select_preset(preset)
    session.set_length(session.resonant_length())
    session.record_trial()


def test_record_trial_assigns_ids_and_clears_fit(session: ExperimentSession) -> None:
    first = session.record_trial()
    assert first.id == 1
    assert not first.accepted

    _record_at_resonance(session, 256)
    _record_at_resonance(session, 384)
    assert session.fit() is not None

    _record_at_resonance(session, 480)
    assert session.fit_result is None
    assert [t.id for t in session.trials] == [1, 2, 3, 4]


def test_fit_needs_two_accepted_trials(session: ExperimentSession) -> None:
    session.record_trial()  # far from resonance
    _record_at_resonance(session, 320)
    assert session.fit() is None


def test_fit_and_stats_recover_speed(session: ExperimentSession) -> None:
    session.record_trial()  # rejected
    for preset in (256, 320, 384, 480):
        _record_at_resonance(session, preset)

    fit = session.fit()
    assert fit is not None
    assert fit.count == 4
    assert fit.speed_of_sound == pytest.approx(343, rel=1e-6)
    assert fit.intercept == pytest.approx(-0.06, abs=1e-6)

    stats = session.stats()
    assert stats.accepted_count == 4
    assert stats.total_count == 5
    assert stats.mean_speed == pytest.approx(343)


def test_clear_trials(session: ExperimentSession) -> None:
    _record_at_resonance(session, 256)
    _record_at_resonance(session, 320)
    session.fit()
    session.clear_trials()

    assert session.trials == ()
    assert session.fit_result is None
    assert session.stats().mean_speed is None
    assert session.record_trial().id == 1


def test_trials_view_is_read_only(session: ExperimentSession) -> None:
    session.record_trial()
    view = session.trials
    assert isinstance(view, tuple)
    session.record_trial()
    assert len(view) == 1


def test_to_dict(session: ExperimentSession) -> None:
    _record_at_resonance(session, 320)
    state = session.to_dict()
    assert state["quality"] == "Excellent"
    assert state["trials"][0]["accepted"] is True
    assert state["stats"]["accepted_count"] == 1
    assert state["fit"] is None


# ── Assessment ───────────────────────────────────────────


def test_check_answer_without_challenge(session: ExperimentSession) -> None:
    assert session.check_answer("1.0").status == GradeStatus.NO_CHALLENGE


def test_challenge_round_trip(session: ExperimentSession) -> None:
    challenge = session.new_challenge("length_from_frequency", np.random.default_rng(3))
    assert session.challenge is challenge
    assert session.check_answer(f"{challenge.answer:.4f}").correct
    assert session.check_answer("not a number").status == GradeStatus.INVALID_INPUT
    # grading never consumes the challenge
    assert session.challenge is challenge


# ── Settings ─────────────────────────────────────────────


def test_custom_settings_drive_session() -> None:
    custom = Settings(tube_diameter_m=0.0, score_tolerance_m=0.01, initial_length_m=0.3)
    session = ExperimentSession(custom)
    assert session.length_m == 0.3
    assert session.resonant_length() == pytest.approx(343 / (4 * 320))


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("RESONANCE_LAB_TUBE_DIAMETER_M", "0.04")
    monkeypatch.setenv("RESONANCE_LAB_PRESET_FREQUENCIES", "[256, 512]")
    monkeypatch.setenv("RESONANCE_LAB_DEFAULT_PRESET_HZ", "512")
    loaded = Settings()
    assert loaded.tube_diameter_m == 0.04
    assert loaded.preset_frequencies == (256, 512)
    assert ExperimentSession(loaded).frequency_hz == 512


def test_version() -> None:
    from resonance_lab import __version__

    assert __version__ == "0.1.0"


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
