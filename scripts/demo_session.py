#!/usr/bin/env python3
"""Run a simulated resonance-tube session and print the derived speed of sound.

For every tuning fork the water level is set near the true resonance
(with a little hand jitter), a trial is recorded, and a line is fitted
through the accepted trials.

Usage:
    uv run python scripts/demo_session.py [seed]
"""

import sys

import numpy as np

from resonance_lab import ExperimentSession


def main() -> None:
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 7
    rng = np.random.default_rng(seed)
    session = ExperimentSession()

    for preset in session.settings.preset_frequencies:
        session.select_preset(preset)
        session.set_length(session.resonant_length() + rng.normal(0, 0.008))
        trial = session.record_trial()
        flag = "" if trial.accepted else " (Rejected)"
        print(
            f"#{trial.id:<2} f={trial.frequency_hz:6.1f} Hz  L={trial.length_m:.3f} m  "
            f"{trial.quality}{flag}"
        )

    stats = session.stats()
    print(f"Accepted: {stats.accepted_count} / {stats.total_count}")
    if stats.mean_speed is not None:
        print(f"Mean speed: {stats.mean_speed:.1f} m/s")

    fit = session.fit()
    if fit is None:
        print("4L = --  (need at least 2 accepted trials)")
    else:
        print(f"4L = {fit.slope:.2f}T + {fit.intercept:.3f}  (R²={fit.r2:.3f})")

    challenge = session.new_challenge("random", rng)
    print(challenge.prompt)
    result = session.check_answer(f"{challenge.answer:.3f}")
    print(result.feedback)


if __name__ == "__main__":
    main()
