"""Resonance Lab formula tests — closed-form tube equations and their domains."""

from __future__ import annotations

import math

import pytest

from resonance_lab.errors import InvalidArgument
from resonance_lab.physics.formulas import (
    END_CORRECTION_FACTOR,
    clamp,
    four_times_length,
    frequency_from_length,
    period,
    resonant_length,
    resonant_length_for_mode,
    speed_of_sound,
)


# ── Known Values ─────────────────────────────────────────


def test_speed_of_sound_first_harmonic() -> None:
    """4·f·(L + 0.3·d) for f=320 Hz, L=0.25 m, d=0.05 m is 339.2 m/s."""
    assert speed_of_sound(320, 0.25, 0.05) == pytest.approx(339.2, abs=1e-12)


def test_resonant_length_inverts_quarter_wave() -> None:
    """v/(4f) − 0.3·d for v=343, f=320, d=0.05."""
    assert resonant_length(343, 320, 0.05) == pytest.approx(0.25296875, abs=1e-12)


def test_end_correction_factor() -> None:
    assert END_CORRECTION_FACTOR == 0.3


def test_resonant_length_clamped_at_zero() -> None:
    """Very high frequency in a wide tube would need a negative column."""
    assert resonant_length(343, 5000, 0.5) == 0.0


def test_third_harmonic_length() -> None:
    """Mode 3 puts three quarter wavelengths in the column."""
    expected = 3 * 343 / (4 * 320) - END_CORRECTION_FACTOR * 0.05
    assert resonant_length_for_mode(343, 320, 0.05, 3) == pytest.approx(expected)
    assert resonant_length_for_mode(343, 320, 0.05, 1) == resonant_length(343, 320, 0.05)


def test_period_and_four_l() -> None:
    assert period(250) == pytest.approx(0.004)
    assert four_times_length(0.3) == pytest.approx(1.2)
    assert four_times_length(0) == 0


def test_frequency_from_zero_length_uses_end_correction() -> None:
    """A zero-length column still has an effective length of 0.3·d."""
    assert frequency_from_length(343, 0, 0.05) == pytest.approx(343 / (4 * 0.015))


def test_clamp() -> None:
    assert clamp(5, 0, 1) == 1
    assert clamp(-5, 0, 1) == 0
    assert clamp(0.5, 0, 1) == 0.5


# ── Round Trip ───────────────────────────────────────────


_LENGTH_DIAMETER_PAIRS = [
    (length, diameter)
    for length in (0.0, 0.1, 0.253, 0.8)
    for diameter in (0.0, 0.025, 0.05)
    if (length, diameter) != (0.0, 0.0)  # zero effective length has no frequency
]


@pytest.mark.parametrize("frequency", [180.0, 256.0, 320.0, 426.0, 700.0])
@pytest.mark.parametrize(("length", "diameter"), _LENGTH_DIAMETER_PAIRS)
def test_speed_and_frequency_invert_each_other(frequency: float, length: float, diameter: float) -> None:
    """frequency_from_length(speed_of_sound(f, L, d), L, d) recovers f."""
    speed = speed_of_sound(frequency, length, diameter)
    assert frequency_from_length(speed, length, diameter) == pytest.approx(frequency, abs=1e-9)


def test_resonant_length_round_trip() -> None:
    """Length predicted for f resonates back at f."""
    length = resonant_length(343, 384, 0.05)
    assert frequency_from_length(343, length, 0.05) == pytest.approx(384, abs=1e-9)


# ── Domain Errors ────────────────────────────────────────


@pytest.mark.parametrize(
    "args",
    [
        (0, 0.25, 0.05),
        (-320, 0.25, 0.05),
        (320, -0.01, 0.05),
        (320, 0.25, -0.05),
        (math.nan, 0.25, 0.05),
    ],
)
def test_speed_of_sound_rejects_bad_input(args: tuple[float, float, float]) -> None:
    with pytest.raises(InvalidArgument):
        speed_of_sound(*args)


@pytest.mark.parametrize(
    "args",
    [
        (0, 0.25, 0.05),
        (-343, 0.25, 0.05),
        (343, -0.25, 0.05),
        (343, 0.25, -0.05),
        (343, 0.0, 0.0),
    ],
)
def test_frequency_from_length_rejects_bad_input(args: tuple[float, float, float]) -> None:
    with pytest.raises(InvalidArgument):
        frequency_from_length(*args)


@pytest.mark.parametrize(
    "args",
    [
        (0, 320, 0.05),
        (343, 0, 0.05),
        (343, -320, 0.05),
        (343, 320, -0.05),
    ],
)
def test_resonant_length_rejects_bad_input(args: tuple[float, float, float]) -> None:
    with pytest.raises(InvalidArgument):
        resonant_length(*args)


@pytest.mark.parametrize("mode", [0, -1, 2, 4, 1.5, True])
def test_resonant_length_for_mode_requires_positive_odd_integer(mode: object) -> None:
    with pytest.raises(InvalidArgument, match="positive odd integer"):
        resonant_length_for_mode(343, 320, 0.05, mode)  # type: ignore[arg-type]


def test_period_and_four_l_domains() -> None:
    with pytest.raises(InvalidArgument):
        period(0)
    with pytest.raises(InvalidArgument):
        four_times_length(-0.1)


def test_invalid_argument_is_value_error() -> None:
    """Callers that already catch ValueError keep working."""
    with pytest.raises(ValueError):
        period(-1)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
