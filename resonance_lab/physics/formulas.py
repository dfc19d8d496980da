"""Quarter-wave resonance formulas for a tube closed at one end.

The air column above the water behaves as a closed pipe whose effective
length is the physical length plus an end correction proportional to the
tube diameter:

    v = 4 · f · (L + k·d)        k = END_CORRECTION_FACTOR

Every function here inverts or reuses that single relation, so

    frequency_from_length(speed_of_sound(f, L, d), L, d) == f

holds to floating-point precision for any valid f, L, d.
"""

from __future__ import annotations

from resonance_lab.errors import InvalidArgument

# ── Constants ────────────────────────────────────────────

END_CORRECTION_FACTOR = 0.3  # k in L_eff = L + k·d


# ── Domain Checks ────────────────────────────────────────


def require_positive(value: float, message: str) -> None:
    # `not value > 0` also rejects NaN
    if not value > 0:
        raise InvalidArgument(message)


def require_non_negative(value: float, message: str) -> None:
    if not value >= 0:
        raise InvalidArgument(message)


def clamp(value: float, low: float, high: float) -> float:
    """Limit value to [low, high]."""
    return min(high, max(low, value))


# ── Closed-Form Equations ────────────────────────────────


def speed_of_sound(frequency_hz: float, length_m: float, diameter_m: float) -> float:
    """Speed of sound implied by a first-harmonic resonance at (f, L, d).

    Args:
        frequency_hz: Driving frequency, > 0.
        length_m: Air-column length above the water, >= 0.
        diameter_m: Inner tube diameter, >= 0.

    Returns:
        4·f·(L + k·d) in m/s.
    """
    require_positive(frequency_hz, "Frequency must be greater than zero.")
    require_non_negative(length_m, "Air-column length cannot be negative.")
    require_non_negative(diameter_m, "Tube diameter cannot be negative.")
    return 4 * frequency_hz * (length_m + END_CORRECTION_FACTOR * diameter_m)


def frequency_from_length(speed_ms: float, length_m: float, diameter_m: float) -> float:
    """First-harmonic frequency of an air column of the given length."""
    require_positive(speed_ms, "Speed of sound must be greater than zero.")
    require_non_negative(length_m, "Air-column length cannot be negative.")
    require_non_negative(diameter_m, "Tube diameter cannot be negative.")

    denominator = 4 * (length_m + END_CORRECTION_FACTOR * diameter_m)
    if denominator <= 0:
        raise InvalidArgument("Invalid denominator for frequency calculation.")
    return speed_ms / denominator


def resonant_length(speed_ms: float, frequency_hz: float, diameter_m: float) -> float:
    """Air-column length that resonates at frequency_hz (first harmonic).

    Clamped at zero: a very high frequency in a wide tube would otherwise
    ask for a negative water level.
    """
    return resonant_length_for_mode(speed_ms, frequency_hz, diameter_m, mode=1)


def resonant_length_for_mode(
    speed_ms: float,
    frequency_hz: float,
    diameter_m: float,
    mode: int = 1,
) -> float:
    """Resonant length for the given odd harmonic (1, 3, 5, ...).

    A closed pipe only supports odd multiples of the quarter wavelength,
    so even or non-positive modes are rejected.
    """
    if isinstance(mode, bool) or not isinstance(mode, int) or mode <= 0 or mode % 2 == 0:
        raise InvalidArgument("Harmonic mode must be a positive odd integer.")
    require_positive(speed_ms, "Speed of sound must be greater than zero.")
    require_positive(frequency_hz, "Frequency must be greater than zero.")
    require_non_negative(diameter_m, "Tube diameter cannot be negative.")
    return max(0.0, (mode * speed_ms) / (4 * frequency_hz) - END_CORRECTION_FACTOR * diameter_m)


def period(frequency_hz: float) -> float:
    """Oscillation period T = 1/f in seconds."""
    require_positive(frequency_hz, "Frequency must be greater than zero.")
    return 1 / frequency_hz


def four_times_length(length_m: float) -> float:
    """4·L, the y-axis of the T vs 4L graph."""
    require_non_negative(length_m, "Air-column length cannot be negative.")
    return 4 * length_m
