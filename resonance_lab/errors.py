"""Resonance Lab exceptions.

Only caller mistakes raise. Missing data (too few points for a fit, no
accepted trials, an unparseable guess) is reported as a value instead.
"""


class ResonanceLabError(Exception):
    """Base class for all Resonance Lab errors."""


class InvalidArgument(ResonanceLabError, ValueError):
    """A physical quantity was outside the domain of the formula it was given to."""
