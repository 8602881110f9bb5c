"""Exception types raised for invalid curve input."""

from __future__ import annotations


class CurveError(ValueError):
    """Base class for structural curve errors."""


class InsufficientPointsError(CurveError):
    """Too few control points to form the requested curve."""


class InvalidParameterError(CurveError):
    """Curve parameter or arc-length fraction outside its valid range."""


class InvalidDivisionsError(CurveError):
    """Arc-length sampling resolution below 1."""
