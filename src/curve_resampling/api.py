"""Public programmatic API for curve evaluation and resampling."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .arc_length import u_to_t
from .spline import CatmullRomSpline


def evaluate(curve: CatmullRomSpline, t: float) -> np.ndarray:
    """Point on `curve` at parameter `t`."""
    return curve.get_point(t)


def build_arc_length_table(
    curve: CatmullRomSpline,
    divisions: Optional[int] = None,
) -> np.ndarray:
    """Cumulative arc-length table of `curve`; defaults to the configured resolution."""
    return curve.get_arc_lengths(divisions)


def parameter_from_arc_fraction(
    table: np.ndarray,
    u: float,
    distance: Optional[float] = None,
) -> float:
    """Curve parameter at arc-length fraction `u`, or at an absolute `distance` when given."""
    return u_to_t(u, table, distance=distance)


def sample(curve: CatmullRomSpline, n: int, spaced: bool = False) -> np.ndarray:
    """Sample `n` points by parameter, or evenly by arc length when `spaced`."""
    return curve.get_points(n, spaced=spaced)
