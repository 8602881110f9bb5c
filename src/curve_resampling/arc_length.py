"""Arc-length tables and their inversion back to curve parameters."""

from __future__ import annotations

import logging
from typing import Callable, Optional

import numpy as np

from .config import validate_divisions
from .errors import InvalidParameterError

logger = logging.getLogger(__name__)


def build_arc_length_table(
    point_fn: Callable[[float], np.ndarray],
    divisions: int,
) -> np.ndarray:
    """
    Cumulative distance along `point_fn` sampled at `i / divisions`.

    Returns an array of `divisions + 1` non-decreasing values starting at 0.
    """
    divisions = validate_divisions(divisions)
    samples = np.array([point_fn(i / divisions) for i in range(divisions + 1)], dtype=float)
    step_lengths = np.linalg.norm(np.diff(samples, axis=0), axis=1)
    table = np.concatenate([[0.0], np.cumsum(step_lengths)])
    logger.debug("Built arc-length table: divisions=%d length=%.6g", divisions, table[-1])
    return table


def u_to_t(
    u: float,
    arc_lengths: np.ndarray,
    distance: Optional[float] = None,
) -> float:
    """
    Map an arc-length fraction `u` (or an absolute `distance`) to a curve parameter.

    The largest table entry not above the target distance is located by binary
    search; the parameter is then interpolated linearly inside that bracket.
    """
    table = np.asarray(arc_lengths, dtype=float)
    if table.ndim != 1 or table.shape[0] < 2:
        raise ValueError("`arc_lengths` must be a 1D table with at least two entries.")
    last = table.shape[0] - 1
    total = float(table[-1])

    if distance is None:
        if not 0.0 <= u <= 1.0:
            raise InvalidParameterError(f"`u` must be in [0, 1]; got {u!r}.")
        if u == 0.0:
            return 0.0
        if u == 1.0:
            return 1.0
        if total <= 0.0:
            # Stationary curve: no distance to invert, keep the parameter as-is.
            return float(u)
        target = u * total
    else:
        if not 0.0 <= distance <= total:
            raise InvalidParameterError(
                f"`distance` must be in [0, {total:.6g}]; got {distance!r}."
            )
        if distance == 0.0:
            return 0.0
        if distance == total:
            return 1.0
        target = float(distance)

    i = int(np.searchsorted(table, target, side="right")) - 1
    i = min(max(i, 0), last - 1)
    if table[i] == target:
        return i / last

    length_before = table[i]
    segment_length = table[i + 1] - length_before
    if segment_length <= 0.0:
        fraction = 0.0
    else:
        fraction = (target - length_before) / segment_length
    return (i + fraction) / last
