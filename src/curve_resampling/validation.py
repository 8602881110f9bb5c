"""Resampled point validation helpers."""

from __future__ import annotations

from typing import Optional

import numpy as np


def spacing_statistics(points: np.ndarray, closed: bool = False) -> dict[str, float]:
    """Mean/std/min/max of distances between consecutive points."""
    pts = np.asarray(points, dtype=float)
    if closed and len(pts) > 1:
        pts = np.vstack([pts, pts[:1]])
    if len(pts) < 2:
        return {"mean": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}
    steps = np.linalg.norm(np.diff(pts, axis=0), axis=1)
    return {
        "mean": float(np.mean(steps)),
        "std": float(np.std(steps)),
        "min": float(np.min(steps)),
        "max": float(np.max(steps)),
    }


def validate_points(
    points: np.ndarray,
    closed: bool = False,
    spacing_tolerance: Optional[float] = None,
    min_step: float = 1e-12,
) -> list[str]:
    """
    Validate a resampled point sequence and return warning strings.

    The function is non-throwing and intended for debug/QA hardening.
    `spacing_tolerance` is the allowed relative deviation of any step from the
    mean step; spacing is not checked when it is None.
    """
    warnings: list[str] = []
    try:
        pts = np.asarray(points, dtype=float)
    except (TypeError, ValueError):
        return ["Points could not be converted to a float array."]
    if pts.ndim != 2 or pts.shape[1] != 3:
        return [f"Points must have shape (N, 3); got shape={pts.shape}."]
    if len(pts) == 0:
        return warnings

    non_finite_count = int(np.count_nonzero(~np.all(np.isfinite(pts), axis=1)))
    if non_finite_count:
        warnings.append(f"{non_finite_count} point(s) contain NaN/Inf values.")
        return warnings

    stats = spacing_statistics(pts, closed=closed)
    loop = np.vstack([pts, pts[:1]]) if closed and len(pts) > 1 else pts
    steps = np.linalg.norm(np.diff(loop, axis=0), axis=1)
    coincident_count = int(np.count_nonzero(steps <= min_step))
    if coincident_count:
        warnings.append(f"{coincident_count} consecutive point pair(s) coincide.")

    if spacing_tolerance is not None and stats["mean"] > 0:
        deviation = float(np.max(np.abs(steps - stats["mean"]))) / stats["mean"]
        if deviation > spacing_tolerance:
            warnings.append(
                f"Point spacing deviates {deviation:.3f} from the mean step "
                f"(tolerance {spacing_tolerance:.3f})."
            )
    return warnings
