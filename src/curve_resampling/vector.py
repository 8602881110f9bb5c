"""Small 3-vector helpers shared by the curve evaluator."""

from __future__ import annotations

import numpy as np


def distance_sq(a: np.ndarray, b: np.ndarray) -> float:
    d = np.asarray(b, dtype=float) - np.asarray(a, dtype=float)
    return float(np.dot(d, d))


def distance(a: np.ndarray, b: np.ndarray) -> float:
    return float(np.sqrt(distance_sq(a, b)))


def add(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) + np.asarray(b, dtype=float)


def sub(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    return np.asarray(a, dtype=float) - np.asarray(b, dtype=float)


def as_points(points, z: float = 0.0) -> np.ndarray:
    """
    Validate control points and return them as a float array of shape (N, 3).

    Points of shape (N, 2) are lifted to 3D with a constant third coordinate `z`.
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim != 2:
        raise ValueError(f"`points` must be a 2D array of shape (N, 3); got ndim={pts.ndim}.")
    if pts.shape[1] == 2:
        pts = np.column_stack([pts, np.full(len(pts), float(z))])
    if pts.shape[1] != 3:
        raise ValueError(f"`points` must have shape (N, 3) or (N, 2); got shape={pts.shape}.")
    if not np.all(np.isfinite(pts)):
        raise ValueError("`points` contains non-finite values (NaN/Inf).")
    return pts
