"""Catmull-Rom curve evaluation and resampling."""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np

from .arc_length import build_arc_length_table, u_to_t
from .config import CurveConfig
from .cubic_poly import CubicPoly
from .errors import InsufficientPointsError, InvalidParameterError
from .vector import add, as_points, distance_sq, sub

logger = logging.getLogger(__name__)

# Spans shorter than this (after applying the distance exponent) are treated as repeated points.
_MIN_SPAN = 1e-4


def _check_point_count(count: int, closed: bool) -> None:
    required = 3 if closed else 2
    if count < required:
        kind = "closed" if closed else "open"
        raise InsufficientPointsError(
            f"A {kind} curve needs at least {required} control points; got {count}."
        )


def _check_parameter(t: float, closed: bool) -> None:
    if not math.isfinite(t):
        raise InvalidParameterError(f"`t` must be finite; got {t!r}.")
    # Closed curves are periodic, so any finite parameter wraps onto the loop.
    if not closed and not 0.0 <= t <= 1.0:
        raise InvalidParameterError(f"`t` must be in [0, 1] for open curves; got {t!r}.")


def _evaluate(points: np.ndarray, t: float, config: CurveConfig) -> np.ndarray:
    closed = config.closed
    l = len(points)
    p = (l - (0 if closed else 1)) * t
    int_point = math.floor(p)
    weight = p - int_point

    if closed:
        if int_point <= 0:
            int_point += (abs(int_point) // l + 1) * l
    elif weight == 0 and int_point == l - 1:
        # Landing exactly on the last point: stay at the end of the final span.
        int_point = l - 2
        weight = 1.0

    if closed or int_point > 0:
        p0 = points[(int_point - 1) % l]
    else:
        # Reflect the second point through the first.
        p0 = add(sub(points[0], points[1]), points[0])

    p1 = points[int_point % l]
    p2 = points[(int_point + 1) % l]

    if closed or int_point + 2 < l:
        p3 = points[(int_point + 2) % l]
    else:
        p3 = add(sub(points[l - 1], points[l - 2]), points[l - 1])

    if config.is_uniform:
        poly = CubicPoly.catmull_rom(p0, p1, p2, p3, config.tension)
    else:
        power = config.power
        dt0 = distance_sq(p0, p1) ** power
        dt1 = distance_sq(p1, p2) ** power
        dt2 = distance_sq(p2, p3) ** power

        if dt1 < _MIN_SPAN:
            dt1 = 1.0
        if dt0 < _MIN_SPAN:
            dt0 = dt1
        if dt2 < _MIN_SPAN:
            dt2 = dt1

        poly = CubicPoly.nonuniform_catmull_rom(p0, p1, p2, p3, dt0, dt1, dt2)

    return np.asarray(poly.calc(weight), dtype=float)


def catmull_rom_point(
    points,
    t: float,
    config: Optional[CurveConfig] = None,
) -> np.ndarray:
    """Evaluate the curve through `points` at parameter `t` without building a spline object."""
    cfg = config if config is not None else CurveConfig()
    pts = as_points(points)
    _check_point_count(len(pts), cfg.closed)
    _check_parameter(t, cfg.closed)
    return _evaluate(pts, t, cfg)


class CatmullRomSpline:
    """
    Catmull-Rom spline through a sequence of 3D control points.

    Supports uniform, centripetal and chordal tangents, open or closed curves,
    and resampling evenly by parameter or by arc length. Control points may be
    replaced between calls through `points`; no state is kept between calls.
    """

    def __init__(self, points, config: Optional[CurveConfig] = None):
        """
        Args:
            points: Array of shape (N, 3), or (N, 2) for planar curves at z=0.
            config: Curve options; defaults to an open uniform curve.
        """
        self.config = config if config is not None else CurveConfig()
        self.points = points

    @property
    def points(self) -> np.ndarray:
        return self._points

    @points.setter
    def points(self, value) -> None:
        self._points = as_points(value)

    @property
    def closed(self) -> bool:
        return self.config.closed

    def _require_points(self) -> None:
        _check_point_count(len(self._points), self.config.closed)

    def get_point(self, t: float) -> np.ndarray:
        """Point on the curve at parameter `t`."""
        self._require_points()
        _check_parameter(t, self.config.closed)
        return _evaluate(self._points, t, self.config)

    def get_arc_lengths(self, divisions: Optional[int] = None) -> np.ndarray:
        self._require_points()
        if divisions is None:
            divisions = self.config.arc_length_divisions
        return build_arc_length_table(
            lambda t: _evaluate(self._points, t, self.config),
            divisions,
        )

    def get_length(self, divisions: Optional[int] = None) -> float:
        """Total arc length, approximated at the given table resolution."""
        return float(self.get_arc_lengths(divisions)[-1])

    def get_u_to_t_mapping(
        self,
        u: float,
        distance: Optional[float] = None,
        arc_lengths: Optional[np.ndarray] = None,
    ) -> float:
        if arc_lengths is None:
            arc_lengths = self.get_arc_lengths()
        return u_to_t(u, arc_lengths, distance=distance)

    def get_spaced_point(self, u: float, arc_lengths: Optional[np.ndarray] = None) -> np.ndarray:
        """Point at fraction `u` of the total arc length."""
        t = self.get_u_to_t_mapping(u, arc_lengths=arc_lengths)
        return self.get_point(t)

    def get_points(self, n: int, spaced: bool = False) -> np.ndarray:
        """
        Sample `n` points along the curve.

        Closed curves sample t = i/n so the seam is not emitted twice; open curves
        sample t = i/(n-1) and include both end points. With `spaced`, samples are
        evenly distributed by arc length instead of by parameter.
        """
        self._require_points()
        if n <= 0:
            return np.empty((0, 3), dtype=float)

        closed = self.config.closed
        arc_lengths = self.get_arc_lengths() if spaced else None
        if arc_lengths is not None and arc_lengths[-1] <= 0.0:
            logger.warning("Curve has zero arc length; spaced samples fall back to parameter spacing.")
        logger.debug("Sampling %d points (spaced=%s, closed=%s).", n, spaced, closed)

        result = np.zeros((n, 3), dtype=float)
        for i in range(n):
            if closed:
                t = i / n
            else:
                t = i / (n - 1) if n > 1 else 0.0
            if arc_lengths is not None:
                result[i] = self.get_spaced_point(t, arc_lengths)
            else:
                result[i] = self.get_point(t)
        return result
