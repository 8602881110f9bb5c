"""Cubic Hermite segment used for each Catmull-Rom span."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

import numpy as np

Scalar = Union[float, np.ndarray]


@dataclass
class CubicPoly:
    """
    Cubic polynomial p(s) = c0 + c1*s + c2*s^2 + c3*s^3 on s in [0, 1].

    Coefficients may be floats or equally shaped arrays, in which case every
    array entry is an independent axis evaluated in one call.
    """

    c0: Scalar
    c1: Scalar
    c2: Scalar
    c3: Scalar

    @classmethod
    def hermite(cls, x0: Scalar, x1: Scalar, t0: Scalar, t1: Scalar) -> "CubicPoly":
        """Polynomial with p(0)=x0, p(1)=x1, p'(0)=t0 and p'(1)=t1."""
        return cls(
            c0=x0,
            c1=t0,
            c2=-3 * x0 + 3 * x1 - 2 * t0 - t1,
            c3=2 * x0 - 2 * x1 + t0 + t1,
        )

    @classmethod
    def catmull_rom(
        cls,
        x0: Scalar,
        x1: Scalar,
        x2: Scalar,
        x3: Scalar,
        tension: float,
    ) -> "CubicPoly":
        return cls.hermite(x1, x2, tension * (x2 - x0), tension * (x3 - x1))

    @classmethod
    def nonuniform_catmull_rom(
        cls,
        x0: Scalar,
        x1: Scalar,
        x2: Scalar,
        x3: Scalar,
        dt0: float,
        dt1: float,
        dt2: float,
    ) -> "CubicPoly":
        # Tangents for a span parameterized over [0, dt1], then rescaled to [0, 1].
        t1 = (x1 - x0) / dt0 - (x2 - x0) / (dt0 + dt1) + (x2 - x1) / dt1
        t2 = (x2 - x1) / dt1 - (x3 - x1) / (dt1 + dt2) + (x3 - x2) / dt2
        return cls.hermite(x1, x2, t1 * dt1, t2 * dt1)

    def calc(self, s: float) -> Scalar:
        s2 = s * s
        s3 = s2 * s
        return self.c0 + self.c1 * s + self.c2 * s2 + self.c3 * s3
