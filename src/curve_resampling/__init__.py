"""Catmull-Rom curve evaluation with arc-length resampling."""

from .api import (
    build_arc_length_table,
    evaluate,
    parameter_from_arc_fraction,
    sample,
)
from .arc_length import u_to_t
from .config import SUPPORTED_CURVE_TYPES, CurveConfig
from .cubic_poly import CubicPoly
from .errors import (
    CurveError,
    InsufficientPointsError,
    InvalidDivisionsError,
    InvalidParameterError,
)
from .spline import CatmullRomSpline, catmull_rom_point
from .validation import spacing_statistics, validate_points

__all__ = [
    "build_arc_length_table",
    "CatmullRomSpline",
    "catmull_rom_point",
    "CubicPoly",
    "CurveConfig",
    "CurveError",
    "evaluate",
    "InsufficientPointsError",
    "InvalidDivisionsError",
    "InvalidParameterError",
    "parameter_from_arc_fraction",
    "sample",
    "spacing_statistics",
    "SUPPORTED_CURVE_TYPES",
    "u_to_t",
    "validate_points",
]
