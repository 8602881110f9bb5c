"""Configuration model for Catmull-Rom curve evaluation."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import json
import math
import numbers
from pathlib import Path
from typing import Any

from .errors import InvalidDivisionsError


SUPPORTED_CURVE_TYPES = ("uniform", "centripetal", "chordal")
CURVE_TYPE_ALIASES = {"catmullrom": "uniform"}
# Exponent applied to squared control-point distances for non-uniform spans.
NONUNIFORM_POWERS = {"centripetal": 0.25, "chordal": 0.5}


def _validate_choice(field_name: str, value: str, allowed: tuple[str, ...]) -> None:
    if value not in allowed:
        allowed_str = ", ".join(allowed)
        raise ValueError(f"Invalid `{field_name}`: {value!r}. Allowed values: {allowed_str}.")


@dataclass
class CurveConfig:
    """Curve shape and arc-length sampling options."""

    closed: bool = False  # wrap from the last control point back to the first.
    curve_type: str = "uniform"  # uniform | centripetal | chordal.
    tension: float = 0.5  # [-] tangent scale, uniform curves only.
    arc_length_divisions: int = 200  # [samples] arc-length table resolution.

    def __post_init__(self) -> None:
        self.curve_type = CURVE_TYPE_ALIASES.get(self.curve_type, self.curve_type)
        _validate_choice("curve_type", self.curve_type, SUPPORTED_CURVE_TYPES)
        if not math.isfinite(self.tension):
            raise ValueError("`tension` must be finite.")
        validate_divisions(self.arc_length_divisions, field_name="arc_length_divisions")

    @property
    def is_uniform(self) -> bool:
        return self.curve_type == "uniform"

    @property
    def power(self) -> float:
        """Distance exponent for centripetal/chordal curves."""
        if self.is_uniform:
            raise ValueError("`power` is only defined for centripetal and chordal curves.")
        return NONUNIFORM_POWERS[self.curve_type]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_json(self, output_path: Path) -> None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "CurveConfig":
        raw = dict(payload)
        # Older payloads used the short `type` key.
        if "type" in raw and "curve_type" not in raw:
            raw["curve_type"] = raw.pop("type")
        return cls(**raw)

    @classmethod
    def from_json(cls, input_path: Path) -> "CurveConfig":
        payload = json.loads(input_path.read_text())
        return cls.from_dict(payload)


def validate_divisions(divisions: int, field_name: str = "divisions") -> int:
    if isinstance(divisions, bool) or not isinstance(divisions, numbers.Integral):
        raise InvalidDivisionsError(f"`{field_name}` must be an integer; got {divisions!r}.")
    if divisions < 1:
        raise InvalidDivisionsError(f"`{field_name}` must be >= 1; got {divisions}.")
    return int(divisions)
