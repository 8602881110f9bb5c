#!/usr/bin/env python3
"""Lightweight benchmark for arc-length resampling across curve types."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import statistics
import sys
import time

import numpy as np


def _resolve_src_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "src"


SRC_DIR = _resolve_src_dir()
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from curve_resampling.config import SUPPORTED_CURVE_TYPES, CurveConfig  # noqa: E402
from curve_resampling.spline import CatmullRomSpline  # noqa: E402
from curve_resampling.validation import spacing_statistics  # noqa: E402


def _configure_logging(log_level: str) -> None:
    level = getattr(logging, (log_level or "INFO").upper(), None)
    if not isinstance(level, int):
        raise ValueError(
            f"Invalid --log-level: {log_level!r}. "
            "Allowed values: DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    logging.basicConfig(level=level, format="%(message)s", force=True)


def _random_control_points(count: int, seed: int) -> np.ndarray:
    rng = np.random.default_rng(seed)
    # Uneven steps make parameter spacing visibly different from arc-length spacing.
    steps = rng.uniform(0.05, 2.0, size=(count, 3)) * rng.choice([-1.0, 1.0], size=(count, 3))
    return np.cumsum(steps, axis=0)


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark Catmull-Rom resampling runtime")
    parser.add_argument("--control-points", type=int, default=12, help="Number of random control points")
    parser.add_argument("--samples", type=int, default=500, help="Points per resampling run")
    parser.add_argument("--repeat", type=int, default=3, help="Number of repeated runs")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--closed", action="store_true", help="Benchmark closed curves")
    parser.add_argument(
        "--config-json",
        type=Path,
        default=None,
        help="Optional JSON file serialized from CurveConfig (curve_type is overridden per run).",
    )
    parser.add_argument(
        "--report-json",
        type=Path,
        default=None,
        help="Optional output JSON report path",
    )
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level.")
    args = parser.parse_args()
    _configure_logging(args.log_level)

    base = CurveConfig.from_json(args.config_json) if args.config_json else CurveConfig()
    points = _random_control_points(args.control_points, args.seed)

    summary: dict[str, dict] = {}
    for curve_type in SUPPORTED_CURVE_TYPES:
        cfg = CurveConfig(
            closed=args.closed or base.closed,
            curve_type=curve_type,
            tension=base.tension,
            arc_length_divisions=base.arc_length_divisions,
        )
        spline = CatmullRomSpline(points, cfg)
        runtimes_s: list[float] = []
        sampled = None
        for _ in range(args.repeat):
            t0 = time.perf_counter()
            sampled = spline.get_points(args.samples, spaced=True)
            runtimes_s.append(time.perf_counter() - t0)
        raw = spline.get_points(args.samples, spaced=False)
        summary[curve_type] = {
            "runtime_s": {
                "min": min(runtimes_s),
                "max": max(runtimes_s),
                "median": statistics.median(runtimes_s),
            },
            "spaced_steps": spacing_statistics(sampled, closed=cfg.closed),
            "raw_steps": spacing_statistics(raw, closed=cfg.closed),
        }

    print("Benchmark summary")
    print(json.dumps(summary, indent=2))

    if args.report_json is not None:
        args.report_json.parent.mkdir(parents=True, exist_ok=True)
        args.report_json.write_text(json.dumps(summary, indent=2))
        print(f"Wrote report: {args.report_json}")


if __name__ == "__main__":
    main()
