from __future__ import annotations

import argparse
import logging

from . import settings
from .factory import CurveFactory
from .pipeline import run_pipeline
from .report import format_report
from .types import FactoryConfig, PipelineConfig


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="python -m curvekit.cli", description="Generate random curves and report circle radii")
    p.add_argument("--count", type=int, default=settings.DEFAULT_CURVE_COUNT, help="Number of curves to generate")
    p.add_argument("--seed", type=int, default=settings.DEFAULT_SEED, help="Random seed (default: OS entropy)")
    p.add_argument("--precision", type=int, default=settings.DEFAULT_PRECISION, help="Significant digits in output")
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ns = p.parse_args(argv)

    if ns.count < 0:
        p.error("--count must be >= 0")
    if ns.seed is not None and ns.seed < 0:
        p.error("--seed must be >= 0")
    if ns.precision < 1:
        p.error("--precision must be >= 1")

    logging.basicConfig(level=getattr(logging, ns.log_level), format=settings.LOG_FORMAT)

    cfg = PipelineConfig(count=ns.count, factory=FactoryConfig(seed=ns.seed))
    report = run_pipeline(cfg, CurveFactory(config=cfg.factory))
    for line in format_report(report, precision=ns.precision):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
