"""Command-line interface for training an SGD binary classifier."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from config import load_config
from index import load_libsvm
from plots.metrics import generate_plots
from runner.loop import run_training
from telemetry.writer import write_history, write_summary

log = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SGD binary linear classifier")
    parser.add_argument(
        "--config",
        required=True,
        help="Path to YAML configuration file.",
    )
    parser.add_argument(
        "--out",
        required=True,
        help="Output directory for history, summary and plots.",
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip writing matplotlib figures.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    cfg = load_config(args.config)
    logging.basicConfig(
        level=logging.INFO if cfg.run.logging else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    index = load_libsvm(cfg.data.path)
    log.info("loaded %d documents, %d features from %s", len(index), index.num_features(), cfg.data.path)
    report = run_training(cfg, index)

    out_dir = Path(args.out)
    write_history(out_dir / "history.jsonl", (record.to_dict() for record in report.history))
    write_summary(out_dir / "summary.json", report.to_dict())
    if not args.no_plots:
        generate_plots(report.history, out_dir / "plots")


if __name__ == "__main__":
    main()
