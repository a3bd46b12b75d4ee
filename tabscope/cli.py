"""
Tabscope CLI

Profile a CSV file (or a built-in sample) and print the insights.
Optional artifacts: JSON payload, Markdown report, PNG charts.
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional

from tabscope.__version__ import __version__
from tabscope.config.loader import load_config
from tabscope.config.options import options_from_config
from tabscope.core.models import AnalysisResult
from tabscope.errors import ConfigError
from tabscope.samples import list_samples
from tabscope.service import AnalysisOutcome, analyze_file, analyze_sample

logger = logging.getLogger(__name__)


# -------------------------------------------------
# ARTIFACTS
# -------------------------------------------------
def write_artifacts(
    outcome: AnalysisOutcome,
    json_path: Optional[str] = None,
    markdown_path: Optional[str] = None,
    charts_dir: Optional[str] = None,
    dpi: int = 150,
) -> None:
    result: AnalysisResult = outcome.result

    if json_path == "-":
        print(json.dumps(result.to_dict(), indent=2))
    elif json_path:
        from tabscope.reporting import write_json

        path = write_json(result, json_path)
        logger.info("JSON written: %s", path)

    if markdown_path:
        from tabscope.reporting import MarkdownReport

        path = MarkdownReport(title=f"Data Analysis: {outcome.source}").build(
            result, markdown_path
        )
        logger.info("Markdown written: %s", path)

    if charts_dir:
        # matplotlib is only imported when charts are requested
        from tabscope.visuals import render_all

        for path in render_all(result, charts_dir, dpi=dpi):
            logger.info("Chart written: %s", path)


def print_summary(outcome: AnalysisOutcome) -> None:
    print(f"\nAnalysis of {outcome.source}")
    for insight in outcome.result.insights:
        print(f"  - {insight}")


# -------------------------------------------------
# CLI ENTRY
# -------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tabscope",
        description=f"Tabscope v{__version__}: profile delimited tabular data",
    )

    parser.add_argument("input", nargs="?", help="Input CSV file")
    parser.add_argument("--sample", help="Analyze a built-in sample dataset")
    parser.add_argument("--list-samples", action="store_true", help="List sample datasets")
    parser.add_argument("--config", help="Path to config YAML")
    parser.add_argument("--delimiter", help="Field delimiter (default: comma)")

    parser.add_argument("--json", metavar="PATH", help="Write JSON payload ('-' for stdout)")
    parser.add_argument("--markdown", metavar="PATH", help="Write Markdown report")
    parser.add_argument("--charts", metavar="DIR", help="Write PNG charts into DIR")

    parser.add_argument("--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # ---- VERSION ----
    if args.version:
        print(f"Tabscope v{__version__}")
        return 0

    if args.list_samples:
        for name in list_samples():
            print(name)
        return 0

    # ---- LOGGING ----
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    if bool(args.input) == bool(args.sample):
        parser.error("provide exactly one of INPUT or --sample")

    # ---- CONFIG ----
    try:
        config = load_config(args.config)
        options = options_from_config(config)
        if args.delimiter:
            delimiter = "\t" if args.delimiter == "\\t" else args.delimiter
            options = dataclasses.replace(options, delimiter=delimiter)
    except (ConfigError, FileNotFoundError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    # ---- ANALYSIS ----
    if args.sample:
        outcome = analyze_sample(args.sample, options)
    else:
        outcome = analyze_file(args.input, options)

    if not outcome.ok:
        print(outcome.error, file=sys.stderr)
        return 1

    if args.json != "-":
        print_summary(outcome)

    write_artifacts(
        outcome,
        json_path=args.json,
        markdown_path=args.markdown,
        charts_dir=args.charts,
        dpi=config.get("output", {}).get("charts_dpi", 150),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
