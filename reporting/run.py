# =============================================================================
# MM PERFORMANCE SCORING - CLI
# Module: reporting/run.py
# Purpose: Batch entry point - load, score, rank, emit
# =============================================================================
#
# USAGE:
#   python -m reporting --data data/reports.json
#   python -m reporting --data data/reports.jsonl --top 5 --markdown
#   python -m reporting --data data/reports.json --output-dir output -v
#
# EXIT CODES:
#   0 - metrics written, or the input held no reports
#   1 - configuration or input file could not be read
#
# =============================================================================

import argparse
import logging
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from metrics_engine.pipeline import run_pipeline
from shared.config import ScoringConfig, load_config
from shared.exceptions import ScoringError
from shared.logging_config import AuditLogger, setup_logging

from .emitter import format_leaderboard, generate_markdown_report, write_metrics_json, write_text
from .loader import load_reports

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score and rank market-maker performance reports by exchange and asset pair"
    )

    parser.add_argument(
        "--data",
        type=str,
        required=True,
        help="Path to the report file (.json or .jsonl)"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to scoring.yaml (default: config/scoring.yaml)"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for the metrics document (overrides config)"
    )

    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of leaderboard entries to print (overrides config)"
    )

    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Also write a markdown report next to the metrics document"
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def print_banner() -> None:
    print("=" * 70)
    print("    MARKET MAKER PERFORMANCE SCORING")
    print("=" * 70)


def _report_path(output_dir: Path) -> Path:
    return output_dir / f"performance_report_{datetime.now().strftime('%Y%m%d_%H%M%S')}.md"


def run(data_path: str, config: ScoringConfig, top_n: int, markdown: bool) -> int:
    """
    Execute one batch run with a loaded config.

    Returns:
        Process exit code
    """
    reports = load_reports(data_path)
    result = run_pipeline(reports)

    audit_details = {
        "data_path": str(data_path),
        "outcome": result.outcome.value,
        "report_count": result.report_count,
        "group_count": result.group_count,
        "input_hash": result.input_hash,
        "metrics_path": None,
    }

    if result.is_empty:
        print("\nNo reports found - nothing to score.")
        AuditLogger(config.log_dir / "audit").log_run(audit_details)
        return 0

    print(f"\nAnalyzed {result.report_count} reports\n")
    print(format_leaderboard(result, top_n))

    metrics_path = write_metrics_json(result.metrics, config.metrics_path)
    print(f"\nMetrics saved to {metrics_path}")
    audit_details["metrics_path"] = str(metrics_path)

    if markdown or config.markdown_report:
        report_path = write_text(generate_markdown_report(result, top_n), _report_path(config.output_dir))
        print(f"Report saved to {report_path}")

    AuditLogger(config.log_dir / "audit").log_run(audit_details)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.top is not None and args.top < 1:
        parser.error(f"--top must be at least 1, got {args.top}")

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ScoringError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.output_dir:
        config = replace(config, output_dir=Path(args.output_dir))
    top_n = args.top if args.top is not None else config.top_n

    setup_logging("DEBUG" if args.verbose else config.log_level, log_dir=config.log_dir)
    print_banner()

    try:
        return run(args.data, config, top_n, args.markdown)
    except ScoringError as e:
        logger.error(f"Scoring run failed: {e}")
        print(f"\nFatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
