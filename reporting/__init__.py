# =============================================================================
# MM PERFORMANCE SCORING - REPORTING
# =============================================================================
#
# I/O boundary of the scoring engine:
# - loader:  JSON / JSON-lines report files -> RawReport values
# - emitter: RankedMetrics -> metrics document, leaderboard, markdown
# - run:     batch CLI tying both to metrics_engine.run_pipeline
#
# =============================================================================

from .loader import load_reports, parse_report, parse_reports
from .emitter import (
    format_leaderboard,
    generate_markdown_report,
    metrics_to_json,
    write_metrics_json,
)

__all__ = [
    "load_reports",
    "parse_report",
    "parse_reports",
    "format_leaderboard",
    "generate_markdown_report",
    "metrics_to_json",
    "write_metrics_json",
]
