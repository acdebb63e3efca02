# =============================================================================
# MM PERFORMANCE SCORING - REPORT EMITTER
# Module: reporting/emitter.py
# Purpose: Serialize ranked metrics to JSON, console leaderboard, markdown
# =============================================================================
#
# OUTPUTS:
# - performance-metrics.json: array of flat records, one per group, in
#   group-emission order. Identical input gives byte-identical output.
# - Leaderboard: top-N groups by overall rank, human readable.
# - Markdown report: run summary, references and a leaderboard table.
#
# =============================================================================

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from metrics_engine.models import RankedMetrics
from metrics_engine.pipeline import PipelineResult

logger = logging.getLogger(__name__)

SEPARATOR_WIDTH = 120


def metrics_to_json(metrics: Sequence[RankedMetrics]) -> str:
    """Serialize metrics as a JSON array of flat records."""
    return json.dumps([m.to_dict() for m in metrics], indent=2) + "\n"


def write_text(text: str, path: Path) -> Path:
    """Write UTF-8 text, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)
    return path


def write_metrics_json(metrics: Sequence[RankedMetrics], path: Path) -> Path:
    """
    Write the metrics document.

    Args:
        metrics: Ranked metrics in the order they should appear
        path: Output file

    Returns:
        The path written
    """
    path = write_text(metrics_to_json(metrics), path)
    logger.info(f"Metrics saved to {path} ({len(metrics)} records)")
    return path


# =============================================================================
# LEADERBOARD
# =============================================================================


def format_entry(position: int, m: RankedMetrics) -> str:
    """Render one leaderboard entry."""
    lines = [
        f"{position}. {m.exchange.upper()} - {m.asset_pair}",
        f"   Overall Score: {m.overall_score:.1f}/100",
        f"   Volume: ${m.total_mm_volume / 1_000_000:.2f}M (Rank #{m.volume_rank})",
        f"   Market Share: {m.mm_market_share:.2f}%",
        f"   Avg Spread: {m.avg_spread_ratio * 100:.3f}% (Rank #{m.spread_rank})",
        f"   Avg Depth 50bps: ${m.avg_depth_50bps / 1000:.1f}K (Rank #{m.depth_rank})",
    ]
    return "\n".join(lines)


def format_leaderboard(result: PipelineResult, top_n: int = 10) -> str:
    """
    Render the top-N leaderboard sorted by overall rank.

    Args:
        result: Pipeline result
        top_n: Number of entries to show

    Returns:
        Multi-line leaderboard text
    """
    if result.is_empty:
        return "No reports found - nothing to rank."

    separator = "=" * SEPARATOR_WIDTH
    blocks = ["TOP PERFORMERS", separator]
    for position, m in enumerate(result.leaderboard(top_n), start=1):
        blocks.append("")
        blocks.append(format_entry(position, m))
    blocks.append("")
    blocks.append(separator)
    blocks.append(f"Total exchange-pair combinations analyzed: {result.group_count}")
    return "\n".join(blocks)


# =============================================================================
# MARKDOWN REPORT
# =============================================================================


def generate_markdown_report(
    result: PipelineResult,
    top_n: int = 10,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Generate a markdown summary of a run.

    Args:
        result: Pipeline result
        top_n: Number of leaderboard rows
        generated_at: Timestamp shown in the header. Defaults to now

    Returns:
        Markdown formatted report string
    """
    generated_at = generated_at or datetime.now()
    lines = [
        "# Market Maker Performance Report",
        "",
        f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        "",
        "## Run Summary",
        "",
        f"- Outcome: {result.outcome.value}",
        f"- Reports analyzed: {result.report_count}",
        f"- Exchange/pair groups: {result.group_count}",
        f"- Input hash: `{result.input_hash}`",
    ]

    if result.is_empty:
        lines += ["", "*No reports were supplied. Nothing was ranked.*"]
        return "\n".join(lines) + "\n"

    refs = result.references
    lines += [
        "",
        "## Normalization References",
        "",
        f"- Max MM volume: {refs.max_volume:,.2f}",
        f"- Min average spread ratio: {refs.min_spread:.6f}",
        f"- Max 50bps depth: {refs.max_depth:,.2f}",
        "",
        f"## Top {top_n} by Overall Score",
        "",
        "| Rank | Exchange | Pair | Overall | Volume | Spread | Depth | MM Share % |",
        "|-----:|----------|------|--------:|-------:|-------:|------:|-----------:|",
    ]
    for m in result.leaderboard(top_n):
        lines.append(
            f"| {m.overall_rank} | {m.exchange} | {m.asset_pair} "
            f"| {m.overall_score:.1f} | {m.volume_score:.1f} | {m.spread_score:.1f} "
            f"| {m.depth_score:.1f} | {m.mm_market_share:.2f} |"
        )
    return "\n".join(lines) + "\n"
