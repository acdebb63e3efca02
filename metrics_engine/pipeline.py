# =============================================================================
# MM PERFORMANCE SCORING - PIPELINE
# =============================================================================
#
# Linear four-stage batch transform:
#
#   Group -> Aggregate -> Normalize + Score -> Rank
#
# Normalization needs every group's aggregate, so scoring cannot start
# until aggregation has finished for the whole batch.
#
# An empty batch is a normal outcome (RunOutcome.NO_REPORTS) with an empty
# result, not an error. The pipeline holds no state between invocations;
# the same input always yields the same result.
#
# =============================================================================

import hashlib
import json
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from shared.enums import RunOutcome

from .aggregator import aggregate_group
from .grouping import group_reports
from .models import RankedMetrics, RawReport
from .normalizer import ScoreReferences, compute_references
from .ranking import rank_groups
from .scoring import score_group

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of one batch run.

    metrics are in group-emission order (first appearance of each
    exchange/pair in the input). references is None for an empty batch.
    """
    outcome: RunOutcome
    metrics: Tuple[RankedMetrics, ...]
    report_count: int
    references: Optional[ScoreReferences]
    input_hash: str

    @property
    def group_count(self) -> int:
        return len(self.metrics)

    @property
    def is_empty(self) -> bool:
        return self.outcome is RunOutcome.NO_REPORTS

    def leaderboard(self, top_n: Optional[int] = None) -> List[RankedMetrics]:
        """Metrics sorted by overall rank, truncated to top_n when given."""
        ordered = sorted(self.metrics, key=lambda m: m.overall_rank)
        if top_n is not None:
            ordered = ordered[:top_n]
        return ordered


def hash_reports(reports: Sequence[RawReport]) -> str:
    """SHA-256 of the canonical JSON form of the batch, order included."""
    payload = json.dumps(
        [r.to_dict() for r in reports],
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def run_pipeline(reports: Sequence[RawReport]) -> PipelineResult:
    """
    Score and rank a batch of reports.

    Args:
        reports: Raw reports, typically ordered by start_date ascending

    Returns:
        PipelineResult with one RankedMetrics per exchange/pair group
    """
    reports = list(reports)
    input_hash = hash_reports(reports)

    if not reports:
        logger.warning("No reports supplied, nothing to score")
        return PipelineResult(
            outcome=RunOutcome.NO_REPORTS,
            metrics=(),
            report_count=0,
            references=None,
            input_hash=input_hash,
        )

    logger.info(f"Analyzing {len(reports)} reports")

    # Stage 1: group
    groups = group_reports(reports)

    # Stage 2: aggregate
    aggregates = [aggregate_group(key, group) for key, group in groups.items()]

    # Stage 3: normalize + score (barrier: needs every aggregate)
    references = compute_references(aggregates)
    scored = [score_group(aggregate, references) for aggregate in aggregates]

    # Stage 4: rank
    ranked = rank_groups(scored)

    logger.info(f"Scored and ranked {len(ranked)} exchange/pair groups")
    return PipelineResult(
        outcome=RunOutcome.COMPLETED,
        metrics=tuple(ranked),
        report_count=len(reports),
        references=references,
        input_hash=input_hash,
    )
