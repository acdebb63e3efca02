# =============================================================================
# MM PERFORMANCE SCORING - ENGINE
# =============================================================================
#
# Groups market-making period reports by exchange and asset pair,
# aggregates them, scores volume/spread/depth on a common 0-100 scale and
# ranks every group on each dimension.
#
# Pure, in-memory batch computation. Loading and emitting live in
# reporting/.
#
# =============================================================================

from .models import (
    RawReport,
    GroupKey,
    AggregatedMetrics,
    ScoredMetrics,
    RankedMetrics,
)
from .grouping import group_reports
from .aggregator import aggregate_group
from .normalizer import ScoreReferences, compute_references
from .scoring import OVERALL_WEIGHTS, score_group
from .ranking import rank_groups
from .pipeline import PipelineResult, run_pipeline

__version__ = "1.0.0"

__all__ = [
    "RawReport",
    "GroupKey",
    "AggregatedMetrics",
    "ScoredMetrics",
    "RankedMetrics",
    "group_reports",
    "aggregate_group",
    "ScoreReferences",
    "compute_references",
    "OVERALL_WEIGHTS",
    "score_group",
    "rank_groups",
    "PipelineResult",
    "run_pipeline",
]
