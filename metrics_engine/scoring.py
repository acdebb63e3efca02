# =============================================================================
# MM PERFORMANCE SCORING - SCORE CALCULATION
# =============================================================================
#
# SCORES (each nominally 0-100):
#
#   volume  = total_mm_volume / max_volume * 100
#   spread  = min_spread / avg_spread_ratio * 100 * spread_consistency
#             (inverted: tighter spread scores higher; no samples -> 0)
#   depth   = avg_depth_50bps / max_depth * 100 * depth_balance_50bps
#             (only the 50bps tier is scored)
#   overall = 0.4 * volume + 0.3 * spread + 0.3 * depth
#
# The spread score is not clamped. min_spread is the smallest positive
# average spread in the batch, so the ratio never exceeds 1, and
# consistency never exceeds 1.
#
# =============================================================================

import logging
import math
from typing import Dict

from shared.enums import ScoreDimension

from .models import AggregatedMetrics, ScoredMetrics
from .normalizer import ScoreReferences

logger = logging.getLogger(__name__)

# Fixed composite weights. Not configuration.
OVERALL_WEIGHTS: Dict[ScoreDimension, float] = {
    ScoreDimension.VOLUME: 0.4,
    ScoreDimension.SPREAD: 0.3,
    ScoreDimension.DEPTH: 0.3,
}

if not math.isclose(sum(OVERALL_WEIGHTS.values()), 1.0):
    raise ValueError(f"Overall score weights must sum to 1.0: {OVERALL_WEIGHTS}")


def volume_score(aggregate: AggregatedMetrics, references: ScoreReferences) -> float:
    return aggregate.total_mm_volume / references.max_volume * 100


def spread_score(aggregate: AggregatedMetrics, references: ScoreReferences) -> float:
    # No reported spread is scored 0, not as a perfect spread
    if aggregate.avg_spread_ratio <= 0:
        return 0.0
    return (
        references.min_spread / aggregate.avg_spread_ratio
        * 100
        * aggregate.spread_consistency
    )


def depth_score(aggregate: AggregatedMetrics, references: ScoreReferences) -> float:
    return (
        aggregate.avg_depth_50bps / references.max_depth
        * 100
        * aggregate.depth_balance_50bps
    )


def overall_score(volume: float, spread: float, depth: float) -> float:
    """Weighted composite of the three sub-scores."""
    return (
        volume * OVERALL_WEIGHTS[ScoreDimension.VOLUME]
        + spread * OVERALL_WEIGHTS[ScoreDimension.SPREAD]
        + depth * OVERALL_WEIGHTS[ScoreDimension.DEPTH]
    )


def score_group(aggregate: AggregatedMetrics, references: ScoreReferences) -> ScoredMetrics:
    """
    Score one group against the batch references.

    Args:
        aggregate: The group's aggregated metrics
        references: Batch-wide normalization references

    Returns:
        ScoredMetrics carrying the aggregate fields plus four scores
    """
    volume = volume_score(aggregate, references)
    spread = spread_score(aggregate, references)
    depth = depth_score(aggregate, references)

    return ScoredMetrics.from_aggregate(
        aggregate,
        volume_score=volume,
        spread_score=spread,
        depth_score=depth,
        overall_score=overall_score(volume, spread, depth),
    )
