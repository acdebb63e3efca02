# =============================================================================
# MM PERFORMANCE SCORING - NORMALIZATION REFERENCES
# =============================================================================
#
# Batch-wide reference values that put each group's raw metrics on a 0-100
# scale. They depend on EVERY group's aggregate, so they can only be
# computed once aggregation has finished for the whole batch.
#
# FLOORS:
# - max_volume: at least 1 (all-zero volume batch)
# - min_spread: 1 when no group has a positive average spread. Those groups
#               score 0 on spread through the scorer's zero guard, not
#               through this floor.
# - max_depth:  at least 1 (all-zero depth batch)
#
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Any, Dict, Sequence

from .models import AggregatedMetrics

logger = logging.getLogger(__name__)

REFERENCE_FLOOR = 1.0


@dataclass(frozen=True)
class ScoreReferences:
    """Read-only batch references shared by every score computation."""
    max_volume: float
    min_spread: float
    max_depth: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "max_volume": self.max_volume,
            "min_spread": self.min_spread,
            "max_depth": self.max_depth,
        }


def compute_references(aggregates: Sequence[AggregatedMetrics]) -> ScoreReferences:
    """
    Compute the normalization references for a batch.

    Args:
        aggregates: Aggregated metrics of every group in the batch

    Returns:
        ScoreReferences with all three floors applied
    """
    max_volume = max((a.total_mm_volume for a in aggregates), default=0.0)
    max_depth = max((a.avg_depth_50bps for a in aggregates), default=0.0)
    positive_spreads = [a.avg_spread_ratio for a in aggregates if a.avg_spread_ratio > 0]

    references = ScoreReferences(
        max_volume=max(max_volume, REFERENCE_FLOOR),
        min_spread=min(positive_spreads) if positive_spreads else REFERENCE_FLOOR,
        max_depth=max(max_depth, REFERENCE_FLOOR),
    )

    logger.debug(
        f"References: max_volume={references.max_volume}, "
        f"min_spread={references.min_spread}, max_depth={references.max_depth}"
    )
    return references
