# =============================================================================
# MM PERFORMANCE SCORING - RANKING
# =============================================================================
#
# Assigns a 1-based rank per score dimension: highest score ranks 1.
#
# TIE-BREAK:
# Equal scores are ordered by GroupKey (exchange, then asset pair), so ranks
# never depend on the order reports arrived in. Within each dimension the
# ranks are a permutation of 1..N.
#
# =============================================================================

import logging
from typing import Dict, List, Sequence

from shared.enums import ScoreDimension

from .models import GroupKey, RankedMetrics, ScoredMetrics

logger = logging.getLogger(__name__)


def rank_dimension(scored: Sequence[ScoredMetrics], dimension: ScoreDimension) -> Dict[GroupKey, int]:
    """
    Rank groups on one score dimension.

    Args:
        scored: Scored metrics of every group
        dimension: Which score to rank on

    Returns:
        Mapping of GroupKey to its 1-based rank
    """
    ordered = sorted(
        scored,
        key=lambda m: (-getattr(m, dimension.score_field), m.key),
    )
    return {m.key: position for position, m in enumerate(ordered, start=1)}


def rank_groups(scored: Sequence[ScoredMetrics]) -> List[RankedMetrics]:
    """
    Rank every group on every dimension.

    Args:
        scored: Scored metrics in group-emission order

    Returns:
        RankedMetrics in the same order as the input
    """
    rankings = {dimension: rank_dimension(scored, dimension) for dimension in ScoreDimension}

    ranked = [
        RankedMetrics.from_scored(
            m,
            {dimension.rank_field: rankings[dimension][m.key] for dimension in ScoreDimension},
        )
        for m in scored
    ]

    logger.debug(f"Ranked {len(ranked)} groups on {len(rankings)} dimensions")
    return ranked
