# =============================================================================
# MM PERFORMANCE SCORING - METRIC AGGREGATION
# =============================================================================
#
# Pure functions turning one group's reports into AggregatedMetrics.
# No I/O, no shared state. Every function is a fold over its input list.
#
# DEGENERATE INPUT:
# - Zero period span        -> period_days = 1
# - No positive spreads     -> avg_spread_ratio = 0, consistency = 1
# - Zero total volume       -> mm_market_share = 0
# - Zero bid and ask depth  -> that report's balance = 0
# Nothing here raises on all-zero input.
#
# =============================================================================

import logging
import math
from statistics import mean, pvariance
from typing import List, Sequence

from shared.enums import DepthTier

from .models import AggregatedMetrics, GroupKey, RawReport

logger = logging.getLogger(__name__)


# =============================================================================
# PERIOD AND VOLUME
# =============================================================================


def period_days(reports: Sequence[RawReport]) -> int:
    """
    Days between the earliest and latest start_date, at least 1.

    Args:
        reports: Reports of one group

    Returns:
        Span in whole days, floored at 1
    """
    if not reports:
        return 1
    starts = [r.start_date for r in reports]
    span = (max(starts) - min(starts)).days
    return span if span > 0 else 1


def market_share(mm_volume: float, market_volume: float) -> float:
    """MM volume as a percentage of market volume, 0 when the market is empty."""
    if market_volume <= 0:
        return 0.0
    return mm_volume / market_volume * 100


# =============================================================================
# SPREAD
# =============================================================================


def spread_samples(reports: Sequence[RawReport]) -> List[float]:
    """Spread ratios that were actually reported (strictly positive)."""
    return [r.spread_ratio for r in reports if r.spread_ratio > 0]


def average_spread(samples: Sequence[float]) -> float:
    """Arithmetic mean of the samples, 0 when there are none."""
    if not samples:
        return 0.0
    return float(mean(samples))


def spread_consistency(samples: Sequence[float]) -> float:
    """
    Stability of the spread: 1 / (1 + population standard deviation).

    Always in (0, 1]. Zero or one sample has no variance and gives 1.
    """
    if len(samples) < 2:
        return 1.0
    return 1.0 / (1.0 + math.sqrt(pvariance(samples)))


# =============================================================================
# DEPTH
# =============================================================================


def average_depth(reports: Sequence[RawReport], tier: int) -> float:
    """Mean of bid + ask depth at the tier, over every report."""
    if not reports:
        return 0.0
    return sum(r.depth_bid(tier) + r.depth_ask(tier) for r in reports) / len(reports)


def depth_balance(bid: float, ask: float) -> float:
    """min/max of the two sides, in [0, 1]. Both sides empty gives 0."""
    larger = max(bid, ask)
    if larger <= 0:
        return 0.0
    return min(bid, ask) / larger


def average_depth_balance(reports: Sequence[RawReport], tier: int) -> float:
    """Mean per-report depth balance at the tier, over every report."""
    if not reports:
        return 0.0
    return sum(depth_balance(r.depth_bid(tier), r.depth_ask(tier)) for r in reports) / len(reports)


# =============================================================================
# GROUP AGGREGATE
# =============================================================================


def aggregate_group(key: GroupKey, reports: Sequence[RawReport]) -> AggregatedMetrics:
    """
    Compute the summary statistics of one group.

    Args:
        key: The group's normalized key
        reports: The group's reports

    Returns:
        AggregatedMetrics for the group
    """
    days = period_days(reports)
    total_mm_volume = float(sum(r.mm_volume for r in reports))
    total_market_volume = float(sum(r.total_volume for r in reports))
    samples = spread_samples(reports)

    aggregate = AggregatedMetrics(
        key=key,
        period_days=days,
        total_mm_volume=total_mm_volume,
        total_market_volume=total_market_volume,
        mm_market_share=market_share(total_mm_volume, total_market_volume),
        avg_daily_volume=total_mm_volume / days,
        avg_spread_ratio=average_spread(samples),
        spread_consistency=spread_consistency(samples),
        avg_depth_50bps=average_depth(reports, DepthTier.BPS_50.value),
        avg_depth_100bps=average_depth(reports, DepthTier.BPS_100.value),
        avg_depth_200bps=average_depth(reports, DepthTier.BPS_200.value),
        depth_balance_50bps=average_depth_balance(reports, DepthTier.BPS_50.value),
        depth_balance_100bps=average_depth_balance(reports, DepthTier.BPS_100.value),
        depth_balance_200bps=average_depth_balance(reports, DepthTier.BPS_200.value),
    )

    logger.debug(
        f"Aggregated {key.label}: {len(reports)} reports, "
        f"{len(samples)} spread samples, {days} days"
    )
    return aggregate
