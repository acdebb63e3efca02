# =============================================================================
# MM PERFORMANCE SCORING - DATA MODELS
# Module: metrics_engine/models.py
# Purpose: Record types flowing through the scoring pipeline
# =============================================================================
#
# PIPELINE SHAPES:
#
#   RawReport ──group──> GroupKey -> [RawReport, ...]
#             ──aggregate──> AggregatedMetrics
#             ──score──────> ScoredMetrics   (adds four scores)
#             ──rank───────> RankedMetrics   (adds four ranks)
#
# All records are frozen. Each stage builds a new record from the previous
# one, nothing is mutated in place. Everything serializes to a flat dict
# whose keys are the published field names.
#
# =============================================================================

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any, Dict


# =============================================================================
# INPUT
# =============================================================================


@dataclass(frozen=True)
class RawReport:
    """
    One period observation for an exchange and asset pair.

    Fields:
        start_date / end_date: Reporting period boundaries.
        exchange: Exchange identifier (case-insensitive).
        asset_pair: Asset pair identifier (case-insensitive).
        total_volume: Total market trading volume in USD.
        mm_volume: Market-maker-attributed volume in USD.
        spread_ratio: Average bid/ask spread ratio. 0 means "not reported".
        depth_{bid,ask}_{50,100,200}: USD depth within each bps band.
    """
    start_date: date
    end_date: date
    exchange: str
    asset_pair: str
    total_volume: float = 0.0
    mm_volume: float = 0.0
    spread_ratio: float = 0.0
    depth_bid_50: float = 0.0
    depth_bid_100: float = 0.0
    depth_bid_200: float = 0.0
    depth_ask_50: float = 0.0
    depth_ask_100: float = 0.0
    depth_ask_200: float = 0.0

    @property
    def key(self) -> GroupKey:
        return GroupKey.from_raw(self.exchange, self.asset_pair)

    def depth_bid(self, tier: int) -> float:
        return getattr(self, f"depth_bid_{tier}")

    def depth_ask(self, tier: int) -> float:
        return getattr(self, f"depth_ask_{tier}")

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["start_date"] = self.start_date.isoformat()
        data["end_date"] = self.end_date.isoformat()
        return data


@dataclass(frozen=True, order=True)
class GroupKey:
    """
    Identity of one output row: (exchange, asset_pair), case-normalized.

    Ordering is lexical on (exchange, asset_pair) and serves as the ranking
    tie-break.
    """
    exchange: str
    asset_pair: str

    @classmethod
    def from_raw(cls, exchange: str, asset_pair: str) -> GroupKey:
        return cls(
            exchange=(exchange or "").strip().lower(),
            asset_pair=(asset_pair or "").strip().upper(),
        )

    @property
    def label(self) -> str:
        return f"{self.exchange}-{self.asset_pair}"

    def __str__(self) -> str:
        return self.label


# =============================================================================
# PIPELINE OUTPUT
# =============================================================================


def _flatten(record: Any) -> Dict[str, Any]:
    """Serialize a metrics record with the key split into two flat fields."""
    data: Dict[str, Any] = {
        "exchange": record.key.exchange,
        "asset_pair": record.key.asset_pair,
    }
    for f in fields(record):
        if f.name != "key":
            data[f.name] = getattr(record, f.name)
    return data


@dataclass(frozen=True)
class AggregatedMetrics:
    """
    Summary statistics for one group of reports.

    period_days is never below 1. Spread statistics use only reports with a
    strictly positive spread_ratio; depth statistics use every report.
    """
    key: GroupKey
    period_days: int

    # Volume
    total_mm_volume: float
    total_market_volume: float
    mm_market_share: float
    avg_daily_volume: float

    # Spread
    avg_spread_ratio: float
    spread_consistency: float

    # Depth
    avg_depth_50bps: float
    avg_depth_100bps: float
    avg_depth_200bps: float
    depth_balance_50bps: float
    depth_balance_100bps: float
    depth_balance_200bps: float

    @property
    def exchange(self) -> str:
        return self.key.exchange

    @property
    def asset_pair(self) -> str:
        return self.key.asset_pair

    def to_dict(self) -> Dict[str, Any]:
        return _flatten(self)


@dataclass(frozen=True)
class ScoredMetrics(AggregatedMetrics):
    """AggregatedMetrics plus the four 0-100 scores."""
    volume_score: float
    spread_score: float
    depth_score: float
    overall_score: float

    @classmethod
    def from_aggregate(
        cls,
        aggregate: AggregatedMetrics,
        volume_score: float,
        spread_score: float,
        depth_score: float,
        overall_score: float,
    ) -> ScoredMetrics:
        values = {f.name: getattr(aggregate, f.name) for f in fields(AggregatedMetrics)}
        return cls(
            **values,
            volume_score=volume_score,
            spread_score=spread_score,
            depth_score=depth_score,
            overall_score=overall_score,
        )


@dataclass(frozen=True)
class RankedMetrics(ScoredMetrics):
    """ScoredMetrics plus a 1-based rank per score dimension."""
    volume_rank: int
    spread_rank: int
    depth_rank: int
    overall_rank: int

    @classmethod
    def from_scored(cls, scored: ScoredMetrics, ranks: Dict[str, int]) -> RankedMetrics:
        """
        Args:
            scored: Scored record
            ranks: Mapping of rank field name (e.g. "volume_rank") to rank
        """
        values = {f.name: getattr(scored, f.name) for f in fields(ScoredMetrics)}
        return cls(**values, **ranks)
