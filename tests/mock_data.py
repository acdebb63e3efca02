# =============================================================================
# MM PERFORMANCE SCORING - MOCK DATA GENERATORS
# =============================================================================
#
# Builders for RawReport values and their JSON forms so tests can state only
# the fields they care about.
#
# =============================================================================

from datetime import date, timedelta
from typing import Any, Dict, List

from metrics_engine.models import RawReport

BASE_DATE = date(2024, 1, 1)


def make_report(
    exchange: str = "binance",
    asset_pair: str = "BTC/USDT",
    day: int = 0,
    total_volume: float = 1_000_000.0,
    mm_volume: float = 100_000.0,
    spread_ratio: float = 0.001,
    depth: float = 10_000.0,
    **overrides: Any,
) -> RawReport:
    """
    Build a RawReport.

    `day` offsets start_date from BASE_DATE. `depth` fills every bid/ask
    depth field unless a specific depth_* override is given.
    """
    start = BASE_DATE + timedelta(days=day)
    values: Dict[str, Any] = {
        "start_date": start,
        "end_date": start + timedelta(days=1),
        "exchange": exchange,
        "asset_pair": asset_pair,
        "total_volume": total_volume,
        "mm_volume": mm_volume,
        "spread_ratio": spread_ratio,
    }
    for side in ("bid", "ask"):
        for tier in (50, 100, 200):
            values[f"depth_{side}_{tier}"] = depth
    values.update(overrides)
    return RawReport(**values)


def make_raw_record(**overrides: Any) -> Dict[str, Any]:
    """JSON-style record using the storage column names."""
    record: Dict[str, Any] = {
        "start_date": "2024-01-01",
        "end_date": "2024-01-02",
        "exchange": "Binance",
        "asset_pair_symbol": "BTC/USDT",
        "total_volume_usd_dollars": 1000000,
        "market_maker_volume_usd_dollars": 100000,
        "average_bid_ask_spread_ratio": 0.001,
    }
    for side in ("bid", "ask"):
        for tier in (50, 100, 200):
            record[f"market_maker_depth_{side}_{tier}_bps_usd_dollars"] = 10000
    record.update(overrides)
    return record


def sample_batch() -> List[RawReport]:
    """Three exchanges, four groups, mixed spreads and depths."""
    return [
        make_report("binance", "BTC/USDT", day=0, mm_volume=400_000, spread_ratio=0.0010, depth=50_000),
        make_report("binance", "BTC/USDT", day=7, mm_volume=600_000, spread_ratio=0.0012, depth=60_000),
        make_report("kraken", "ETH/USD", day=0, mm_volume=250_000, spread_ratio=0.0020, depth=20_000),
        make_report("kraken", "ETH/USD", day=14, mm_volume=150_000, spread_ratio=0.0, depth=15_000),
        make_report("okx", "SOL/USDT", day=3, mm_volume=80_000, spread_ratio=0.0050,
                    depth_bid_50=30_000, depth_ask_50=10_000),
        make_report("binance", "ETH/USDT", day=1, mm_volume=0.0, spread_ratio=0.0, depth=0.0),
    ]
