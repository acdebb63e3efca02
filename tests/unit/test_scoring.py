# =============================================================================
# UNIT TESTS — Score Calculation
# =============================================================================

import math
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from metrics_engine.aggregator import aggregate_group
from metrics_engine.normalizer import ScoreReferences, compute_references
from metrics_engine.scoring import (
    OVERALL_WEIGHTS,
    depth_score,
    overall_score,
    score_group,
    spread_score,
    volume_score,
)
from shared.enums import ScoreDimension
from tests.mock_data import make_report


def _agg(**kwargs):
    report = make_report(**kwargs)
    return aggregate_group(report.key, [report])


REFS = ScoreReferences(max_volume=1000.0, min_spread=0.001, max_depth=200.0)


class TestWeights:

    def test_weights_sum_to_one(self):
        assert math.isclose(sum(OVERALL_WEIGHTS.values()), 1.0)

    def test_weight_values(self):
        assert OVERALL_WEIGHTS[ScoreDimension.VOLUME] == 0.4
        assert OVERALL_WEIGHTS[ScoreDimension.SPREAD] == 0.3
        assert OVERALL_WEIGHTS[ScoreDimension.DEPTH] == 0.3

    def test_overall_combination(self):
        assert overall_score(100.0, 50.0, 20.0) == pytest.approx(40.0 + 15.0 + 6.0)


class TestVolumeScore:

    def test_scaled_against_max(self):
        assert volume_score(_agg(mm_volume=250.0), REFS) == pytest.approx(25.0)

    def test_max_group_scores_100(self):
        assert volume_score(_agg(mm_volume=1000.0), REFS) == pytest.approx(100.0)


class TestSpreadScore:

    def test_tighter_spread_scores_higher(self):
        tight = spread_score(_agg(spread_ratio=0.001), REFS)
        wide = spread_score(_agg(spread_ratio=0.004), REFS)
        assert tight == pytest.approx(100.0)
        assert wide == pytest.approx(25.0)
        assert tight > wide

    def test_consistency_scales_score(self):
        reports = [make_report(spread_ratio=1.0), make_report(spread_ratio=3.0)]
        agg = aggregate_group(reports[0].key, reports)
        refs = ScoreReferences(max_volume=1.0, min_spread=2.0, max_depth=1.0)
        # ratio 2/2 = 1, consistency 1 / (1 + 1) = 0.5
        assert spread_score(agg, refs) == pytest.approx(50.0)

    def test_no_spread_scores_zero_not_perfect(self):
        assert spread_score(_agg(spread_ratio=0.0), REFS) == 0.0

    def test_never_exceeds_100_within_batch(self):
        reports = [
            make_report("a", spread_ratio=0.0007),
            make_report("b", spread_ratio=0.0021),
            make_report("c", spread_ratio=0.3),
            make_report("d", spread_ratio=0.0),
        ]
        aggregates = [aggregate_group(r.key, [r]) for r in reports]
        refs = compute_references(aggregates)
        for agg in aggregates:
            assert 0.0 <= spread_score(agg, refs) <= 100.0


class TestDepthScore:

    def test_scaled_and_balanced(self):
        agg = _agg(depth_bid_50=50.0, depth_ask_50=100.0)
        # avg depth 150 / 200 * 100 = 75, balance 0.5
        assert depth_score(agg, REFS) == pytest.approx(37.5)

    def test_only_50bps_tier_counts(self):
        base = _agg(depth_bid_50=100.0, depth_ask_50=100.0)
        deeper = _agg(depth_bid_50=100.0, depth_ask_50=100.0, depth_bid_200=1e9, depth_ask_100=1e9)
        assert depth_score(base, REFS) == pytest.approx(depth_score(deeper, REFS))

    def test_empty_book_scores_zero(self):
        assert depth_score(_agg(depth=0.0), REFS) == 0.0


class TestScoreGroup:

    def test_carries_aggregate_fields(self):
        agg = _agg(mm_volume=500.0, spread_ratio=0.002, depth=50.0)
        scored = score_group(agg, REFS)
        assert scored.key == agg.key
        assert scored.total_mm_volume == agg.total_mm_volume
        assert scored.depth_balance_200bps == agg.depth_balance_200bps

    def test_scores(self):
        scored = score_group(_agg(mm_volume=500.0, spread_ratio=0.002, depth=50.0), REFS)
        assert scored.volume_score == pytest.approx(50.0)
        assert scored.spread_score == pytest.approx(50.0)
        assert scored.depth_score == pytest.approx(50.0)
        assert scored.overall_score == pytest.approx(50.0)

    def test_lone_zero_group(self):
        """Single report, no spread, no depth → overall 40."""
        agg = _agg(mm_volume=5000.0, spread_ratio=0.0, depth=0.0)
        scored = score_group(agg, compute_references([agg]))
        assert scored.volume_score == pytest.approx(100.0)
        assert scored.spread_score == 0.0
        assert scored.depth_score == 0.0
        assert scored.overall_score == pytest.approx(40.0)
