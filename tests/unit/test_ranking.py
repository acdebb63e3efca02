# =============================================================================
# UNIT TESTS — Ranking
# =============================================================================

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from metrics_engine.aggregator import aggregate_group
from metrics_engine.models import GroupKey
from metrics_engine.normalizer import compute_references
from metrics_engine.ranking import rank_dimension, rank_groups
from metrics_engine.scoring import score_group
from shared.enums import ScoreDimension
from tests.mock_data import make_report


def _scored(reports):
    aggregates = [aggregate_group(r.key, [r]) for r in reports]
    refs = compute_references(aggregates)
    return [score_group(a, refs) for a in aggregates]


class TestRankDimension:

    def test_descending_score(self):
        scored = _scored([
            make_report("a", mm_volume=10),
            make_report("b", mm_volume=30),
            make_report("c", mm_volume=20),
        ])
        ranks = rank_dimension(scored, ScoreDimension.VOLUME)
        assert ranks[GroupKey("b", "BTC/USDT")] == 1
        assert ranks[GroupKey("c", "BTC/USDT")] == 2
        assert ranks[GroupKey("a", "BTC/USDT")] == 3

    def test_ties_break_on_group_key(self):
        scored = _scored([
            make_report("okx", mm_volume=50),
            make_report("binance", mm_volume=50),
            make_report("kraken", mm_volume=50),
        ])
        ranks = rank_dimension(scored, ScoreDimension.VOLUME)
        assert ranks[GroupKey("binance", "BTC/USDT")] == 1
        assert ranks[GroupKey("kraken", "BTC/USDT")] == 2
        assert ranks[GroupKey("okx", "BTC/USDT")] == 3

    def test_ties_independent_of_input_order(self):
        reports = [
            make_report("okx", "ETH/USDT", mm_volume=50),
            make_report("okx", "BTC/USDT", mm_volume=50),
            make_report("binance", "ETH/USDT", mm_volume=50),
        ]
        forward = rank_dimension(_scored(reports), ScoreDimension.VOLUME)
        backward = rank_dimension(_scored(list(reversed(reports))), ScoreDimension.VOLUME)
        assert forward == backward


class TestRankGroups:

    def test_two_groups_volume(self):
        """Group1 volume 100, Group2 volume 50 → scores 100/50, ranks 1/2."""
        ranked = rank_groups(_scored([
            make_report("group1", mm_volume=100),
            make_report("group2", mm_volume=50),
        ]))
        group1, group2 = ranked
        assert group1.volume_score == 100.0
        assert group2.volume_score == 50.0
        assert group1.volume_rank == 1
        assert group2.volume_rank == 2

    def test_ranks_are_permutations(self):
        reports = [
            make_report(f"ex{i}", mm_volume=(i * 37) % 11, spread_ratio=0.001 * (i % 4),
                        depth=float((i * 13) % 7))
            for i in range(12)
        ]
        ranked = rank_groups(_scored(reports))
        expected = list(range(1, len(reports) + 1))
        for dimension in ScoreDimension:
            assert sorted(getattr(m, dimension.rank_field) for m in ranked) == expected

    def test_preserves_input_order(self):
        scored = _scored([make_report("z", mm_volume=1), make_report("a", mm_volume=9)])
        ranked = rank_groups(scored)
        assert [m.key for m in ranked] == [m.key for m in scored]

    def test_empty(self):
        assert rank_groups([]) == []
