# =============================================================================
# MM PERFORMANCE SCORING - SHARED ENUMS
# =============================================================================
#
# These enums define the shared vocabulary across the engine, the report
# loader/emitter and the CLI.
#
# SCORE DIMENSION ENUM:
# Encodes the four ranking dimensions together with the record fields that
# carry their score and rank. The ranker iterates over it, so adding a
# dimension here is the only place the set of rankings is declared.
#
# =============================================================================

from enum import Enum


class RunOutcome(Enum):
    """
    Terminal outcome of one batch invocation.

    COMPLETED: At least one report was supplied and every group was ranked.
    NO_REPORTS: The input batch was empty. This is a normal outcome, not a
                failure. Callers must distinguish it from a completed run
                whose groups all scored zero.
    """
    COMPLETED = "COMPLETED"
    NO_REPORTS = "NO_REPORTS"


class ScoreDimension(Enum):
    """
    Ranking dimensions.

    Each value names the score field on ScoredMetrics; the matching rank
    field on RankedMetrics is derived from it.
    """
    VOLUME = "volume"
    SPREAD = "spread"
    DEPTH = "depth"
    OVERALL = "overall"

    @property
    def score_field(self) -> str:
        return f"{self.value}_score"

    @property
    def rank_field(self) -> str:
        return f"{self.value}_rank"


class DepthTier(Enum):
    """Basis-point bands at which order book depth is reported."""
    BPS_50 = 50
    BPS_100 = 100
    BPS_200 = 200
