# =============================================================================
# MM PERFORMANCE SCORING - GROUPING
# =============================================================================
#
# Partitions a flat batch of reports by (exchange, asset_pair).
#
# Keys are case-normalized (exchange lower-case, asset pair upper-case).
# Groups appear in order of first occurrence; reports inside a group keep
# their input order.
#
# =============================================================================

import logging
from typing import Dict, Iterable, List

from .models import GroupKey, RawReport

logger = logging.getLogger(__name__)


def group_reports(reports: Iterable[RawReport]) -> Dict[GroupKey, List[RawReport]]:
    """
    Group reports by normalized (exchange, asset_pair).

    Args:
        reports: Raw reports in input order

    Returns:
        Insertion-ordered mapping of GroupKey to that group's reports.
        Empty input gives an empty mapping.
    """
    groups: Dict[GroupKey, List[RawReport]] = {}
    for report in reports:
        groups.setdefault(report.key, []).append(report)

    logger.debug(f"Grouped reports into {len(groups)} exchange/pair groups")
    return groups
