# =============================================================================
# MM PERFORMANCE SCORING - REPORT LOADER
# Module: reporting/loader.py
# Purpose: Read period reports from JSON / JSON-lines into RawReport values
# =============================================================================
#
# ACCEPTED FILES:
#   *.json   - array of report objects, or {"reports": [...]}
#   *.jsonl  - one report object per line (blank lines skipped)
#
# FIELD NAMES:
# Both the short names (asset_pair, mm_volume, depth_bid_50, ...) and the
# storage column names (asset_pair_symbol, market_maker_volume_usd_dollars,
# market_maker_depth_bid_50_bps_usd_dollars, ...) are understood.
#
# COERCION:
# Missing, null, empty or non-numeric values become 0.0. Records without an
# exchange, an asset pair or a parseable start date are skipped and logged.
# Numeric dates are read as spreadsheet serial day numbers.
#
# =============================================================================

import json
import logging
import math
import re
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from metrics_engine.models import RawReport
from shared.exceptions import ReportLoadError

logger = logging.getLogger(__name__)

# RawReport field -> accepted input keys, first match wins
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "start_date": ("start_date", "report_start"),
    "end_date": ("end_date", "report_end"),
    "exchange": ("exchange",),
    "asset_pair": ("asset_pair", "asset_pair_symbol"),
    "total_volume": ("total_volume", "total_volume_usd_dollars"),
    "mm_volume": ("mm_volume", "market_maker_volume_usd_dollars"),
    "spread_ratio": ("spread_ratio", "average_bid_ask_spread_ratio"),
}
for _side in ("bid", "ask"):
    for _tier in (50, 100, 200):
        FIELD_ALIASES[f"depth_{_side}_{_tier}"] = (
            f"depth_{_side}_{_tier}",
            f"market_maker_depth_{_side}_{_tier}_bps_usd_dollars",
        )

NUMERIC_FIELDS = (
    "total_volume",
    "mm_volume",
    "spread_ratio",
    "depth_bid_50",
    "depth_bid_100",
    "depth_bid_200",
    "depth_ask_50",
    "depth_ask_100",
    "depth_ask_200",
)

_DMY_PATTERN = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")

# Spreadsheet serial day numbers count from this date
EXCEL_EPOCH = date(1899, 12, 30)


# =============================================================================
# VALUE COERCION
# =============================================================================


def _lookup(record: Dict[str, Any], field_name: str) -> Any:
    for alias in FIELD_ALIASES[field_name]:
        if alias in record and record[alias] is not None:
            return record[alias]
    return None


def to_float(value: Any) -> float:
    """
    Coerce a raw value to a finite float.

    Returns 0.0 for None, empty strings, non-numeric or non-finite values.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        number = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def _from_serial(value: float) -> Optional[date]:
    if value < 1:
        return None
    try:
        return EXCEL_EPOCH + timedelta(days=int(value))
    except (OverflowError, ValueError):
        return None


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a calendar date.

    Accepts date/datetime objects, YYYY-MM-DD, ISO timestamps (date part
    kept), DD/MM/YYYY or D/M/YYYY, and spreadsheet serial day
    numbers (45292 is 2024-01-01).

    Returns:
        date, or None if the value cannot be parsed
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _from_serial(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _DMY_PATTERN.match(text)
    if match:
        day, month, year = (int(part) for part in match.groups())
        try:
            return date(year, month, day)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


# =============================================================================
# RECORD PARSING
# =============================================================================


def parse_report(record: Dict[str, Any]) -> Optional[RawReport]:
    """
    Map one input object to a RawReport.

    Args:
        record: Report object as decoded from JSON

    Returns:
        RawReport, or None when the record lacks an exchange, asset pair or
        start date
    """
    if not isinstance(record, dict):
        return None

    exchange = str(_lookup(record, "exchange") or "").strip()
    asset_pair = str(_lookup(record, "asset_pair") or "").strip()
    start_date = parse_date(_lookup(record, "start_date"))
    if not exchange or not asset_pair or start_date is None:
        return None

    end_date = parse_date(_lookup(record, "end_date")) or start_date
    numbers = {name: to_float(_lookup(record, name)) for name in NUMERIC_FIELDS}

    return RawReport(
        start_date=start_date,
        end_date=end_date,
        exchange=exchange.lower(),
        asset_pair=asset_pair,
        **numbers,
    )


def parse_reports(records: Iterable[Any], source: str = "<memory>") -> List[RawReport]:
    """
    Parse many records, skipping invalid ones.

    Returns:
        Reports sorted by start_date ascending (stable on input order)
    """
    reports = []
    skipped = 0
    for index, record in enumerate(records):
        report = parse_report(record)
        if report is None:
            skipped += 1
            logger.debug(f"Skipping record {index} from {source}: missing exchange, pair or start date")
            continue
        reports.append(report)

    if skipped:
        logger.warning(f"Skipped {skipped} invalid records from {source}")

    reports.sort(key=lambda r: r.start_date)
    logger.info(f"Parsed {len(reports)} reports from {source}")
    return reports


# =============================================================================
# FILE LOADING
# =============================================================================


def _read_json(path: Path) -> List[Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict) and isinstance(data.get("reports"), list):
        return data["reports"]
    if isinstance(data, list):
        return data
    raise ReportLoadError("Expected a JSON array or an object with a 'reports' array", str(path))


def _read_jsonl(path: Path) -> List[Any]:
    records = []
    with open(path, "r", encoding="utf-8") as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ReportLoadError(f"Invalid JSON on line {line_num}: {e.msg}", str(path))
    return records


def load_reports(path: Union[str, Path]) -> List[RawReport]:
    """
    Load reports from a .json or .jsonl file.

    Args:
        path: Input file

    Returns:
        Valid reports sorted by start_date ascending

    Raises:
        ReportLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ReportLoadError("Report file not found", str(path))

    try:
        if path.suffix.lower() == ".jsonl":
            records = _read_jsonl(path)
        else:
            records = _read_json(path)
    except json.JSONDecodeError as e:
        raise ReportLoadError(f"Invalid JSON: {e.msg} (line {e.lineno})", str(path))
    except UnicodeDecodeError as e:
        raise ReportLoadError(f"File is not valid UTF-8: {e.reason}", str(path))
    except OSError as e:
        raise ReportLoadError(f"Cannot read file: {e}", str(path))

    return parse_reports(records, source=str(path))
