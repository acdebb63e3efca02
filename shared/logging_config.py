# =============================================================================
# MM PERFORMANCE SCORING - LOGGING CONFIGURATION
# =============================================================================
#
# Operational logs go to logs/ (console + timestamped file).
# Audit records go to logs/audit/ as JSON lines, one record per batch run.
#
# Library modules only ever call logging.getLogger(__name__). Handlers are
# attached here, to the top-level package loggers, by the CLI entry point.
#
# =============================================================================

import hashlib
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

# Top-level packages whose loggers receive the configured handlers
PACKAGE_LOGGERS = ("metrics_engine", "reporting", "shared")

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _get_project_root() -> Path:
    """Get the project root directory."""
    # This file is at shared/logging_config.py
    return Path(__file__).parent.parent


def default_log_dir() -> Path:
    """Default directory for operational logs."""
    return _get_project_root() / "logs"


# =============================================================================
# LOGGING SETUP
# =============================================================================

def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Path] = None,
    console_output: bool = True,
    file_output: bool = True,
) -> Optional[Path]:
    """
    Configure logging for a batch run.

    Args:
        level: Logging level (int or name such as "DEBUG")
        log_dir: Directory for the log file. Defaults to <project>/logs
        console_output: Whether to log to console
        file_output: Whether to log to file

    Returns:
        Path of the log file, or None when file output is disabled
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    log_file = None
    if file_output:
        log_dir = Path(log_dir) if log_dir is not None else default_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_dir / f"scoring_{timestamp}.log"

    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Remove existing handlers to avoid duplicates on repeated setup
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

        if console_output:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        if log_file is not None:
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("Logging initialized at level %s", logging.getLevelName(level))
    if log_file is not None:
        logger.info("Log file: %s", log_file)
    return log_file


def reset_logging() -> None:
    """Detach and close all handlers installed by setup_logging()."""
    for name in PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


# =============================================================================
# AUDIT LOGGING
# =============================================================================

class AuditLogger:
    """
    Writes audit-grade run records.

    Audit records are:
    - Always written to file
    - One JSON object per line
    - Stored separately from operational logs
    - Tagged with a SHA-256 hash of their details for traceability
    """

    def __init__(self, audit_dir: Optional[Path] = None):
        self.audit_dir = Path(audit_dir) if audit_dir is not None else default_log_dir() / "audit"
        self.audit_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d")
        self.audit_file = self.audit_dir / f"audit_{timestamp}.jsonl"

    @staticmethod
    def compute_hash(data: Any) -> str:
        """
        Compute SHA-256 hash of JSON-serializable data.

        Args:
            data: Value to hash (serialized with sorted keys, no whitespace)

        Returns:
            Hex-encoded SHA-256 hash
        """
        serialized = json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)
        return hashlib.sha256(serialized.encode("utf-8")).hexdigest()

    def log_run(self, details: Dict[str, Any]) -> Dict[str, Any]:
        """
        Append one run record to the audit file.

        Args:
            details: Run details (outcome, counts, input hash, output path)

        Returns:
            The record as written
        """
        record = {
            "timestamp": datetime.now().isoformat(),
            "event": "SCORING_RUN",
            "details": details,
            "details_hash": self.compute_hash(details),
        }
        with open(self.audit_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False, default=str) + "\n")
        return record
