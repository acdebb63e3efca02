# =============================================================================
# MM PERFORMANCE SCORING - EXCEPTIONS
# =============================================================================
#
# EXCEPTION HIERARCHY:
#
# ScoringError (base)
# ├── ReportLoadError  - input file missing, unreadable or malformed
# └── ConfigError      - configuration file unreadable or invalid
#
# The scoring engine itself raises none of these. Degenerate numeric input
# (zero periods, no spread samples, zero maxima) is absorbed by guards and
# produces defined scores. These errors only come from the I/O boundary.
#
# =============================================================================

from typing import Optional


class ScoringError(Exception):
    """
    Base class for all errors raised by the scoring tool.

    Allows the CLI to catch every expected failure in a single except block.
    """

    def __init__(self, message: str, source: Optional[str] = None):
        """
        Initialize scoring error.

        Args:
            message: Error description
            source: Optional file path or setting name for context
        """
        self.message = message
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        if self.source:
            return f"[{self.source}] {self.message}"
        return self.message


class ReportLoadError(ScoringError):
    """The report input file could not be read or parsed."""


class ConfigError(ScoringError):
    """The scoring configuration could not be read or holds invalid values."""
