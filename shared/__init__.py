# =============================================================================
# MM PERFORMANCE SCORING - SHARED MODULE
# =============================================================================
#
# Utilities shared by the engine and the reporting layer. No scoring logic
# lives here.
#
# CONTENTS:
# - Enums (shared vocabulary)
# - Exceptions (I/O boundary errors)
# - Configuration loading
# - Logging and audit utilities
#
# =============================================================================

from .enums import RunOutcome, ScoreDimension, DepthTier
from .exceptions import ScoringError, ReportLoadError, ConfigError
from .logging_config import setup_logging, AuditLogger

__all__ = [
    "RunOutcome",
    "ScoreDimension",
    "DepthTier",
    "ScoringError",
    "ReportLoadError",
    "ConfigError",
    "setup_logging",
    "AuditLogger",
]
