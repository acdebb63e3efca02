# =============================================================================
# MM PERFORMANCE SCORING - CONFIGURATION LOADER
# =============================================================================
#
# Reads config/scoring.yaml and applies environment overrides.
#
# USAGE:
#   from shared.config import load_config
#
#   config = load_config()
#   print(config.top_n)
#
# ENVIRONMENT OVERRIDES (a .env file in the project root is loaded first,
# without overriding variables already set in the process):
#   MM_SCORING_LOG_LEVEL
#   MM_SCORING_OUTPUT_DIR
#   MM_SCORING_TOP_N
#
# Score weights are NOT configuration. They live in metrics_engine.scoring.
#
# =============================================================================

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).parent.parent
CONFIG_PATH = BASE_DIR / "config" / "scoring.yaml"
ENV_FILE = BASE_DIR / ".env"

ENV_LOG_LEVEL = "MM_SCORING_LOG_LEVEL"
ENV_OUTPUT_DIR = "MM_SCORING_OUTPUT_DIR"
ENV_TOP_N = "MM_SCORING_TOP_N"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ScoringConfig:
    """Settings for one batch run. Immutable once loaded."""
    log_level: str = "INFO"
    log_dir: Path = BASE_DIR / "logs"
    output_dir: Path = BASE_DIR / "data"
    metrics_file: str = "performance-metrics.json"
    markdown_report: bool = False
    top_n: int = 10

    @property
    def metrics_path(self) -> Path:
        return self.output_dir / self.metrics_file


def _section(raw: Dict[str, Any], name: str, source: str) -> Dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping", source)
    return section


def _resolve_path(value: Any) -> Path:
    path = Path(str(value))
    if not path.is_absolute():
        path = BASE_DIR / path
    return path


def _parse_top_n(value: Any, source: str) -> int:
    try:
        top_n = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"top_n must be an integer, got {value!r}", source)
    if top_n < 1:
        raise ConfigError(f"top_n must be at least 1, got {top_n}", source)
    return top_n


def _parse_flag(value: Any, name: str, source: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{name} must be true or false, got {value!r}", source)
    return value


def _parse_log_level(value: Any, source: str) -> str:
    level = str(value).upper()
    if level not in VALID_LOG_LEVELS:
        raise ConfigError(f"Unknown log level {value!r}", source)
    return level


def _read_yaml(path: Path) -> Dict[str, Any]:
    """Load the YAML document, returning {} when the file does not exist."""
    if not path.exists():
        logger.warning(f"Config file not found: {path}, using defaults")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Cannot parse YAML: {e}", str(path))
    except OSError as e:
        raise ConfigError(f"Cannot read config: {e}", str(path))

    if not isinstance(raw, dict):
        raise ConfigError("Top-level config document must be a mapping", str(path))
    return raw


def load_config(
    path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    env_file: Optional[Path] = None,
) -> ScoringConfig:
    """
    Load scoring configuration.

    Args:
        path: Path to scoring.yaml. Defaults to config/scoring.yaml
        environ: Environment mapping for overrides. Defaults to os.environ
            after loading the .env file
        env_file: .env file to load when environ is not given

    Returns:
        ScoringConfig

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values
    """
    path = Path(path) if path is not None else CONFIG_PATH
    source = str(path)

    if environ is None:
        load_dotenv(env_file or ENV_FILE, override=False)
        environ = os.environ

    raw = _read_yaml(path)
    global_cfg = _section(raw, "global", source)
    output_cfg = _section(raw, "output", source)
    leaderboard_cfg = _section(raw, "leaderboard", source)

    defaults = ScoringConfig()

    log_level = environ.get(ENV_LOG_LEVEL) or global_cfg.get("log_level", defaults.log_level)
    output_dir = environ.get(ENV_OUTPUT_DIR) or output_cfg.get("dir")
    top_n = environ.get(ENV_TOP_N) or leaderboard_cfg.get("top_n", defaults.top_n)
    log_dir = global_cfg.get("log_dir")

    metrics_file = output_cfg.get("metrics_file", defaults.metrics_file)
    if not metrics_file or not isinstance(metrics_file, str):
        raise ConfigError("output.metrics_file must be a non-empty string", source)

    config = ScoringConfig(
        log_level=_parse_log_level(log_level, source),
        log_dir=_resolve_path(log_dir) if log_dir else defaults.log_dir,
        output_dir=_resolve_path(output_dir) if output_dir else defaults.output_dir,
        metrics_file=metrics_file,
        markdown_report=_parse_flag(
            output_cfg.get("markdown_report", defaults.markdown_report), "output.markdown_report", source
        ),
        top_n=_parse_top_n(top_n, source),
    )

    logger.debug(f"Loaded config from {source}: {config}")
    return config
