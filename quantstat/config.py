"""
Default indicator periods, loaded from config.toml.
Reads config.toml from the first found config directory:
  1. $QUANTSTAT_CONFIG_DIR environment variable
  2. ./config/  (working directory)
  3. config/ next to the package (repo checkout)
Missing file → dataclass defaults.
"""
import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "QUANTSTAT_CONFIG_DIR"


def _find_config_dir() -> Path:
    """Find config directory by priority."""
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        p = Path(env_dir)
        if p.exists():
            return p

    local = Path.cwd() / "config"
    if (local / "config.toml").exists():
        return local

    return Path(__file__).parent.parent / "config"


# --- Data classes ---
@dataclass(frozen=True)
class MomentumConfig:
    rsi_period: int = 14            # Wilder's original lookback
    stochastic_period: int = 14     # 5, 9 and 14 are common


@dataclass(frozen=True)
class TrendConfig:
    sma_period: int = 10
    ema_period: int = 10


@dataclass(frozen=True)
class IndicatorConfig:
    momentum: MomentumConfig = field(default_factory=MomentumConfig)
    trend: TrendConfig = field(default_factory=TrendConfig)


def _check_periods(section) -> None:
    for f in fields(section):
        value = getattr(section, f.name)
        if not isinstance(value, int) or value < 1:
            raise ValueError(
                f"{type(section).__name__}.{f.name} must be a positive integer, got {value!r}"
            )


# --- Loader ---
def _load_toml(path: Path) -> dict:
    """Load TOML file, return empty dict if missing."""
    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return {}
    with open(path, "rb") as f:
        logger.debug(f"Loading indicator config from {path}")
        return tomllib.load(f)


_CONFIG = None


def get_config() -> IndicatorConfig:
    """Load and cache indicator config from config.toml."""
    global _CONFIG
    if _CONFIG is not None:
        return _CONFIG

    data = _load_toml(_find_config_dir() / "config.toml")

    config = IndicatorConfig(
        momentum=MomentumConfig(**data.get("momentum", {})),
        trend=TrendConfig(**data.get("trend", {})),
    )
    _check_periods(config.momentum)
    _check_periods(config.trend)
    _CONFIG = config
    return _CONFIG


def reload_config() -> IndicatorConfig:
    """Force reload config (useful for tests)."""
    global _CONFIG
    _CONFIG = None
    return get_config()
