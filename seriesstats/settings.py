"""Default tuning parameters loaded from ``config/settings.yaml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_LOGGER = logging.getLogger(__name__)
_SETTINGS_PATH = Path(__file__).resolve().parent / "config" / "settings.yaml"


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults applied when an operation is called without an explicit value."""

    precision: float = 0.05
    significance_level: float = 0.95
    threshold: float = 0.6

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError("precision must be non-negative")
        if not 0 < self.significance_level <= 1:
            raise ValueError("significance_level must be in (0, 1]")
        if not 0 < self.threshold <= 1:
            raise ValueError("threshold must be in (0, 1]")


def _section(payload: dict[str, Any], name: str) -> dict[str, Any]:
    section = payload.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Settings section {name!r} must be a mapping")
    return section


def load_settings(path: Path | str | None = None) -> Settings:
    """Read settings from ``path`` (the bundled file by default)."""

    source = Path(path) if path is not None else _SETTINGS_PATH
    payload = yaml.safe_load(source.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise ValueError(f"Settings file {source} must contain a mapping")

    defaults = Settings()
    settings = Settings(
        precision=float(
            _section(payload, "roughly_equal").get("precision", defaults.precision)
        ),
        significance_level=float(
            _section(payload, "ks_test").get("significance_level", defaults.significance_level)
        ),
        threshold=float(
            _section(payload, "head_tails_breaks").get("threshold", defaults.threshold)
        ),
    )
    _LOGGER.debug("Loaded settings from %s: %s", source, settings)
    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the bundled settings, loading them on first use."""

    return load_settings()


__all__ = ["Settings", "get_settings", "load_settings"]
