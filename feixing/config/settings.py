"""Configuration models and helpers for feixing settings."""

from __future__ import annotations

import logging
import os
from datetime import tzinfo
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..time import parse_timezone

LOG = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"

LanguageCode = Literal["en", "ja", "vi", "zh_cn", "zh_tw"]

# -------------------- Settings Schema --------------------


class EphemerisCfg(BaseModel):
    """Swiss Ephemeris options used for solar longitude lookups."""

    moshier: bool = True
    path: Optional[str] = Field(default_factory=lambda: os.environ.get("SE_EPHE_PATH"))


class SolarTermsCfg(BaseModel):
    """Bounds for the backwards solar-term search.

    ``timezone`` is the calendar zone term dates are reported in; the
    traditional almanac counts days in China Standard Time.
    """

    search_limit_days: int = 40
    lichun_probe_day: int = 6
    timezone: str = "+08:00"

    @field_validator("search_limit_days", mode="before")
    @classmethod
    def _clamp_search_limit(cls, value: int) -> int:
        numeric = int(value)
        # Terms lie up to ~15.7 days apart near aphelion.
        return max(20, min(400, numeric))

    @field_validator("lichun_probe_day", mode="before")
    @classmethod
    def _clamp_probe_day(cls, value: int) -> int:
        numeric = int(value)
        return max(5, min(17, numeric))

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        parse_timezone(value)
        return value

    def zone(self) -> tzinfo:
        return parse_timezone(self.timezone)


class FlyingStarsCfg(BaseModel):
    """Flying-star cycle anchoring."""

    san_yuan_start_year: int = 1864


class Settings(BaseModel):
    """Top-level settings container."""

    language: LanguageCode = "zh_tw"
    ephemeris: EphemerisCfg = Field(default_factory=EphemerisCfg)
    solar_terms: SolarTermsCfg = Field(default_factory=SolarTermsCfg)
    flying_stars: FlyingStarsCfg = Field(default_factory=FlyingStarsCfg)


# -------------------- Persistence Helpers --------------------


def get_config_home() -> Path:
    """Return the directory where settings are looked up."""

    return Path(os.environ.get("FEIXING_HOME", str(Path.home() / ".feixing")))


def config_path() -> Path:
    """Return the full path to the configuration file."""

    return get_config_home() / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` to disk as YAML and return the target path."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, falling back to defaults when missing."""

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        LOG.debug("No settings file at %s; using defaults", source_path)
        return default_settings()
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle) or {}
    if not isinstance(raw, dict):
        LOG.warning("Ignoring malformed settings payload in %s", source_path)
        raw = {}
    return Settings(**raw)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""

    return load_settings()


def reset_settings_cache() -> None:
    """For tests: force :func:`get_settings` to reload on next call."""

    get_settings.cache_clear()
