"""Configuration helpers exposed at :mod:`feixing.config`."""

from __future__ import annotations

from .settings import (
    EphemerisCfg,
    FlyingStarsCfg,
    LanguageCode,
    Settings,
    SolarTermsCfg,
    config_path,
    default_settings,
    get_config_home,
    get_settings,
    load_settings,
    reset_settings_cache,
    save_settings,
)

__all__ = [
    "EphemerisCfg",
    "FlyingStarsCfg",
    "LanguageCode",
    "Settings",
    "SolarTermsCfg",
    "config_path",
    "default_settings",
    "get_config_home",
    "get_settings",
    "load_settings",
    "reset_settings_cache",
    "save_settings",
]
