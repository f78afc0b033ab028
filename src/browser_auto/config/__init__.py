"""
Configuration module - Settings for selector synthesis, snapshots and capture.

Usage:
    from browser_auto.config import load_config, StructureSettings
    
    settings = load_config(structure={"limit": 3000})
    result = recognize_structure(document, settings=settings.structure)

Environment Variables:
    BROWSER_AUTO__STRUCTURE__LIMIT=3000
    BROWSER_AUTO__SELECTORS__MAX_LENGTH=120
    BROWSER_AUTO__BROWSER__HEADLESS=false
"""

from browser_auto.config.settings import (
    DEFAULT_ATTRIBUTE_KEYS,
    Settings,
    SelectorSettings,
    StructureSettings,
    BrowserSettings,
    LoggingSettings,
)
from browser_auto.config.loader import ConfigLoader, load_config

__all__ = [
    "DEFAULT_ATTRIBUTE_KEYS",
    "Settings",
    "SelectorSettings",
    "StructureSettings",
    "BrowserSettings",
    "LoggingSettings",
    "ConfigLoader",
    "load_config",
]
