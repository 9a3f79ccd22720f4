"""Settings files used as macro sources.

Settings files are INI-like: [section] headers followed by key = value
lines. Each section can supply values for template expansion.
"""

from .models import SettingsSection, SettingsFile, SettingsParseError
from .parser import SettingsParser
from .paths import PathFinder

__all__ = [
    "SettingsSection",
    "SettingsFile",
    "SettingsParseError",
    "SettingsParser",
    "PathFinder",
]
