"""Release notes parsed from a markdown changelog."""

from .notes import ReleaseNotes

__all__ = ["ReleaseNotes"]
