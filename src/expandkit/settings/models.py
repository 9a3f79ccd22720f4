"""Data models for settings files."""

from typing import Iterator, Optional

from pydantic import BaseModel, Field


class SettingsSection(BaseModel):
    """Named section of a settings file, keys keep their file order."""

    name: str
    entries: dict[str, Optional[str]] = Field(default_factory=dict)

    @property
    def keys(self) -> list[str]:
        """Keys in section."""
        return list(self.entries)

    @property
    def has_keys(self) -> bool:
        """True if section has any keys."""
        return bool(self.entries)

    def items(self) -> list[tuple[str, Optional[str]]]:
        """All key/value pairs in section."""
        return list(self.entries.items())

    def get(self, key: str) -> Optional[str]:
        """Value assigned to key, None if there is no such key or it has no value."""
        return self.entries.get(key)

    def set(self, key: str, value: Optional[str]):
        self.entries[key] = value

    def __getitem__(self, key: str) -> Optional[str]:
        return self.get(key)

    def __setitem__(self, key: str, value: Optional[str]):
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return key in self.entries


class SettingsFile(BaseModel):
    """Parsed settings file. Sections keep their file order."""

    section_map: dict[str, SettingsSection] = Field(default_factory=dict)

    def __getitem__(self, name: str) -> SettingsSection:
        """Get a section, creating an empty one if it does not exist."""
        section = self.section_map.get(name)
        if section is None:
            section = self.section_map[name] = SettingsSection(name=name)
        return section

    def has_section(self, name: str) -> bool:
        """Check if given section exists and has some keys in it."""
        section = self.section_map.get(name)
        return section is not None and section.has_keys

    @property
    def sections(self) -> Iterator[SettingsSection]:
        """Sections which have keys. Empty sections are skipped."""
        return (s for s in self.section_map.values() if s.has_keys)

    @property
    def root(self) -> SettingsSection:
        """Root section, holding keys which precede any section header."""
        return self[""]


class SettingsParseError(ValueError):
    """Exception raised when a settings file cannot be parsed."""

    pass
