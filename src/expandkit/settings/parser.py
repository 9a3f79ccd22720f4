"""Parser for INI-like settings files."""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Pattern, Union

from .models import SettingsFile, SettingsParseError

logger = logging.getLogger(__name__)

# [section name]
HEADER_PATTERN: Pattern = re.compile(r"\s*\[\s*(?P<name>.*?)\s*\]\s*")

# key = value, or a bare key
VALUE_PATTERN: Pattern = re.compile(r"\s*(?P<key>.*?)\s*(?:=\s*(?P<value>.*?)\s*)?")

# empty line, # comment or ; comment
EMPTY_PATTERN: Pattern = re.compile(r"\s*(?:[#;].*)?")


class SettingsParser:
    """Parse settings files into sections of key/value pairs."""

    def parse(self, lines: Iterable[str]) -> SettingsFile:
        """
        Parse settings from text lines.

        Args:
            lines: Lines of text

        Returns:
            Parsed settings

        Raises:
            SettingsParseError: If a line cannot be parsed
        """
        result = SettingsFile()
        section = result.root

        for line in lines:
            if EMPTY_PATTERN.fullmatch(line):
                continue

            header_match = HEADER_PATTERN.fullmatch(line)
            if header_match:
                section = result[header_match.group("name")]
                continue

            value_match = VALUE_PATTERN.fullmatch(line)
            if value_match:
                section[value_match.group("key")] = value_match.group("value")
                continue

            raise SettingsParseError(f"Settings file is invalid: {line}")

        return result

    def parse_text(self, content: str) -> SettingsFile:
        """Parse settings from file content."""
        return self.parse(content.split("\n"))

    def parse_file(self, path: Union[str, Path]) -> SettingsFile:
        """
        Parse settings from a file.

        Raises:
            FileNotFoundError: If the file does not exist
            SettingsParseError: If the file cannot be parsed
        """
        result = self.try_parse_file(path)
        if result is None:
            raise FileNotFoundError(f"File {path} does not exist")
        return result

    def try_parse_file(self, path: Union[str, Path]) -> Optional[SettingsFile]:
        """Parse settings from a file, None if the file does not exist."""
        path = Path(path)
        if not path.is_file():
            return None

        logger.info(f"Loading settings from {path}")
        return self.parse(path.read_text(encoding="utf-8").splitlines())
