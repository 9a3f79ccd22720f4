"""Parser for markdown changelogs (release notes)."""

import logging
import re
from pathlib import Path
from typing import Iterable, Optional, Pattern, Union

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# ## 1.2.3-beta.1 (optional trailing text, e.g. a date)
HEADER_PATTERN: Pattern = re.compile(
    r"##\s+(?P<version>\d+(?:\.\d+(?:\.\d+)?)?)(?:-(?P<tag>\S+))?.*", re.DOTALL
)

# * change entry (bullet is optional)
BULLET_PATTERN: Pattern = re.compile(r"(?:\*+\s+)?(?P<entry>.*)", re.DOTALL)


class ReleaseNotes(BaseModel):
    """Latest release described by a changelog.

    Only the first section of the changelog is read: the version header
    and the change entries directly below it.
    """

    file_version: str = "0.0.0"  # Short version (e.g., "1.2.3")
    tag: Optional[str] = None  # Pre-release tag (e.g., "beta.3")
    changes: list[str] = Field(default_factory=list)

    @property
    def package_version(self) -> str:
        """Full version including tag (e.g., "1.2.3-beta.3")."""
        if not self.tag or not self.tag.strip():
            return self.file_version
        return f"{self.file_version}-{self.tag}"

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ReleaseNotes":
        """
        Parse a changelog.

        Args:
            lines: Text lines

        Returns:
            Parsed release notes (defaults if the first line is not a version header)
        """
        result = cls()
        lines = iter(lines)

        first = next(lines, None)
        if not first or not _extract_version(first, result):
            return result

        for line in lines:
            if not _append_change(line, result.changes):
                break

        logger.debug(f"Parsed release notes {result.package_version} ({len(result.changes)} changes)")
        return result

    @classmethod
    def from_text(cls, content: str) -> "ReleaseNotes":
        """Parse changelog content. Lines are trimmed before parsing."""
        return cls.from_lines([line.strip() for line in content.split("\n")])

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "ReleaseNotes":
        """Parse changelog file. Unlike from_text, lines are not trimmed."""
        logger.info(f"Loading release notes from {path}")
        return cls.from_lines(Path(path).read_text(encoding="utf-8").splitlines())


def _extract_version(line: str, result: ReleaseNotes) -> bool:
    match = HEADER_PATTERN.fullmatch(line)
    if not match:
        return False

    result.file_version = match.group("version")
    tag = match.group("tag")
    result.tag = tag if tag and tag.strip() else None
    return True


def _append_change(line: str, changes: list[str]) -> bool:
    if not line or line.isspace():
        return False
    if HEADER_PATTERN.fullmatch(line):
        # next release
        return False

    changes.append(BULLET_PATTERN.fullmatch(line).group("entry"))
    return True
