"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

SETTINGS_CONTENT = """
    in_root = some text

    [section1]
    name1
    name2
    name3

    [section2]
    key1=value1=value1
    key2 = value2
    #comment

    [section3]
"""

CHANGELOG_CONTENT = """## 1.2.3-beta.7 (2022/02/22)
* Added reindentation of nested values
* Fixed empty sections

## 1.2.2
* Initial release
"""


@pytest.fixture
def settings_content() -> str:
    """Sample settings file content."""
    return SETTINGS_CONTENT


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project tree with a settings file and changelog at its root.

    Templates are placed two levels below the root.
    """
    (tmp_path / "build.ini").write_text(
        "product = expandkit\n"
        "[release]\n"
        "channel = beta\n"
        "banner = {product} {package_version}\n",
        encoding="utf-8",
    )
    (tmp_path / "CHANGES.md").write_text(CHANGELOG_CONTENT, encoding="utf-8")

    templates = tmp_path / "src" / "templates"
    templates.mkdir(parents=True)
    return tmp_path
