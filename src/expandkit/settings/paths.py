"""Locate files and folders by walking up the directory tree."""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

logger = logging.getLogger(__name__)

# Upper bound on parent folders visited
MAX_ASCENT = 1024


class PathFinder:
    """
    Find files inside a repository.

    Can be used to find the root folder of a project or a settings file
    placed in any parent folder.
    """

    def try_find(
        self, root: Union[str, Path], test: Callable[[Path], bool]
    ) -> Optional[Path]:
        """
        Find a folder which passes given test, walking up the tree.

        Args:
            root: Starting folder, usually "."
            test: Test callback

        Returns:
            Matching folder, or None
        """
        path = Path(root).resolve()

        for _ in range(MAX_ASCENT + 1):
            if test(path):
                return path

            parent = path.parent
            if parent == path:
                # filesystem root
                return None
            path = parent

        return None

    def try_find_file(self, root: Union[str, Path], file_name: str) -> Optional[Path]:
        """Find a file in the starting folder or any of its parents."""
        found = self.try_find(root, lambda p: (p / file_name).is_file())
        if found is None:
            logger.debug(f"File {file_name} not found above {root}")
            return None
        return found / file_name

    def try_find_directory(
        self, root: Union[str, Path], directory_name: str
    ) -> Optional[Path]:
        """Find a folder in the starting folder or any of its parents."""
        found = self.try_find(root, lambda p: (p / directory_name).is_dir())
        return None if found is None else found / directory_name
