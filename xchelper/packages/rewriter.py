"""Rewriting of dependency references in Xcode project files."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

from xchelper.exceptions import FilesystemError

logger = logging.getLogger(__name__)


class ReferenceRewriter(ABC):
    """Replaces references to a versioned dependency in a project file."""

    @abstractmethod
    def rewrite(
        self, project_file: Union[str, Path], raw_name: str, alias: str
    ) -> int:
        """
        Point every reference to ``raw_name`` at ``alias``.

        Returns:
            Number of references replaced
        """


class TextReferenceRewriter(ReferenceRewriter):
    """
    Plain substring replacement over the whole file.

    The file format is not parsed. ``raw_name`` carries the version suffix,
    which keeps it from matching unrelated text.
    """

    def rewrite(
        self, project_file: Union[str, Path], raw_name: str, alias: str
    ) -> int:
        project_file = Path(project_file)
        if not raw_name:
            raise ValueError("Cannot rewrite references to an empty name")
        try:
            content = project_file.read_text(encoding="utf-8")
        except OSError as e:
            raise FilesystemError(
                project_file, f"Failed to read project file ({e})"
            ) from e

        count = content.count(raw_name)
        if count == 0:
            return 0

        try:
            project_file.write_text(content.replace(raw_name, alias), encoding="utf-8")
        except OSError as e:
            raise FilesystemError(
                project_file, f"Failed to write project file ({e})"
            ) from e
        logger.debug(f"Replaced {count} reference(s) to {raw_name} in {project_file}")
        return count
