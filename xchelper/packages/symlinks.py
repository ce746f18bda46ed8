"""
Stable names for versioned dependency checkouts.

SwiftPM checks dependencies out into directories named after their version,
e.g. `.build/checkouts/Hello-1.0.3`, so every update changes the paths an
Xcode project refers to. Each checkout gets a version-less symlink next to
it (`.build/checkouts/Hello -> .../Hello-1.0.3`) and the project file is
rewritten to point at the symlink.
"""

import logging
import os
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

from xchelper.constants import BUILD_DIR_NAME, CHECKOUTS_DIR_NAME
from xchelper.exceptions import (
    CheckoutsDirNotFoundError,
    FilesystemError,
    ManifestNotFoundError,
    ProjectFileNotFoundError,
)

from .rewriter import ReferenceRewriter, TextReferenceRewriter

logger = logging.getLogger(__name__)

# Hash-pinned checkouts look like "Hello.git-5b3a1c9"
HASH_SUFFIX_SEPARATOR = ".git-"
VERSION_SUFFIX_SEPARATOR = "-"
# Cut at the first "-" followed by a version: "Hello-1.0.3", "Hello-v2.0.0-beta.1"
_VERSIONED_NAME = re.compile(r"(.+?)-(v?[0-9]+(?:\.[0-9]+)*(?:[-+.][0-9A-Za-z]+)*)")
# Files that live next to the checkouts but are not checkouts
NON_PACKAGE_SUFFIXES = (".json", ".resolved")

PROJECT_SUFFIX = ".xcodeproj"
PBXPROJ_SUFFIX = ".pbxproj"


def checkouts_directory(source_root: Union[str, Path]) -> Path:
    return Path(source_root) / BUILD_DIR_NAME / CHECKOUTS_DIR_NAME


def list_checkouts(source_root: Union[str, Path]) -> List[str]:
    """
    Return the entry names of the checkouts directory.

    Raises:
        CheckoutsDirNotFoundError: If the package has no checkouts directory
    """
    directory = checkouts_directory(source_root)
    if not directory.is_dir():
        raise CheckoutsDirNotFoundError(directory)
    try:
        return sorted(os.listdir(directory))
    except OSError as e:
        raise FilesystemError(directory, f"Failed to list directory ({e})") from e


def alias_for(checkout_name: str) -> Optional[str]:
    """
    Return the version-less name of a checkout, or None if it is not one.

    Examples:
        >>> alias_for("Hello-1.0.3")
        'Hello'
        >>> alias_for("Hello.git-5b3a1c9")
        'Hello'
        >>> alias_for("swift-nio") is None
        True
        >>> alias_for(".DS_Store") is None
        True
    """
    if (
        checkout_name.startswith(".")
        or VERSION_SUFFIX_SEPARATOR not in checkout_name
        or checkout_name.endswith(NON_PACKAGE_SUFFIXES)
    ):
        return None

    if HASH_SUFFIX_SEPARATOR in checkout_name:
        alias = checkout_name[: checkout_name.rindex(HASH_SUFFIX_SEPARATOR)]
        return alias or None

    # Unversioned names such as "swift-nio" are left alone
    match = _VERSIONED_NAME.fullmatch(checkout_name)
    return match.group(1) if match else None


def ensure_symlink(checkout_path: Union[str, Path], alias: str) -> bool:
    """
    Create a symlink named ``alias`` next to the checkout, pointing at it.

    An existing entry with that name, symlink or not, is left untouched.

    Returns:
        True if the symlink was created, False if the name already existed
    """
    checkout_path = Path(checkout_path).absolute()
    link_path = checkout_path.parent / alias
    if link_path.exists() or link_path.is_symlink():
        return False
    try:
        link_path.symlink_to(checkout_path, target_is_directory=True)
    except FileExistsError:
        return False
    except OSError as e:
        raise FilesystemError(link_path, f"Error creating symlink ({e})") from e
    return True


def _single_entry(directory: Path, suffix: str, error_class) -> Path:
    try:
        candidates = sorted(
            name for name in os.listdir(directory) if name.endswith(suffix)
        )
    except OSError as e:
        raise FilesystemError(directory, f"Failed to list directory ({e})") from e
    if len(candidates) != 1:
        error = error_class(directory, candidates)
        logger.debug(error.message)
        raise error
    return directory / candidates[0]


def project_file_path(source_root: Union[str, Path]) -> Path:
    """
    Locate the project.pbxproj of the package's Xcode project.

    Raises:
        ProjectFileNotFoundError: Unless there is exactly one .xcodeproj
        ManifestNotFoundError: Unless the .xcodeproj holds exactly one .pbxproj
    """
    xcodeproj = _single_entry(
        Path(source_root), PROJECT_SUFFIX, ProjectFileNotFoundError
    )
    return _single_entry(xcodeproj, PBXPROJ_SUFFIX, ManifestNotFoundError)


def rewrite_project_references(
    project_file: Union[str, Path],
    raw_name: str,
    alias: str,
    rewriter: Optional[ReferenceRewriter] = None,
) -> int:
    """Replace every occurrence of ``raw_name`` in the project file with ``alias``."""
    rewriter = rewriter or TextReferenceRewriter()
    return rewriter.rewrite(project_file, raw_name, alias)


def symlink_dependencies(
    source_root: Union[str, Path], rewriter: Optional[ReferenceRewriter] = None
) -> List[Tuple[str, Path]]:
    """
    Symlink every dependency checkout and point the Xcode project at the links.

    Returns:
        (alias, checkout path) for every checkout that was processed
    """
    logger.info("Symlinking dependencies")
    directory = checkouts_directory(source_root)
    project_file: Optional[Path] = None
    processed = []

    for name in list_checkouts(source_root):
        checkout_path = directory / name
        alias = alias_for(name)
        # Links made by earlier runs, e.g. "swift-nio", are not checkouts
        if alias is None or checkout_path.is_symlink():
            continue
        created = ensure_symlink(checkout_path, alias)
        logger.info(
            f"Symlink: {alias} -> {checkout_path}" + ("" if created else " (exists)")
        )

        if project_file is None:
            project_file = project_file_path(source_root)
        rewrite_project_references(project_file, name, alias, rewriter)
        processed.append((alias, checkout_path))

    if project_file is not None:
        logger.info("Updated Xcode references")
    logger.info("Symlinking done")
    return processed
