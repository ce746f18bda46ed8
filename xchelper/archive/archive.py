"""
Release archives.

Build products are packed into tar archives, either flat (every file at the
archive root) or keeping the paths they were given. Xcode-style
.xcarchive bundles wrap such an archive with an Info.plist so they show up
in the Xcode organizer.
"""

import logging
import plistlib
import tarfile
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from xchelper.exceptions import (
    CreateArchiveError,
    FilesystemError,
    XcarchivePlistError,
)

from .dates import archive_date, directory_date, plist_date

logger = logging.getLogger(__name__)

XCARCHIVE_PREFIX = "xchelper"
XCARCHIVE_VERSION = "2"


def get_archive_mode(archive_path: Path) -> str:
    """Get the tarfile write mode for an archive file name."""
    name = archive_path.name
    if name.endswith(".tar.gz") or name.endswith(".tgz"):
        return "w:gz"
    return "w"


def release_archive_name(name: str, version: str, timestamp: datetime) -> str:
    """Archive file name for a released version, e.g. Hello-1.2.3-2017-03-09.tar.gz"""
    return f"{name}-{version}-{directory_date(timestamp)}.tar.gz"


def create_archive(
    archive_path: Union[str, Path],
    file_paths: Sequence[Union[str, Path]],
    flat: bool = True,
) -> Path:
    """
    Create a tar archive of ``file_paths``.

    Args:
        archive_path: Archive to create; gzip-compressed for .tar.gz/.tgz names
        file_paths: Files or directories to include
        flat: Store each entry under its base name instead of its full path

    Returns:
        Path to the created archive

    Raises:
        CreateArchiveError: If an input is missing or the archive cannot be written
    """
    archive_path = Path(archive_path)
    logger.info(f"Creating archive {archive_path}")

    members: List[tuple] = []
    for file_path in file_paths:
        file_path = Path(file_path)
        if not file_path.exists():
            message = f"Error creating archive: {file_path} does not exist"
            logger.debug(message)
            raise CreateArchiveError(message)
        arcname = file_path.name if flat else file_path.as_posix().lstrip("/")
        members.append((file_path, arcname))

    try:
        archive_path.parent.mkdir(parents=True, exist_ok=True)
        with tarfile.open(archive_path, get_archive_mode(archive_path)) as archive:
            for file_path, arcname in members:
                logger.debug(f"a {arcname}")
                archive.add(file_path, arcname=arcname)
    except (OSError, tarfile.TarError) as e:
        message = f"Error creating archive {archive_path}: {e}"
        logger.debug(message)
        raise CreateArchiveError(message) from e

    logger.info("Archive created")
    return archive_path


def create_xcarchive_plist(
    directory: Path, name: str, scheme_name: str, timestamp: datetime
) -> Path:
    plist_path = directory / "Info.plist"
    info = {
        "ArchiveVersion": XCARCHIVE_VERSION,
        "CreationDate": plist_date(timestamp),
        "Name": name,
        "SchemeName": scheme_name,
    }
    try:
        with open(plist_path, "wb") as f:
            plistlib.dump(info, f, fmt=plistlib.FMT_XML)
    except OSError as e:
        message = f"Failed to create plist in: {directory}. Error: {e}"
        logger.debug(message)
        raise XcarchivePlistError(message) from e
    return plist_path


def create_xcarchive(
    directory: Union[str, Path],
    binary_path: Union[str, Path],
    scheme_name: str,
    timestamp: Optional[datetime] = None,
) -> Path:
    """
    Wrap a built binary in an .xcarchive bundle.

    The bundle is created at
    ``<directory>/<yyyy-MM-dd>/xchelper-<name> <MM-dd-yyyy, h.mm.ss a>.xcarchive``
    and contains Info.plist and Products/<name>.tar.

    Returns:
        Path to the .xcarchive directory
    """
    binary_path = Path(binary_path)
    timestamp = timestamp or datetime.now()
    name = binary_path.name
    logger.info(f"Creating xcarchive {name}")

    xcarchive_path = (
        Path(directory)
        / directory_date(timestamp)
        / f"{XCARCHIVE_PREFIX}-{name} {archive_date(timestamp)}.xcarchive"
    )
    try:
        xcarchive_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(
            xcarchive_path, f"Failed to create xcarchive directory ({e})"
        ) from e

    create_xcarchive_plist(xcarchive_path, name, scheme_name, timestamp)
    create_archive(xcarchive_path / "Products" / f"{name}.tar", [binary_path])
    return xcarchive_path
