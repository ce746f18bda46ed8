"""
Detection and removal of stale build output.

The check is best effort: it only looks at the target triples recorded in
the build manifest of the previous build. It does not know whether the
toolchain itself changed.
"""

import logging
import re
import shutil
from enum import Enum
from pathlib import Path
from typing import List, Union

from xchelper.constants import BUILD_DIR_NAME, DEFAULT_PLATFORM
from xchelper.exceptions import CleanError, FilesystemError
from xchelper.utils import run_command

logger = logging.getLogger(__name__)

# llbuild manifests record compiler invocations as ["swiftc",...,"-target","x86_64-apple-macosx10.10",...]
_TARGET_ARG = re.compile(r'"-target"\s*,\s*"([^"]+)"')


class BuildConfiguration(Enum):
    debug = "debug"
    release = "release"

    def manifest_path(self, source_root: Union[str, Path]) -> Path:
        return Path(source_root) / BUILD_DIR_NAME / f"{self.value}.yaml"

    def build_directory(self, source_root: Union[str, Path]) -> Path:
        return Path(source_root) / BUILD_DIR_NAME / self.value


def manifest_targets(manifest: str) -> List[str]:
    """Return the target triples passed to the compiler in a build manifest."""
    return _TARGET_ARG.findall(manifest)


def triple_matches_platform(triple: str, platform: str) -> bool:
    """
    Check whether a target triple builds for ``platform``.

    Only the system part of the triple (after arch and vendor) is compared,
    so "x86_64-unknown-linux-gnu" matches "linux" and
    "x86_64-apple-macosx10.10" matches "macos".
    """
    return any(part.startswith(platform) for part in triple.split("-")[2:])


def should_clean(
    source_root: Union[str, Path],
    configuration: BuildConfiguration,
    platform: str = DEFAULT_PLATFORM,
) -> bool:
    """
    Decide whether the previous build output must be removed before building.

    If the configuration's manifest is readable, clean when it records a
    target triple for another platform. Otherwise clean whenever a build
    directory exists for the configuration, since its origin is unknown.
    """
    manifest_path = configuration.manifest_path(source_root)
    try:
        manifest = manifest_path.read_text(errors="replace")
    except OSError:
        exists = configuration.build_directory(source_root).exists()
        logger.debug(
            f"No readable manifest at {manifest_path}, build directory exists: {exists}"
        )
        return exists

    incompatible = [
        triple
        for triple in manifest_targets(manifest)
        if not triple_matches_platform(triple, platform)
    ]
    if incompatible:
        logger.debug(f"Previous build targeted {', '.join(sorted(set(incompatible)))}")
    return bool(incompatible)


def clean(source_root: Union[str, Path], configuration: BuildConfiguration) -> None:
    """Remove the configuration's build directory and manifest, if present."""
    logger.info(f"Cleaning {configuration.value} build in {source_root}")
    build_directory = configuration.build_directory(source_root)
    manifest_path = configuration.manifest_path(source_root)
    try:
        if build_directory.is_symlink() or build_directory.is_file():
            build_directory.unlink()
        elif build_directory.exists():
            shutil.rmtree(build_directory)
    except OSError as e:
        raise FilesystemError(
            build_directory, f"Failed to remove build directory ({e})"
        ) from e
    try:
        manifest_path.unlink(missing_ok=True)
    except OSError as e:
        raise FilesystemError(
            manifest_path, f"Failed to remove build manifest ({e})"
        ) from e


def clean_package(source_root: Union[str, Path]) -> None:
    """Run the toolchain's own clean in ``source_root``."""
    logger.info(f"Cleaning {source_root}")
    result = run_command(["swift", "package", "clean"], cwd=source_root)
    if result.returncode != 0:
        message = f"Error cleaning: {result.stderr}"
        logger.debug(message)
        raise CleanError(message, result.returncode, result.stderr)
