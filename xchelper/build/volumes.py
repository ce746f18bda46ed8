"""
Persistent build volumes for containerized builds.

Every cache bucket (usually a target platform) gets its own copy of the
build output directory under the source tree:

    SomePackage/
        .build/                 <- mounted over by the container
            linux/              <- cache directory for bucket "linux"
                .build/         <- host side of the mount
            other-bucket/
                .build/

The bucket's copy is bind-mounted over SomePackage/.build inside the
container, so the toolchain always writes to the conventional path while
builds for different buckets keep separate incremental state.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

from xchelper.constants import BUILD_DIR_NAME, PACKAGES_DIR_NAME
from xchelper.exceptions import FilesystemError, InvalidBucketNameError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MountMapping:
    """A host directory bind-mounted at a container path for one invocation."""

    host_path: Path
    container_path: Path

    def volume_spec(self) -> str:
        return f"{self.host_path}:{self.container_path}"

    def docker_options(self) -> List[str]:
        return ["-v", self.volume_spec()]


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and its parents; existing directories are fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FilesystemError(path, f"Failed to create directory ({e})") from e
    return path


def _check_bucket_name(bucket_name: str) -> None:
    if (
        not bucket_name
        or bucket_name in (".", "..")
        or "/" in bucket_name
        or "\\" in bucket_name
    ):
        raise InvalidBucketNameError(bucket_name)


def cache_directory(source_root: Union[str, Path], bucket_name: str) -> Path:
    """
    Return the cache directory of ``bucket_name``, creating it if needed.

    The result is ``<source_root>/.build/<bucket_name>``; the nested
    ``.build`` directory that gets mounted is created as well.

    Raises:
        InvalidBucketNameError: If the name is not a single path component
    """
    _check_bucket_name(bucket_name)
    directory = Path(source_root).absolute() / BUILD_DIR_NAME / bucket_name
    ensure_directory(directory / BUILD_DIR_NAME)
    return directory


def mount_mapping(
    source_root: Union[str, Path],
    bucket_name: str,
    directory_name: str = BUILD_DIR_NAME,
) -> MountMapping:
    """
    Map the bucket's copy of ``directory_name`` onto the source tree's copy.

    Args:
        source_root: Root of the package being built
        bucket_name: Cache bucket, e.g. the target platform
        directory_name: Directory of the source root to persist
            (the build output directory unless stated otherwise)
    """
    source_root = Path(source_root).absolute()
    host_path = ensure_directory(
        cache_directory(source_root, bucket_name) / directory_name
    )
    return MountMapping(
        host_path=host_path, container_path=source_root / directory_name
    )


def dependency_mount_mapping(
    source_root: Union[str, Path], bucket_name: str
) -> MountMapping:
    """
    Map the bucket's copy of the resolved dependency directory.

    Not used by the build and update commands: sharing this directory
    across container runs has crashed the Swift compiler. See
    persistent_volume_options.
    """
    return mount_mapping(source_root, bucket_name, PACKAGES_DIR_NAME)


def persistent_volume_options(
    source_root: Union[str, Path], bucket_name: str
) -> List[MountMapping]:
    """
    Mounts that keep a bucket's incremental state across container runs.

    Only the build output directory is persisted. The dependency directory
    is left out until the toolchain crash seen with a persisted Packages
    directory is fixed upstream.
    """
    mapping = mount_mapping(source_root, bucket_name)
    logger.debug(f"Persistent volume: {mapping.volume_spec()}")
    return [mapping]
