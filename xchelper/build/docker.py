"""
Containerized builds with Docker.

Only the `docker run` invocation is assembled here; the container runtime
itself is an external process.
"""

import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Union

from xchelper.constants import DEFAULT_DOCKER_IMAGE, DEFAULT_PLATFORM
from xchelper.exceptions import DockerBuildError, UpdatePackagesError
from xchelper.utils import bash_command, run_command

from .clean import BuildConfiguration, clean, should_clean
from .volumes import cache_directory, persistent_volume_options

logger = logging.getLogger(__name__)


@dataclass
class DockerRun:
    """A single `docker run` invocation."""

    image: str
    command: List[str]
    options: List[str] = field(default_factory=list)

    def args(self) -> List[str]:
        return ["docker", "run", "--rm", *self.options, self.image, *self.command]

    def launch(self) -> subprocess.CompletedProcess:
        logger.info(f"Running in Docker - {self.image}")
        return run_command(self.args())


def source_options(source_root: Path) -> List[str]:
    """Mount the source tree at the same path and run from it."""
    return ["-v", f"{source_root}:{source_root}", "--workdir", str(source_root)]


def volume_options(source_root: Path, persistent_volume: Optional[str]) -> List[str]:
    if persistent_volume is None:
        return []
    return [
        option
        for mapping in persistent_volume_options(source_root, persistent_volume)
        for option in mapping.docker_options()
    ]


def _error_prefix(persistent_volume: Optional[str]) -> str:
    return f"{persistent_volume} - " if persistent_volume else ""


def docker_build(
    source_root: Union[str, Path],
    configuration: BuildConfiguration = BuildConfiguration.debug,
    image: str = DEFAULT_DOCKER_IMAGE,
    persistent_volume: Optional[str] = None,
    run_options: Optional[Sequence[str]] = None,
    platform: str = DEFAULT_PLATFORM,
) -> subprocess.CompletedProcess:
    """
    Build the package inside a Docker container.

    Args:
        source_root: Root of the Swift package
        configuration: Build configuration passed to `swift build`
        image: Docker image with the Swift toolchain
        persistent_volume: Cache bucket keeping the build output between runs;
            without one the container writes to the source tree's build directory
        run_options: Extra `docker run` options, placed before the mounts
        platform: Platform the container builds for, used to detect stale output

    Raises:
        DockerBuildError: If the build exits with a non-zero status
    """
    source_root = Path(source_root).absolute()
    logger.info(f"Building in Docker - {image}")

    # Where the container's build output lives on the host
    build_root = (
        cache_directory(source_root, persistent_volume)
        if persistent_volume
        else source_root
    )
    if should_clean(build_root, configuration, platform):
        clean(build_root, configuration)

    options = list(run_options or [])
    options += source_options(source_root)
    options += volume_options(source_root, persistent_volume)

    run = DockerRun(
        image=image,
        command=bash_command(f"swift build --configuration {configuration.value}"),
        options=options,
    )
    result = run.launch()
    if result.returncode != 0:
        message = (
            f"{_error_prefix(persistent_volume)}Error building in Docker "
            f"({result.returncode}): {result.stderr}"
        )
        logger.debug(message)
        raise DockerBuildError(message, result.returncode, result.stderr)
    return result


def update_docker_packages(
    source_root: Union[str, Path],
    image: str = DEFAULT_DOCKER_IMAGE,
    persistent_volume: Optional[str] = None,
) -> subprocess.CompletedProcess:
    """
    Resolve and update the package's dependencies inside a Docker container.

    Raises:
        UpdatePackagesError: If the update exits with a non-zero status
    """
    source_root = Path(source_root).absolute()
    logger.info(f"Updating Docker packages at {source_root}")

    options = source_options(source_root) + volume_options(
        source_root, persistent_volume
    )
    run = DockerRun(
        image=image, command=bash_command("swift package update"), options=options
    )
    result = run.launch()
    if result.returncode != 0:
        message = (
            f"{_error_prefix(persistent_volume)}Error updating packages "
            f"({result.returncode}):\n{result.stderr}"
        )
        logger.debug(message)
        raise UpdatePackagesError(message, result.returncode, result.stderr)

    logger.info("Packages updated")
    return result
