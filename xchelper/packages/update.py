"""Dependency updates and Xcode project generation on the host."""

import logging
import subprocess
from pathlib import Path
from typing import Union

from xchelper.exceptions import UpdatePackagesError
from xchelper.utils import run_command

logger = logging.getLogger(__name__)


def update_macos_packages(source_root: Union[str, Path]) -> subprocess.CompletedProcess:
    logger.info(f"Updating macOS packages at {source_root}")
    result = run_command(["swift", "package", "update"], cwd=source_root)
    if result.returncode != 0:
        message = f"Error updating packages ({result.returncode}):\n{result.stderr}"
        logger.debug(message)
        raise UpdatePackagesError(message, result.returncode, result.stderr)
    logger.info("Packages updated")
    return result


def generate_xcode_project(
    source_root: Union[str, Path],
) -> subprocess.CompletedProcess:
    logger.info("Generating Xcode Project")
    result = run_command(["swift", "package", "generate-xcodeproj"], cwd=source_root)
    if result.returncode != 0:
        message = (
            f"Error generating Xcode project ({result.returncode}):\n{result.stderr}"
        )
        logger.debug(message)
        raise UpdatePackagesError(message, result.returncode, result.stderr)
    logger.info("Xcode project generated")
    return result
