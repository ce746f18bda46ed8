"""Options shared by several commands and resolution of their values."""

import shlex
from pathlib import Path
from typing import List, Optional, Sequence

import click

from xchelper.build.clean import BuildConfiguration
from xchelper.config import ConfigAccessor
from xchelper.exceptions import XcodeHelperError
from xchelper.model.project import ProjectConfig

from .errors import exit_with_error

source_path_option = click.option(
    "--source-path",
    "-p",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    envvar="XCHELPER_SOURCE_PATH",
    help="Root of the Swift package.",
)

configuration_option = click.option(
    "--configuration",
    "-c",
    type=click.Choice([c.value for c in BuildConfiguration], case_sensitive=False),
    default=None,
    envvar="XCHELPER_CONFIGURATION",
    help="Build configuration. [default: debug]",
)

persistent_volume_option = click.option(
    "--persistent-volume",
    "-v",
    type=str,
    default=None,
    envvar="XCHELPER_PERSISTENT_VOLUME",
    help="Cache bucket that keeps build output between container runs.",
)

image_option = click.option(
    "--image",
    "-i",
    type=str,
    default=None,
    envvar="XCHELPER_DOCKER_IMAGE",
    help="Docker image with the Swift toolchain. [default: swift]",
)


def first_set(*values):
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def load_project(source_path: Path) -> ProjectConfig:
    try:
        return ProjectConfig.load(source_path)
    except XcodeHelperError as e:
        exit_with_error(e)


def load_user_config() -> ConfigAccessor:
    return ConfigAccessor()


def resolve_configuration(
    value: Optional[str], project: ProjectConfig
) -> BuildConfiguration:
    if value is None:
        return project.configuration
    return BuildConfiguration(value.lower())


def resolve_image(
    value: Optional[str], project: ProjectConfig, user_config: ConfigAccessor
) -> str:
    return first_set(value, project.docker_image, user_config.get("docker", "image"))


def split_run_options(values: Sequence[str]) -> List[str]:
    """Split repeated --run-option values such as "--network host" into arguments."""
    return [part for value in values for part in shlex.split(value)]
