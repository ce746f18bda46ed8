"""Build, package update and clean commands"""

import click

from xchelper.build import (
    cache_directory,
    clean as clean_build,
    clean_package,
    docker_build,
    update_docker_packages,
)
from xchelper.exceptions import XcodeHelperError
from xchelper.packages import update_macos_packages

from .debug import add_debug_option
from .utils.errors import exit_with_error
from .utils.logging import logger
from .utils.options import (
    configuration_option,
    first_set,
    image_option,
    load_project,
    load_user_config,
    persistent_volume_option,
    resolve_configuration,
    resolve_image,
    source_path_option,
    split_run_options,
)


@add_debug_option
@click.command("build")
@source_path_option
@configuration_option
@image_option
@persistent_volume_option
@click.option(
    "--platform",
    type=str,
    default=None,
    help="Platform the container builds for; output built for others is cleaned. [default: linux]",
)
@click.option(
    "--run-option",
    "run_options",
    multiple=True,
    help='Extra `docker run` option, e.g. "--network host". Repeatable.',
)
def build(
    source_path, configuration, image, persistent_volume, platform, run_options
):
    """Build the package in a Docker container."""
    project = load_project(source_path)
    user_config = load_user_config()

    try:
        result = docker_build(
            source_path,
            configuration=resolve_configuration(configuration, project),
            image=resolve_image(image, project, user_config),
            persistent_volume=first_set(persistent_volume, project.persistent_volume),
            run_options=split_run_options(run_options),
            platform=first_set(platform, project.platform),
        )
    except XcodeHelperError as e:
        exit_with_error(e)

    if result.stdout:
        click.echo(result.stdout, nl=False)
    logger.info("Build succeeded")


@add_debug_option
@click.command("update-packages")
@source_path_option
@click.option(
    "--docker/--host",
    default=False,
    show_default=True,
    help="Update inside a Docker container instead of on the host.",
)
@image_option
@persistent_volume_option
def update_packages(source_path, docker, image, persistent_volume):
    """Resolve and update the package's dependencies."""
    project = load_project(source_path)

    try:
        if docker:
            update_docker_packages(
                source_path,
                image=resolve_image(image, project, load_user_config()),
                persistent_volume=first_set(
                    persistent_volume, project.persistent_volume
                ),
            )
        else:
            update_macos_packages(source_path)
    except XcodeHelperError as e:
        exit_with_error(e)


@add_debug_option
@click.command("clean")
@source_path_option
@configuration_option
@persistent_volume_option
@click.option(
    "--toolchain",
    is_flag=True,
    default=False,
    help="Run `swift package clean` instead of removing the build directory.",
)
def clean(source_path, configuration, persistent_volume, toolchain):
    """Remove build output of the package or of a cache bucket."""
    project = load_project(source_path)

    try:
        if toolchain:
            clean_package(source_path)
            return
        persistent_volume = first_set(persistent_volume, project.persistent_volume)
        build_root = (
            cache_directory(source_path, persistent_volume)
            if persistent_volume
            else source_path
        )
        clean_build(build_root, resolve_configuration(configuration, project))
    except XcodeHelperError as e:
        exit_with_error(e)
