"""Xcode project commands"""

import click

from xchelper.exceptions import XcodeHelperError
from xchelper.packages import generate_xcode_project, symlink_dependencies

from .debug import add_debug_option
from .utils.errors import exit_with_error
from .utils.options import source_path_option


@add_debug_option
@click.command("generate-project")
@source_path_option
def generate_project(source_path):
    """Generate the Xcode project of the package."""
    try:
        generate_xcode_project(source_path)
    except XcodeHelperError as e:
        exit_with_error(e)


@add_debug_option
@click.command("symlink-dependencies")
@source_path_option
def symlink(source_path):
    """Symlink dependency checkouts and point the Xcode project at the links."""
    try:
        processed = symlink_dependencies(source_path)
    except XcodeHelperError as e:
        exit_with_error(e)

    for alias, checkout_path in processed:
        click.echo(f"{alias} -> {checkout_path}")
