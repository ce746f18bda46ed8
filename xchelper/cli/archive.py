"""Archive commands for packaging build products"""

import sys
from datetime import datetime
from pathlib import Path

import click

from xchelper.archive import create_archive, create_xcarchive, release_archive_name
from xchelper.exceptions import XcodeHelperError
from xchelper.versioning import GitTagManager

from .debug import add_debug_option
from .utils.errors import exit_with_error
from .utils.logging import logger
from .utils.options import first_set, load_project, source_path_option


@click.group("archive")
@click.pass_context
def archive(ctx):
    """Package build products into archives."""
    ctx.ensure_object(dict)


@add_debug_option
@archive.command("create")
@source_path_option
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Archive to create. [default: <name>-<latest tag>-<date>.tar.gz]",
)
@click.option(
    "--flat/--structured",
    default=None,
    help="Store files under their base name, or keep their paths. [default: flat]",
)
def create(source_path, files, output, flat):
    """Create a tar archive of FILES (default: files listed in .xchelper.yml)."""
    project = load_project(source_path)
    files = list(files) or [source_path / f for f in project.archive.files]
    if not files:
        logger.error(
            click.style("[ERROR]", fg="red", bold=True)
            + " No files to archive. Pass FILES or set archive.files in .xchelper.yml"
        )
        sys.exit(1)

    try:
        if output is None:
            name = project.name or source_path.absolute().name
            version = GitTagManager(source_path).latest_tag()
            output = (
                source_path
                / project.archive.output_dir
                / release_archive_name(name, str(version), datetime.now())
            )
        archive_path = create_archive(
            output, files, flat=first_set(flat, project.archive.flat)
        )
    except XcodeHelperError as e:
        exit_with_error(e)
    click.echo(f"Created archive: {archive_path}")


@add_debug_option
@archive.command("xcarchive")
@click.argument(
    "binary", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--scheme", "-s", required=True, help="Scheme name recorded in Info.plist."
)
@click.option(
    "--directory",
    "-d",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("~/Library/Developer/Xcode/Archives").expanduser(),
    show_default=True,
    help="Directory the dated archive folders are created in.",
)
def xcarchive(binary, scheme, directory):
    """Wrap BINARY in an .xcarchive bundle."""
    try:
        path = create_xcarchive(directory, binary, scheme)
    except XcodeHelperError as e:
        exit_with_error(e)
    click.echo(f"Created xcarchive: {path}")
