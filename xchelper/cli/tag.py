"""Release tag commands"""

import sys

import click

from xchelper.exceptions import NoValidTagError, XcodeHelperError
from xchelper.versioning import GitTagManager, VersionComponent

from .debug import add_debug_option
from .utils.errors import exit_with_error
from .utils.logging import logger
from .utils.options import source_path_option


@click.group("tag")
@click.pass_context
def tag(ctx):
    """Read and publish release tags (major.minor.patch)."""
    ctx.ensure_object(dict)


@add_debug_option
@tag.command("latest")
@source_path_option
def latest(source_path):
    """Print the latest release tag."""
    try:
        version = GitTagManager(source_path).latest_tag()
    except NoValidTagError as e:
        logger.error(
            click.style("[ERROR]", fg="red", bold=True)
            + f" Repository has no version tags yet. Create one with `git tag 0.1.0`. ({e})"
        )
        sys.exit(1)
    except XcodeHelperError as e:
        exit_with_error(e)
    click.echo(str(version))


@add_debug_option
@tag.command("increment")
@source_path_option
@click.option(
    "--component",
    type=click.Choice([c.name.lower() for c in VersionComponent], case_sensitive=False),
    default="patch",
    show_default=True,
    help="Version component to increment.",
)
@click.option(
    "--push",
    is_flag=True,
    default=False,
    help="Push the current branch and the new tag to origin.",
)
def increment(source_path, component, push):
    """Tag the repository with the next version."""
    try:
        manager = GitTagManager(source_path)
        version = manager.increment_tag(VersionComponent.from_name(component))
        if push:
            manager.push_tag(version)
    except XcodeHelperError as e:
        exit_with_error(e)
    click.echo(str(version))


@add_debug_option
@tag.command("push")
@source_path_option
@click.argument("tag_name", required=False)
def push(source_path, tag_name):
    """Push the current branch and TAG_NAME (default: latest tag) to origin."""
    try:
        manager = GitTagManager(source_path)
        manager.push_tag(tag_name or manager.latest_tag())
    except XcodeHelperError as e:
        exit_with_error(e)
