"""xchelper CLI"""

import click

from xchelper import __version__
from xchelper.cli.archive import archive
from xchelper.cli.build import build, clean, update_packages
from xchelper.cli.project import generate_project, symlink
from xchelper.cli.tag import tag
from xchelper.cli.upload import upload

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="xchelper")
@click.pass_context
def cli(ctx):
    """
    Build Swift packages in Docker, tag releases and publish archives.
    """
    ctx.ensure_object(dict)


cli.add_command(build)
cli.add_command(update_packages)
cli.add_command(clean)
cli.add_command(generate_project)
cli.add_command(symlink)
cli.add_command(tag)
cli.add_command(archive)
cli.add_command(upload)

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
