import click

from .utils.logging import configure_logging


def _set_debug(ctx, param, value):
    """
    Record the --debug flag on the root context and configure logging.

    Any level may switch debug on; only the top-level command may switch
    it off again.
    """
    root_ctx = ctx.find_root()
    root_ctx.ensure_object(dict)
    at_root = ctx is root_ctx

    if value or at_root or "DEBUG" not in root_ctx.obj:
        root_ctx.obj["DEBUG"] = bool(value)

    configure_logging(root_ctx.obj["DEBUG"])
    return root_ctx.obj["DEBUG"]


debug_option = click.option(
    "--debug/--no-debug",
    is_eager=True,
    expose_value=False,
    callback=_set_debug,
    help="Enable debug mode",
)


def add_debug_option(cmd):
    """Add --debug/--no-debug to a command or group, or to a function about to become one."""
    if not isinstance(cmd, click.Command):
        return debug_option(cmd)

    if not any(param.name == "debug" for param in cmd.params):
        cmd.params.insert(
            0,
            click.Option(
                ["--debug/--no-debug"],
                is_eager=True,
                expose_value=False,
                callback=_set_debug,
                help="Enable debug mode",
            ),
        )
    return cmd
