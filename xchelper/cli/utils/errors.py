import sys

import click

from xchelper.exceptions import XcodeHelperError

from .logging import logger


def exit_with_error(error: XcodeHelperError):
    """Report an xchelper error to the user and exit with status 1."""
    message = error.message
    stderr = getattr(error, "stderr", "")
    # Most collaborator messages already end with the captured stderr
    if stderr and stderr.strip() not in message:
        message += f"\n{stderr}"
    logger.error(click.style("[ERROR]", fg="red", bold=True) + f" {message}")
    sys.exit(1)
