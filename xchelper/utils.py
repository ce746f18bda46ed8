"""General utils functions"""

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence, Union

from xchelper.exceptions import CollaboratorError

logger = logging.getLogger(__name__)


def run_command(
    command: Sequence[str], cwd: Optional[Union[str, Path]] = None
) -> subprocess.CompletedProcess:
    """
    Run an external command and capture its output.

    A non-zero exit status is returned to the caller, not raised, so each
    caller can wrap it in its own error. A missing executable or working
    directory is raised as a CollaboratorError with status 127.
    """
    logger.debug("+ " + " ".join(shlex.quote(str(part)) for part in command))
    try:
        return subprocess.run(
            [str(part) for part in command],
            cwd=cwd,
            text=True,
            capture_output=True,
            check=False,
        )
    except FileNotFoundError as e:
        raise CollaboratorError(
            f"Failed to run {command[0]}: {e}", exit_code=127, stderr=str(e)
        ) from e


def bash_command(script: str) -> List[str]:
    return ["/bin/bash", "-c", script]
