import json
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

from xchelper.exceptions import UploadArchiveError

ACCESS_KEY_VAR = "XCHELPER_S3_ACCESS_KEY"
SECRET_KEY_VAR = "XCHELPER_S3_SECRET_KEY"
CONFIG_FILE_VAR = "XCHELPER_S3_CONFIG"


def load_dotenv_file(start: Optional[Path] = None) -> None:
    """
    Load the nearest .env file from ``start`` or one of its parents.

    Variables already set in the environment win over the file.
    """
    current_path = Path(start) if start is not None else Path.cwd()
    for parent in [current_path] + list(current_path.parents):
        dotenv_path = parent / ".env"
        if dotenv_path.exists():
            load_dotenv(dotenv_path=dotenv_path, override=False)
            break


def S3_access_config_from_file(config_path: Union[str, Path]) -> dict:
    """Read access_key and secret_key from a JSON credentials file."""
    try:
        with open(config_path, "r") as file:
            auth_options = json.load(file)
    except (OSError, ValueError) as e:
        raise UploadArchiveError(
            f"Failed to read S3 credentials file {config_path}: {e}"
        ) from e
    if "access_key" in auth_options and "secret_key" in auth_options:
        return {
            "access_key": auth_options["access_key"],
            "secret_key": auth_options["secret_key"],
        }
    raise UploadArchiveError(
        f"Missing access_key or secret_key in config file: {config_path}"
    )


def S3_access_config_from_env(required: bool = True) -> dict:
    """Get S3 access config from environment variables or file

    Args:
        required: If True, raise an error when credentials are missing.
                 If False, return empty dict when credentials are missing.

    Returns:
        dict: Dictionary with access_key and secret_key, or empty dict if not required
    """
    load_dotenv_file()
    if ACCESS_KEY_VAR in os.environ and SECRET_KEY_VAR in os.environ:
        return {
            "access_key": os.environ[ACCESS_KEY_VAR],
            "secret_key": os.environ[SECRET_KEY_VAR],
        }
    elif CONFIG_FILE_VAR in os.environ:
        return S3_access_config_from_file(os.environ[CONFIG_FILE_VAR])
    elif required:
        raise UploadArchiveError(
            f"Missing S3 credentials. Set {ACCESS_KEY_VAR} and {SECRET_KEY_VAR}, "
            f"or {CONFIG_FILE_VAR}"
        )
    return {}
