"""Remote storage for release archives."""

from .S3config import S3_access_config_from_env, S3_access_config_from_file
from .storage import DEFAULT_S3_ENDPOINT, connect, upload_archive

__all__ = [
    "DEFAULT_S3_ENDPOINT",
    "S3_access_config_from_env",
    "S3_access_config_from_file",
    "connect",
    "upload_archive",
]
