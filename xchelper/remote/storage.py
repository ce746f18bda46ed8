"""Upload of release archives to S3-compatible storage."""

import logging
from pathlib import Path
from typing import Dict, Union
from urllib.parse import urlparse

import minio
from minio.error import MinioException
from urllib3.exceptions import HTTPError

from xchelper.exceptions import UploadArchiveError

logger = logging.getLogger(__name__)

DEFAULT_S3_ENDPOINT = "https://s3.amazonaws.com"


def connect(
    auth_options: Dict[str, str],
    region: str,
    endpoint: str = DEFAULT_S3_ENDPOINT,
) -> "minio.Minio":
    """
    Create a MinIO client for ``endpoint``.

    The endpoint may be given with or without scheme; plain host names are
    reached over https.
    """
    url = urlparse(endpoint if "://" in endpoint else f"https://{endpoint}")
    return minio.Minio(
        endpoint=url.netloc,
        access_key=auth_options.get("access_key"),
        secret_key=auth_options.get("secret_key"),
        region=region,
        secure=url.scheme != "http",
    )


def upload_archive(
    archive_path: Union[str, Path],
    bucket: str,
    region: str,
    auth_options: Dict[str, str],
    endpoint: str = DEFAULT_S3_ENDPOINT,
) -> str:
    """
    Upload an archive to ``bucket`` under its file name.

    Returns:
        The object name the archive was stored under

    Raises:
        UploadArchiveError: If the file is missing or the storage rejects the upload
    """
    archive_path = Path(archive_path)
    object_name = archive_path.name
    logger.info(f"Uploading archive: {object_name}")

    if not archive_path.is_file():
        raise UploadArchiveError(f"Archive not found: {archive_path}")

    client = connect(auth_options, region, endpoint)
    try:
        client.fput_object(bucket, object_name, str(archive_path))
    except (MinioException, HTTPError, OSError) as e:
        message = f"Error uploading {archive_path} to {bucket}: {e}"
        logger.debug(message)
        raise UploadArchiveError(message, stderr=str(e)) from e

    logger.info("Archive uploaded")
    return object_name
