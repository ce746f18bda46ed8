"""Upload command for release archives"""

import sys
from pathlib import Path

import click

from xchelper.exceptions import XcodeHelperError
from xchelper.remote import (
    S3_access_config_from_env,
    S3_access_config_from_file,
    upload_archive,
)

from .debug import add_debug_option
from .utils.errors import exit_with_error
from .utils.logging import logger
from .utils.options import (
    first_set,
    load_project,
    load_user_config,
    source_path_option,
)


@add_debug_option
@click.command("upload")
@source_path_option
@click.argument(
    "archive_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--bucket", "-b", default=None, envvar="XCHELPER_S3_BUCKET", help="Target bucket."
)
@click.option(
    "--region", "-r", default=None, envvar="XCHELPER_S3_REGION", help="Bucket region."
)
@click.option(
    "--endpoint",
    default=None,
    envvar="XCHELPER_S3_ENDPOINT",
    help="S3-compatible endpoint URL. [default: https://s3.amazonaws.com]",
)
@click.option(
    "--credentials",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON file with access_key and secret_key (otherwise read from the environment).",
)
def upload(source_path, archive_path, bucket, region, endpoint, credentials):
    """Upload ARCHIVE_PATH to S3-compatible storage."""
    project = load_project(source_path)
    user_config = load_user_config()
    s3 = project.s3

    bucket = first_set(bucket, s3.bucket if s3 else None)
    if bucket is None:
        logger.error(
            click.style("[ERROR]", fg="red", bold=True)
            + " No bucket given. Pass --bucket or set s3.bucket in .xchelper.yml"
        )
        sys.exit(1)

    try:
        auth_options = (
            S3_access_config_from_file(credentials)
            if credentials
            else S3_access_config_from_env(required=True)
        )
        object_name = upload_archive(
            archive_path,
            bucket,
            region=first_set(
                region, s3.region if s3 else None, user_config.get("s3", "region")
            ),
            auth_options=auth_options,
            endpoint=first_set(
                endpoint,
                s3.endpoint if s3 else None,
                user_config.get("s3", "endpoint"),
            ),
        )
    except XcodeHelperError as e:
        exit_with_error(e)
    click.echo(f"Uploaded {object_name} to {bucket}")
