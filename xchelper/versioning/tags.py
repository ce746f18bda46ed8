"""Selection and increment of release tags."""

import logging
from typing import Iterable, List, Union

from xchelper.exceptions import InvalidCurrentTagError, NoValidTagError

from .version import Version, VersionComponent, parse_version

logger = logging.getLogger(__name__)


def split_tag_listing(output: str) -> List[str]:
    """Split the newline-delimited output of a tag listing into tag strings."""
    return [line.strip() for line in output.strip().splitlines() if line.strip()]


def select_latest(tag_strings: Iterable[str]) -> Version:
    """
    Select the largest valid version among raw tag strings.

    Tags that are not major.minor.patch are ignored.

    Raises:
        NoValidTagError: If no tag parses as a version
    """
    tag_strings = list(tag_strings)
    versions = [v for v in (parse_version(t) for t in tag_strings) if v is not None]
    if not versions:
        error = NoValidTagError(tag_strings)
        logger.debug(error.message)
        raise error

    skipped = len(tag_strings) - len(versions)
    if skipped:
        logger.debug(f"Ignored {skipped} tag(s) that are not major.minor.patch")
    return max(versions)


def increment_tag(
    current: Union[str, Version], target: Union[str, VersionComponent]
) -> Version:
    """
    Compute the tag that follows ``current`` when bumping ``target``.

    Examples:
        >>> increment_tag("1.2.3", VersionComponent.MINOR)
        Version('1.3.0')

    Raises:
        InvalidCurrentTagError: If ``current`` is not a major.minor.patch version
        ValueError: If ``target`` names an unknown component
    """
    if isinstance(target, str):
        target = VersionComponent.from_name(target)

    if isinstance(current, Version):
        version = current
    else:
        parsed = parse_version(current)
        if parsed is None:
            raise InvalidCurrentTagError(str(current))
        version = parsed

    return version.increment(target)
