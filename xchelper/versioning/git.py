"""
Git integration for release tags.

Listing, creating and pushing tags is done through GitPython; the tag
strings it returns are handed to the selection and increment logic in
tags.py.
"""

import logging
from pathlib import Path
from typing import List, Union

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from xchelper.exceptions import GitTagError, PushTagError, TagReadBackMismatchError

from .tags import increment_tag, select_latest, split_tag_listing
from .version import Version, VersionComponent

logger = logging.getLogger(__name__)

# `git push` reports an accepted tag as " * [new tag]  1.2.3 -> 1.2.3"
PUSH_ACCEPTED_MARKER = "new tag"


class GitTagManager:
    """
    Reads, creates and publishes release tags of a git repository.

    Args:
        repo_path: Path to the git working tree
        remote: Name of the remote that tags are pushed to
    """

    def __init__(self, repo_path: Union[str, Path], remote: str = "origin"):
        self.repo_path = Path(repo_path)
        self.remote = remote
        try:
            self.repo = Repo(self.repo_path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise GitTagError(f"Not a git repository: {self.repo_path}") from e

    def list_tags(self) -> List[str]:
        """Return the raw tag strings of the repository."""
        try:
            output = self.repo.git.tag()
        except GitCommandError as e:
            message = f"Error reading git tags: {e.stderr}"
            logger.debug(message)
            raise GitTagError(message, e.status, str(e.stderr)) from e
        return split_tag_listing(output)

    def latest_tag(self) -> Version:
        """
        Return the largest major.minor.patch tag.

        Raises:
            NoValidTagError: If the repository has no version tags yet
        """
        tag = select_latest(self.list_tags())
        logger.debug(f"Latest tag: {tag}")
        return tag

    def create_tag(self, tag: Union[str, Version]) -> None:
        try:
            self.repo.git.tag(str(tag))
        except GitCommandError as e:
            message = f"Error tagging git repo: {e.stderr}"
            logger.debug(message)
            raise GitTagError(message, e.status, str(e.stderr)) from e

    def increment_tag(
        self, component: VersionComponent = VersionComponent.PATCH
    ) -> Version:
        """
        Tag the repository with the next version and return it.

        The latest tag is read again after tagging and must equal the
        computed version.

        Raises:
            NoValidTagError: If the repository has no version tags yet
            TagReadBackMismatchError: If the re-read tag differs from the new one
        """
        current = self.latest_tag()
        updated = increment_tag(current, component)
        logger.info(f"Tagging {self.repo_path}: {current} -> {updated}")
        self.create_tag(updated)

        read_back = self.latest_tag()
        if read_back != updated:
            error = TagReadBackMismatchError(str(updated), str(read_back))
            logger.debug(error.message)
            raise error
        return read_back

    def push_tag(self, tag: Union[str, Version], push_branch: bool = True) -> None:
        """
        Push the current branch, then ``tag``, to the remote.

        A zero exit status is not enough: the push output must confirm that
        the remote accepted a new tag.

        Raises:
            PushTagError: If either push fails or the tag was not accepted
        """
        tag = str(tag)
        logger.info(f"Pushing tag: {tag}")

        if push_branch:
            status, _, stderr = self.repo.git.push(
                self.remote, with_extended_output=True, with_exceptions=False
            )
            if status != 0:
                message = f"Error pushing git tag: {stderr}"
                logger.debug(message)
                raise PushTagError(message, status, stderr)

        status, stdout, stderr = self.repo.git.push(
            self.remote, tag, with_extended_output=True, with_exceptions=False
        )
        if status != 0 or PUSH_ACCEPTED_MARKER not in f"{stdout}\n{stderr}":
            message = f"Error pushing git tag: {stderr}"
            logger.debug(message)
            raise PushTagError(message, status, stderr)

        logger.info(f"Pushed tag: {tag}")
