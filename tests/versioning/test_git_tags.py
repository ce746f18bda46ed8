"""
Tests for GitTagManager.

Tag listing, creation and pushing run against real temporary repositories
created with GitPython; failure paths of the push are mocked.
"""

from unittest.mock import MagicMock, patch

import pytest

from xchelper.exceptions import (
    GitTagError,
    NoValidTagError,
    PushTagError,
    TagReadBackMismatchError,
)
from xchelper.versioning.git import GitTagManager
from xchelper.versioning.version import Version, VersionComponent


@pytest.mark.short
class TestGitTagManager:
    def test_not_a_repository(self, tmp_path):
        with pytest.raises(GitTagError, match="Not a git repository"):
            GitTagManager(tmp_path)

    def test_list_tags(self, git_repo):
        for tag in ["1.0.0", "1.1.0", "nightly"]:
            git_repo.create_tag(tag)
        manager = GitTagManager(git_repo.working_tree_dir)
        assert sorted(manager.list_tags()) == ["1.0.0", "1.1.0", "nightly"]

    def test_latest_tag(self, git_repo):
        for tag in ["1.999.1", "1.1000.1", "1.1.1", "v9.9.9"]:
            git_repo.create_tag(tag)
        manager = GitTagManager(git_repo.working_tree_dir)
        assert manager.latest_tag() == Version("1.1000.1")

    def test_latest_tag_without_tags(self, git_repo):
        manager = GitTagManager(git_repo.working_tree_dir)
        with pytest.raises(NoValidTagError):
            manager.latest_tag()

    def test_create_tag(self, git_repo):
        manager = GitTagManager(git_repo.working_tree_dir)
        manager.create_tag(Version("0.1.0"))
        assert "0.1.0" in [t.name for t in git_repo.tags]

    def test_create_existing_tag(self, git_repo):
        git_repo.create_tag("0.1.0")
        manager = GitTagManager(git_repo.working_tree_dir)
        with pytest.raises(GitTagError, match="Error tagging git repo"):
            manager.create_tag("0.1.0")

    @pytest.mark.parametrize(
        "component, expected",
        [
            (VersionComponent.MAJOR, "2.0.0"),
            (VersionComponent.MINOR, "1.3.0"),
            (VersionComponent.PATCH, "1.2.4"),
        ],
    )
    def test_increment_tag(self, git_repo, component, expected):
        git_repo.create_tag("1.2.3")
        manager = GitTagManager(git_repo.working_tree_dir)

        assert manager.increment_tag(component) == Version(expected)
        assert manager.latest_tag() == Version(expected)
        assert expected in [t.name for t in git_repo.tags]

    def test_increment_tag_without_tags(self, git_repo):
        manager = GitTagManager(git_repo.working_tree_dir)
        with pytest.raises(NoValidTagError):
            manager.increment_tag()

    def test_increment_tag_read_back_mismatch(self, git_repo):
        git_repo.create_tag("1.2.3")
        manager = GitTagManager(git_repo.working_tree_dir)

        # The listing does not reflect the newly created tag
        with patch.object(manager, "list_tags", return_value=["1.2.3"]):
            with pytest.raises(TagReadBackMismatchError) as excinfo:
                manager.increment_tag(VersionComponent.PATCH)

        assert excinfo.value.expected == "1.2.4"
        assert excinfo.value.actual == "1.2.3"


@pytest.mark.short
class TestPushTag:
    def test_push_new_tag(self, git_repo_with_remote):
        repo, remote = git_repo_with_remote
        repo.create_tag("1.0.0")
        manager = GitTagManager(repo.working_tree_dir)

        manager.push_tag("1.0.0")

        assert "1.0.0" in [t.name for t in remote.tags]

    def test_push_already_pushed_tag(self, git_repo_with_remote):
        repo, _ = git_repo_with_remote
        repo.create_tag("1.0.0")
        manager = GitTagManager(repo.working_tree_dir)
        manager.push_tag("1.0.0")

        # Exits with 0 ("Everything up-to-date") but no new tag is reported
        with pytest.raises(PushTagError, match="Error pushing git tag"):
            manager.push_tag("1.0.0")

    def test_push_without_remote(self, git_repo):
        git_repo.create_tag("1.0.0")
        manager = GitTagManager(git_repo.working_tree_dir)
        with pytest.raises(PushTagError) as excinfo:
            manager.push_tag("1.0.0")
        assert excinfo.value.exit_code != 0

    def test_push_requires_new_tag_in_output(self, git_repo):
        manager = GitTagManager(git_repo.working_tree_dir)
        manager.repo = MagicMock()
        manager.repo.git.push.side_effect = [
            (0, "", ""),
            (0, "", "To origin\n = [up to date]      1.0.0 -> 1.0.0"),
        ]
        with pytest.raises(PushTagError) as excinfo:
            manager.push_tag("1.0.0")
        assert "up to date" in excinfo.value.stderr

    def test_push_branch_failure(self, git_repo):
        manager = GitTagManager(git_repo.working_tree_dir)
        manager.repo = MagicMock()
        manager.repo.git.push.return_value = (1, "", "fatal: rejected")
        with pytest.raises(PushTagError) as excinfo:
            manager.push_tag("1.0.0")
        assert excinfo.value.exit_code == 1
        # The tag push is not attempted after the branch push fails
        assert manager.repo.git.push.call_count == 1

    def test_push_tag_only(self, git_repo):
        manager = GitTagManager(git_repo.working_tree_dir)
        manager.repo = MagicMock()
        manager.repo.git.push.return_value = (
            0,
            "",
            "To origin\n * [new tag]         1.0.0 -> 1.0.0",
        )
        manager.push_tag(Version("1.0.0"), push_branch=False)
        manager.repo.git.push.assert_called_once_with(
            "origin", "1.0.0", with_extended_output=True, with_exceptions=False
        )
