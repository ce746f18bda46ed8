import io
import logging

import pytest
from git import Repo


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("xchelper")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream

    logger.removeHandler(handler)
    log_stream.close()


# git fixtures


def _commit(repo: Repo, filename: str, content: str, message: str) -> None:
    path = repo.working_tree_dir + "/" + filename
    with open(path, "w") as f:
        f.write(content)
    repo.index.add([filename])
    repo.index.commit(message)


@pytest.fixture
def git_repo(tmp_path):
    """A git repository with one commit and no tags."""
    repo_path = tmp_path / "repo"
    repo = Repo.init(repo_path)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "xchelper tests")
        writer.set_value("user", "email", "tests@example.com")
    _commit(repo, "Package.swift", "// swift-tools-version:5.0\n", "Initial commit")
    return repo


@pytest.fixture
def git_repo_with_remote(tmp_path, git_repo):
    """The git_repo fixture with a bare `origin` tracking its branch."""
    remote = Repo.init(tmp_path / "remote.git", bare=True)
    git_repo.create_remote("origin", str(remote.git_dir))
    git_repo.git.push("--set-upstream", "origin", git_repo.active_branch.name)
    return git_repo, remote


# Swift package fixtures


@pytest.fixture
def swift_package(tmp_path):
    """
    A Swift package with one resolved dependency and a generated Xcode project.

        Hello/
            .build/checkouts/Hello-1.0.3/
            .build/checkouts/workspace-state.json
            HelloSwift.xcodeproj/project.pbxproj
    """
    root = tmp_path / "Hello"
    checkouts = root / ".build" / "checkouts"
    (checkouts / "Hello-1.0.3").mkdir(parents=True)
    (checkouts / "workspace-state.json").write_text("{}")
    (root / "Package.swift").write_text("// swift-tools-version:5.0\n")

    project = root / "HelloSwift.xcodeproj"
    project.mkdir()
    (project / "project.pbxproj").write_text(
        "// !$*UTF8*$!\n"
        "{\n"
        '\tpath = ".build/checkouts/Hello-1.0.3/Sources/Hello";\n'
        '\tname = "Hello-1.0.3";\n'
        "\tsourceTree = SOURCE_ROOT;\n"
        "}\n"
    )
    return root
