from unittest.mock import patch

import pytest

from xchelper.build.clean import (
    BuildConfiguration,
    clean,
    clean_package,
    manifest_targets,
    should_clean,
    triple_matches_platform,
)
from xchelper.exceptions import CleanError

MACOS_MANIFEST = """\
client:
  name: swift-build
commands:
  <Hello.module>:
    tool: swift-compiler
    other-args: ["-j8","-target","x86_64-apple-macosx10.10","-swift-version","4"]
"""

LINUX_MANIFEST = """\
client:
  name: swift-build
commands:
  <Hello.module>:
    tool: swift-compiler
    other-args: ["-j8", "-target", "x86_64-unknown-linux-gnu", "-swift-version", "5"]
"""


def write_build(root, configuration, manifest=None):
    configuration.build_directory(root).mkdir(parents=True)
    (configuration.build_directory(root) / "Hello.swiftmodule").write_text("")
    if manifest is not None:
        configuration.manifest_path(root).write_text(manifest)


@pytest.mark.short
class TestBuildConfiguration:
    def test_paths(self, tmp_path):
        assert BuildConfiguration.debug.manifest_path(tmp_path) == (
            tmp_path / ".build" / "debug.yaml"
        )
        assert BuildConfiguration.release.build_directory(tmp_path) == (
            tmp_path / ".build" / "release"
        )

    def test_from_value(self):
        assert BuildConfiguration("release") is BuildConfiguration.release


@pytest.mark.short
class TestTargetTriples:
    def test_manifest_targets(self):
        assert manifest_targets(MACOS_MANIFEST) == ["x86_64-apple-macosx10.10"]
        assert manifest_targets(LINUX_MANIFEST) == ["x86_64-unknown-linux-gnu"]
        assert manifest_targets("client: {}") == []

    @pytest.mark.parametrize(
        "triple, platform, expected",
        [
            ("x86_64-unknown-linux-gnu", "linux", True),
            ("aarch64-unknown-linux-gnu", "linux", True),
            ("x86_64-apple-macosx10.10", "linux", False),
            ("x86_64-apple-macosx10.10", "macos", True),
            ("arm64-apple-ios13.0", "linux", False),
            # The vendor is not part of the platform
            ("x86_64-linux-unknown", "linux", False),
        ],
    )
    def test_triple_matches_platform(self, triple, platform, expected):
        assert triple_matches_platform(triple, platform) is expected


@pytest.mark.short
class TestShouldClean:
    def test_manifest_for_other_platform(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.debug, MACOS_MANIFEST)
        assert should_clean(tmp_path, BuildConfiguration.debug) is True

    def test_manifest_for_same_platform(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.debug, LINUX_MANIFEST)
        assert should_clean(tmp_path, BuildConfiguration.debug) is False

    def test_manifest_without_targets(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.debug, "client: {}\n")
        assert should_clean(tmp_path, BuildConfiguration.debug) is False

    def test_other_configuration_is_ignored(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.release, MACOS_MANIFEST)
        assert should_clean(tmp_path, BuildConfiguration.debug) is False

    def test_build_directory_without_manifest(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.release)
        assert should_clean(tmp_path, BuildConfiguration.release) is True

    def test_nothing_built(self, tmp_path):
        assert should_clean(tmp_path, BuildConfiguration.debug) is False

    def test_custom_platform(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.debug, MACOS_MANIFEST)
        assert should_clean(tmp_path, BuildConfiguration.debug, "macos") is False


@pytest.mark.short
class TestClean:
    def test_removes_build_directory_and_manifest(self, tmp_path):
        write_build(tmp_path, BuildConfiguration.debug, MACOS_MANIFEST)
        write_build(tmp_path, BuildConfiguration.release, LINUX_MANIFEST)

        clean(tmp_path, BuildConfiguration.debug)

        assert not BuildConfiguration.debug.build_directory(tmp_path).exists()
        assert not BuildConfiguration.debug.manifest_path(tmp_path).exists()
        # The other configuration is untouched
        assert BuildConfiguration.release.build_directory(tmp_path).exists()
        assert should_clean(tmp_path, BuildConfiguration.debug) is False

    def test_idempotent(self, tmp_path):
        clean(tmp_path, BuildConfiguration.debug)
        clean(tmp_path, BuildConfiguration.debug)
        assert not (tmp_path / ".build" / "debug").exists()

    def test_clean_package(self, tmp_path):
        with patch("xchelper.build.clean.run_command") as mock_run:
            mock_run.return_value.returncode = 0
            clean_package(tmp_path)
        mock_run.assert_called_once_with(["swift", "package", "clean"], cwd=tmp_path)

    def test_clean_package_failure(self, tmp_path):
        with patch("xchelper.build.clean.run_command") as mock_run:
            mock_run.return_value.returncode = 1
            mock_run.return_value.stderr = "error: no Package.swift"
            with pytest.raises(CleanError) as excinfo:
                clean_package(tmp_path)
        assert excinfo.value.exit_code == 1
        assert "no Package.swift" in excinfo.value.message
