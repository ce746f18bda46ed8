import pytest

from xchelper.exceptions import (
    ErrorKind,
    InvalidCurrentTagError,
    NoValidTagError,
    XcodeHelperError,
)
from xchelper.versioning.tags import increment_tag, select_latest, split_tag_listing
from xchelper.versioning.version import Version, VersionComponent


@pytest.mark.short
class TestSelectLatest:
    def test_largest_major(self):
        tags = ["1000.1.1", "999.1.1", "1.1000.1", "1.1.1000"]
        assert select_latest(tags) == Version("1000.1.1")

    def test_largest_minor(self):
        tags = ["1.1.1", "1.1000.1", "1.999.1", "1.1.1000"]
        assert select_latest(tags) == Version("1.1000.1")

    def test_largest_patch(self):
        tags = ["1.1.1", "1.1000.1", "1.1000.1000"]
        assert select_latest(tags) == Version("1.1000.1000")

    def test_unparsable_tags_are_ignored(self):
        tags = ["v2.0.0", "release-candidate", "1.2", "1.2.3", "3.0.0-beta", "1.10.0"]
        assert select_latest(tags) == Version("1.10.0")

    def test_duplicates(self):
        assert select_latest(["1.2.3", "1.2.3", "01.2.3"]) == Version("1.2.3")

    def test_order_does_not_matter(self):
        tags = ["0.9.9", "1.0.0", "0.10.0"]
        assert select_latest(tags) == select_latest(list(reversed(tags)))

    def test_empty(self):
        with pytest.raises(NoValidTagError) as excinfo:
            select_latest([])
        assert excinfo.value.kind == ErrorKind.SELECTION

    def test_all_unparsable(self):
        with pytest.raises(NoValidTagError) as excinfo:
            select_latest(["latest", "v1", "0.0"])
        assert excinfo.value.tags == ["latest", "v1", "0.0"]
        assert isinstance(excinfo.value, XcodeHelperError)

    def test_accepts_generators(self):
        assert select_latest(t for t in ["1.0.0", "2.0.0"]) == Version("2.0.0")


@pytest.mark.short
class TestIncrementTag:
    @pytest.mark.parametrize(
        "component, expected",
        [
            (VersionComponent.MAJOR, "2.0.0"),
            (VersionComponent.MINOR, "1.3.0"),
            (VersionComponent.PATCH, "1.2.4"),
        ],
    )
    def test_increment(self, component, expected):
        assert increment_tag(Version("1.2.3"), component) == Version(expected)

    def test_increment_from_string(self):
        assert increment_tag("1.2.3", "minor") == Version("1.3.0")

    def test_increment_rolls_over_large_components(self):
        assert increment_tag("9.999.999", VersionComponent.PATCH) == Version("9.999.1000")
        assert increment_tag("9.999.999", VersionComponent.MAJOR) == Version("10.0.0")

    @pytest.mark.parametrize("tag", ["1.2", "1.2.3.4", "1.2.x", "", "v1.2.3"])
    def test_invalid_current_tag(self, tag):
        with pytest.raises(InvalidCurrentTagError) as excinfo:
            increment_tag(tag, VersionComponent.PATCH)
        assert excinfo.value.kind == ErrorKind.INCREMENT_PRECONDITION
        assert "major.minor.patch" in str(excinfo.value)

    def test_unknown_component(self):
        with pytest.raises(ValueError):
            increment_tag("1.2.3", "build")


@pytest.mark.short
def test_split_tag_listing():
    output = "1.0.0\n1.1.0\n\n  1.2.0  \nnot-a-version\n"
    assert split_tag_listing(output) == ["1.0.0", "1.1.0", "1.2.0", "not-a-version"]
    assert split_tag_listing("") == []
