"""
Version utility module for release tag operations.

Release tags are strict three component versions (major.minor.patch).
Ordering is delegated to packaging.version, which compares each component
numerically, so "1.1000.1" sorts after "1.999.1".
"""

import re
from enum import IntEnum
from typing import Optional, Tuple, Union

from packaging.version import InvalidVersion
from packaging.version import Version as PackagingVersion

from xchelper.exceptions import VersionParseError

_VERSION_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")


class VersionComponent(IntEnum):
    """
    Component of a version, ranked by significance.

    The value is the position in the version tuple: a component with a
    higher value is less significant than one with a lower value.
    """

    MAJOR = 0
    MINOR = 1
    PATCH = 2

    @classmethod
    def from_name(cls, name: str) -> "VersionComponent":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown version component: {name}") from None


class Version:
    """
    A release version: exactly three non-negative integer components.

    Instances are immutable, hashable and totally ordered.
    """

    def __init__(self, version_string: str):
        """
        Initialize a Version from a string.

        Args:
            version_string: Version string in format "x.y.z"

        Raises:
            VersionParseError: If the string is not exactly three numeric components
        """
        self._original_string = str(version_string).strip()

        if not _VERSION_PATTERN.fullmatch(self._original_string):
            raise VersionParseError(self._original_string)

        try:
            self._version = PackagingVersion(self._original_string)
        except InvalidVersion as e:
            raise VersionParseError(self._original_string) from e

    @classmethod
    def from_tuple(cls, components: Tuple[int, int, int]) -> "Version":
        if len(components) != 3 or any(
            not isinstance(c, int) or c < 0 for c in components
        ):
            raise VersionParseError(".".join(str(c) for c in components))
        return cls(".".join(str(c) for c in components))

    @property
    def major(self) -> int:
        return self._version.major

    @property
    def minor(self) -> int:
        return self._version.minor

    @property
    def patch(self) -> int:
        return self._version.micro

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    def __getitem__(self, component: VersionComponent) -> int:
        return self.as_tuple()[component]

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    def __repr__(self) -> str:
        return f"Version('{str(self)}')"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Version):
            return False
        return self.as_tuple() == other.as_tuple()

    def __lt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._version < other._version

    def __le__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._version <= other._version

    def __gt__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._version > other._version

    def __ge__(self, other) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._version >= other._version

    def __hash__(self) -> int:
        return hash(self.as_tuple())

    def increment(self, target: VersionComponent) -> "Version":
        """
        Return the next version when bumping ``target``.

        The target component is incremented, every less significant
        component is reset to zero and every more significant component is
        kept as is.
        """
        components = []
        for component in VersionComponent:
            value = self[component]
            if component == target:
                components.append(value + 1)
            elif component > target:
                components.append(0)
            else:
                components.append(value)
        return Version.from_tuple((components[0], components[1], components[2]))


def parse_version(version_string: str) -> Optional[Version]:
    """
    Parse a version string, returning None when it is not a valid version.

    Malformed tags are expected in tag listings, so this never raises.
    """
    try:
        return Version(version_string)
    except VersionParseError:
        return None


def compare_versions(
    version1: Union[str, Version], version2: Union[str, Version]
) -> int:
    """
    Compare two versions.

    Returns:
        -1 if version1 < version2
         0 if version1 == version2
         1 if version1 > version2

    Raises:
        VersionParseError: If either argument is a string that is not a valid version
    """
    v1 = version1 if isinstance(version1, Version) else Version(version1)
    v2 = version2 if isinstance(version2, Version) else Version(version2)

    if v1 < v2:
        return -1
    elif v1 > v2:
        return 1
    else:
        return 0
