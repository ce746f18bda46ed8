"""
Release versioning for xchelper.

- version.py: strict major.minor.patch Version, parsing and comparison
- tags.py: selection of the latest tag from a listing and tag increments
- git.py: GitTagManager, listing/creating/pushing tags with GitPython
"""

from .git import GitTagManager
from .tags import increment_tag, select_latest, split_tag_listing
from .version import Version, VersionComponent, compare_versions, parse_version

__all__ = [
    "GitTagManager",
    "Version",
    "VersionComponent",
    "compare_versions",
    "increment_tag",
    "parse_version",
    "select_latest",
    "split_tag_listing",
]
