"""
Archive module for packaging build products.

Creates tar archives of build outputs and Xcode-style .xcarchive bundles,
with date-stamped names produced by the pure formatters in dates.py.
"""

from .archive import create_archive, create_xcarchive, release_archive_name
from .dates import format_timestamp

__all__ = [
    "create_archive",
    "create_xcarchive",
    "format_timestamp",
    "release_archive_name",
]
