"""
Dependency management for Swift packages.

- symlinks.py: version-less symlinks for dependency checkouts
- rewriter.py: project file reference rewriting
- update.py: `swift package update` and Xcode project generation
"""

from .rewriter import ReferenceRewriter, TextReferenceRewriter
from .symlinks import (
    alias_for,
    ensure_symlink,
    list_checkouts,
    project_file_path,
    rewrite_project_references,
    symlink_dependencies,
)
from .update import generate_xcode_project, update_macos_packages

__all__ = [
    "ReferenceRewriter",
    "TextReferenceRewriter",
    "alias_for",
    "ensure_symlink",
    "generate_xcode_project",
    "list_checkouts",
    "project_file_path",
    "rewrite_project_references",
    "symlink_dependencies",
    "update_macos_packages",
]
