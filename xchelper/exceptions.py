"""
Exception classes for xchelper.

Every error raised by the package derives from XcodeHelperError and carries
an ErrorKind, so callers can branch on the kind of failure without parsing
the message text.
"""

from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union


class ErrorKind(Enum):
    PARSE = "parse"
    SELECTION = "selection"
    INCREMENT_PRECONDITION = "increment_precondition"
    FILESYSTEM = "filesystem"
    AMBIGUITY = "ambiguity"
    COLLABORATOR = "collaborator"


class XcodeHelperError(Exception):
    """Base exception for all xchelper errors."""

    kind: ErrorKind = ErrorKind.COLLABORATOR

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# Versioning


class VersionParseError(XcodeHelperError):
    """Raised when a string is not a strict major.minor.patch version."""

    kind = ErrorKind.PARSE

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"Invalid version format: '{text}'. Expected major.minor.patch"
        )


class NoValidTagError(XcodeHelperError):
    """Raised when a tag listing holds no parseable version."""

    kind = ErrorKind.SELECTION

    def __init__(self, tags: Iterable[str]):
        self.tags = list(tags)
        super().__init__(f"Git tag not found: {self.tags}")


class InvalidCurrentTagError(XcodeHelperError):
    """Raised when the tag being incremented is not major.minor.patch."""

    kind = ErrorKind.INCREMENT_PRECONDITION

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(
            f"Invalid git tag: {tag}. It should be in the format #.#.# major.minor.patch"
        )


# Filesystem


class FilesystemError(XcodeHelperError):
    """Raised when a directory, symlink or file operation fails."""

    kind = ErrorKind.FILESYSTEM

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class CheckoutsDirNotFoundError(FilesystemError):
    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "Failed to find directory")


class InvalidBucketNameError(FilesystemError):
    """Raised when a cache bucket name is not a single path component."""

    def __init__(self, bucket_name: str):
        self.bucket_name = bucket_name
        super().__init__(bucket_name, "Invalid cache bucket name")


class ProjectConfigError(FilesystemError):
    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(path, f"Invalid project configuration ({reason})")


class AmbiguityError(XcodeHelperError):
    """Raised when zero or several candidates exist where exactly one is required."""

    kind = ErrorKind.AMBIGUITY
    what = "file"

    def __init__(self, path: Union[str, Path], candidates: Sequence[str]):
        self.path = Path(path)
        self.candidates = list(candidates)
        if not self.candidates:
            message = f"Failed to find {self.what} at path: {path}"
        else:
            message = (
                f"Found {len(self.candidates)} {self.what} candidates at path: {path} "
                f"({', '.join(self.candidates)})"
            )
        super().__init__(message)


class ProjectFileNotFoundError(AmbiguityError):
    what = "xcodeproj"


class ManifestNotFoundError(AmbiguityError):
    what = "pbxproj"


# External collaborators


class CollaboratorError(XcodeHelperError):
    """Raised when an external process or service reports a failure."""

    kind = ErrorKind.COLLABORATOR

    def __init__(
        self, message: str, exit_code: Optional[int] = None, stderr: str = ""
    ):
        self.exit_code = exit_code
        self.stderr = stderr
        super().__init__(message)


class DockerBuildError(CollaboratorError):
    pass


class UpdatePackagesError(CollaboratorError):
    pass


class CleanError(CollaboratorError):
    pass


class GitTagError(CollaboratorError):
    pass


class PushTagError(GitTagError):
    pass


class TagReadBackMismatchError(GitTagError):
    """Raised when the tag read back after creation is not the tag we created."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tag read back after tagging was {actual}, expected {expected}"
        )


class CreateArchiveError(CollaboratorError):
    pass


class UploadArchiveError(CollaboratorError):
    pass


class XcarchivePlistError(CollaboratorError):
    pass
