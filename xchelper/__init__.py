"""xchelper: containerized builds and release tagging for Swift packages."""

__version__ = "0.1.0"
