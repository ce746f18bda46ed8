"""
Containerized builds.

- volumes.py: per-bucket persistent build directories and their mounts
- clean.py: build configurations and stale output detection
- docker.py: `docker run` invocations for building and updating packages
"""

from .clean import BuildConfiguration, clean, clean_package, should_clean
from .docker import DockerRun, docker_build, update_docker_packages
from .volumes import (
    MountMapping,
    cache_directory,
    dependency_mount_mapping,
    mount_mapping,
    persistent_volume_options,
)

__all__ = [
    "BuildConfiguration",
    "DockerRun",
    "MountMapping",
    "cache_directory",
    "clean",
    "clean_package",
    "dependency_mount_mapping",
    "docker_build",
    "mount_mapping",
    "persistent_volume_options",
    "should_clean",
    "update_docker_packages",
]
