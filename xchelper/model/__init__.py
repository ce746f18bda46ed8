from .project import ArchiveSettings, ProjectConfig, S3Settings

__all__ = ["ArchiveSettings", "ProjectConfig", "S3Settings"]
