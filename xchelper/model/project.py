from pathlib import Path
from typing import List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from xchelper.build.clean import BuildConfiguration
from xchelper.constants import DEFAULT_PLATFORM, PROJECT_CONFIG_FILE
from xchelper.exceptions import ProjectConfigError


class ArchiveSettings(BaseModel):
    """Files packed into the release archive"""

    model_config = ConfigDict(extra="forbid")

    files: List[str] = Field(default_factory=list)
    flat: bool = True
    output_dir: str = "."


class S3Settings(BaseModel):
    """Destination of uploaded release archives"""

    model_config = ConfigDict(extra="forbid")

    bucket: str
    region: Optional[str] = None
    endpoint: Optional[str] = None


class ProjectConfig(BaseModel):
    """Per-package settings read from .xchelper.yml at the source root"""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = None
    docker_image: Optional[str] = None
    persistent_volume: Optional[str] = None
    configuration: BuildConfiguration = BuildConfiguration.debug
    platform: str = DEFAULT_PLATFORM
    archive: ArchiveSettings = Field(default_factory=ArchiveSettings)
    s3: Optional[S3Settings] = None

    @field_validator("persistent_volume")
    @classmethod
    def validate_persistent_volume(cls, v):
        if v is not None and (not v or "/" in v or v in (".", "..")):
            raise ValueError(f"Invalid persistent volume name: '{v}'")
        return v

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ProjectConfig":
        """Alternative constructor that loads from YAML string"""
        data = yaml.safe_load(yaml_str) or {}
        return cls(**data)

    @classmethod
    def load(cls, source_root: Union[str, Path]) -> "ProjectConfig":
        """
        Load the project file of ``source_root``; defaults when there is none.

        Raises:
            ProjectConfigError: If the file is not valid YAML or has invalid settings
        """
        path = Path(source_root) / PROJECT_CONFIG_FILE
        if not path.exists():
            return cls()
        try:
            return cls.from_yaml(path.read_text())
        except yaml.YAMLError as e:
            raise ProjectConfigError(path, f"YAML error: {e}") from e
        except (ValidationError, TypeError) as e:
            raise ProjectConfigError(path, str(e)) from e
        except OSError as e:
            raise ProjectConfigError(path, f"cannot read file: {e}") from e
