"""User configuration for xchelper, read from an INI file in the XDG config directory"""

import configparser
import logging
import os
import platform
from pathlib import Path
from typing import Any, Optional

from xchelper.constants import APP_NAME, DEFAULT_DOCKER_IMAGE

logger = logging.getLogger(__name__)

_home = os.path.expanduser("~")

xdg_config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(_home, ".config")

default_cfg = {
    "docker": {"image": DEFAULT_DOCKER_IMAGE},
    "s3": {"region": "us-east-1", "endpoint": "https://s3.amazonaws.com"},
}

if platform.system() == "Darwin":
    config_dir = Path(f"~/Library/Application Support/{APP_NAME}").expanduser()
else:
    config_dir = Path(os.path.join(xdg_config_home, APP_NAME))


def get_config_file() -> Path:
    return config_dir / f"{APP_NAME}.cfg"


class ConfigAccessor:
    """
    Read-only access to the user configuration file.

    Missing files, sections or keys fall back to ``default_cfg`` and then to
    the default passed by the caller. The file is edited by hand; xchelper
    never writes it.

    Usage:
        config = ConfigAccessor()
        image = config.get('docker', 'image')
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = Path(config_path) if config_path else get_config_file()

        self.config = configparser.ConfigParser()
        try:
            self.config.read(self.config_path)
        except configparser.Error as e:
            logger.warning(
                f"Ignoring invalid configuration file {self.config_path}: {e}"
            )
            self.config = configparser.ConfigParser()

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a configuration value from the specified section and key.

        Args:
            section: The configuration section
            key: The configuration key
            default: Value to return if neither the file nor the built-in
                defaults define the key
        """
        try:
            return self.config[section][key]
        except KeyError:
            return default_cfg.get(section, {}).get(key, default)
