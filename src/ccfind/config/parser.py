"""
YAML configuration parser for ccfind.

This module locates an optional YAML configuration file, merges it over the
built-in defaults and validates the result into a WorkspaceConfig. The default
workspace root is derived from the HOME environment variable.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Mapping, Union
import logging

from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import WorkspaceConfig


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CCFIND_CONFIG"


class ConfigParser:
    """
    YAML configuration parser with validation and error handling.

    Configuration is optional. Without a file every setting falls back to its
    default and the workspace root is $HOME/Curbcut/cc_app.
    """

    DEFAULT_CONFIG_NAMES = [
        '.ccfind.yaml',
        '.ccfind.yml',
    ]

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        """Read HOME and CCFIND_CONFIG from environ, defaulting to os.environ."""
        self.environ = os.environ if environ is None else environ
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> WorkspaceConfig:
        """
        Load and validate configuration, searching the default locations when
        config_path is None.

        Raises:
            ConfigurationError: If configuration is invalid, unreadable, or HOME is unset
        """
        config_path = config_path or self.environ.get(CONFIG_ENV_VAR) or self._find_config()

        config_data = {}
        if config_path:
            config_path = Path(config_path).expanduser()
            if not config_path.is_file():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            config_data = self._load_yaml_file(config_path)

        if not config_data.get('root'):
            config_data['root'] = WorkspaceConfig.default_root(self._home_dir())

        try:
            config = WorkspaceConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        self.logger.debug(f"Configuration loaded from {config_path or 'defaults'}, workspace root {config.root}")
        return config

    def _home_dir(self) -> str:
        """Return HOME from the environment or fail with a configuration error."""
        home = self.environ.get('HOME')
        if not home:
            raise ConfigurationError("Could not determine home directory")
        return home

    def _search_paths(self) -> List[Path]:
        """Candidate configuration files in lookup order."""
        home = self.environ.get('HOME')
        if not home:
            return []
        home_path = Path(home)
        paths = [home_path / name for name in self.DEFAULT_CONFIG_NAMES]
        paths.append(home_path / '.config' / 'ccfind' / 'config.yaml')
        return paths

    def _find_config(self) -> Optional[Path]:
        """First existing configuration file in the default locations, if any."""
        for config_file in self._search_paths():
            if config_file.is_file():
                self.logger.debug(f"Found configuration file: {config_file}")
                return config_file
        return None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Parse a YAML file into a dictionary; an empty file yields {}."""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")
        return data


def load_config(config_path: Optional[Union[str, Path]] = None,
                environ: Optional[Mapping[str, str]] = None) -> WorkspaceConfig:
    """Convenience function to load configuration."""
    return ConfigParser(environ=environ).load_config(config_path)
