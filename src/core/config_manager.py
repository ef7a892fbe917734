import os
from typing import Any, Dict, List, Optional

import yaml

from .exceptions import InvalidArgument
from .logging import LoggingConfig
from .logging.config import parse_flag


class ConfigManager:
    """
    Application settings loaded from ``<config_dir>/app.yaml`` and the environment.

    Environment variables win over the file. A missing file means defaults.
    Problems found while loading are kept in ``problems`` so the caller can
    report them once logging is available.
    """

    def __init__(self, config_dir: str = "config", environ: Optional[Dict[str, str]] = None):
        self.config_dir = config_dir
        self.app_config_path = os.path.join(config_dir, "app.yaml")
        self.environ = os.environ if environ is None else environ
        self.problems: List[str] = []
        self.config = self._load_config()

        logging_section = self._section("logging")
        server_section = self._section("server")

        # Blank or null values fall back to the default, like an unset LOG_LEVEL
        yaml_level = logging_section.get("min_level")
        yaml_level = str(yaml_level).strip() if yaml_level is not None else ""
        self.log_level = (self.environ.get("LOG_LEVEL") or "").strip() or yaml_level or LoggingConfig.min_level
        timestamps_env = (self.environ.get("LOG_TIMESTAMPS") or "").strip()
        if timestamps_env:
            self.log_timestamps = parse_flag(timestamps_env)
        else:
            self.log_timestamps = parse_flag(logging_section.get("timestamps", False))

        self.host = self.environ.get("HOST") or str(server_section.get("host", "127.0.0.1"))
        self.port = self._int_setting("PORT", server_section.get("port", 8000))

    def _load_config(self) -> Dict[str, Any]:
        try:
            with open(self.app_config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            return {}
        except yaml.YAMLError as e:
            self.problems.append(f"Error parsing YAML file {self.app_config_path}: {e}")
            return {}

        if not isinstance(data, dict):
            self.problems.append(f"Ignoring {self.app_config_path}: top level must be a mapping")
            return {}
        return data

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.config.get(name) or {}
        if not isinstance(section, dict):
            self.problems.append(f"Ignoring '{name}' section: expected a mapping")
            return {}
        return section

    def _int_setting(self, env_name: str, default: Any) -> int:
        raw = self.environ.get(env_name) or default
        try:
            return int(raw)
        except (TypeError, ValueError):
            raise InvalidArgument(f"{env_name} must be an integer, got {raw!r}", env_name, raw) from None

    def get_config(self) -> Dict[str, Any]:
        return self.config

    def logging_config(self) -> LoggingConfig:
        """Build the registry configuration; raises InvalidArgument for an unknown level."""
        return LoggingConfig(min_level=self.log_level, timestamps=self.log_timestamps)
