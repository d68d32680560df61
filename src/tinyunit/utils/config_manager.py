"""
Configuration Manager for runner settings.

Settings are layered: built-in defaults, then an optional JSON/YAML file, then
command-line overrides. With no file and no overrides the runner behaves like
the plain reference runner (sequential, summary only, exit code 0).
"""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from tinyunit.core.test_executor import IsolationPolicy
from tinyunit.handlers.error_handler import ConfigurationError


VALID_LOG_LEVELS = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}


@dataclass
class RunnerConfig:
    """Validated runner settings."""

    isolation: IsolationPolicy = IsolationPolicy.LIFECYCLE
    workers: int = 1
    fail_exit_code: bool = False
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    show_tracebacks: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['isolation'] = self.isolation.value
        return data


class RunnerConfigManager:
    """
    Loads and validates RunnerConfig from files and overrides.
    """

    KNOWN_KEYS = {f.name for f in fields(RunnerConfig)}

    def __init__(self):
        self.logger = logging.getLogger('tinyunit.config_manager')

    def load_config(self, config_source: Optional[str] = None,
                    overrides: Optional[Dict[str, Any]] = None) -> RunnerConfig:
        """
        Load runner configuration.

        Args:
            config_source: Optional path to a JSON or YAML file
            overrides: Values that win over the file, None values are ignored

        Returns:
            RunnerConfig: Validated configuration

        Raises:
            ConfigurationError: If the file cannot be read or a value is invalid
        """
        config: Dict[str, Any] = {}

        if config_source:
            config.update(self._load_config_file(config_source))
            self.logger.info(f"Loaded runner configuration from: {config_source}")

        if overrides:
            applied = {k: v for k, v in overrides.items() if v is not None}
            config.update(applied)
            if applied:
                self.logger.debug(f"Applied overrides: {sorted(applied)}")

        runner_config = self._validate(config)
        self.logger.debug(f"Final runner configuration: {runner_config.to_dict()}")
        return runner_config

    def _load_config_file(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from a JSON or YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Dict: Configuration data

        Raises:
            ConfigurationError: If file loading fails
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        if not path.is_file():
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file: {e}")

        suffix = path.suffix.lower()
        try:
            if suffix == '.json':
                data = json.loads(content)
            elif suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(content)
            else:
                raise ConfigurationError(f"Unknown configuration file format: {suffix}")
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {e}")
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration root must be a mapping, got {type(data).__name__}")
        return data

    def _validate(self, config: Dict[str, Any]) -> RunnerConfig:
        unknown = set(config) - self.KNOWN_KEYS
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

        values: Dict[str, Any] = {}

        if 'isolation' in config:
            isolation = config['isolation']
            if isinstance(isolation, IsolationPolicy):
                values['isolation'] = isolation
            else:
                try:
                    values['isolation'] = IsolationPolicy(str(isolation).lower())
                except ValueError:
                    supported = ', '.join(p.value for p in IsolationPolicy)
                    raise ConfigurationError(f"Unsupported isolation '{isolation}'. Supported: {supported}")

        if 'workers' in config:
            workers = config['workers']
            if isinstance(workers, bool) or not isinstance(workers, int) or workers < 1:
                raise ConfigurationError(f"workers must be an integer >= 1, got {workers!r}")
            values['workers'] = workers

        for flag in ('fail_exit_code', 'show_tracebacks'):
            if flag in config:
                if not isinstance(config[flag], bool):
                    raise ConfigurationError(f"{flag} must be true or false, got {config[flag]!r}")
                values[flag] = config[flag]

        if 'log_level' in config:
            level = str(config['log_level']).upper()
            if level not in VALID_LOG_LEVELS:
                raise ConfigurationError(f"Invalid log_level '{config['log_level']}'")
            values['log_level'] = level

        if config.get('log_file') is not None:
            values['log_file'] = str(config['log_file'])

        return RunnerConfig(**values)
