"""
Configuration Management

Centralized configuration with YAML file support and environment
variable overrides.
"""

import os
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field

import yaml
from dotenv import load_dotenv

from .exceptions import ConfigurationError

# Load .env file if it exists
load_dotenv()

DEFAULT_CONFIG_PATH = Path("config/default.yaml")


@dataclass
class EvaluationConfig:
    """Answer evaluation settings."""
    similarity_threshold: float = 0.8
    multiple_choice_case_sensitive: bool = False

    def __post_init__(self):
        # Environment overrides arrive as strings
        try:
            self.similarity_threshold = float(self.similarity_threshold)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"Invalid similarity threshold: {self.similarity_threshold!r}",
                setting="evaluation.similarity_threshold",
            )
        self.multiple_choice_case_sensitive = _as_bool(self.multiple_choice_case_sensitive)


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    console_level: str = "WARNING"  # Separate level for console output
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None  # No file handler unless configured
    max_size: str = "10MB"
    backup_count: int = 5


@dataclass
class AppConfig:
    """Main application configuration."""
    name: str = "Chamorro Answer Evaluation"
    version: str = "1.0.0"
    environment: str = "production"
    debug: bool = False

    evaluation: EvaluationConfig = field(default_factory=EvaluationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def __post_init__(self):
        self.debug = _as_bool(self.debug)

    @classmethod
    def from_yaml(cls, config_path: Path) -> "AppConfig":
        """Load configuration from YAML file."""
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict):
            raise ConfigurationError(
                f"Configuration file must contain a mapping: {config_path}",
                setting=str(config_path),
            )

        return cls.from_dict(config_data)

    @classmethod
    def from_dict(cls, config_data: Dict[str, Any]) -> "AppConfig":
        """Build configuration from a plain dictionary, applying env overrides."""
        # Copy nested sections so overrides never touch the caller's dicts
        config_data = {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in config_data.items()
        }

        # Flatten the app section before overrides so they take precedence
        if 'app' in config_data:
            app_config = config_data.pop('app')
            config_data.update(app_config)

        config_data = cls._apply_env_overrides(config_data)

        if 'evaluation' in config_data and isinstance(config_data['evaluation'], dict):
            config_data['evaluation'] = EvaluationConfig(**config_data['evaluation'])

        if 'logging' in config_data and isinstance(config_data['logging'], dict):
            config_data['logging'] = LoggingConfig(**config_data['logging'])

        try:
            return cls(**config_data)
        except TypeError as e:
            raise ConfigurationError(f"Unknown configuration key: {e}")

    @staticmethod
    def _apply_env_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        env_mappings = {
            'ANSWER_SIMILARITY_THRESHOLD': ['evaluation', 'similarity_threshold'],
            'LOG_LEVEL': ['logging', 'level'],
            'DEBUG': ['debug'],
            'ENVIRONMENT': ['environment'],
        }

        for env_var, config_path in env_mappings.items():
            env_value = os.getenv(env_var)
            if env_value:
                current = config_data
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = env_value

        return config_data


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ('1', 'true', 'yes', 'on')
    return bool(value)


# Global configuration instance
_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Get the application configuration instance."""
    global _config

    if _config is None:
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        if config_path.exists():
            _config = AppConfig.from_yaml(config_path)
        else:
            # Use default configuration if file doesn't exist
            _config = AppConfig.from_dict({})

    return _config


def set_config(config: AppConfig) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Reload configuration from file."""
    global _config
    _config = None
    return get_config(config_path)
