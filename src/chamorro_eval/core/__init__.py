"""
Core Module

Foundational components used across the package: configuration
management and custom exceptions.
"""

from .config import get_config, set_config, reload_config, AppConfig
from .exceptions import (
    ChamorroEvalError,
    ConfigurationError,
    ValidationError,
)

__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "AppConfig",
    "ChamorroEvalError",
    "ConfigurationError",
    "ValidationError",
]
