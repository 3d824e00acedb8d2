"""
Custom Exception Classes

Package-specific exception classes for the configuration and quiz content
layers. The answer-evaluation core itself never raises.
"""

from typing import Optional, Any, Dict


class ChamorroEvalError(Exception):
    """Base exception class for all chamorro-eval errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class ConfigurationError(ChamorroEvalError):
    """Raised when there's an issue with configuration loading or parsing."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        super().__init__(message, kwargs)
        self.setting = setting


class ValidationError(ChamorroEvalError):
    """Raised when quiz content fails validation."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 invalid_value: Optional[Any] = None, **kwargs):
        super().__init__(message, kwargs)
        self.field_name = field_name
        self.invalid_value = invalid_value
