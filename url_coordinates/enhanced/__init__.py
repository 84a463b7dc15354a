"""
Инфраструктура: логирование, метрики, исключения
"""

from .exceptions import BaseError, ConfigError, ConfigLoadError, ConfigValidationError, LoggingError
from .log_manager import LogManager
from .metrics_manager import MetricsManager

__all__ = [
    'BaseError',
    'ConfigError',
    'ConfigLoadError',
    'ConfigValidationError',
    'LoggingError',
    'LogManager',
    'MetricsManager',
]
