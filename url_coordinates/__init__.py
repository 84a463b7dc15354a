"""
Обработчик URL-параметра showCoord для картографического приложения
"""

__version__ = "1.0.0"

from .errors import (
    URLCoordinatesError,
    CoordinateParseError,
    EmptyCoordinatesError,
    MalformedCoordinatesError,
    CoordinateNotANumberError,
    AxisOutOfRangeError,
    ReferenceSystemNotANumberError,
    ReferenceSystemTooShortError,
    ReferenceSystemTooLongError,
    MapApplyError,
    TransformFailedError,
    ViewUnavailableError,
)
from .enhanced.exceptions import ConfigError, ConfigLoadError, ConfigValidationError
from .core import (
    MapCenterPoint,
    AxisInterpretation,
    ReferenceSystemPolicy,
    ReferenceSystemRegistry,
)
from .enhanced.config_enhanced import HandlerConfig, ConfigManager
from .handler import (
    URLCoordinatesHandler,
    ParseResult,
    MapView,
    MapWidgetModel,
    PyprojTransformer,
    LogHighlighter,
    params_from_url,
)

__all__ = [
    'URLCoordinatesHandler',
    'ParseResult',
    'HandlerConfig',
    'ConfigManager',
    'MapCenterPoint',
    'AxisInterpretation',
    'ReferenceSystemPolicy',
    'ReferenceSystemRegistry',
    'MapView',
    'MapWidgetModel',
    'PyprojTransformer',
    'LogHighlighter',
    'params_from_url',
    'URLCoordinatesError',
    'CoordinateParseError',
    'EmptyCoordinatesError',
    'MalformedCoordinatesError',
    'CoordinateNotANumberError',
    'AxisOutOfRangeError',
    'ReferenceSystemNotANumberError',
    'ReferenceSystemTooShortError',
    'ReferenceSystemTooLongError',
    'MapApplyError',
    'TransformFailedError',
    'ViewUnavailableError',
    'ConfigError',
    'ConfigLoadError',
    'ConfigValidationError',
]
