"""
Ошибки разбора параметра showCoord и применения центра к карте
"""

import math
from typing import Optional, Tuple

from .nls import MESSAGES, DEFAULT_LOCALE


def _format_bound(value: float) -> str:
    """Форматирование границы диапазона без лишних нулей"""
    if math.isinf(value):
        return '-inf' if value < 0 else 'inf'
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class URLCoordinatesError(Exception):
    """Базовый класс для ошибок обработчика URL-координат"""

    key: str = ''
    code: int = 0

    def __init__(self, message: Optional[str] = None):
        self.message = message or self._default_message()
        super().__init__(self.message)

    def message_suffix(self) -> str:
        """Дополнение к тексту из каталога сообщений (например, диапазон)"""
        return ''

    def _default_message(self) -> str:
        text = MESSAGES[DEFAULT_LOCALE].get(self.key, self.__class__.__name__)
        suffix = self.message_suffix()
        return f"{text} {suffix}" if suffix else text


class CoordinateParseError(URLCoordinatesError):
    """Ошибки разбора и валидации значения параметра"""
    pass


class EmptyCoordinatesError(CoordinateParseError):
    """Параметр передан, но значение пустое"""
    key = 'emptyCoordinates'
    code = 1


class MalformedCoordinatesError(CoordinateParseError):
    """Кортеж координат не содержит разделителя"""
    key = 'malformedCoordinates'
    code = 2


class CoordinateNotANumberError(CoordinateParseError):
    """Значение координаты нельзя прочитать как число"""
    key = 'coordinateNaN'
    code = 3

    def __init__(self, axis: int, value: str):
        self.axis = axis
        self.value = value
        super().__init__()


class AxisOutOfRangeError(CoordinateParseError):
    """Значение координаты вне допустимого для WKID диапазона"""
    code = 4

    def __init__(self, axis: int, value: float, bounds: Tuple[float, float]):
        self.axis = axis
        self.value = value
        self.bounds = bounds
        super().__init__()

    @property
    def key(self) -> str:
        return 'coordinateExceedsXLimit' if self.axis == 0 else 'coordinateExceedsYLimit'

    def message_suffix(self) -> str:
        lower, upper = self.bounds
        return f"[{_format_bound(lower)}, {_format_bound(upper)}]."


class ReferenceSystemNotANumberError(CoordinateParseError):
    """WKID нельзя прочитать как число"""
    key = 'wkidNaN'
    code = 5

    def __init__(self, value: str):
        self.value = value
        super().__init__()


class ReferenceSystemTooShortError(CoordinateParseError):
    """WKID содержит меньше 4 цифр"""
    key = 'wkidExceedsLowerLimit'
    code = 6

    def __init__(self, value: str):
        self.value = value
        super().__init__()


class ReferenceSystemTooLongError(CoordinateParseError):
    """WKID содержит больше 5 цифр"""
    key = 'wkidExceedsUpperLimit'
    code = 7

    def __init__(self, value: str):
        self.value = value
        super().__init__()


class MapApplyError(URLCoordinatesError):
    """Ошибки применения центра к карте"""
    pass


class TransformFailedError(MapApplyError):
    """Ошибка перепроецирования точки в систему координат карты"""
    key = 'transformFailed'
    code = 10

    def __init__(self, source_wkid: int, target_wkid: int, reason: Optional[str] = None):
        self.source_wkid = source_wkid
        self.target_wkid = target_wkid
        self.reason = reason
        super().__init__()

    def message_suffix(self) -> str:
        details = f"({self.source_wkid} -> {self.target_wkid})"
        if self.reason:
            details = f"{details}: {self.reason}"
        return details


class ViewUnavailableError(MapApplyError):
    """Представление карты не появилось за отведенное время"""
    key = 'viewUnavailable'
    code = 11

    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__()
