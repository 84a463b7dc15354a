"""
Проверка значений координат и WKID
"""

from typing import List, Optional

from url_coordinates.errors import (
    AxisOutOfRangeError,
    CoordinateNotANumberError,
    ReferenceSystemNotANumberError,
    ReferenceSystemTooLongError,
    ReferenceSystemTooShortError,
)
from .parsing import parse_leading_float, parse_leading_int
from .reference_systems import ReferenceSystemRegistry, default_registry

WKID_MIN_DIGITS = 4
WKID_MAX_DIGITS = 5


def resolve_wkid(tokens: List[str]) -> Optional[int]:
    """WKID из третьего элемента или None, если его нет или он не число"""
    if len(tokens) < 3:
        return None
    parsed = parse_leading_int(tokens[2])
    return parsed[0] if parsed else None


def validate_coordinate_value(
    value: str,
    axis: int,
    wkid: Optional[int],
    registry: ReferenceSystemRegistry = default_registry
) -> float:
    """
    Проверка одной координаты

    Args:
        value: Строковое значение координаты
        axis: Индекс оси (0 или 1)
        wkid: WKID, определяющий допустимый диапазон
        registry: Реестр систем координат

    Returns:
        float: Прочитанное значение

    Raises:
        CoordinateNotANumberError: Значение не число
        AxisOutOfRangeError: Значение вне диапазона
    """
    number = parse_leading_float(value)
    if number is None:
        raise CoordinateNotANumberError(axis=axis, value=value)

    lower, upper = registry.get(wkid).bounds_for(axis)
    if not lower <= number <= upper:
        raise AxisOutOfRangeError(axis=axis, value=number, bounds=(lower, upper))
    return number


def validate_wkid_value(value: str) -> int:
    """
    Проверка WKID: число из 4-5 цифр

    Raises:
        ReferenceSystemNotANumberError: WKID не число
        ReferenceSystemTooShortError: Меньше 4 цифр
        ReferenceSystemTooLongError: Больше 5 цифр
    """
    parsed = parse_leading_int(value)
    if parsed is None:
        raise ReferenceSystemNotANumberError(value)

    wkid, digits = parsed
    if len(digits) < WKID_MIN_DIGITS:
        raise ReferenceSystemTooShortError(value)
    if len(digits) > WKID_MAX_DIGITS:
        raise ReferenceSystemTooLongError(value)
    return wkid


class ValueValidator:
    """Проверка значений кортежа showCoord"""

    def __init__(self, registry: ReferenceSystemRegistry = default_registry):
        self.registry = registry

    def validate(self, tokens: List[str]) -> None:
        """
        Проверка координат и WKID по порядку: axis0, axis1, WKID

        Первая найденная ошибка прерывает проверку.

        Args:
            tokens: Два или три элемента кортежа
        """
        wkid = resolve_wkid(tokens)
        for axis in (0, 1):
            validate_coordinate_value(tokens[axis], axis, wkid, self.registry)
        if len(tokens) > 2:
            validate_wkid_value(tokens[2])
