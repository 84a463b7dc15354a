"""
Очистка, разбиение и структурная проверка значения параметра showCoord
"""

import math
import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from url_coordinates.errors import EmptyCoordinatesError, MalformedCoordinatesError

SEPARATOR = ','

# Символы и подписи, допустимые в "подробной" записи: (x: 52.0°), (y: 7.5°), WKID: 4326
DECORATIVE_TOKENS = ('(', ')', '°', ' ', 'x:', 'x=', 'y:', 'y=', 'WKID=', 'WKID:')

MISSING_WKID_WARNING = 'missingWKID'

_FLOAT_PREFIX = re.compile(r'^\s*([+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)')
_INT_PREFIX = re.compile(r'^\s*([+-]?)([0-9]+)')


@dataclass
class StructureResult:
    """Результат структурной проверки"""
    tokens: List[str]
    warnings: List[str] = field(default_factory=list)

    @property
    def has_wkid(self) -> bool:
        return len(self.tokens) > 2


def clean_input(raw: str, verbose_input: bool) -> str:
    """
    Удаление символов, добавленных для читаемости

    Args:
        raw: Значение showCoord из URL
        verbose_input: Разрешена ли подробная запись

    Returns:
        str: Строка без скобок, знака градуса, пробелов и подписей осей
    """
    if not verbose_input:
        return raw
    cleaned = raw
    for token in DECORATIVE_TOKENS:
        cleaned = cleaned.replace(token, '')
    return cleaned


def split_tokens(cleaned: str) -> List[str]:
    """Разбиение строки по запятой без дополнительной обрезки"""
    return cleaned.split(SEPARATOR)


def check_structure(tokens: List[str], default_wkid: int, use_default_wkid: bool = True) -> StructureResult:
    """
    Проверка количества элементов кортежа

    Args:
        tokens: Элементы, полученные из split_tokens
        default_wkid: WKID по умолчанию
        use_default_wkid: Подставлять ли WKID по умолчанию для пары координат

    Returns:
        StructureResult: Исправленная последовательность и предупреждения

    Raises:
        EmptyCoordinatesError: Пустое значение
        MalformedCoordinatesError: Нет разделителя между координатами
    """
    if len(tokens) == 1:
        if tokens[0] == '':
            raise EmptyCoordinatesError()
        raise MalformedCoordinatesError()

    if len(tokens) == 2:
        if use_default_wkid:
            return StructureResult(
                tokens=[tokens[0], tokens[1], str(default_wkid)],
                warnings=[MISSING_WKID_WARNING],
            )
        return StructureResult(tokens=list(tokens))

    # лишние элементы после WKID игнорируются
    return StructureResult(tokens=list(tokens[:3]))


def parse_leading_float(value: str) -> Optional[float]:
    """
    Чтение числа из начала строки

    Как и parseFloat в браузере, берется только числовой префикс:
    "52.0abc" -> 52.0, "abc" -> None. Infinity и NaN числом не считаются.
    """
    match = _FLOAT_PREFIX.match(value)
    if not match:
        return None
    number = float(match.group(1))
    if not math.isfinite(number):
        return None
    return number


def parse_leading_int(value: str) -> Optional[Tuple[int, str]]:
    """
    Чтение целого числа из начала строки

    Returns:
        Кортеж (число, цифры префикса) или None, если префикса нет
    """
    match = _INT_PREFIX.match(value)
    if not match:
        return None
    sign, digits = match.groups()
    return int(sign + digits), digits
