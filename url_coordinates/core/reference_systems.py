"""
Реестр систем координат: допустимые диапазоны осей и трактовка осей по WKID
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple, Any

from url_coordinates.enhanced.exceptions import ConfigValidationError

Bounds = Tuple[float, float]

UNRESTRICTED: Bounds = (-math.inf, math.inf)

WGS84_WKID = 4326
ETRS89_UTM33N_WKID = 25833


class AxisInterpretation(Enum):
    """Смысл осей axis0/axis1 для системы координат"""
    LAT_LON = 'latlon'
    XY = 'xy'


@dataclass(frozen=True)
class ReferenceSystemPolicy:
    """Политика системы координат"""
    wkid: Optional[int]
    axis0_bounds: Bounds = UNRESTRICTED
    axis1_bounds: Bounds = UNRESTRICTED
    interpretation: AxisInterpretation = AxisInterpretation.LAT_LON
    name: str = ''

    def __post_init__(self):
        for bounds in (self.axis0_bounds, self.axis1_bounds):
            if bounds[0] > bounds[1]:
                raise ConfigValidationError(
                    f"Нижняя граница больше верхней для WKID {self.wkid}: {bounds}"
                )

    def bounds_for(self, axis: int) -> Bounds:
        """Диапазон для оси 0 или 1"""
        return self.axis0_bounds if axis == 0 else self.axis1_bounds

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ReferenceSystemPolicy':
        """
        Создание политики из словаря конфигурации

        Пример::

            {"wkid": 25832, "axis0": [-1e6, 2e6], "axis1": [0, 1e7],
             "interpretation": "xy", "name": "ETRS89 / UTM 32N"}
        """
        try:
            wkid = int(data['wkid'])
            axis0 = tuple(float(v) for v in data.get('axis0', UNRESTRICTED))
            axis1 = tuple(float(v) for v in data.get('axis1', UNRESTRICTED))
            interpretation = AxisInterpretation(data.get('interpretation', 'latlon'))
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigValidationError(f"Некорректное описание системы координат {data!r}: {e}") from e
        if len(axis0) != 2 or len(axis1) != 2:
            raise ConfigValidationError(f"Диапазон оси должен состоять из двух чисел: {data!r}")
        return cls(
            wkid=wkid,
            axis0_bounds=axis0,
            axis1_bounds=axis1,
            interpretation=interpretation,
            name=str(data.get('name', '')),
        )


# Для 4326 axis0 ограничена диапазоном широты, axis1 диапазоном долготы
DEFAULT_POLICIES = (
    ReferenceSystemPolicy(
        wkid=WGS84_WKID,
        axis0_bounds=(-90.0, 90.0),
        axis1_bounds=(-180.0, 180.0),
        interpretation=AxisInterpretation.LAT_LON,
        name='WGS 84',
    ),
    ReferenceSystemPolicy(
        wkid=ETRS89_UTM33N_WKID,
        axis0_bounds=(-2465144.80, 4102893.55),
        axis1_bounds=(776625.76, 9408555.22),
        interpretation=AxisInterpretation.XY,
        name='ETRS89 / UTM zone 33N',
    ),
)


class ReferenceSystemRegistry:
    """Расширяемая таблица политик систем координат"""

    def __init__(self, policies: Iterable[ReferenceSystemPolicy] = DEFAULT_POLICIES):
        self._policies: Dict[int, ReferenceSystemPolicy] = {}
        for policy in policies:
            self.register(policy)

    def register(self, policy: ReferenceSystemPolicy) -> None:
        """Добавление или замена политики"""
        if policy.wkid is None:
            raise ConfigValidationError("Политика системы координат должна иметь WKID")
        self._policies[policy.wkid] = policy

    def get(self, wkid: Optional[int]) -> ReferenceSystemPolicy:
        """
        Политика по WKID

        Для неизвестных и отсутствующих WKID возвращается политика без
        ограничений диапазона с трактовкой осей как широта/долгота.
        """
        if wkid is not None and wkid in self._policies:
            return self._policies[wkid]
        return ReferenceSystemPolicy(wkid=wkid)

    def __contains__(self, wkid: object) -> bool:
        return wkid in self._policies

    def __iter__(self):
        return iter(self._policies.values())

    def __len__(self) -> int:
        return len(self._policies)


default_registry = ReferenceSystemRegistry()
