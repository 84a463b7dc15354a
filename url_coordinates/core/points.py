"""
Построение центра карты из проверенного кортежа showCoord
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from url_coordinates.errors import CoordinateNotANumberError, ReferenceSystemNotANumberError
from .parsing import parse_leading_float, parse_leading_int
from .reference_systems import AxisInterpretation, ReferenceSystemRegistry, default_registry


@dataclass(frozen=True)
class MapCenterPoint:
    """Центр карты: две оси и система координат"""
    axis0: float
    axis1: float
    wkid: int
    interpretation: AxisInterpretation = AxisInterpretation.LAT_LON

    @property
    def is_projected(self) -> bool:
        return self.interpretation is AxisInterpretation.XY

    @property
    def latitude(self) -> Optional[float]:
        return None if self.is_projected else self.axis0

    @property
    def longitude(self) -> Optional[float]:
        return None if self.is_projected else self.axis1

    @property
    def x(self) -> Optional[float]:
        return self.axis0 if self.is_projected else None

    @property
    def y(self) -> Optional[float]:
        return self.axis1 if self.is_projected else None

    def with_wkid(self, wkid: int, interpretation: AxisInterpretation, axis0: float, axis1: float) -> 'MapCenterPoint':
        """Копия точки в другой системе координат"""
        return replace(self, axis0=axis0, axis1=axis1, wkid=wkid, interpretation=interpretation)

    def to_dict(self) -> Dict[str, Any]:
        """Представление точки в виде JSON геометрии"""
        if self.is_projected:
            data = {'x': self.axis0, 'y': self.axis1}
        else:
            data = {'latitude': self.axis0, 'longitude': self.axis1}
        data['spatialReference'] = {'wkid': self.wkid}
        return data

    def __str__(self) -> str:
        if self.is_projected:
            return f"x={self.axis0}, y={self.axis1} (WKID {self.wkid})"
        return f"lat={self.axis0}, lon={self.axis1} (WKID {self.wkid})"


def build_center_point(
    tokens: List[str],
    default_wkid: int,
    registry: ReferenceSystemRegistry = default_registry
) -> MapCenterPoint:
    """
    Построение точки центра

    Трактовка осей берется из реестра: для систем XY (25833) axis0/axis1
    это x/y, для остальных это широта/долгота. Диапазоны здесь не
    проверяются.

    Args:
        tokens: Два или три элемента кортежа
        default_wkid: WKID, если третий элемент отсутствует
        registry: Реестр систем координат

    Returns:
        MapCenterPoint: Центр карты
    """
    if len(tokens) > 2:
        parsed = parse_leading_int(tokens[2])
        if parsed is None:
            raise ReferenceSystemNotANumberError(tokens[2])
        wkid = parsed[0]
    else:
        wkid = default_wkid

    axes = []
    for axis in (0, 1):
        number = parse_leading_float(tokens[axis])
        if number is None:
            raise CoordinateNotANumberError(axis=axis, value=tokens[axis])
        axes.append(number)

    policy = registry.get(wkid)
    return MapCenterPoint(
        axis0=axes[0],
        axis1=axes[1],
        wkid=wkid,
        interpretation=policy.interpretation,
    )
