"""
Интерфейсы внешних компонентов обработчика
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from url_coordinates.core.points import MapCenterPoint


class MapViewBase(ABC):
    """Представление карты: система координат и центр"""

    @property
    @abstractmethod
    def spatial_reference_wkid(self) -> int:
        """WKID системы координат представления"""

    @property
    @abstractmethod
    def center(self) -> Optional[MapCenterPoint]:
        """Текущий центр"""

    @center.setter
    @abstractmethod
    def center(self, value: MapCenterPoint) -> None:
        """Установка центра"""


class ViewLocator(ABC):
    """Поиск активного представления карты"""

    @abstractmethod
    async def get_view(self) -> MapViewBase:
        """
        Получение представления

        Если представления еще нет, ожидает его появления и
        завершается ровно один раз.
        """


class CoordinateTransformer(ABC):
    """Перепроецирование точки между системами координат"""

    @abstractmethod
    async def transform(self, point: MapCenterPoint, target_wkid: int) -> MapCenterPoint:
        """
        Перепроецирование точки

        Raises:
            TransformFailedError: Преобразование невозможно
        """


class Highlighter(ABC):
    """Временная подсветка геометрии на карте"""

    @abstractmethod
    def highlight(self, geometry: MapCenterPoint, symbol: Optional[Any] = None,
                  timeout: Optional[float] = None) -> None:
        """Подсветка геометрии без ожидания результата"""
