"""
Модель виджета карты с наблюдаемым свойством view
"""

import asyncio
from typing import Any, Callable, List, Optional

from url_coordinates.core.points import MapCenterPoint
from url_coordinates.enhanced.log_manager import LogManager
from .interfaces import MapViewBase, ViewLocator

logger = LogManager().get_logger(__name__)


class MapView(MapViewBase):
    """Представление карты в памяти"""

    def __init__(self, spatial_reference_wkid: int, center: Optional[MapCenterPoint] = None):
        self._wkid = int(spatial_reference_wkid)
        self._center = center

    @property
    def spatial_reference_wkid(self) -> int:
        return self._wkid

    @property
    def center(self) -> Optional[MapCenterPoint]:
        return self._center

    @center.setter
    def center(self, value: MapCenterPoint) -> None:
        self._center = value

    def __repr__(self) -> str:
        return f"MapView(wkid={self._wkid}, center={self._center!r})"


class WatchHandle:
    """Подписка на изменение свойства"""

    def __init__(self, watchers: List[Callable[[Any], None]], callback: Callable[[Any], None]):
        self._watchers = watchers
        self._callback = callback

    def remove(self) -> None:
        if self._callback in self._watchers:
            self._watchers.remove(self._callback)


class MapWidgetModel(ViewLocator):
    """
    Модель виджета карты

    Хранит представление, которое хост устанавливает после инициализации
    карты. Свойство view меняется в потоке цикла событий.
    """

    def __init__(self, view: Optional[MapViewBase] = None):
        self._view = view
        self._watchers: List[Callable[[Any], None]] = []

    @property
    def view(self) -> Optional[MapViewBase]:
        return self._view

    @view.setter
    def view(self, value: Optional[MapViewBase]) -> None:
        self._view = value
        for callback in list(self._watchers):
            callback(value)

    def watch(self, callback: Callable[[Any], None]) -> WatchHandle:
        """
        Подписка на изменения view

        Args:
            callback: Вызывается с новым значением

        Returns:
            WatchHandle: Подписка, которую можно удалить
        """
        self._watchers.append(callback)
        return WatchHandle(self._watchers, callback)

    async def get_view(self) -> MapViewBase:
        """Текущее представление или первое появившееся после вызова"""
        if self._view is not None:
            return self._view

        future = asyncio.get_running_loop().create_future()

        def _on_view_changed(value: Any) -> None:
            if value is not None and not future.done():
                future.set_result(value)

        handle = self.watch(_on_view_changed)
        logger.debug("Представление карты еще не создано, ожидание")
        try:
            return await future
        finally:
            handle.remove()
