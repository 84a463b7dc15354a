"""
Перепроецирование центра карты средствами pyproj
"""

import asyncio
import functools
import math
import threading
from typing import Dict, Tuple

from pyproj import CRS, Transformer
from pyproj.exceptions import CRSError, ProjError

from url_coordinates.core.points import MapCenterPoint
from url_coordinates.core.reference_systems import (
    AxisInterpretation,
    ReferenceSystemRegistry,
    default_registry,
)
from url_coordinates.enhanced.log_manager import LogManager
from url_coordinates.errors import TransformFailedError
from .interfaces import CoordinateTransformer

logger = LogManager().get_logger(__name__)


class PyprojTransformer(CoordinateTransformer):
    """
    Сервис преобразования координат

    Трансформеры pyproj кэшируются по паре (исходный WKID, целевой WKID).
    Порядок осей всегда x/y (долгота/широта для географических систем).
    """

    def __init__(self, registry: ReferenceSystemRegistry = default_registry):
        self.registry = registry
        self._transformer_cache: Dict[Tuple[int, int], Transformer] = {}
        self._lock = threading.Lock()

    def get_transformer(self, source_wkid: int, target_wkid: int) -> Transformer:
        """
        Трансформер для пары систем координат

        Raises:
            CRSError: Неизвестный код EPSG
        """
        key = (source_wkid, target_wkid)
        with self._lock:
            if key not in self._transformer_cache:
                self._transformer_cache[key] = Transformer.from_crs(
                    f"EPSG:{source_wkid}", f"EPSG:{target_wkid}", always_xy=True
                )
                logger.debug(f"Создан трансформер EPSG:{source_wkid} -> EPSG:{target_wkid}")
            return self._transformer_cache[key]

    def interpretation_for(self, wkid: int) -> AxisInterpretation:
        """Трактовка осей целевой системы: из реестра, иначе по типу CRS"""
        if wkid in self.registry:
            return self.registry.get(wkid).interpretation
        if CRS.from_epsg(wkid).is_geographic:
            return AxisInterpretation.LAT_LON
        return AxisInterpretation.XY

    def transform_sync(self, point: MapCenterPoint, target_wkid: int) -> MapCenterPoint:
        """
        Синхронное перепроецирование точки

        Args:
            point: Исходная точка
            target_wkid: WKID системы координат карты

        Returns:
            MapCenterPoint: Точка в целевой системе

        Raises:
            TransformFailedError: Ошибка pyproj или неконечный результат
        """
        try:
            transformer = self.get_transformer(point.wkid, target_wkid)
            interpretation = self.interpretation_for(target_wkid)

            if point.is_projected:
                xx, yy = transformer.transform(point.axis0, point.axis1)
            else:
                xx, yy = transformer.transform(point.axis1, point.axis0)
        except (CRSError, ProjError) as e:
            logger.error(f"Ошибка преобразования EPSG:{point.wkid} -> EPSG:{target_wkid}: {e}")
            raise TransformFailedError(point.wkid, target_wkid, str(e)) from e

        if not (math.isfinite(xx) and math.isfinite(yy)):
            raise TransformFailedError(point.wkid, target_wkid, "результат вне области определения проекции")

        if interpretation is AxisInterpretation.LAT_LON:
            axis0, axis1 = yy, xx
        else:
            axis0, axis1 = xx, yy

        logger.debug(f"Преобразовано {point} -> ({axis0:.6f}, {axis1:.6f}) EPSG:{target_wkid}")
        return point.with_wkid(target_wkid, interpretation, axis0, axis1)

    async def transform(self, point: MapCenterPoint, target_wkid: int) -> MapCenterPoint:
        """Перепроецирование точки в пуле потоков"""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(self.transform_sync, point, target_wkid)
        )
