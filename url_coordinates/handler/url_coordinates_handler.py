"""
Обработчик URL-параметра showCoord
"""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional
from urllib.parse import urlsplit, parse_qsl

from url_coordinates.core.parsing import check_structure, clean_input, split_tokens
from url_coordinates.core.points import MapCenterPoint, build_center_point
from url_coordinates.core.validation import ValueValidator
from url_coordinates.enhanced.config_enhanced import HandlerConfig
from url_coordinates.enhanced.log_manager import FEEDBACK_PREFIX, LogManager
from url_coordinates.enhanced.metrics_manager import MetricsManager
from url_coordinates.errors import (
    CoordinateParseError,
    MapApplyError,
    TransformFailedError,
    URLCoordinatesError,
    ViewUnavailableError,
)
from url_coordinates.nls import format_error, get_message
from .interfaces import CoordinateTransformer, Highlighter, MapViewBase, ViewLocator
from .transformer import PyprojTransformer


@dataclass
class ParseResult:
    """Результат разбора значения showCoord"""
    point: MapCenterPoint
    tokens: List[str]
    warnings: List[str] = field(default_factory=list)


def params_from_url(url: str) -> Dict[str, str]:
    """
    Параметры запроса из URL

    Для повторяющихся параметров берется первое значение, пустые
    значения сохраняются.
    """
    params: Dict[str, str] = {}
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        params.setdefault(key, value)
    return params


class URLCoordinatesHandler:
    """
    Обработчик параметра showCoord

    Очищает и разбирает значение, проверяет его, строит центр карты
    и применяет его к представлению, при необходимости перепроецируя
    точку и подсвечивая центр.
    """

    def __init__(
        self,
        view_locator: ViewLocator,
        config: Optional[HandlerConfig] = None,
        transformer: Optional[CoordinateTransformer] = None,
        highlighter: Optional[Highlighter] = None,
        feedback_logger=None,
        metrics: Optional[MetricsManager] = None,
        logger=None
    ):
        """
        Инициализация обработчика

        Args:
            view_locator: Поиск представления карты
            config: Конфигурация обработчика
            transformer: Сервис перепроецирования
            highlighter: Подсветка центра
            feedback_logger: Получатель сообщений об ошибках (error/warning)
            metrics: Менеджер метрик
            logger: Логгер обработчика
        """
        self.config = config or HandlerConfig()
        self.registry = self.config.build_registry()
        self._view_locator = view_locator
        self._transformer = transformer or PyprojTransformer(self.registry)
        self._highlighter = highlighter
        self._logger = logger or LogManager().get_logger(__name__)
        self._feedback = feedback_logger or LogManager().get_logger('url_coordinates.feedback')
        self.metrics = metrics or MetricsManager()
        self._validator = ValueValidator(self.registry)

    async def decode_url_parameter(self, params: Mapping[str, str]) -> Optional[MapCenterPoint]:
        """
        Обработка параметров URL при старте приложения

        Args:
            params: Параметры, переданные в URL

        Returns:
            Установленный центр карты или None, если параметр не задан
        """
        raw = params.get(self.config.parameter_name)
        if not raw:
            return None

        start_time = self.metrics.start_operation('decode')
        try:
            result = self.parse_parameter(raw)
        except CoordinateParseError as e:
            await self.metrics.record_error('decode', type(e).__name__)
            raise
        await self.metrics.record_operation('decode', start_time)

        return await self.apply_to_map(result.point)

    def parse_parameter(self, raw: str) -> ParseResult:
        """
        Разбор значения showCoord без обращения к карте

        Args:
            raw: Значение параметра

        Returns:
            ParseResult: Центр карты, элементы кортежа и предупреждения

        Raises:
            CoordinateParseError: Значение некорректно
        """
        config = self.config
        try:
            cleaned = clean_input(raw, config.verbose_input)
            structure = check_structure(split_tokens(cleaned), config.default_wkid, config.use_default_wkid)
            for warning in structure.warnings:
                self._report_warning(warning)

            if config.validate_input:
                self._validator.validate(structure.tokens)

            point = build_center_point(structure.tokens, config.default_wkid, self.registry)
        except CoordinateParseError as e:
            self._report_error(e)
            raise

        self._logger.debug(f"Параметр {config.parameter_name}={raw!r} разобран: {point}")
        return ParseResult(point=point, tokens=structure.tokens, warnings=structure.warnings)

    async def apply_to_map(self, point: MapCenterPoint) -> MapCenterPoint:
        """
        Установка центра карты

        Если система координат точки отличается от системы представления,
        точка перепроецируется. Подсветка выполняется для итоговой точки.

        Args:
            point: Центр из URL

        Returns:
            MapCenterPoint: Центр, установленный в представлении

        Raises:
            ViewUnavailableError: Представление не появилось за view_timeout
            TransformFailedError: Ошибка перепроецирования
        """
        try:
            view = await self._acquire_view()
            view_wkid = view.spatial_reference_wkid
            if point.wkid != view_wkid:
                center = await self._transform(point, view_wkid)
            else:
                center = point
        except MapApplyError as e:
            self._report_error(e)
            raise

        view.center = center
        self._logger.info(f"Центр карты установлен: {center}")

        if self.config.highlight_center:
            self._highlight(center)
        return center

    async def _acquire_view(self) -> MapViewBase:
        timeout = self.config.view_timeout
        start_time = self.metrics.start_operation('view')
        try:
            if timeout is None:
                view = await self._view_locator.get_view()
            else:
                view = await asyncio.wait_for(self._view_locator.get_view(), timeout)
        except asyncio.TimeoutError as e:
            await self.metrics.record_error('view', ViewUnavailableError.__name__)
            raise ViewUnavailableError(timeout) from e
        await self.metrics.record_operation('view', start_time)
        return view

    async def _transform(self, point: MapCenterPoint, target_wkid: int) -> MapCenterPoint:
        timeout = self.config.transform_timeout
        start_time = self.metrics.start_operation('transform')
        try:
            if timeout is None:
                center = await self._transformer.transform(point, target_wkid)
            else:
                center = await asyncio.wait_for(self._transformer.transform(point, target_wkid), timeout)
        except asyncio.TimeoutError as e:
            await self.metrics.record_error('transform', TransformFailedError.__name__)
            raise TransformFailedError(point.wkid, target_wkid, f"timeout {timeout}s") from e
        except TransformFailedError:
            await self.metrics.record_error('transform', TransformFailedError.__name__)
            raise
        except Exception as e:
            # любая ошибка внешнего сервиса приводится к TransformFailedError
            self._logger.error(f"Ошибка сервиса перепроецирования: {e}")
            await self.metrics.record_error('transform', TransformFailedError.__name__)
            raise TransformFailedError(point.wkid, target_wkid, str(e)) from e
        await self.metrics.record_operation('transform', start_time)
        return center

    def _highlight(self, center: MapCenterPoint) -> None:
        if self._highlighter is None:
            self._logger.warning("Подсветка центра включена, но компонент подсветки не передан")
            return
        options = {'timeout': self.config.highlighter_timeout}
        if self.config.highlighter_symbol:
            options['symbol'] = self.config.highlighter_symbol
        self._highlighter.highlight(center, **options)

    def _report_warning(self, key: str) -> None:
        message = get_message(key, self.config.locale)
        self._logger.warning(message)
        if self.config.enable_logger_feedback:
            self._feedback.warning(FEEDBACK_PREFIX + message)

    def _report_error(self, error: URLCoordinatesError) -> None:
        if self.config.enable_logger_feedback:
            self._feedback.error(FEEDBACK_PREFIX + format_error(error, self.config.locale))
