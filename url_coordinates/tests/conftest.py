"""
Конфигурация для тестов pytest
"""

import pytest
from unittest.mock import MagicMock, AsyncMock

from url_coordinates.core.points import MapCenterPoint
from url_coordinates.core.reference_systems import AxisInterpretation
from url_coordinates.enhanced.config_enhanced import HandlerConfig
from url_coordinates.enhanced.metrics_manager import MetricsManager
from url_coordinates.handler.interfaces import CoordinateTransformer, Highlighter
from url_coordinates.handler.url_coordinates_handler import URLCoordinatesHandler
from url_coordinates.handler.view_locator import MapView, MapWidgetModel


@pytest.fixture
def handler_config():
    """Конфигурация с включенной обратной связью в журнал"""
    return HandlerConfig(
        verbose_input=True,
        validate_input=True,
        enable_logger_feedback=True,
        highlight_center=False,
        default_wkid=4326,
    )


@pytest.fixture
def mock_feedback_logger():
    """Мок для получателя сообщений об ошибках"""
    logger = MagicMock()
    logger.error = MagicMock()
    logger.warning = MagicMock()
    return logger


@pytest.fixture
def projected_center():
    """Точка, которую возвращает мок трансформера"""
    return MapCenterPoint(
        axis0=500000.0,
        axis1=5761038.0,
        wkid=25833,
        interpretation=AxisInterpretation.XY,
    )


@pytest.fixture
def mock_transformer(projected_center):
    """Мок для CoordinateTransformer"""
    transformer = MagicMock(spec=CoordinateTransformer)
    transformer.transform = AsyncMock(return_value=projected_center)
    return transformer


@pytest.fixture
def mock_highlighter():
    """Мок для Highlighter"""
    return MagicMock(spec=Highlighter)


@pytest.fixture
def map_view():
    """Представление карты в WGS 84"""
    return MapView(4326)


@pytest.fixture
def widget_model(map_view):
    """Модель виджета с уже созданным представлением"""
    return MapWidgetModel(map_view)


@pytest.fixture
def make_handler(handler_config, mock_transformer, mock_highlighter, mock_feedback_logger):
    """Фабрика обработчиков с моками внешних компонентов"""
    def _make(view_locator, config=None):
        return URLCoordinatesHandler(
            view_locator,
            config=config or handler_config,
            transformer=mock_transformer,
            highlighter=mock_highlighter,
            feedback_logger=mock_feedback_logger,
            metrics=MetricsManager(),
        )
    return _make
