"""
Применение параметра showCoord к карте
"""

from .interfaces import MapViewBase, ViewLocator, CoordinateTransformer, Highlighter
from .view_locator import MapView, MapWidgetModel
from .transformer import PyprojTransformer
from .highlighter import LogHighlighter
from .url_coordinates_handler import URLCoordinatesHandler, ParseResult, params_from_url

__all__ = [
    'MapViewBase',
    'ViewLocator',
    'CoordinateTransformer',
    'Highlighter',
    'MapView',
    'MapWidgetModel',
    'PyprojTransformer',
    'LogHighlighter',
    'URLCoordinatesHandler',
    'ParseResult',
    'params_from_url',
]
