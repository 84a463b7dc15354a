"""
Подсветка центра карты через журнал
"""

from typing import Any, List, Optional, Tuple

from url_coordinates.core.points import MapCenterPoint
from url_coordinates.enhanced.log_manager import LogManager
from .interfaces import Highlighter


class LogHighlighter(Highlighter):
    """Подсветка, которая только записывает маркер в журнал (для CLI)"""

    def __init__(self, logger=None):
        self.logger = logger or LogManager().get_logger(__name__)
        self.highlighted: List[Tuple[MapCenterPoint, Optional[Any], Optional[float]]] = []

    def highlight(self, geometry: MapCenterPoint, symbol: Optional[Any] = None,
                  timeout: Optional[float] = None) -> None:
        self.highlighted.append((geometry, symbol, timeout))
        self.logger.info(f"Подсветка центра: {geometry}, символ: {symbol or 'по умолчанию'}, таймаут: {timeout}")
