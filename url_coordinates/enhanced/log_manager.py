"""
Менеджер логирования
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Dict, List, Optional

from .exceptions import LoggingError
from url_coordinates.config import Config

FEEDBACK_PREFIX = "URL-Coordinates: "


class LogManager:
    """Менеджер логирования"""

    _loggers: Dict[str, logging.Logger] = {}
    _root_handlers: List[logging.Handler] = []

    def __init__(self):
        """Инициализация менеджера логирования"""
        self.log_dir = Config.LOG_DIR
        self.log_level = self._resolve_level(Config.LOG_LEVEL)
        self.log_format = Config.LOG_FORMAT
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def _resolve_level(level: str) -> int:
        resolved = logging.getLevelName(str(level).upper())
        if not isinstance(resolved, int):
            raise LoggingError(f"Неверный уровень логирования: {level}")
        return resolved

    def get_logger(self, name: str) -> logging.Logger:
        """
        Получение логгера по имени

        Args:
            name: Имя логгера

        Returns:
            logging.Logger: Логгер
        """
        if name not in self._loggers:
            logger = logging.getLogger(name)
            logger.setLevel(self.log_level)
            self._loggers[name] = logger

        return self._loggers[name]

    def set_level(self, level: str) -> None:
        """
        Установка уровня логирования для всех выданных логгеров

        Args:
            level: Уровень логирования
        """
        self.log_level = self._resolve_level(level)
        for logger in self._loggers.values():
            logger.setLevel(self.log_level)

    def setup_logging(
        self,
        level: Optional[str] = None,
        format: Optional[str] = None,
        log_file: Optional[str] = None
    ) -> None:
        """
        Настройка корневого логгера

        Args:
            level: Уровень логирования
            format: Формат сообщений
            log_file: Путь к файлу лога
        """
        if level is not None:
            self.set_level(level)

        try:
            root_logger = logging.getLogger()
            root_logger.setLevel(self.log_level)
            self._remove_root_handlers(root_logger)

            formatter = logging.Formatter(format or self.log_format)

            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)
            self._root_handlers.append(console_handler)

            if log_file:
                Path(log_file).parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    filename=log_file,
                    maxBytes=10 * 1024 * 1024,  # 10 MB
                    backupCount=5,
                    encoding='utf-8'
                )
                file_handler.setFormatter(formatter)
                root_logger.addHandler(file_handler)
                self._root_handlers.append(file_handler)

            self.logger.debug(f"Логирование настроено. Уровень: {logging.getLevelName(self.log_level)}")

        except OSError as e:
            raise LoggingError(f"Ошибка настройки логирования: {str(e)}") from e

    def _remove_root_handlers(self, root_logger: logging.Logger) -> None:
        """Удаление обработчиков, добавленных предыдущим вызовом setup_logging"""
        while self._root_handlers:
            handler = self._root_handlers.pop()
            root_logger.removeHandler(handler)
            handler.close()
