"""
Конфигурация приложения
"""

import os
import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def find_dotenv() -> Path:
    """Поиск .env файла в возможных расположениях"""
    current_dir = Path(__file__).resolve().parent
    root_dir = current_dir.parent

    possible_locations = [
        current_dir / '.env',  # url_coordinates/.env
        root_dir / '.env',
    ]

    for location in possible_locations:
        if location.is_file():
            logger.debug(f"Найден .env файл: {location}")
            return location

    logger.debug(f"Файл .env не найден. Проверенные расположения: {[str(p) for p in possible_locations]}")
    return current_dir / '.env'


env_path = find_dotenv()
load_dotenv(dotenv_path=env_path)


class LogConfig:
    """Конфигурация логирования"""
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
    LOG_DIR = Path(os.getenv('LOG_DIR', 'logs'))
    LOG_FILE = os.getenv('LOG_FILE', '')


class Config:
    """Основные настройки приложения"""

    BASE_DIR = Path(__file__).resolve().parent

    # JSON-конфигурация обработчика (необязательна)
    HANDLER_CONFIG_PATH = os.getenv('URL_COORDS_CONFIG', '')

    # Префикс переменных окружения для HandlerConfig.from_env
    ENV_PREFIX = 'URL_COORDS_'

    LOG_LEVEL = LogConfig.LOG_LEVEL
    LOG_FORMAT = LogConfig.LOG_FORMAT
    LOG_DIR = LogConfig.LOG_DIR
