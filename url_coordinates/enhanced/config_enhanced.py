"""
Модуль для управления конфигурацией обработчика
"""

import os
import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional, Dict, Any, List, Mapping, Union

from .exceptions import ConfigLoadError, ConfigValidationError
from .log_manager import LogManager
from url_coordinates.config import Config
from url_coordinates.core.reference_systems import (
    DEFAULT_POLICIES,
    ReferenceSystemPolicy,
    ReferenceSystemRegistry,
    WGS84_WKID,
)

logger = LogManager().get_logger(__name__)

# Ключи манифеста в стиле camelCase -> поля HandlerConfig
CAMEL_CASE_KEYS = {
    'verboseInput': 'verbose_input',
    'validateInput': 'validate_input',
    'enableLoggerFeedback': 'enable_logger_feedback',
    'highlightCenter': 'highlight_center',
    'defaultWKID': 'default_wkid',
    'useDefaultWKID': 'use_default_wkid',
    'highlighterSymbol': 'highlighter_symbol',
    'highlighterTimeout': 'highlighter_timeout',
    'parameterName': 'parameter_name',
    'viewTimeout': 'view_timeout',
    'transformTimeout': 'transform_timeout',
    'referenceSystems': 'reference_systems',
}

_TRUE_VALUES = ('1', 'true', 'yes', 'on')
_FALSE_VALUES = ('0', 'false', 'no', 'off', '')


def _to_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ConfigValidationError(f"{name} должно быть логическим значением, получено {value!r}")


def _to_optional_float(value: Any, name: str) -> Optional[float]:
    if value is None or value == '':
        return None
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"{name} должно быть числом: {value!r}") from e
    if result < 0:
        raise ConfigValidationError(f"{name} должно быть неотрицательным")
    return result


@dataclass
class HandlerConfig:
    """Конфигурация обработчика параметра showCoord"""
    verbose_input: bool = True
    validate_input: bool = True
    enable_logger_feedback: bool = False
    highlight_center: bool = False
    default_wkid: int = WGS84_WKID
    use_default_wkid: bool = True
    highlighter_symbol: Optional[Dict[str, Any]] = None
    highlighter_timeout: Optional[float] = None
    parameter_name: str = 'showCoord'
    locale: str = 'en'
    view_timeout: Optional[float] = None
    transform_timeout: Optional[float] = None
    reference_systems: List[ReferenceSystemPolicy] = field(default_factory=list)

    def __post_init__(self):
        """Приведение типов и валидация"""
        for name in ('verbose_input', 'validate_input', 'enable_logger_feedback',
                     'highlight_center', 'use_default_wkid'):
            setattr(self, name, _to_bool(getattr(self, name), name))

        try:
            self.default_wkid = int(self.default_wkid)
        except (TypeError, ValueError) as e:
            raise ConfigValidationError(f"default_wkid должно быть целым числом: {self.default_wkid!r}") from e
        if not 4 <= len(str(abs(self.default_wkid))) <= 5:
            raise ConfigValidationError("default_wkid должен состоять из 4-5 цифр")

        self.highlighter_timeout = _to_optional_float(self.highlighter_timeout, 'highlighter_timeout')
        self.view_timeout = _to_optional_float(self.view_timeout, 'view_timeout')
        self.transform_timeout = _to_optional_float(self.transform_timeout, 'transform_timeout')

        if self.highlighter_symbol is not None and not isinstance(self.highlighter_symbol, dict):
            raise ConfigValidationError("highlighter_symbol должен быть словарем")
        if not self.parameter_name:
            raise ConfigValidationError("parameter_name не может быть пустым")

        self.reference_systems = [
            policy if isinstance(policy, ReferenceSystemPolicy) else ReferenceSystemPolicy.from_dict(policy)
            for policy in self.reference_systems
        ]

    def build_registry(self) -> ReferenceSystemRegistry:
        """Реестр систем координат: встроенные политики плюс заданные в конфигурации"""
        return ReferenceSystemRegistry(list(DEFAULT_POLICIES) + list(self.reference_systems))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'HandlerConfig':
        """
        Создание конфигурации из словаря

        Принимаются как поля dataclass, так и ключи манифеста
        (verboseInput, defaultWKID и т.д.). Неизвестные ключи игнорируются.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key)
            if name in known:
                kwargs[name] = value
            else:
                logger.warning(f"Неизвестный параметр конфигурации: {key}")
        return cls(**kwargs)

    @classmethod
    def from_env(cls, prefix: str = Config.ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> 'HandlerConfig':
        """
        Создание конфигурации из переменных окружения

        Пример: URL_COORDS_VERBOSE_INPUT=false, URL_COORDS_DEFAULT_WKID=25833.
        highlighter_symbol и reference_systems задаются JSON-строкой.
        """
        environ = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            env_name = prefix + f.name.upper()
            if env_name not in environ:
                continue
            value = environ[env_name]
            if f.name in ('highlighter_symbol', 'reference_systems'):
                try:
                    value = json.loads(value)
                except json.JSONDecodeError as e:
                    raise ConfigValidationError(f"{env_name} должен содержать JSON: {e}") from e
            kwargs[f.name] = value
        return cls(**kwargs)


class ConfigManager:
    """Загрузка конфигурации обработчика"""

    @staticmethod
    def load_config(path: Optional[Union[str, Path]] = None) -> HandlerConfig:
        """
        Загрузка конфигурации

        Порядок: явный путь к JSON, путь из URL_COORDS_CONFIG,
        затем переменные окружения.

        Args:
            path: Путь к JSON файлу

        Returns:
            HandlerConfig: Конфигурация

        Raises:
            ConfigLoadError: Файл не найден или содержит некорректный JSON
        """
        path = path or Config.HANDLER_CONFIG_PATH
        if not path:
            return HandlerConfig.from_env()

        config_path = Path(path)
        if not config_path.is_file():
            raise ConfigLoadError(f"Файл конфигурации не найден: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Ошибка разбора JSON в {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigLoadError(f"Конфигурация в {config_path} должна быть объектом JSON")

        logger.info(f"Конфигурация загружена из {config_path}")
        return HandlerConfig.from_dict(data)
