"""
Инфраструктурные исключения проекта
"""

class BaseError(Exception):
    """Базовое инфраструктурное исключение"""
    pass

class ConfigError(BaseError):
    """Исключение для ошибок конфигурации"""
    pass

class ConfigLoadError(ConfigError):
    """Ошибка загрузки конфигурации"""
    pass

class ConfigValidationError(ConfigError):
    """Ошибка валидации конфигурации"""
    pass

class LoggingError(BaseError):
    """Исключение для ошибок логирования"""
    pass
