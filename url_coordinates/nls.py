"""
Локализованные сообщения обработчика URL-координат
"""

from typing import Dict

DEFAULT_LOCALE = 'en'

MESSAGES: Dict[str, Dict[str, str]] = {
    'en': {
        'emptyCoordinates': "Parameter Error: showCoord was passed as URL parameter but the value is empty.",
        'malformedCoordinates': "Parameter Error: showCoord was passed as URL parameter but the coordinate tuple is malformed.",
        'missingWKID': "Parameter Warning: showCoord was passed as URL parameter but the WKID is missing. Applying default.",
        'coordinateNaN': "Value Error: A provided coordinate value cannot be read as number.",
        'coordinateExceedsXLimit': "Value Error: The provided x value exceeds the limits of",
        'coordinateExceedsYLimit': "Value Error: The provided y value exceeds the limits of",
        'wkidNaN': "Value Error: The provided WKID value cannot be read as number.",
        'wkidExceedsLowerLimit': "Value Error: The provided WKID is too short.",
        'wkidExceedsUpperLimit': "Value Error: The provided WKID is too long.",
        'transformFailed': "Transform Error: The coordinate could not be projected into the spatial reference of the map.",
        'viewUnavailable': "View Error: The map view did not become available in time.",
    },
    'de': {
        'emptyCoordinates': "Parameter Error: showCoord wurde als URL Parameter angegeben, aber der Wert ist leer.",
        'malformedCoordinates': "Parameter Error: showCoord wurde als URL Parameter angegeben, aber das Koordinaten-Tupel ist inkorrekt formatiert.",
        'missingWKID': "Parameter Warning: showCoord wurde als URL Parameter angegeben, aber es konnte keine WKID gefunden werden. Nutze Standardwert.",
        'coordinateNaN': "Value Error: Eine der angegeben Koordinaten kann nicht als Zahl interpretiert werden.",
        'coordinateExceedsXLimit': "Value Error: Der angegebene x Wert liegt nicht im Wertebereich von",
        'coordinateExceedsYLimit': "Value Error: Der angegebene y Wert liegt nicht im Wertebereich von",
        'wkidNaN': "Value Error: Die angegebene WKID kann nicht als Zahl interpretiert werden.",
        'wkidExceedsLowerLimit': "Value Error: Die angegebene WKID ist zu kurz.",
        'wkidExceedsUpperLimit': "Value Error: Die angegebene WKID ist zu lang.",
        'transformFailed': "Transform Error: Die Koordinate konnte nicht in das Koordinatensystem der Karte projiziert werden.",
        'viewUnavailable': "View Error: Die Kartenansicht wurde nicht rechtzeitig verfügbar.",
    },
}


def get_messages(locale: str = DEFAULT_LOCALE) -> Dict[str, str]:
    """
    Получение набора сообщений для локали

    Неизвестные локали (и региональные варианты вроде ``de-AT``) сводятся
    к базовому языку, иначе используется английский набор.

    Args:
        locale: Код локали

    Returns:
        Dict[str, str]: Сообщения по ключам
    """
    if not locale:
        return MESSAGES[DEFAULT_LOCALE]
    language = locale.replace('_', '-').split('-')[0].lower()
    return MESSAGES.get(language, MESSAGES[DEFAULT_LOCALE])


def get_message(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Получение сообщения по ключу с откатом на английский текст"""
    messages = get_messages(locale)
    if key in messages:
        return messages[key]
    return MESSAGES[DEFAULT_LOCALE][key]


def format_error(error, locale: str = DEFAULT_LOCALE) -> str:
    """
    Форматирование ошибки обработчика на языке пользователя

    Args:
        error: Экземпляр URLCoordinatesError
        locale: Код локали

    Returns:
        str: Локализованный текст ошибки
    """
    text = get_message(error.key, locale)
    suffix = error.message_suffix()
    if suffix:
        return f"{text} {suffix}"
    return text
