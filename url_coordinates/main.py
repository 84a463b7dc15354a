"""
Командная строка: применение showCoord к карте в памяти
"""

import sys
import asyncio
import argparse
import json
import logging
from dataclasses import replace
from typing import List, Optional

from url_coordinates.config import LogConfig
from url_coordinates.enhanced.config_enhanced import ConfigManager
from url_coordinates.enhanced.exceptions import ConfigError
from url_coordinates.enhanced.log_manager import LogManager
from url_coordinates.errors import URLCoordinatesError
from url_coordinates.handler import (
    LogHighlighter,
    MapView,
    MapWidgetModel,
    URLCoordinatesHandler,
    params_from_url,
)
from url_coordinates.nls import format_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='url_coordinates',
        description="Разбор параметра showCoord и установка центра карты",
    )
    parser.add_argument('value', help="Значение showCoord или полный URL с параметром showCoord")
    parser.add_argument('--view-wkid', type=int, default=None,
                        help="WKID системы координат карты (по умолчанию совпадает с WKID точки)")
    parser.add_argument('--config', default=None, help="Путь к JSON конфигурации обработчика")
    parser.add_argument('--verbose-input', dest='verbose_input', action='store_true', default=None,
                        help="Разрешить скобки, знак градуса и подписи осей")
    parser.add_argument('--no-validate', dest='validate_input', action='store_false', default=None,
                        help="Отключить проверку значений")
    parser.add_argument('--highlight', dest='highlight_center', action='store_true', default=None,
                        help="Подсветить центр")
    parser.add_argument('--json', dest='as_json', action='store_true',
                        help="Вывести центр карты как JSON геометрию")
    parser.add_argument('--locale', default=None, help="Язык сообщений об ошибках (en, de)")
    parser.add_argument('--log-level', default=LogConfig.LOG_LEVEL, help="Уровень логирования")
    return parser


async def run(args: argparse.Namespace) -> int:
    """Основная асинхронная логика"""
    config = ConfigManager.load_config(args.config)
    overrides = {
        name: getattr(args, name)
        for name in ('verbose_input', 'validate_input', 'highlight_center', 'locale')
        if getattr(args, name) is not None
    }
    if overrides:
        config = replace(config, **overrides)

    if '?' in args.value:
        params = params_from_url(args.value)
    else:
        params = {config.parameter_name: args.value}

    model = MapWidgetModel()
    handler = URLCoordinatesHandler(model, config=config, highlighter=LogHighlighter())

    try:
        raw = params.get(config.parameter_name)
        if not raw:
            print(f"Параметр {config.parameter_name} не задан", file=sys.stderr)
            return 1
        point = handler.parse_parameter(raw).point
        model.view = MapView(args.view_wkid if args.view_wkid is not None else point.wkid)
        center = await handler.apply_to_map(point)
    except URLCoordinatesError as e:
        print(format_error(e, config.locale), file=sys.stderr)
        return 1

    if args.as_json:
        print(json.dumps(center.to_dict(), ensure_ascii=False))
    else:
        print(center)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    LogManager().setup_logging(level=args.log_level, log_file=LogConfig.LOG_FILE or None)
    logging.getLogger('pyproj').setLevel(logging.WARNING)

    try:
        return asyncio.run(run(args))
    except ConfigError as e:
        logging.error(f"Ошибка конфигурации: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
