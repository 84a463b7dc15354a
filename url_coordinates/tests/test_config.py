"""
Тесты конфигурации обработчика
"""

import json

import pytest

from url_coordinates.enhanced.config_enhanced import ConfigManager, HandlerConfig
from url_coordinates.enhanced.exceptions import ConfigLoadError, ConfigValidationError


class TestHandlerConfig:
    """Тесты HandlerConfig"""

    def test_defaults(self):
        config = HandlerConfig()
        assert config.verbose_input is True
        assert config.validate_input is True
        assert config.enable_logger_feedback is False
        assert config.highlight_center is False
        assert config.default_wkid == 4326
        assert config.parameter_name == "showCoord"
        assert config.highlighter_symbol is None

    def test_from_manifest_keys(self):
        config = HandlerConfig.from_dict({
            "verboseInput": False,
            "validateInput": "false",
            "enableLoggerFeedback": 1,
            "highlightCenter": "yes",
            "defaultWKID": "25833",
            "highlighterTimeout": "2.5",
            "highlighterSymbol": {"type": "simple-marker"},
            "unknownKey": True,
        })
        assert config.verbose_input is False
        assert config.validate_input is False
        assert config.enable_logger_feedback is True
        assert config.highlight_center is True
        assert config.default_wkid == 25833
        assert config.highlighter_timeout == 2.5
        assert config.highlighter_symbol == {"type": "simple-marker"}

    @pytest.mark.parametrize("kwargs", [
        {"default_wkid": 123},
        {"default_wkid": "abc"},
        {"verbose_input": "maybe"},
        {"view_timeout": -1},
        {"transform_timeout": "soon"},
        {"highlighter_symbol": "red"},
        {"parameter_name": ""},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigValidationError):
            HandlerConfig(**kwargs)

    def test_reference_systems_in_registry(self):
        config = HandlerConfig(reference_systems=[{"wkid": 25832, "interpretation": "xy"}])
        registry = config.build_registry()
        assert 25832 in registry
        assert 4326 in registry
        assert 25833 in registry

    def test_from_env(self):
        environ = {
            "URL_COORDS_VERBOSE_INPUT": "false",
            "URL_COORDS_DEFAULT_WKID": "25833",
            "URL_COORDS_HIGHLIGHTER_SYMBOL": '{"color": "red"}',
            "URL_COORDS_LOCALE": "de",
            "OTHER": "ignored",
        }
        config = HandlerConfig.from_env(environ=environ)
        assert config.verbose_input is False
        assert config.default_wkid == 25833
        assert config.highlighter_symbol == {"color": "red"}
        assert config.locale == "de"

    def test_from_env_invalid_json(self):
        with pytest.raises(ConfigValidationError):
            HandlerConfig.from_env(environ={"URL_COORDS_REFERENCE_SYSTEMS": "[oops"})


class TestConfigManager:
    """Тесты загрузки конфигурации из файла"""

    def test_load_json(self, tmp_path):
        config_file = tmp_path / "url_coordinates.json"
        config_file.write_text(json.dumps({
            "verboseInput": True,
            "defaultWKID": 25833,
            "referenceSystems": [{"wkid": 3857, "interpretation": "xy"}],
        }), encoding="utf-8")

        config = ConfigManager.load_config(config_file)
        assert config.default_wkid == 25833
        assert config.reference_systems[0].wkid == 3857

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigLoadError):
            ConfigManager.load_config(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        config_file = tmp_path / "broken.json"
        config_file.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load_config(config_file)

    def test_non_object_json(self, tmp_path):
        config_file = tmp_path / "list.json"
        config_file.write_text("[]", encoding="utf-8")
        with pytest.raises(ConfigLoadError):
            ConfigManager.load_config(config_file)
