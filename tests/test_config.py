"""Tests for azswitch.config — configuration loading and validation."""

from __future__ import annotations

import json

import pytest

from azswitch.config import (
    DEFAULT_CONFIG,
    _sanitize_json_text,
    load_config,
    validate_config,
)


# ------------------------------------------------------------------
# DEFAULT_CONFIG
# ------------------------------------------------------------------

class TestDefaultConfig:

    EXPECTED_KEYS = {
        'debug',
        'line_wrap',
        'window_width',
        'window_height',
        'font_size',
        'caps_lock_at_start',
    }

    def test_contains_all_expected_keys(self):
        assert set(DEFAULT_CONFIG.keys()) == self.EXPECTED_KEYS

    def test_defaults_are_valid(self):
        assert validate_config(DEFAULT_CONFIG) == DEFAULT_CONFIG

    def test_window_defaults(self):
        assert DEFAULT_CONFIG['window_width'] == 450
        assert DEFAULT_CONFIG['window_height'] == 300
        assert DEFAULT_CONFIG['line_wrap'] is True


# ------------------------------------------------------------------
# validate_config
# ------------------------------------------------------------------

class TestValidateConfig:

    def test_none_gives_defaults(self):
        assert validate_config(None) == DEFAULT_CONFIG

    def test_valid_data_passes(self):
        result = validate_config({
            'debug': True,
            'line_wrap': False,
            'window_width': 800,
            'window_height': '600',
            'font_size': 14,
            'caps_lock_at_start': 'on',
        })
        assert result['debug'] is True
        assert result['line_wrap'] is False
        assert result['window_height'] == 600
        assert result['font_size'] == 14
        assert result['caps_lock_at_start'] == 'on'

    def test_invalid_debug_type(self):
        with pytest.raises(ValueError, match="debug"):
            validate_config({'debug': 'yes'})

    def test_invalid_line_wrap_type(self):
        with pytest.raises(ValueError, match="line_wrap"):
            validate_config({'line_wrap': 1})

    @pytest.mark.parametrize("value", ['abc', None, 50, 20000, True])
    def test_invalid_window_width(self, value):
        with pytest.raises(ValueError, match="window_width"):
            validate_config({'window_width': value})

    @pytest.mark.parametrize("value", [-1, 3, 73])
    def test_invalid_font_size(self, value):
        with pytest.raises(ValueError, match="font_size"):
            validate_config({'font_size': value})

    def test_font_size_zero_is_default(self):
        assert validate_config({'font_size': 0})['font_size'] == 0

    def test_invalid_caps_lock_setting(self):
        with pytest.raises(ValueError, match="caps_lock_at_start"):
            validate_config({'caps_lock_at_start': 'maybe'})


# ------------------------------------------------------------------
# _sanitize_json_text
# ------------------------------------------------------------------

class TestSanitizeJsonText:

    def test_strips_comments_and_trailing_commas(self):
        raw = '{\n  # hash comment\n  "debug": true, // trailing\n  "font_size": 12,\n}'
        assert json.loads(_sanitize_json_text(raw)) == {'debug': True, 'font_size': 12}


# ------------------------------------------------------------------
# load_config
# ------------------------------------------------------------------

class TestLoadConfig:

    def test_missing_explicit_file_gives_defaults(self, tmp_path):
        assert load_config(str(tmp_path / "nope.json")) == DEFAULT_CONFIG

    def test_overrides_only_present_keys(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({'window_width': 640}), encoding='utf-8')
        cfg = load_config(str(path))
        assert cfg['window_width'] == 640
        assert cfg['window_height'] == DEFAULT_CONFIG['window_height']

    def test_commented_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{\n  // bigger text\n  "font_size": 16,\n}\n', encoding='utf-8')
        assert load_config(str(path))['font_size'] == 16

    def test_invalid_value_falls_back_to_defaults(self, tmp_path, caplog):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({'window_width': 5, 'line_wrap': False}), encoding='utf-8')
        cfg = load_config(str(path), debug=True)
        assert cfg == DEFAULT_CONFIG
        assert "window_width" in caplog.text

    def test_broken_json_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"debug": ', encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_non_object_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('[1, 2]', encoding='utf-8')
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({'mappings': {'a': 'b'}, 'debug': True}), encoding='utf-8')
        cfg = load_config(str(path))
        assert 'mappings' not in cfg
        assert cfg['debug'] is True

    def test_user_config_location(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        user_cfg = tmp_path / ".config" / "azswitch" / "config.json"
        user_cfg.parent.mkdir(parents=True)
        user_cfg.write_text(json.dumps({'caps_lock_at_start': 'off'}), encoding='utf-8')
        assert load_config()['caps_lock_at_start'] == 'off'

    def test_returned_dict_is_a_copy(self, tmp_path):
        cfg = load_config(str(tmp_path / "nope.json"))
        cfg['debug'] = True
        assert DEFAULT_CONFIG['debug'] is False
