"""
Tests for configuration loading and validation.

Run with: pytest tests/ -v
"""

import pytest
from pydantic import ValidationError

from iwparsers.config import ConfigLoader, LocaleConfig, MatchBudget
from iwparsers.exceptions import ConfigError


class TestLocaleConfig:
    """Tests for locale validation."""

    def test_defaults(self):
        locale = LocaleConfig()
        assert '.' in locale.thousand_separators
        assert ',' in locale.decimal_separators
        assert locale.timezone == 'Europe/Berlin'

    def test_multi_character_separator(self):
        with pytest.raises(ValidationError):
            LocaleConfig(thousand_separators=('..',))

    def test_empty_separators_allowed(self):
        assert LocaleConfig(decimal_separators=()).decimal_separators == ()

    def test_empty_timezone(self):
        with pytest.raises(ValidationError):
            LocaleConfig(timezone='  ')

    def test_frozen(self):
        locale = LocaleConfig()
        with pytest.raises(ValidationError):
            locale.timezone = 'UTC'


class TestMatchBudget:
    """Tests for budget validation."""

    def test_defaults(self):
        budget = MatchBudget()
        assert budget.timeout is None
        assert budget.max_text_length == 500_000

    def test_invalid_values(self):
        with pytest.raises(ValidationError):
            MatchBudget(timeout=0)
        with pytest.raises(ValidationError):
            MatchBudget(max_text_length=0)


class TestConfigLoader:
    """Tests for YAML loading."""

    def test_no_file(self):
        loader = ConfigLoader()
        assert loader.locale == LocaleConfig()
        assert loader.get('locale.timezone') == 'Europe/Berlin'

    def test_load(self, tmp_path):
        path = tmp_path / 'locale.yaml'
        path.write_text(
            'locale:\n'
            '  thousand_separators: [".", " "]\n'
            '  timezone: UTC\n'
            'matching:\n'
            '  timeout: 2.5\n',
            encoding='utf-8',
        )
        loader = ConfigLoader(path)
        assert loader.locale.thousand_separators == ('.', ' ')
        assert loader.locale.timezone == 'UTC'
        assert loader.budget.timeout == 2.5
        assert loader.get('matching.max_text_length') == 500_000
        assert loader.get('matching.unknown', 'fallback') == 'fallback'

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('', encoding='utf-8')
        loader = ConfigLoader(path)
        assert loader.budget == MatchBudget()

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text('- a\n- b\n', encoding='utf-8')
        with pytest.raises(ConfigError):
            ConfigLoader(path)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text('locale: [unclosed\n', encoding='utf-8')
        with pytest.raises(ConfigError):
            ConfigLoader(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            ConfigLoader(tmp_path / 'missing.yaml')

    def test_invalid_value(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('matching:\n  timeout: -1\n', encoding='utf-8')
        with pytest.raises(ValidationError):
            ConfigLoader(path)
