"""
Configuration

Locale settings and matching budgets, validated with pydantic and loadable
from a YAML file.

Example ``locale.yaml``::

    locale:
      thousand_separators: [".", "'", " "]
      decimal_separators: [",", "."]
      timezone: Europe/Berlin
    matching:
      timeout: 2.0
      max_text_length: 200000

Every key is optional; missing keys fall back to the defaults below.
"""

from pathlib import Path
from typing import Any, Optional, Tuple

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import ConfigError

DEFAULT_THOUSAND_SEPARATORS: Tuple[str, ...] = ('.', "'", 'k', '"', '`', '´', ' ')
DEFAULT_DECIMAL_SEPARATORS: Tuple[str, ...] = ('.', ',', '´', '`')
DEFAULT_TIMEZONE = 'Europe/Berlin'
DEFAULT_MAX_TEXT_LENGTH = 500_000


def _single_characters(value: Tuple[str, ...]) -> Tuple[str, ...]:
    for sep in value:
        if len(sep) != 1:
            raise ValueError(f'Separator must be a single character, got {sep!r}')
    return tuple(value)


class LocaleConfig(BaseModel):
    """
    Locale settings shared by the fragment library and the normalizer.

    An empty separator set is allowed; the affected fragments then never
    match instead of failing.
    """
    model_config = ConfigDict(frozen=True)

    thousand_separators: Tuple[str, ...] = DEFAULT_THOUSAND_SEPARATORS
    decimal_separators: Tuple[str, ...] = DEFAULT_DECIMAL_SEPARATORS
    timezone: str = DEFAULT_TIMEZONE

    @field_validator('thousand_separators', 'decimal_separators')
    @classmethod
    def validate_separators(cls, v):
        return _single_characters(v)

    @field_validator('timezone')
    @classmethod
    def validate_timezone(cls, v):
        v = str(v).strip()
        if not v:
            raise ValueError('Timezone must not be empty')
        return v


class MatchBudget(BaseModel):
    """
    Limits applied to a single pattern match.

    timeout: wall-clock seconds; None runs the match inline without a limit
    max_text_length: texts longer than this are rejected before matching
    """
    model_config = ConfigDict(frozen=True)

    timeout: Optional[float] = None
    max_text_length: Optional[int] = DEFAULT_MAX_TEXT_LENGTH

    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError('Timeout must be positive')
        return v

    @field_validator('max_text_length')
    @classmethod
    def validate_max_text_length(cls, v):
        if v is not None and v < 1:
            raise ValueError('max_text_length must be at least 1')
        return v


class ConfigLoader:
    """
    Loads locale and matching settings from YAML.

    Usage:
        loader = ConfigLoader(Path('config/locale.yaml'))
        parser = ShipInfoParser(locale=loader.locale, budget=loader.budget)
        loader.get('locale.thousand_separators')
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path
        self.config: dict = {}
        self.locale = LocaleConfig()
        self.budget = MatchBudget()

        if config_path:
            self.load(config_path)

    def load(self, config_path: Path) -> dict:
        """
        Load configuration from a YAML file.

        Raises:
            ConfigError: If the file cannot be read or is not a mapping
            pydantic.ValidationError: If a setting has an invalid value
        """
        logger.info(f"Loading configuration from: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config {config_path} must contain a mapping")

        self.config = data
        self.config_path = Path(config_path)
        self.locale = LocaleConfig(**(data.get('locale') or {}))
        self.budget = MatchBudget(**(data.get('matching') or {}))

        logger.debug(
            f"Locale: {len(self.locale.thousand_separators)} thousand separators, "
            f"timezone {self.locale.timezone}"
        )
        return self.config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Look up a setting by dotted key, e.g. ``locale.timezone``.

        Keys missing from the file resolve against the validated models so
        defaults are visible too.
        """
        node: Any = {
            'locale': self.locale.model_dump(),
            'matching': self.budget.model_dump(),
        }
        node.update({k: v for k, v in self.config.items() if k not in node})

        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node
