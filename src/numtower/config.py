"""Runtime settings for the numeric tower.

Settings are read-only once created. A process-wide instance is loaded lazily,
from the YAML file named by ``NUMTOWER_CONFIG`` when that variable is set.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "NUMTOWER_CONFIG"


@dataclass(frozen=True)
class TaylorTerms:
    """Number of series terms used by the matrix transcendental functions."""

    exp: int = 35
    log: int = 8
    trig: int = 18
    hyperbolic: int = 18
    sinc: int = 18

    def __post_init__(self) -> None:
        for term_field in fields(self):
            value = getattr(self, term_field.name)
            if not isinstance(value, int) or value < 1:
                error_message = f"taylor_terms.{term_field.name} must be a positive integer; got {value!r}."
                raise ValueError(error_message)


@dataclass(frozen=True)
class Settings:
    """Numeric settings shared by all algebra kernels."""

    high_precision_digits: int = 35
    taylor_terms: TaylorTerms = field(default_factory=TaylorTerms)
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not isinstance(self.high_precision_digits, int) or self.high_precision_digits < 1:
            error_message = f"high_precision_digits must be a positive integer; got {self.high_precision_digits!r}."
            raise ValueError(error_message)

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> Settings:
        """Build settings from a parsed YAML mapping, rejecting unknown keys."""
        known = {settings_field.name for settings_field in fields(cls)}
        unknown = sorted(set(config) - known)
        if unknown:
            error_message = f"Unknown settings keys: {', '.join(unknown)}"
            raise ValueError(error_message)

        values = dict(config)
        if "taylor_terms" in values:
            terms = values["taylor_terms"] or {}
            term_names = {term_field.name for term_field in fields(TaylorTerms)}
            unknown_terms = sorted(set(terms) - term_names)
            if unknown_terms:
                error_message = f"Unknown taylor_terms keys: {', '.join(unknown_terms)}"
                raise ValueError(error_message)
            values["taylor_terms"] = TaylorTerms(**terms)
        return cls(**values)


def load_settings(config_path: Path) -> Settings:
    """Load settings from a YAML file.

    Args:
        config_path (Path): Path to a YAML mapping of settings.

    Returns:
        Settings: The parsed settings.
    """
    with Path(config_path).open(mode="r") as file:
        config = yaml.safe_load(file) or {}
    if not isinstance(config, dict):
        error_message = f"Settings file must contain a mapping: {config_path}"
        raise ValueError(error_message)
    logger.info("Loaded numeric settings from %s", config_path)
    return Settings.from_dict(config)


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        _settings = load_settings(Path(config_path)) if config_path else Settings()
    return _settings


def configure(settings: Settings | None) -> None:
    """Replace the process-wide settings; ``None`` resets to lazy loading."""
    global _settings
    _settings = settings
