"""Classifier configuration loading from dicts, JSON files, and settings."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from riskgate.config.settings import Settings
from riskgate.services.classifier.errors import ConfigurationError
from riskgate.services.classifier.models import ClassifierConfig
from riskgate.services.classifier.presets import get_preset

logger = logging.getLogger(__name__)


def load_config_dict(data: Any) -> ClassifierConfig:
    """
    Build a ClassifierConfig from a plain dict.

    An optional "preset" key names a base preset; the remaining keys
    override its fields.

    Raises:
        ConfigurationError: If data is not a dict or fails validation
        UnknownPresetError: If the base preset is not registered
    """
    if not isinstance(data, dict):
        raise ConfigurationError(f"Classifier config must be a JSON object, got {type(data).__name__}")

    fields = dict(data)
    preset = fields.pop("preset", None)
    if preset is not None:
        base = get_preset(preset).model_dump()
        base.update(fields)
        fields = base

    try:
        return ClassifierConfig(**fields)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid classifier config: {e}") from e


def load_config_file(path: str | Path) -> ClassifierConfig:
    """
    Load a ClassifierConfig from a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not valid JSON or fails validation
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{path}: malformed JSON ({e})") from e

    try:
        config = load_config_dict(data)
    except ConfigurationError as e:
        raise ConfigurationError(f"{path}: {e}") from e

    logger.info("Loaded classifier config from %s", path)
    return config


def apply_settings(config: ClassifierConfig, settings: Settings) -> ClassifierConfig:
    """Apply the host's master switch and size cap to a config."""
    overrides: dict[str, Any] = {}
    if not settings.shield_enabled:
        overrides["active"] = False
    if settings.max_input_size is not None:
        overrides["max_input_size"] = settings.max_input_size
    if not overrides:
        return config
    return config.model_copy(update=overrides)


def resolve_config(settings: Settings) -> ClassifierConfig:
    """Resolve the classifier config for the host: config file first, then preset."""
    if settings.config_file:
        config = load_config_file(settings.config_file)
    else:
        config = get_preset(settings.default_preset)
        logger.info("Using classifier preset %s", settings.default_preset)
    return apply_settings(config, settings)
