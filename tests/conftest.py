"""Pytest configuration and fixtures."""

import pytest

from riskgate.config.settings import Settings
from riskgate.services.classifier.models import ClassifierConfig
from riskgate.services.classifier.presets import get_preset


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings()


@pytest.fixture
def standard_config():
    """Provide the standard preset."""
    return get_preset("standard")


@pytest.fixture
def bare_config():
    """Active config with no indicators or markers (contextual layer only)."""
    return ClassifierConfig()
