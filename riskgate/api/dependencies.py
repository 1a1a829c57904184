"""FastAPI dependencies."""

from functools import lru_cache

from riskgate.config.settings import Settings, get_settings
from riskgate.services.classifier.classifier import RiskClassifier
from riskgate.services.tracking.violations import ViolationTracker


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


@lru_cache
def get_classifier() -> RiskClassifier:
    """Get the shared classifier, resolved once from settings."""
    return RiskClassifier(get_settings_dependency())


@lru_cache
def get_violation_tracker() -> ViolationTracker:
    """Get the shared per-session violation tracker."""
    return ViolationTracker(max_sessions=get_settings_dependency().violation_tracker_max_sessions)
