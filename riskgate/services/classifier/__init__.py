"""Layered heuristic text-risk classifier."""

from riskgate.services.classifier.classifier import RiskClassifier, classify, classify_batch
from riskgate.services.classifier.errors import ConfigurationError, InputTooLarge, UnknownPresetError
from riskgate.services.classifier.models import ClassificationResult, ClassifierConfig
from riskgate.services.classifier.presets import get_preset, list_presets, register_preset

__all__ = [
    "ClassificationResult",
    "ClassifierConfig",
    "ConfigurationError",
    "InputTooLarge",
    "RiskClassifier",
    "UnknownPresetError",
    "classify",
    "classify_batch",
    "get_preset",
    "list_presets",
    "register_preset",
]
