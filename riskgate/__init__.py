"""RiskGate - layered heuristic text-risk classifier."""

from riskgate.config.constants import TriggeredSignal
from riskgate.services.classifier import (
    ClassificationResult,
    ClassifierConfig,
    InputTooLarge,
    classify,
    classify_batch,
    get_preset,
)

__version__ = "0.1.0"

__all__ = [
    "ClassificationResult",
    "ClassifierConfig",
    "InputTooLarge",
    "TriggeredSignal",
    "classify",
    "classify_batch",
    "get_preset",
]
