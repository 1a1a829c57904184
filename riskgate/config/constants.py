"""
Constants, enums, and static values.
"""

from enum import Enum


class TriggeredSignal(str, Enum):
    """Which classification layer caused a rejection."""

    NONE = "none"  # Accepted
    WORD_INDICATOR = "wordIndicator"
    PHRASE_INDICATOR = "phraseIndicator"
    UNCERTAINTY_BUDGET = "uncertaintyBudget"
    CONTEXTUAL_PATTERN = "contextualPattern"


# =============================================================================
# Classifier defaults
# =============================================================================

DEFAULT_THRESHOLD: float = 0.1
DEFAULT_MARKER_WEIGHT: float = 0.15
DEFAULT_CONTEXT_WINDOW: int = 15

DEFAULT_CERTAINTY_CLAIMS: tuple[str, ...] = (
    "certainly",
    "definitely",
    "absolutely",
    "without doubt",
    "clearly",
)

DEFAULT_UNCERTAINTY_FOLLOWUPS: tuple[str, ...] = (
    "might",
    "maybe",
    "perhaps",
    "possibly",
    "could be",
    "may be",
)


# =============================================================================
# Presets
# =============================================================================


class PresetName(str, Enum):
    """Built-in classifier presets."""

    STANDARD = "standard"
    MINIMAL = "minimal"
    DISABLED = "disabled"


DEFAULT_PRESET = PresetName.STANDARD.value
