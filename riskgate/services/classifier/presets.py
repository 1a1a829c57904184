"""Named classifier presets -- read-only configurations by name.

Built-in presets are registered on import. Hosts may register their own
under new names; re-registering a name replaces it.
"""

from __future__ import annotations

import logging

from riskgate.config.constants import DEFAULT_THRESHOLD, PresetName
from riskgate.services.classifier.errors import UnknownPresetError
from riskgate.services.classifier.models import ClassifierConfig

logger = logging.getLogger(__name__)

# =============================================================================
# Indicator lists
# =============================================================================

WORD_INDICATORS: tuple[str, ...] = (
    "unverified",
    "unconfirmed",
    "rumor",
    "allegedly",
    "supposedly",
    "potentially",
    "seemingly",
    "apparently",
)

PHRASE_INDICATORS: tuple[str, ...] = (
    "i believe that",
    "i think that",
    "might be the case",
    "i'm not sure but",
    "it's possible that",
    "from what i understand",
    "i've heard that",
    "some say that",
    "it's been suggested",
)

UNCERTAINTY_MARKERS: tuple[str, ...] = (
    "could be",
    "might be",
    "perhaps",
    "maybe",
    "possibly",
    "arguably",
    "in theory",
    "in my opinion",
    "to my knowledge",
)

# =============================================================================
# Registry
# =============================================================================

_REGISTRY: dict[str, ClassifierConfig] = {}


def register_preset(name: str, config: ClassifierConfig) -> None:
    """Register a config under a preset name."""
    if not name or not name.strip():
        raise ValueError("Preset name must not be empty")
    _REGISTRY[name] = config
    logger.debug("Registered classifier preset %s", name)


def get_preset(name: str) -> ClassifierConfig:
    """Get a preset by name. Raises UnknownPresetError if not registered."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownPresetError(name, list_presets()) from None


def list_presets() -> list[str]:
    """Return registered preset names, sorted."""
    return sorted(_REGISTRY)


STANDARD = ClassifierConfig(
    active=True,
    threshold=DEFAULT_THRESHOLD,
    word_indicators=WORD_INDICATORS,
    phrase_indicators=PHRASE_INDICATORS,
    uncertainty_markers=UNCERTAINTY_MARKERS,
)

MINIMAL = ClassifierConfig(
    active=True,
    threshold=DEFAULT_THRESHOLD,
    word_indicators=WORD_INDICATORS[:5],
    certainty_claims=(),
)

DISABLED = STANDARD.model_copy(update={"active": False})

register_preset(PresetName.STANDARD.value, STANDARD)
register_preset(PresetName.MINIMAL.value, MINIMAL)
register_preset(PresetName.DISABLED.value, DISABLED)
