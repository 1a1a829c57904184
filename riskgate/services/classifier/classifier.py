"""Layered heuristic risk classifier."""

import logging
import time
from bisect import bisect_left
from collections.abc import Iterable

from riskgate.config.constants import TriggeredSignal
from riskgate.config.settings import Settings
from riskgate.infrastructure.logging.logger import StructuredLogger
from riskgate.services.classifier.errors import InputTooLarge
from riskgate.services.classifier.loader import apply_settings, resolve_config
from riskgate.services.classifier.models import ClassificationResult, ClassifierConfig
from riskgate.services.classifier.presets import get_preset
from riskgate.utils.text_processing import find_occurrences, first_contained

logger = logging.getLogger(__name__)


def classify(text: str, config: ClassifierConfig) -> ClassificationResult:
    """
    Classify a piece of text against a classifier configuration.

    Layers run in a fixed order and the first rejection wins:
    1. Word indicators
    2. Phrase indicators
    3. Uncertainty budget (all markers summed)
    4. Contextual certainty/hedging pattern

    Args:
        text: Text to classify (any length, may be empty)
        config: Validated classifier configuration

    Returns:
        ClassificationResult with the verdict and the triggering signal

    Raises:
        InputTooLarge: If config.max_input_size is set and exceeded
    """
    if not config.active:
        return ClassificationResult.accept()

    if config.max_input_size is not None and len(text) > config.max_input_size:
        raise InputTooLarge(len(text), config.max_input_size)

    lowered = text.lower()

    # 1. Word indicators
    token = first_contained(lowered, config.word_indicators)
    if token is not None:
        return ClassificationResult.reject(TriggeredSignal.WORD_INDICATOR, token)

    # 2. Phrase indicators
    token = first_contained(lowered, config.phrase_indicators)
    if token is not None:
        return ClassificationResult.reject(TriggeredSignal.PHRASE_INDICATOR, token)

    # 3. Uncertainty budget
    matched_markers: list[str] = []
    crossing_marker: str | None = None
    for marker in config.uncertainty_markers:
        if marker in lowered:
            matched_markers.append(marker)
            if crossing_marker is None and len(matched_markers) * config.marker_weight > config.threshold:
                crossing_marker = marker
    score = len(matched_markers) * config.marker_weight
    markers = tuple(matched_markers)

    if crossing_marker is not None:
        return ClassificationResult.reject(
            TriggeredSignal.UNCERTAINTY_BUDGET,
            crossing_marker,
            uncertainty_score=score,
            matched_markers=markers,
        )

    # 4. Contextual pattern
    span = find_contextual_pattern(
        lowered,
        config.certainty_claims,
        config.uncertainty_followups,
        config.context_window,
    )
    if span is not None:
        return ClassificationResult.reject(
            TriggeredSignal.CONTEXTUAL_PATTERN,
            span,
            uncertainty_score=score,
            matched_markers=markers,
        )

    return ClassificationResult.accept(uncertainty_score=score, matched_markers=markers)


def find_contextual_pattern(
    text: str,
    claims: Iterable[str],
    followups: Iterable[str],
    window: int,
) -> str | None:
    """
    Find a certainty claim followed closely by a hedging token.

    Distance is measured start to start and must be strictly positive and
    strictly below window. Every occurrence of every token is considered,
    and for each followup only the nearest preceding claim is checked.

    Returns:
        The text span from the claim through the followup, or None
    """
    claim_hits = sorted(
        (pos, claim) for claim in claims for pos in find_occurrences(text, claim)
    )
    if not claim_hits:
        return None
    followup_hits = sorted(
        (pos, followup) for followup in followups for pos in find_occurrences(text, followup)
    )

    claim_positions = [pos for pos, _ in claim_hits]
    for followup_pos, followup in followup_hits:
        index = bisect_left(claim_positions, followup_pos)
        if index == 0:
            continue
        claim_pos, _ = claim_hits[index - 1]
        if followup_pos - claim_pos < window:
            return text[claim_pos : followup_pos + len(followup)]
    return None


def classify_batch(texts: Iterable[str], config: ClassifierConfig) -> list[ClassificationResult]:
    """Classify texts independently, preserving input order."""
    return [classify(text, config) for text in texts]


def _loggable_token(result: ClassificationResult, config: ClassifierConfig) -> str | None:
    """Return the configured token(s) behind a rejection, never input text."""
    if result.triggered_signal != TriggeredSignal.CONTEXTUAL_PATTERN or result.matched_token is None:
        return result.matched_token
    span = result.matched_token
    claim = next((c for c in config.certainty_claims if span.startswith(c)), None)
    followup = next((f for f in config.uncertainty_followups if span.endswith(f)), None)
    return f"{claim} ... {followup}"


class RiskClassifier:
    """Classifies text with the configuration resolved from settings."""

    def __init__(self, settings: Settings, config: ClassifierConfig | None = None):
        """Initialize risk classifier."""
        self.settings = settings
        self.config = config if config is not None else resolve_config(settings)
        self._structured = StructuredLogger(__name__)

    def config_for(self, preset: str | None = None) -> ClassifierConfig:
        """Return the default config, or a named preset with host overrides applied."""
        if preset is None:
            return self.config
        return apply_settings(get_preset(preset), self.settings)

    def classify(self, text: str, preset: str | None = None) -> ClassificationResult:
        """
        Classify a single text.

        Args:
            text: Text to classify
            preset: Optional preset name overriding the default config

        Returns:
            ClassificationResult
        """
        config = self.config_for(preset)
        if not config.active:
            logger.debug("Classifier inactive, accepting %d characters", len(text))

        start = time.time()
        result = classify(text, config)
        elapsed_ms = (time.time() - start) * 1000

        if not result.accepted:
            self._structured.log_step(
                "classify",
                {
                    "signal": result.triggered_signal.value,
                    "matched_token": _loggable_token(result, config),
                    "text_length": len(text),
                },
                duration_ms=elapsed_ms,
            )
        return result

    def classify_batch(self, texts: list[str], preset: str | None = None) -> list[ClassificationResult]:
        """Classify a batch of texts with one config."""
        config = self.config_for(preset)
        results = classify_batch(texts, config)
        rejected = sum(1 for r in results if not r.accepted)
        logger.info("Classified batch of %d texts, %d rejected", len(results), rejected)
        return results
