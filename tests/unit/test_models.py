"""Tests for classifier config and result models."""

import pytest
from pydantic import ValidationError

from riskgate.config.constants import (
    DEFAULT_CERTAINTY_CLAIMS,
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_MARKER_WEIGHT,
    DEFAULT_THRESHOLD,
    TriggeredSignal,
)
from riskgate.services.classifier.models import ClassificationResult, ClassifierConfig, normalize_tokens


class TestClassifierConfig:
    def test_defaults(self):
        config = ClassifierConfig()
        assert config.active is True
        assert config.threshold == DEFAULT_THRESHOLD
        assert config.marker_weight == DEFAULT_MARKER_WEIGHT
        assert config.context_window == DEFAULT_CONTEXT_WINDOW
        assert config.certainty_claims == DEFAULT_CERTAINTY_CLAIMS
        assert config.word_indicators == ()
        assert config.max_input_size is None

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(threshold=-0.1)

    def test_zero_threshold_allowed(self):
        assert ClassifierConfig(threshold=0).threshold == 0

    def test_negative_marker_weight_rejected(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(marker_weight=-1)

    def test_negative_context_window_rejected(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(context_window=-1)

    def test_non_positive_max_input_size_rejected(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(max_input_size=0)

    def test_none_indicator_set_rejected(self):
        with pytest.raises(ValidationError, match="got None"):
            ClassifierConfig(word_indicators=None)

    def test_bare_string_rejected(self):
        with pytest.raises(ValidationError, match="not a single string"):
            ClassifierConfig(phrase_indicators="i think that")

    def test_empty_token_rejected(self):
        with pytest.raises(ValidationError, match="empty tokens"):
            ClassifierConfig(uncertainty_markers=["maybe", "  "])

    def test_mapping_rejected(self):
        with pytest.raises(ValidationError, match="not a mapping"):
            ClassifierConfig(word_indicators={"rumor": 1})

    def test_non_string_token_rejected(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(word_indicators=["rumor", 3])

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            ClassifierConfig(treshold=0.2)

    def test_tokens_lowercased_and_deduplicated(self):
        config = ClassifierConfig(word_indicators=["Rumor", "rumor", "ALLEGEDLY"])
        assert config.word_indicators == ("rumor", "allegedly")

    def test_set_input_is_sorted(self):
        config = ClassifierConfig(word_indicators={"supposedly", "allegedly", "rumor"})
        assert config.word_indicators == ("allegedly", "rumor", "supposedly")

    def test_config_is_frozen(self):
        config = ClassifierConfig()
        with pytest.raises(ValidationError):
            config.threshold = 0.5

    def test_overlapping_sets_allowed(self):
        config = ClassifierConfig(word_indicators=["maybe"], uncertainty_markers=["maybe"])
        assert config.word_indicators == config.uncertainty_markers


def test_normalize_tokens_keeps_order():
    assert normalize_tokens(["b", "A", "a"], "tokens") == ("b", "a")


def test_normalize_tokens_rejects_non_iterable():
    with pytest.raises(ValueError, match="collection of strings"):
        normalize_tokens(42, "tokens")


class TestClassificationResult:
    def test_accept(self):
        result = ClassificationResult.accept()
        assert result.accepted
        assert result.triggered_signal == TriggeredSignal.NONE
        assert result.matched_token is None

    def test_reject(self):
        result = ClassificationResult.reject(TriggeredSignal.WORD_INDICATOR, "rumor")
        assert not result.accepted
        assert result.matched_token == "rumor"

    def test_serializes_signal_values(self):
        result = ClassificationResult.reject(TriggeredSignal.CONTEXTUAL_PATTERN, "clearly maybe")
        data = result.model_dump(mode="json")
        assert data["triggered_signal"] == "contextualPattern"
        assert data["matched_markers"] == []
