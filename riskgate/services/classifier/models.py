"""Classifier service models."""

from collections.abc import Iterable, Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from riskgate.config.constants import (
    DEFAULT_CERTAINTY_CLAIMS,
    DEFAULT_CONTEXT_WINDOW,
    DEFAULT_MARKER_WEIGHT,
    DEFAULT_THRESHOLD,
    DEFAULT_UNCERTAINTY_FOLLOWUPS,
    TriggeredSignal,
)

_TOKEN_FIELDS = (
    "word_indicators",
    "phrase_indicators",
    "uncertainty_markers",
    "certainty_claims",
    "uncertainty_followups",
)


def normalize_tokens(value: Any, field_name: str) -> tuple[str, ...]:
    """
    Normalize an indicator collection to unique lowercase tokens.

    Lists and tuples keep their declaration order; sets are sorted so the
    first-match order does not depend on hash seeding.

    Raises:
        ValueError: If the collection is None, a bare string, or holds an
            empty or non-string token.
    """
    if value is None:
        raise ValueError(f"{field_name} must be a collection of strings, got None")
    if isinstance(value, (str, bytes)):
        raise ValueError(f"{field_name} must be a collection of strings, not a single string")
    if isinstance(value, Mapping):
        raise ValueError(f"{field_name} must be a collection of strings, not a mapping")
    if isinstance(value, (set, frozenset)):
        value = sorted(value, key=lambda t: str(t))
    if not isinstance(value, Iterable):
        raise ValueError(f"{field_name} must be a collection of strings, got {type(value).__name__}")

    tokens: list[str] = []
    seen: set[str] = set()
    for token in value:
        if not isinstance(token, str):
            raise ValueError(f"{field_name} entries must be strings, got {type(token).__name__}")
        if not token.strip():
            raise ValueError(f"{field_name} must not contain empty tokens")
        lowered = token.lower()
        if lowered not in seen:
            seen.add(lowered)
            tokens.append(lowered)
    return tuple(tokens)


class ClassifierConfig(BaseModel):
    """Immutable configuration for the risk classifier."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    active: bool = True
    threshold: float = Field(DEFAULT_THRESHOLD, ge=0, description="Uncertainty budget")
    word_indicators: tuple[str, ...] = ()
    phrase_indicators: tuple[str, ...] = ()
    uncertainty_markers: tuple[str, ...] = ()
    marker_weight: float = Field(DEFAULT_MARKER_WEIGHT, ge=0, description="Score per marker")
    certainty_claims: tuple[str, ...] = DEFAULT_CERTAINTY_CLAIMS
    uncertainty_followups: tuple[str, ...] = DEFAULT_UNCERTAINTY_FOLLOWUPS
    context_window: int = Field(DEFAULT_CONTEXT_WINDOW, ge=0, description="Max claim-to-followup distance")
    max_input_size: Optional[int] = Field(None, gt=0, description="Optional input length cap")

    @field_validator(*_TOKEN_FIELDS, mode="before")
    @classmethod
    def validate_tokens(cls, v: Any, info: ValidationInfo) -> tuple[str, ...]:
        return normalize_tokens(v, info.field_name)


class ClassificationResult(BaseModel):
    """Result from one classification."""

    model_config = ConfigDict(frozen=True)

    accepted: bool
    triggered_signal: TriggeredSignal = TriggeredSignal.NONE
    matched_token: str | None = None
    uncertainty_score: float = 0.0
    matched_markers: tuple[str, ...] = ()

    @classmethod
    def accept(cls, uncertainty_score: float = 0.0, matched_markers: tuple[str, ...] = ()) -> "ClassificationResult":
        return cls(
            accepted=True,
            uncertainty_score=uncertainty_score,
            matched_markers=matched_markers,
        )

    @classmethod
    def reject(cls, signal: TriggeredSignal, token: str, **diagnostics: Any) -> "ClassificationResult":
        return cls(accepted=False, triggered_signal=signal, matched_token=token, **diagnostics)
