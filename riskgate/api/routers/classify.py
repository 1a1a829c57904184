"""Classification endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from riskgate.api.dependencies import get_classifier, get_settings_dependency, get_violation_tracker
from riskgate.api.models import BatchClassifyRequest, BatchClassifyResponse, ClassifyRequest
from riskgate.config.settings import Settings
from riskgate.services.classifier.classifier import RiskClassifier
from riskgate.services.classifier.errors import InputTooLarge, UnknownPresetError
from riskgate.services.classifier.models import ClassificationResult
from riskgate.services.tracking.violations import ViolationTracker

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ClassificationResult)
async def classify_text(
    request: ClassifyRequest,
    classifier: RiskClassifier = Depends(get_classifier),  # noqa: B008
    tracker: ViolationTracker = Depends(get_violation_tracker),  # noqa: B008
) -> ClassificationResult:
    """
    Classify a single text.

    Rejections are returned as results, not errors. When session_id is
    given, rejections are counted against that session.
    """
    try:
        result = classifier.classify(request.text, preset=request.preset)
    except UnknownPresetError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InputTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e)) from e

    if request.session_id:
        tracker.record(request.session_id, result)
    return result


@router.post("/batch", response_model=BatchClassifyResponse)
async def classify_texts(
    request: BatchClassifyRequest,
    classifier: RiskClassifier = Depends(get_classifier),  # noqa: B008
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> BatchClassifyResponse:
    """Classify a batch of texts independently, preserving order."""
    if len(request.texts) > settings.max_batch_size:
        raise HTTPException(
            status_code=422,
            detail=f"Batch of {len(request.texts)} texts exceeds the limit of {settings.max_batch_size}",
        )

    try:
        results = classifier.classify_batch(request.texts, preset=request.preset)
    except UnknownPresetError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except InputTooLarge as e:
        raise HTTPException(status_code=413, detail=str(e)) from e

    rejected = sum(1 for r in results if not r.accepted)
    return BatchClassifyResponse(results=results, rejected=rejected)
