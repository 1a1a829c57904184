"""Session violation counter endpoints."""

import logging

from fastapi import APIRouter, Depends

from riskgate.api.dependencies import get_violation_tracker
from riskgate.api.models import SessionViolationsResponse
from riskgate.services.tracking.violations import ViolationTracker

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{session_id}/violations", response_model=SessionViolationsResponse)
async def get_session_violations(
    session_id: str,
    tracker: ViolationTracker = Depends(get_violation_tracker),  # noqa: B008
) -> SessionViolationsResponse:
    """Return rejection counters for a session (zeroed if unknown)."""
    return SessionViolationsResponse(**tracker.get(session_id).to_dict())


@router.delete("/{session_id}/violations")
async def reset_session_violations(
    session_id: str,
    tracker: ViolationTracker = Depends(get_violation_tracker),  # noqa: B008
) -> dict[str, str]:
    """Reset rejection counters for a session."""
    existed = tracker.reset(session_id)
    logger.info("Violation counters reset for session %s (existed=%s)", session_id, existed)
    return {"message": "Session counters reset", "status": "success" if existed else "not_found"}
