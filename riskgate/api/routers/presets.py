"""Preset listing endpoints."""

from fastapi import APIRouter, HTTPException

from riskgate.services.classifier.errors import UnknownPresetError
from riskgate.services.classifier.models import ClassifierConfig
from riskgate.services.classifier.presets import get_preset, list_presets

router = APIRouter()


@router.get("", response_model=list[str])
async def get_presets() -> list[str]:
    """List registered preset names."""
    return list_presets()


@router.get("/{name}", response_model=ClassifierConfig)
async def get_preset_config(name: str) -> ClassifierConfig:
    """Return the configuration behind a preset."""
    try:
        return get_preset(name)
    except UnknownPresetError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
