"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svgrn.engine.pipeline import register_stages
from svgrn.engine.registry import get_registry
from svgrn.models.converter_config import ConverterConfig
from svgrn.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    register_stages()
    return HealthResponse(
        status="ok",
        version="0.1.0",
        stages_registered=get_registry().count,
    )


@router.get("/config/default", response_model=ConverterConfig)
async def default_config() -> ConverterConfig:
    return ConverterConfig()
