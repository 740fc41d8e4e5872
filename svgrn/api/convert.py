"""POST /api/convert — SVG → component source."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from svgrn.config import Settings
from svgrn.dependencies import get_settings
from svgrn.engine.convert import convert_svg
from svgrn.models.requests import ConvertRequest, SuggestNameRequest, ValidateRequest
from svgrn.models.responses import ConversionResult, SuggestNameResponse, ValidationResult
from svgrn.svg.parser import suggest_component_name
from svgrn.svg.validator import validate_svg
from svgrn.utils.helpers import format_file_size

logger = logging.getLogger(__name__)

router = APIRouter()


def _size_warning(svg: str, settings: Settings) -> str | None:
    size = len(svg.encode("utf-8"))
    if size <= settings.max_svg_bytes:
        return None
    return (
        f"SVG is {format_file_size(size)}, above the recommended "
        f"{format_file_size(settings.max_svg_bytes)}; conversion may be slow."
    )


@router.post("/convert", response_model=ConversionResult)
async def convert(req: ConvertRequest, settings: Settings = Depends(get_settings)) -> ConversionResult:
    result = await convert_svg(req.svg, req.config)
    warning = _size_warning(req.svg, settings)
    if warning:
        logger.info(warning)
        result.warnings.append(warning)
    return result


@router.post("/validate", response_model=ValidationResult)
async def validate(req: ValidateRequest) -> ValidationResult:
    return validate_svg(req.svg)


@router.post("/suggest-name", response_model=SuggestNameResponse)
async def suggest_name(req: SuggestNameRequest) -> SuggestNameResponse:
    return SuggestNameResponse(name=suggest_component_name(req.svg))
