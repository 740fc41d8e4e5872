"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgrn.models.converter_config import ConverterConfig


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    config: ConverterConfig = Field(
        default_factory=ConverterConfig,
        description="Conversion options; defaults apply for anything omitted",
    )


class ValidateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class SuggestNameRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
