"""Conversion results and API response models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

from svgrn.models.svg_document import SVGMetadata


class ErrorKind(str, enum.Enum):
    EMPTY_INPUT = "empty_input"
    NO_ROOT_ELEMENT = "no_root_element"
    MALFORMED_MARKUP = "malformed_markup"
    INTERNAL_ERROR = "internal_error"


class ValidationResult(BaseModel):
    valid: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    warnings: list[str] = Field(default_factory=list)


class ConversionStats(BaseModel):
    element_count: int = 0
    original_byte_size: int = 0
    optimized_byte_size: int = 0
    saved_bytes: int = 0
    saved_percent: float = 0.0


class ConversionResult(BaseModel):
    """Outcome of a single ``convert_svg`` call.

    ``success`` discriminates the two shapes: on failure only ``error``,
    ``error_kind`` and ``warnings`` are meaningful and ``code`` is empty.
    """

    success: bool
    code: str = ""
    imports: str | None = None
    type_definitions: str | None = None
    usage_example: str | None = None
    filename: str | None = None
    metadata: SVGMetadata | None = None
    stats: ConversionStats | None = None
    unsupported_elements: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None
    error_kind: ErrorKind | None = None

    @classmethod
    def failure(
        cls,
        message: str,
        kind: ErrorKind = ErrorKind.INTERNAL_ERROR,
        warnings: list[str] | None = None,
    ) -> ConversionResult:
        return cls(success=False, error=message, error_kind=kind, warnings=warnings or [])


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    stages_registered: int = 0


class SuggestNameResponse(BaseModel):
    name: str
