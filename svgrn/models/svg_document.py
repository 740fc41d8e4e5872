"""Parsed SVG document metadata."""

from __future__ import annotations

from pydantic import BaseModel


class SVGMetadata(BaseModel):
    """Sizing and descriptive info pulled from the root ``<svg>``."""

    width: float | None = None
    height: float | None = None
    view_box: str | None = None
    title: str | None = None
    description: str | None = None
