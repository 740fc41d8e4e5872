"""Dimension policy — rewrites sizing attributes on the root node."""

from __future__ import annotations

from dataclasses import replace

from svgrn.engine.context import ConversionContext, TransformedElement
from svgrn.engine.registry import Phase, stage
from svgrn.models.converter_config import ConverterConfig, DimensionMode

_ROOT_NAMES = {"Svg", "svg"}


def format_number(value: float) -> str:
    """48.0 → "48", 1.5 → "1.5"."""
    return str(int(value)) if float(value).is_integer() else str(value)


def apply_dimension_config(element: TransformedElement, config: ConverterConfig) -> TransformedElement:
    if element.name not in _ROOT_NAMES:
        return element

    dims = config.dimensions
    attributes = dict(element.attributes)

    if dims.mode == DimensionMode.REMOVE:
        attributes.pop("width", None)
        attributes.pop("height", None)
    elif dims.mode == DimensionMode.CUSTOM:
        if dims.custom_width is not None:
            attributes["width"] = format_number(dims.custom_width)
        if dims.custom_height is not None:
            attributes["height"] = format_number(dims.custom_height)

    if not dims.preserve_view_box:
        attributes.pop("viewBox", None)

    return replace(element, attributes=attributes)


@stage(
    id="S06",
    phase=Phase.TRANSFORM,
    dependencies=["S05"],
    description="Apply the configured dimension mode to the root",
)
def dimension_stage(ctx: ConversionContext) -> None:
    ctx.tree = apply_dimension_config(ctx.tree, ctx.config)
