"""Icon mode — turns size and color into component props."""

from __future__ import annotations

from dataclasses import replace

from svgrn.converter.dimensions import format_number
from svgrn.engine.context import ConversionContext, PropFallback, TransformedElement
from svgrn.engine.registry import Phase, stage
from svgrn.models.converter_config import ConverterConfig

COLOR_PROP = "color"
_COLOR_ATTRIBUTES = ("fill", "stroke")


def apply_icon_mode(element: TransformedElement, config: ConverterConfig) -> TransformedElement:
    """Size the root from ``width``/``height`` props, optionally recolor from ``color``."""
    if not config.icon_active or element.name != "Svg":
        return element

    size = format_number(config.icon.default_size)
    attributes = dict(element.attributes)
    attributes["width"] = PropFallback("width", size)
    attributes["height"] = PropFallback("height", size)

    children = element.children
    if config.icon.replace_color_with_prop:
        children = tuple(replace_colors_with_prop(c, COLOR_PROP) for c in children)

    return replace(element, attributes=attributes, children=children)


def replace_colors_with_prop(element: TransformedElement, prop: str) -> TransformedElement:
    """Rewrite ``fill``/``stroke`` literals (except ``none``) into ``{prop || '<color>'}``."""
    attributes = dict(element.attributes)
    for name in _COLOR_ATTRIBUTES:
        value = attributes.get(name)
        if isinstance(value, str) and value and value != "none":
            attributes[name] = PropFallback(prop, value, quoted=True)

    return replace(
        element,
        attributes=attributes,
        children=tuple(replace_colors_with_prop(c, prop) for c in element.children),
    )


@stage(
    id="S07",
    phase=Phase.TRANSFORM,
    dependencies=["S06"],
    description="Parameterize icon size and color",
    when=lambda config: config.icon_active,
)
def icon_stage(ctx: ConversionContext) -> None:
    ctx.tree = apply_icon_mode(ctx.tree, ctx.config)
