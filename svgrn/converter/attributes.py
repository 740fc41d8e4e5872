"""Attribute transformation — rename, recast and filter attributes on every node."""

from __future__ import annotations

import json
import re
from dataclasses import replace

from svgrn.engine.context import AttrValue, ConversionContext, RawExpression, TransformedElement
from svgrn.engine.registry import Phase, stage
from svgrn.models.converter_config import AttributeReplacement, ConverterConfig, OutputFormat

# Never make it into the generated component, whatever the format
REMOVED_ATTRIBUTES = frozenset({
    "class",
    "xmlns",
    "xmlns:xlink",
    "xml:space",
    "enable-background",
    "version",
})

# kebab-case SVG attribute → react-native-svg prop. "" means drop.
SVG_ATTRIBUTE_MAP: dict[str, str] = {
    "class": "",
    "fill-rule": "fillRule",
    "fill-opacity": "fillOpacity",
    "stroke-width": "strokeWidth",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-opacity": "strokeOpacity",
    "clip-path": "clipPath",
    "clip-rule": "clipRule",
    "font-family": "fontFamily",
    "font-size": "fontSize",
    "font-weight": "fontWeight",
    "font-style": "fontStyle",
    "text-anchor": "textAnchor",
    "text-decoration": "textDecoration",
    "letter-spacing": "letterSpacing",
    "word-spacing": "wordSpacing",
    "baseline-shift": "baselineShift",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "gradient-units": "gradientUnits",
    "gradient-transform": "gradientTransform",
    "spread-method": "spreadMethod",
    "marker-start": "markerStart",
    "marker-mid": "markerMid",
    "marker-end": "markerEnd",
    "paint-order": "paintOrder",
    "color-interpolation": "colorInterpolation",
    "color-rendering": "colorRendering",
}

NUMERIC_ATTRIBUTES = frozenset({
    "width",
    "height",
    "x",
    "y",
    "cx",
    "cy",
    "r",
    "rx",
    "ry",
    "x1",
    "y1",
    "x2",
    "y2",
    "strokeWidth",
    "stroke-width",
    "fontSize",
    "font-size",
})

_KEBAB_RE = re.compile(r"-([a-z])")
_UNITS_RE = re.compile(r"px|em|rem|pt|%")


def kebab_to_camel_case(name: str) -> str:
    return _KEBAB_RE.sub(lambda m: m.group(1).upper(), name)


def transform_attribute_name(name: str, fmt: OutputFormat) -> str | None:
    """New prop name, or None when the attribute must be dropped."""
    if name in REMOVED_ATTRIBUTES:
        return None

    if fmt.is_native and name in SVG_ATTRIBUTE_MAP:
        return SVG_ATTRIBUTE_MAP[name] or None

    if "-" in name:
        return kebab_to_camel_case(name)
    return name


def replace_literal(value: str, rule: AttributeReplacement) -> str:
    """Replace every occurrence of ``rule.find``, matched literally."""
    if not rule.find:
        return value
    return value.replace(rule.find, rule.replace)


def convert_style_to_object(style: str) -> str:
    """``"fill: red; stroke-width: 2"`` → ``'{"fill":"red","strokeWidth":"2"}'``."""
    styles: dict[str, str] = {}
    for rule in style.split(";"):
        prop, _, value = rule.partition(":")
        prop, value = prop.strip(), value.strip()
        if prop and value:
            styles[kebab_to_camel_case(prop)] = value
    return json.dumps(styles, separators=(",", ":"))


def _is_number(value: str) -> bool:
    try:
        float(value)
    except ValueError:
        return False
    return True


def remove_units(value: str) -> str:
    """``"24px"`` → ``"24"``; values that already parse as numbers are left alone."""
    if _is_number(value):
        return value
    return _UNITS_RE.sub("", value)


def transform_attribute_value(name: str, value: AttrValue, config: ConverterConfig) -> AttrValue:
    """Recast one attribute value. ``name`` is the original (pre-rename) name."""
    if not isinstance(value, str):
        return value

    for rule in config.attributes.replacements:
        if not rule.is_restricted:
            value = replace_literal(value, rule)

    if config.attributes.remove_data_attrs and name.startswith("data-"):
        return ""
    if config.attributes.remove_aria_attrs and name.startswith("aria-"):
        return ""

    if config.output_format.is_native:
        if name == "style":
            return RawExpression(convert_style_to_object(value))
        if name in NUMERIC_ATTRIBUTES:
            return remove_units(value)

    return value


def transform_element_attributes(
    element: TransformedElement,
    config: ConverterConfig,
) -> TransformedElement:
    """Apply name and value transforms to every node, pre-order."""
    attributes: dict[str, AttrValue] = {}
    for name, value in element.attributes.items():
        new_name = transform_attribute_name(name, config.output_format)
        if new_name is None:
            continue
        new_value = transform_attribute_value(name, value, config)
        if new_value == "":
            continue
        attributes[new_name] = new_value

    return replace(
        element,
        attributes=attributes,
        children=tuple(transform_element_attributes(c, config) for c in element.children),
    )


@stage(
    id="S05",
    phase=Phase.TRANSFORM,
    dependencies=["S04"],
    description="Rename, recast and filter attributes",
)
def attribute_stage(ctx: ConversionContext) -> None:
    ctx.tree = transform_element_attributes(ctx.tree, ctx.config)
