"""Element mapping — SVG tag → component name, plus required-import computation."""

from __future__ import annotations

from dataclasses import replace

from svgrn.engine.context import ConversionContext, TransformedElement
from svgrn.engine.registry import Phase, stage
from svgrn.models.converter_config import OutputFormat

# SVG tag → react-native-svg component
SVG_ELEMENT_MAP: dict[str, str] = {
    "svg": "Svg",
    "g": "G",
    "path": "Path",
    "circle": "Circle",
    "rect": "Rect",
    "ellipse": "Ellipse",
    "line": "Line",
    "polygon": "Polygon",
    "polyline": "Polyline",
    "text": "Text",
    "tspan": "TSpan",
    "defs": "Defs",
    "linearGradient": "LinearGradient",
    "radialGradient": "RadialGradient",
    "stop": "Stop",
    "clipPath": "ClipPath",
    "mask": "Mask",
    "image": "Image",
    "use": "Use",
    "symbol": "Symbol",
    "pattern": "Pattern",
    "marker": "Marker",
}

# Lookups go through the lowercase tag
_ELEMENT_MAP_LOWER = {k.lower(): v for k, v in SVG_ELEMENT_MAP.items()}

ROOT_COMPONENT = "Svg"
GROUP_COMPONENT = "G"


def get_element_name(original: str, fmt: OutputFormat) -> str:
    """Component name for a tag; unknown tags pass through untouched on native."""
    lower = original.lower()
    if fmt.is_native:
        return _ELEMENT_MAP_LOWER.get(lower, original)
    return lower[:1].upper() + lower[1:]


def is_element_supported(tag: str, fmt: OutputFormat) -> bool:
    if not fmt.is_native:
        return True
    return tag.lower() in _ELEMENT_MAP_LOWER


def get_unsupported_elements(used_elements: set[str], fmt: OutputFormat) -> list[str]:
    """Tags with no native component; they are emitted as-is and reported."""
    return sorted(tag for tag in used_elements if not is_element_supported(tag, fmt))


def get_required_imports(used_elements: set[str], fmt: OutputFormat) -> set[str]:
    """Component names the generated file must import.

    Always contains the root component. Web output imports nothing from an
    SVG runtime, so the set is empty there.
    """
    if not fmt.is_native:
        return set()

    imports = {ROOT_COMPONENT}
    for tag in used_elements:
        mapped = _ELEMENT_MAP_LOWER.get(tag.lower())
        if mapped and mapped != ROOT_COMPONENT:
            imports.add(mapped)
    return imports


def map_element_tree(element: TransformedElement, fmt: OutputFormat) -> TransformedElement:
    """Rename every node of the tree for the given output format."""
    return replace(
        element,
        name=get_element_name(element.name, fmt),
        attributes=dict(element.attributes),
        children=tuple(map_element_tree(child, fmt) for child in element.children),
    )


@stage(id="S04", phase=Phase.MAPPING, description="Map SVG tags to component names")
def element_mapping_stage(ctx: ConversionContext) -> None:
    fmt = ctx.config.output_format
    ctx.tree = map_element_tree(ctx.tree, fmt)
    ctx.used_imports = get_required_imports(ctx.parse.elements, fmt)
