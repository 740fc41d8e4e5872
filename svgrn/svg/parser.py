"""SVG parser — facade over xml.etree.

Converts raw SVG string → ParseResult holding the TransformedElement tree,
root metadata and a census of the features the validator warns about.
"""

from __future__ import annotations

import io
import logging
import re
import xml.etree.ElementTree as ET

from svgrn.engine.context import ParseResult, TransformedElement
from svgrn.models.responses import ErrorKind
from svgrn.models.svg_document import SVGMetadata

logger = logging.getLogger(__name__)

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")

# Namespaces ElementTree folds into "{uri}local"; restored as "prefix:local"
_KNOWN_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
}
_SVG_NS = "http://www.w3.org/2000/svg"

_GRADIENT_TAGS = {"lineargradient", "radialgradient"}


def _strip_ns(tag: str) -> str:
    return tag.split("}")[-1] if "}" in tag else tag


def _qualified_name(name: str, prefixes: dict[str, str]) -> str:
    """Turn ``{uri}local`` back into ``prefix:local``."""
    if not name.startswith("{"):
        return name
    uri, local = name[1:].split("}", 1)
    prefix = _KNOWN_PREFIXES.get(uri) or prefixes.get(uri)
    return f"{prefix}:{local}" if prefix else local


def _read_document(svg_text: str) -> tuple[ET.Element, dict[ET.Element, dict[str, str]], dict[str, str]]:
    """Parse markup, keeping the namespace declarations ElementTree would drop.

    Returns (document root, per-element xmlns attributes, uri → prefix map).
    """
    declarations: dict[ET.Element, dict[str, str]] = {}
    prefixes: dict[str, str] = {}
    pending: dict[str, str] = {}
    root: ET.Element | None = None

    for event, item in ET.iterparse(io.StringIO(svg_text), events=("start-ns", "start")):
        if event == "start-ns":
            prefix, uri = item
            pending["xmlns:" + prefix if prefix else "xmlns"] = uri
            if prefix:
                prefixes.setdefault(uri, prefix)
        else:
            if pending:
                declarations[item] = pending
                pending = {}
            if root is None:
                root = item
    if root is None:
        raise ET.ParseError("no element found")
    return root, declarations, prefixes


def parse_svg(svg_text: str) -> ParseResult:
    """Parse raw SVG string into a ParseResult.

    Never raises: syntax errors and a missing ``<svg>`` come back as
    ``valid=False`` with a message.
    """
    try:
        doc_root, declarations, prefixes = _read_document(svg_text)
    except ET.ParseError as e:
        return ParseResult(
            valid=False,
            error=f"Invalid SVG markup: {e}",
            error_kind=ErrorKind.MALFORMED_MARKUP,
        )

    svg_el = next((el for el in doc_root.iter() if _strip_ns(el.tag) == "svg"), None)
    if svg_el is None:
        return ParseResult(
            valid=False,
            error="No SVG element found",
            error_kind=ErrorKind.NO_ROOT_ELEMENT,
        )

    result = ParseResult(valid=True, elements={"svg"})
    for el in svg_el.iter():
        if not isinstance(el.tag, str):
            continue
        tag = _strip_ns(el.tag).lower()
        result.elements.add(tag)
        if tag in _GRADIENT_TAGS:
            result.has_gradients = True
        elif tag == "clippath":
            result.has_clip_paths = True
        if "transform" in el.attrib:
            result.has_transforms = True

    result.metadata = extract_metadata(svg_el)
    result.tree = _build_tree(svg_el, declarations, prefixes)

    logger.debug(
        "Parsed SVG: %d nodes, %d distinct tags",
        result.tree.element_count,
        len(result.elements),
    )
    return result


def _parse_dimension(raw: str | None) -> float | None:
    """Strip units ("24px" → 24.0); unparseable values are dropped, not zeroed."""
    if not raw:
        return None
    try:
        return float(_NON_NUMERIC_RE.sub("", raw))
    except ValueError:
        return None


def _to_float(raw: str) -> float | None:
    try:
        return float(raw)
    except ValueError:
        return None


def extract_metadata(svg_el: ET.Element) -> SVGMetadata:
    meta = SVGMetadata(
        width=_parse_dimension(svg_el.get("width")),
        height=_parse_dimension(svg_el.get("height")),
    )

    view_box = svg_el.get("viewBox")
    if view_box:
        meta.view_box = view_box
        parts = view_box.split()
        if len(parts) == 4:
            if meta.width is None:
                meta.width = _to_float(parts[2])
            if meta.height is None:
                meta.height = _to_float(parts[3])

    for el in svg_el.iter():
        if not isinstance(el.tag, str):
            continue
        tag = _strip_ns(el.tag)
        if tag == "title" and meta.title is None:
            meta.title = "".join(el.itertext()).strip() or None
        elif tag == "desc" and meta.description is None:
            meta.description = "".join(el.itertext()).strip() or None

    return meta


def _build_tree(
    el: ET.Element,
    declarations: dict[ET.Element, dict[str, str]],
    prefixes: dict[str, str],
) -> TransformedElement:
    """Copy one ElementTree node (and its subtree) verbatim into a TransformedElement."""
    attributes: dict[str, str] = dict(declarations.get(el, {}))
    for name, value in el.attrib.items():
        attributes[_qualified_name(name, prefixes)] = value

    # Text nodes are el.text and each child's tail; the last non-blank one wins.
    text = el.text.strip() if el.text else None
    children: list[TransformedElement] = []
    for child in el:
        if isinstance(child.tag, str):
            children.append(_build_tree(child, declarations, prefixes))
        tail = child.tail.strip() if child.tail else ""
        if tail:
            text = tail

    tag = el.tag
    if tag.startswith("{"):
        uri = tag[1:].split("}", 1)[0]
        tag = _strip_ns(tag) if uri == _SVG_NS else _qualified_name(tag, prefixes)

    return TransformedElement(
        name=tag,
        attributes=attributes,
        children=tuple(children),
        text=text or None,
    )


def suggest_component_name(svg_text: str) -> str:
    """PascalCase the ``<title>`` text, else fall back to ``SvgComponent``."""
    result = parse_svg(svg_text)
    if result.valid and result.metadata.title:
        name = to_pascal_case(result.metadata.title)
        if name and not name[0].isdigit():
            return name
    return "SvgComponent"


def to_pascal_case(text: str) -> str:
    words = re.sub(r"[^a-zA-Z0-9]+", " ", text).split()
    return "".join(w[:1].upper() + w[1:].lower() for w in words)


def clean_svg_string(svg_text: str) -> str:
    """Remove comments and collapse whitespace."""
    svg_text = re.sub(r"<!--.*?-->", "", svg_text, flags=re.DOTALL)
    return re.sub(r"\s+", " ", svg_text).strip()


def is_figma_svg(svg_text: str) -> bool:
    """Heuristic: exported by Figma or Sketch."""
    return (
        "figma" in svg_text
        or "Generator: Sketch" in svg_text
        or 'fill-rule="evenodd"' in svg_text
    )
