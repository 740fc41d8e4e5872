"""ConversionContext — the state object flowing through all pipeline stages.

Tree nodes are immutable; a stage replaces ``ctx.tree`` with a new tree
instead of editing nodes in place, so before/after trees stay inspectable.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from svgrn.models.converter_config import ConverterConfig
from svgrn.models.responses import ErrorKind
from svgrn.models.svg_document import SVGMetadata


@dataclass(frozen=True)
class RawExpression:
    """Source code emitted verbatim inside ``{}`` by the code generator."""

    code: str


@dataclass(frozen=True)
class PropFallback:
    """``{prop || default}`` — caller-supplied prop, else a baked-in default."""

    prop: str
    default: str
    # Quote the default as a string literal (colors) or emit it bare (sizes)
    quoted: bool = False

    def render(self) -> str:
        default = _single_quoted(self.default) if self.quoted else self.default
        return f"{self.prop} || {default}"


def _single_quoted(text: str) -> str:
    """JS single-quoted string literal."""
    escaped = (
        text.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


# A plain str is a literal attribute value.
AttrValue = Union[str, RawExpression, PropFallback]


@dataclass(frozen=True)
class TransformedElement:
    """Single node of the component tree.

    ``attributes`` keeps insertion order, which drives the order of props in
    the generated markup.
    """

    name: str
    attributes: dict[str, AttrValue] = field(default_factory=dict)
    children: tuple[TransformedElement, ...] = ()
    text: str | None = None

    def walk(self):
        """Pre-order traversal."""
        yield self
        for child in self.children:
            yield from child.walk()

    @property
    def element_count(self) -> int:
        return sum(1 for _ in self.walk())


@dataclass
class ParseResult:
    valid: bool
    tree: TransformedElement | None = None
    metadata: SVGMetadata = field(default_factory=SVGMetadata)
    # Distinct lowercase tag names, including the root
    elements: set[str] = field(default_factory=set)
    has_gradients: bool = False
    has_clip_paths: bool = False
    has_transforms: bool = False
    error: str | None = None
    error_kind: ErrorKind | None = None


@dataclass
class ConversionContext:
    """Per-call state. Created fresh by ``convert_svg`` and discarded afterwards."""

    config: ConverterConfig
    parse: ParseResult
    tree: TransformedElement
    used_imports: set[str] = field(default_factory=set)
    # Generated source parts, filled by the code generation stage
    code: str = ""
    imports: str = ""
    type_definitions: str = ""
    usage_example: str = ""
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    # Snapshot of the tree after each stage, keyed by stage ID
    history: dict[str, TransformedElement] = field(default_factory=dict)
