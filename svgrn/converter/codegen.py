"""Code generator — renders the transformed tree into component source."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

from svgrn.converter.imports import (
    generate_default_props,
    generate_export,
    generate_imports,
    generate_prop_types,
    generate_type_definitions,
    generate_usage_example,
)
from svgrn.engine.context import (
    AttrValue,
    ConversionContext,
    PropFallback,
    RawExpression,
    TransformedElement,
)
from svgrn.engine.registry import Phase, stage
from svgrn.models.converter_config import ConverterConfig, SpreadPosition

REST_PARAM = "props"
SPREAD = f"{{...{REST_PARAM}}}"
INDENT = "  "

# Plain decimal / exponent numbers only; no nan, inf or digit separators
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

# Attribute lists longer than this go one-per-line unless they fit the print width
_INLINE_ATTRIBUTE_LIMIT = 2


@dataclass
class GeneratedCode:
    code: str
    imports: str
    type_definitions: str
    usage_example: str


def render_attribute(name: str, value: AttrValue) -> str:
    if isinstance(value, PropFallback):
        return f"{name}={{{value.render()}}}"
    if isinstance(value, RawExpression):
        return f"{name}={{{value.code}}}"

    # Literal strings. Users may still write expressions through find/replace rules.
    if value.startswith("{") and value.endswith("}"):
        return f"{name}={value}"
    if _NUMBER_RE.match(value):
        return f"{name}={{{value}}}"
    if "{" in value or f"{REST_PARAM}." in value:
        return f"{name}={{{value}}}"
    if '"' in value:
        return f"{name}={{{json.dumps(value, ensure_ascii=False)}}}"
    return f'{name}="{value}"'


def generate_attributes(attributes: dict[str, AttrValue]) -> list[str]:
    return [render_attribute(n, v) for n, v in attributes.items() if v != ""]


def generate_jsx(
    element: TransformedElement,
    config: ConverterConfig,
    indent_level: int = 0,
    is_root: bool = True,
) -> str:
    """Serialize a node and its subtree as JSX, indented by nesting depth."""
    indent = INDENT * indent_level
    attrs = generate_attributes(element.attributes)

    if is_root:
        spread = config.props.props_spread_position
        if spread == SpreadPosition.START:
            attrs.insert(0, SPREAD)
        elif spread == SpreadPosition.END:
            attrs.append(SPREAD)
        if config.component.wrap_in_forward_ref:
            attrs.append("ref={ref}")

    self_closing = not element.children and not element.text
    close = " />" if self_closing else ">"

    open_tag = f"{indent}<{element.name}"
    if attrs:
        inline = f"{open_tag} {' '.join(attrs)}{close}"
        # The print-width check approximates Prettier's JSX layout for when the formatter is unavailable
        if len(attrs) <= _INLINE_ATTRIBUTE_LIMIT or len(inline) <= config.code_style.print_width:
            open_tag = inline
        else:
            attr_lines = "".join(f"\n{indent}{INDENT}{a}" for a in attrs)
            open_tag = f"{open_tag}{attr_lines}\n{indent}{close.strip()}"
    else:
        open_tag += close

    if self_closing:
        return open_tag

    lines = [open_tag]
    if element.text:
        lines.append(f"{indent}{INDENT}{{{json.dumps(element.text, ensure_ascii=False)}}}")
    for child in element.children:
        lines.append(generate_jsx(child, config, indent_level + 1, is_root=False))
    lines.append(f"{indent}</{element.name}>")
    return "\n".join(lines)


def generate_props_parameter(name: str, config: ConverterConfig) -> str:
    defaults = generate_default_props(config)
    param = f"{{ {', '.join(defaults)}, ...{REST_PARAM} }}" if defaults else REST_PARAM
    if config.component.use_types:
        param += f": {name}Props"
    return param


def generate_component_function(name: str, element: TransformedElement, config: ConverterConfig) -> str:
    param = generate_props_parameter(name, config)
    forward_ref = config.component.wrap_in_forward_ref

    lines = [f"React.forwardRef(({param}, ref) => {{" if forward_ref else f"({param}) => {{"]
    lines.append(f"{INDENT}return (")
    lines.append(generate_jsx(element, config, indent_level=2))
    lines.append(f"{INDENT});")
    lines.append("})" if forward_ref else "}")
    return "\n".join(lines)


def generate_component(
    element: TransformedElement,
    used_imports: set[str],
    config: ConverterConfig,
) -> str:
    name = config.component.name
    parts = [generate_imports(used_imports, config)]

    types = generate_type_definitions(name, config)
    if types:
        parts.append(types)

    fn = generate_component_function(name, element, config)
    if config.component.wrap_in_memo:
        parts.append(f"const {name} = React.memo({fn});")
    else:
        parts.append(f"const {name} = {fn};")

    prop_types = generate_prop_types(name, config)
    if prop_types:
        parts.append(prop_types)

    parts.append(generate_export(name, config.component.export_style))
    return "\n\n".join(parts) + "\n"


def generate_complete_code(
    element: TransformedElement,
    used_imports: set[str],
    config: ConverterConfig,
) -> GeneratedCode:
    name = config.component.name
    return GeneratedCode(
        code=generate_component(element, used_imports, config),
        imports=generate_imports(used_imports, config),
        type_definitions=generate_type_definitions(name, config),
        usage_example=generate_usage_example(name, config),
    )


def generate_filename(name: str, config: ConverterConfig) -> str:
    return f"{name}.tsx" if config.component.use_types else f"{name}.jsx"


@stage(
    id="S10",
    phase=Phase.GENERATE,
    dependencies=["S09"],
    description="Render component source, imports, types and usage example",
)
def codegen_stage(ctx: ConversionContext) -> None:
    generated = generate_complete_code(ctx.tree, ctx.used_imports, ctx.config)
    ctx.code = generated.code
    ctx.imports = generated.imports
    ctx.type_definitions = generated.type_definitions
    ctx.usage_example = generated.usage_example
