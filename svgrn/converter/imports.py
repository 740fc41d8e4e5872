"""Import lines, prop type declarations, default props and the usage snippet."""

from __future__ import annotations

from svgrn.converter.dimensions import format_number
from svgrn.converter.elements import ROOT_COMPONENT
from svgrn.models.converter_config import ConverterConfig, DimensionMode, ExportStyle, OutputFormat

NATIVE_SVG_MODULE = "react-native-svg"


def _sizes_are_props(config: ConverterConfig) -> bool:
    return config.dimensions.mode == DimensionMode.REMOVE or config.icon.enabled


def _color_is_prop(config: ConverterConfig) -> bool:
    return config.icon.enabled and config.icon.replace_color_with_prop


def uses_prop_types(config: ConverterConfig) -> bool:
    """PropTypes are only emitted for untyped web output."""
    return not config.component.use_types and config.output_format != OutputFormat.REACT_NATIVE


def generate_imports(used_imports: set[str], config: ConverterConfig) -> str:
    lines = []
    if config.component.use_types:
        lines.append("import * as React from 'react';")
    else:
        lines.append("import React from 'react';")

    if config.output_format.is_native:
        named = sorted(n for n in used_imports if n not in (ROOT_COMPONENT, "svg"))
        named_part = f", {{ {', '.join(named)} }}" if named else ""
        lines.append(f"import {ROOT_COMPONENT}{named_part} from '{NATIVE_SVG_MODULE}';")

    if uses_prop_types(config):
        lines.append("import PropTypes from 'prop-types';")

    return "\n".join(lines)


def generate_type_definitions(name: str, config: ConverterConfig) -> str:
    """TypeScript props interface; empty when types are off."""
    if not config.component.use_types:
        return ""

    lines = [f"interface {name}Props {{"]
    if _sizes_are_props(config):
        lines.append("  width?: number | string;")
        lines.append("  height?: number | string;")
    if _color_is_prop(config):
        lines.append("  color?: string;")
    if config.props.title_prop:
        lines.append("  title?: string;")
    if config.props.desc_prop:
        lines.append("  desc?: string;")
    if config.props.native_style_prop:
        lines.append("  style?: object;")
    if config.component.wrap_in_forward_ref:
        lines.append("  ref?: React.Ref<any>;")
    lines.append("}")
    return "\n".join(lines)


def generate_prop_types(name: str, config: ConverterConfig) -> str:
    if not uses_prop_types(config):
        return ""

    lines = [f"{name}.propTypes = {{"]
    if _sizes_are_props(config):
        lines.append("  width: PropTypes.oneOfType([PropTypes.number, PropTypes.string]),")
        lines.append("  height: PropTypes.oneOfType([PropTypes.number, PropTypes.string]),")
    if _color_is_prop(config):
        lines.append("  color: PropTypes.string,")
    if config.props.title_prop:
        lines.append("  title: PropTypes.string,")
    if config.props.desc_prop:
        lines.append("  desc: PropTypes.string,")
    lines.append("};")
    return "\n".join(lines)


def generate_default_props(config: ConverterConfig) -> list[str]:
    """Destructuring defaults, e.g. ``["width = 24", "height = 24"]``."""
    if not config.icon.enabled:
        return []

    size = format_number(config.icon.default_size)
    defaults = [f"width = {size}", f"height = {size}"]
    if config.icon.replace_color_with_prop:
        defaults.append("color = '#000'")
    return defaults


def generate_export(name: str, style: ExportStyle) -> str:
    if style == ExportStyle.DEFAULT:
        return f"export default {name};"
    if style == ExportStyle.NAMED:
        return f"export {{ {name} }};"
    return f"export {{ {name} }};\nexport default {name};"


def generate_usage_example(name: str, config: ConverterConfig) -> str:
    lines = ["// Usage example:"]

    style = config.component.export_style
    if style == ExportStyle.NAMED:
        lines.append(f"import {{ {name} }} from './{name}';")
    else:
        lines.append(f"import {name} from './{name}';")
        if style == ExportStyle.BOTH:
            lines.append("// or")
            lines.append(f"// import {{ {name} }} from './{name}';")

    example_props = []
    if _sizes_are_props(config):
        example_props += ["width={48}", "height={48}"]
    if _color_is_prop(config):
        example_props.append('color="#6366f1"')
    if config.props.title_prop:
        example_props.append(f'title="{name}"')
    if config.props.desc_prop:
        example_props.append('desc="Icon description"')

    props_part = " " + " ".join(example_props) if example_props else ""
    lines += [
        "",
        "function App() {",
        f"  return <{name}{props_part} />;",
        "}",
    ]
    return "\n".join(lines)
