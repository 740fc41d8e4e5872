"""Tests for attribute renaming, recasting and filtering."""

from tests.conftest import GRADIENT_SVG, SMILEY_SVG, STYLED_SVG, TEXT_SVG

from svgrn.converter.attributes import (
    REMOVED_ATTRIBUTES,
    convert_style_to_object,
    kebab_to_camel_case,
    remove_units,
    transform_attribute_name,
    transform_element_attributes,
)
from svgrn.converter.elements import map_element_tree
from svgrn.engine.context import RawExpression, TransformedElement
from svgrn.models.converter_config import ConverterConfig, OutputFormat
from svgrn.svg.parser import parse_svg


def _transform(svg: str, config: ConverterConfig) -> TransformedElement:
    tree = map_element_tree(parse_svg(svg).tree, config.output_format)
    return transform_element_attributes(tree, config)


def test_kebab_to_camel_case():
    assert kebab_to_camel_case("stroke-dash-array") == "strokeDashArray"
    assert kebab_to_camel_case("plain") == "plain"


def test_attribute_names_native():
    native = OutputFormat.REACT_NATIVE
    assert transform_attribute_name("class", native) is None
    assert transform_attribute_name("xmlns:xlink", native) is None
    assert transform_attribute_name("stroke-linejoin", native) == "strokeLinejoin"
    assert transform_attribute_name("vector-effect", native) == "vectorEffect"
    assert transform_attribute_name("viewBox", native) == "viewBox"


def test_attribute_names_web_skip_table():
    assert transform_attribute_name("stroke-width", OutputFormat.REACT) == "strokeWidth"
    assert transform_attribute_name("version", OutputFormat.REACT) is None


def test_removed_attributes_never_survive(native_config, web_config):
    for config in (native_config, web_config):
        for svg in (GRADIENT_SVG, SMILEY_SVG):
            tree = _transform(svg, config)
            for node in tree.walk():
                assert not REMOVED_ATTRIBUTES & set(node.attributes)


def test_root_attributes_renamed(native_config):
    tree = _transform(SMILEY_SVG, native_config)
    assert list(tree.attributes) == [
        "width",
        "height",
        "viewBox",
        "fill",
        "stroke",
        "strokeWidth",
        "strokeLinecap",
        "strokeLinejoin",
    ]


def test_units_stripped_native(native_config):
    text = _transform(TEXT_SVG, native_config).children[0]
    assert text.attributes["fontSize"] == "12"
    assert text.attributes["fontFamily"] == "Arial"


def test_stroke_width_units(native_config):
    tree = _transform('<svg><path d="M0 0" stroke-width="2px"/></svg>', native_config)
    assert tree.children[0].attributes["strokeWidth"] == "2"


def test_units_kept_web(web_config):
    text = _transform(TEXT_SVG, web_config).children[0]
    assert text.attributes["fontSize"] == "12px"


def test_remove_units():
    assert remove_units("24px") == "24"
    assert remove_units("50%") == "50"
    assert remove_units("1.5") == "1.5"
    assert remove_units("1e3") == "1e3"


def test_data_attributes_removed_by_default(native_config):
    text = _transform(TEXT_SVG, native_config).children[0]
    assert "dataId" not in text.attributes
    assert text.attributes["ariaLabel"] == "greeting"


def test_aria_attributes_removed_when_configured():
    config = ConverterConfig.model_validate({
        "attributes": {"remove_data_attrs": False, "remove_aria_attrs": True},
    })
    text = _transform(TEXT_SVG, config).children[0]
    assert text.attributes["dataId"] == "t1"
    assert "ariaLabel" not in text.attributes


def test_style_becomes_object(native_config):
    rect = _transform(STYLED_SVG, native_config).children[0]
    style = rect.attributes["style"]
    assert isinstance(style, RawExpression)
    assert style.code == '{"fill":"red","strokeWidth":"2","background":"url(http://x/y.png)"}'


def test_style_left_as_string_on_web(web_config):
    rect = _transform(STYLED_SVG, web_config).children[0]
    assert isinstance(rect.attributes["style"], str)


def test_convert_style_ignores_empty_rules():
    assert convert_style_to_object("fill:red;;  ;opacity:") == '{"fill":"red"}'


def test_unrestricted_replacements_literal():
    config = ConverterConfig.model_validate({
        "attributes": {"replacements": [{"find": "#ff0000", "replace": "#00f"}, {"find": "1.", "replace": "X"}]},
    })
    tree = _transform(
        '<svg><circle fill="#ff0000" r="1.5" cx="105"/></svg>',
        config,
    )
    attrs = tree.children[0].attributes
    assert attrs["fill"] == "#00f"
    assert attrs["r"] == "X5"
    # "1." is matched literally, so "10" is not touched
    assert attrs["cx"] == "105"


def test_restricted_replacements_skipped_here():
    config = ConverterConfig.model_validate({
        "attributes": {"replacements": [{"find": "red", "replace": "blue", "elements": ["rect"]}]},
    })
    tree = _transform('<svg><rect fill="red"/></svg>', config)
    assert tree.children[0].attributes["fill"] == "red"


def test_transform_does_not_mutate_input(native_config):
    tree = map_element_tree(parse_svg(SMILEY_SVG).tree, native_config.output_format)
    snapshot = dict(tree.attributes)
    transform_element_attributes(tree, native_config)
    assert tree.attributes == snapshot
