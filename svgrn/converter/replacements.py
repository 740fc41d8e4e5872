"""Custom find/replace rules scoped to element names."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from svgrn.converter.attributes import replace_literal
from svgrn.engine.context import AttrValue, ConversionContext, PropFallback, RawExpression, TransformedElement
from svgrn.engine.registry import Phase, stage
from svgrn.models.converter_config import AttributeReplacement


def _applies_to(rule: AttributeReplacement, element: TransformedElement) -> bool:
    return not rule.is_restricted or element.name.lower() in rule.elements


def _replace_value(value: AttrValue, rule: AttributeReplacement) -> AttrValue:
    """Literal replace on the text of any value kind; expressions come back as new instances."""
    if isinstance(value, PropFallback):
        return replace(value, default=replace_literal(value.default, rule))
    if isinstance(value, RawExpression):
        return RawExpression(replace_literal(value.code, rule))
    return replace_literal(value, rule)


def apply_attribute_replacements(
    element: TransformedElement,
    replacements: Sequence[AttributeReplacement],
) -> TransformedElement:
    """Run every rule over all attribute values of matching nodes.

    Children are always visited, whether or not their parent matched.
    Icon fallbacks have their default rewritten; style objects their source.
    """
    if not replacements:
        return element

    attributes = dict(element.attributes)
    for rule in replacements:
        if not _applies_to(rule, element):
            continue
        for name, value in attributes.items():
            attributes[name] = _replace_value(value, rule)

    return replace(
        element,
        attributes=attributes,
        children=tuple(apply_attribute_replacements(c, replacements) for c in element.children),
    )


@stage(
    id="S08",
    phase=Phase.TRANSFORM,
    dependencies=["S06", "S07"],
    description="Apply element-scoped find/replace rules",
    when=lambda config: bool(config.attributes.replacements),
)
def replacement_stage(ctx: ConversionContext) -> None:
    ctx.tree = apply_attribute_replacements(ctx.tree, ctx.config.attributes.replacements)
