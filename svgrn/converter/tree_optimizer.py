"""Tree optimizer — prunes empty groups and collapses pass-through wrappers."""

from __future__ import annotations

import logging
from dataclasses import replace

from svgrn.converter.elements import GROUP_COMPONENT
from svgrn.engine.context import ConversionContext, TransformedElement
from svgrn.engine.registry import Phase, stage

logger = logging.getLogger(__name__)


def _is_bare_group(element: TransformedElement) -> bool:
    return element.name == GROUP_COMPONENT and not element.attributes


def remove_empty_groups(element: TransformedElement) -> TransformedElement | None:
    """Drop attribute-less groups with no children, bottom-up.

    A group that only becomes empty once its own children are pruned is
    pruned as well. Returns None when ``element`` itself goes away.
    """
    children = tuple(
        child for child in (remove_empty_groups(c) for c in element.children)
        if child is not None
    )
    if _is_bare_group(element) and not children:
        return None
    return replace(element, children=children)


def flatten_groups(element: TransformedElement) -> TransformedElement:
    """Replace an attribute-less group holding exactly one child by that child."""
    if _is_bare_group(element) and len(element.children) == 1:
        return flatten_groups(element.children[0])
    return replace(element, children=tuple(flatten_groups(c) for c in element.children))


def optimize_transformed_tree(element: TransformedElement) -> TransformedElement:
    """Prune then flatten. The root is never deleted."""
    pruned = remove_empty_groups(element)
    if pruned is None:
        logger.debug("Optimizer would delete the root; keeping tree as-is")
        return element
    return flatten_groups(pruned)


@stage(
    id="S09",
    phase=Phase.OPTIMIZE,
    dependencies=["S06", "S07", "S08"],
    description="Remove empty groups and flatten single-child groups",
)
def tree_optimizer_stage(ctx: ConversionContext) -> None:
    before = ctx.tree.element_count
    ctx.tree = optimize_transformed_tree(ctx.tree)
    logger.debug("Tree optimizer: %d → %d nodes", before, ctx.tree.element_count)
