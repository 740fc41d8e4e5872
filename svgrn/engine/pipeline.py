"""Pipeline orchestrator — runs the stages a config needs, in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from svgrn.engine.context import ConversionContext
from svgrn.engine.registry import StageRegistry, get_registry

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the conversion stages."""

    def __init__(self, registry: StageRegistry | None = None) -> None:
        self.registry = registry or get_registry()

    def run(self, ctx: ConversionContext) -> ConversionContext:
        """Run every stage that applies to ``ctx.config``.

        A failing stage is recorded in ``ctx.errors`` and halts the run;
        the remaining stages would only see a half-transformed tree.
        """
        start = time.perf_counter()

        plan = self.registry.plan(ctx.config)
        logger.debug(
            "Pipeline: %d stages queued, skipped %s",
            len(plan.ordered),
            [s.id for s in plan.skipped] or "none",
        )

        for spec in plan.ordered:
            t0 = time.perf_counter()
            before = ctx.tree
            try:
                spec.fn(ctx)
            except Exception as e:
                ctx.errors[spec.id] = str(e)
                logger.warning("  %s FAILED (%s): %s", spec.id, spec.description or spec.fn.__name__, e)
                break
            ctx.completed_stages.add(spec.id)
            if ctx.tree is not before:
                ctx.history[spec.id] = ctx.tree
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s %s: %.2fms", spec.id, spec.description or spec.fn.__name__, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages in %.1fms",
            len(ctx.completed_stages),
            len(plan.ordered),
            total,
        )
        return ctx


def register_stages() -> None:
    """Import all converter modules so @stage decorators fire."""
    package = importlib.import_module("svgrn.converter")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"svgrn.converter.{module_name}")


def create_pipeline() -> Pipeline:
    """Factory function for creating a pipeline over the global registry."""
    register_stages()
    return Pipeline()
