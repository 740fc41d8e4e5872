"""Stage registry — converter stages register themselves with ``@stage``.

Usage:
    @stage(
        id="S07",
        phase=Phase.TRANSFORM,
        dependencies=["S06"],
        when=lambda config: config.icon_active,
    )
    def icon_stage(ctx: ConversionContext) -> None:
        ctx.tree = apply_icon_mode(ctx.tree, ctx.config)

A stage declares its own ordering (phase + dependencies) and, optionally,
the configs it applies to. ``plan()`` turns the registered stages into the
run list for one conversion.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from svgrn.engine.context import ConversionContext
    from svgrn.models.converter_config import ConverterConfig

logger = logging.getLogger(__name__)

StageFn = Callable[["ConversionContext"], None]
StageGate = Callable[["ConverterConfig"], bool]


class Phase(enum.IntEnum):
    """Tree stages run before code generation; a stage never depends on a later phase."""

    MAPPING = 0
    TRANSFORM = 1
    OPTIMIZE = 2
    GENERATE = 3


@dataclass(frozen=True)
class StageSpec:
    id: str
    phase: Phase
    fn: StageFn
    dependencies: tuple[str, ...] = ()
    description: str = ""
    # None means the stage runs for every config
    when: StageGate | None = None

    def applies_to(self, config: ConverterConfig) -> bool:
        return self.when is None or self.when(config)

    @property
    def sort_key(self) -> tuple[int, str]:
        return (self.phase, self.id)


@dataclass
class StagePlan:
    """Stages to run for one config, in order, plus the ones gated out."""

    ordered: list[StageSpec]
    skipped: list[StageSpec]


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s (%s)", spec.id, spec.phase.name)

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: s.sort_key)

    def plan(self, config: ConverterConfig) -> StagePlan:
        active = [s for s in self.all() if s.applies_to(config)]
        skipped = [s for s in self.all() if not s.applies_to(config)]
        return StagePlan(ordered=self.resolve_order(active), skipped=skipped)

    def resolve_order(self, stages: Iterable[StageSpec] | None = None) -> list[StageSpec]:
        """Dependency order over ``stages`` (default: all), ties broken by phase then ID.

        Dependencies outside ``stages`` count as satisfied, so a gated-out
        stage never blocks the stages after it.
        """
        pool = {s.id: s for s in (self._stages.values() if stages is None else stages)}

        waiting: dict[str, set[str]] = {}
        for sid, spec in pool.items():
            for dep in spec.dependencies:
                if dep in self._stages and self._stages[dep].phase > spec.phase:
                    raise ValueError(
                        f"Stage {sid} ({spec.phase.name}) depends on {dep} "
                        f"from later phase {self._stages[dep].phase.name}"
                    )
            waiting[sid] = {dep for dep in spec.dependencies if dep in pool}

        ready = [(pool[sid].sort_key, sid) for sid, deps in waiting.items() if not deps]
        heapq.heapify(ready)
        ordered: list[StageSpec] = []

        while ready:
            _, sid = heapq.heappop(ready)
            ordered.append(pool[sid])
            for other_id, deps in waiting.items():
                if sid in deps:
                    deps.discard(sid)
                    if not deps:
                        heapq.heappush(ready, (pool[other_id].sort_key, other_id))

        if len(ordered) != len(pool):
            stuck = sorted(set(pool) - {s.id for s in ordered})
            raise ValueError(f"Circular dependency detected among: {', '.join(stuck)}")

        return ordered

    @property
    def count(self) -> int:
        return len(self._stages)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(
    *,
    id: str,
    phase: Phase,
    dependencies: list[str] | None = None,
    description: str = "",
    when: StageGate | None = None,
):
    """Register the decorated function as a pipeline stage."""

    def decorator(fn: StageFn) -> StageFn:
        _registry.register(
            StageSpec(
                id=id,
                phase=phase,
                fn=fn,
                dependencies=tuple(dependencies or ()),
                description=description,
                when=when,
            )
        )
        return fn

    return decorator
