"""svgrn conversion engine."""

from svgrn.engine.registry import stage, Phase, get_registry
from svgrn.engine.context import ConversionContext, TransformedElement
from svgrn.engine.pipeline import Pipeline

__all__ = [
    "stage",
    "Phase",
    "get_registry",
    "ConversionContext",
    "TransformedElement",
    "Pipeline",
]
