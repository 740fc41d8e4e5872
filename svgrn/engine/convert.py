"""Conversion entry points — validate, optimize, run the pipeline, format."""

from __future__ import annotations

import logging
import time

from svgrn.adapters.formatter import format_code
from svgrn.adapters.optimizer import get_optimization_stats, optimize_svg
from svgrn.converter.codegen import generate_filename
from svgrn.converter.elements import get_unsupported_elements
from svgrn.engine.context import ConversionContext
from svgrn.engine.pipeline import create_pipeline
from svgrn.models.converter_config import ConverterConfig
from svgrn.models.responses import ConversionResult, ConversionStats, ErrorKind
from svgrn.svg.parser import parse_svg
from svgrn.svg.validator import validate_svg
from svgrn.utils.helpers import format_file_size

logger = logging.getLogger(__name__)


def _run_pipeline(
    svg_input: str,
    optimized_svg: str,
    config: ConverterConfig,
    warnings: list[str],
) -> ConversionResult:
    """Parse + stages 4–10. The result has no formatting applied yet."""
    parse = parse_svg(optimized_svg)
    if not parse.valid or parse.tree is None:
        return ConversionResult.failure(
            parse.error or "Failed to parse SVG",
            parse.error_kind or ErrorKind.MALFORMED_MARKUP,
            warnings,
        )

    ctx = ConversionContext(config=config, parse=parse, tree=parse.tree)
    create_pipeline().run(ctx)
    if ctx.errors:
        stage_id, message = next(iter(ctx.errors.items()))
        logger.warning("Conversion aborted in %s: %s", stage_id, message)
        return ConversionResult.failure(message, ErrorKind.INTERNAL_ERROR, warnings)

    unsupported = get_unsupported_elements(parse.elements, config.output_format)
    all_warnings = list(warnings)
    if unsupported:
        all_warnings.append(
            "Unsupported elements passed through unchanged: " + ", ".join(unsupported)
        )

    size = get_optimization_stats(svg_input, optimized_svg)
    result = ConversionResult(
        success=True,
        code=ctx.code,
        imports=ctx.imports,
        type_definitions=ctx.type_definitions,
        usage_example=ctx.usage_example,
        filename=generate_filename(config.component.name, config),
        metadata=parse.metadata,
        stats=ConversionStats(
            element_count=len(parse.elements),
            original_byte_size=size["original_size"],
            optimized_byte_size=size["optimized_size"],
            saved_bytes=size["saved_bytes"],
            saved_percent=size["saved_percent"],
        ),
        unsupported_elements=unsupported,
        warnings=all_warnings,
    )
    return result


async def convert_svg(svg_input: str, config: ConverterConfig) -> ConversionResult:
    """Convert SVG markup into component source.

    Never raises: every failure, including unexpected ones, comes back as a
    ``success=False`` result.
    """
    start = time.perf_counter()
    try:
        validation = validate_svg(svg_input)
        if not validation.valid:
            return ConversionResult.failure(
                validation.error or "Invalid SVG",
                validation.error_kind or ErrorKind.MALFORMED_MARKUP,
                validation.warnings,
            )

        optimized = await optimize_svg(svg_input, config.svgo)

        result = _run_pipeline(svg_input, optimized, config, validation.warnings)
        if not result.success:
            return result

        result.code = await format_code(result.code, config.code_style, result.filename or "Component.tsx")
    except Exception as e:
        logger.exception("Unexpected conversion failure")
        return ConversionResult.failure(str(e) or type(e).__name__)

    elapsed = (time.perf_counter() - start) * 1000
    logger.info(
        "Converted %s → %s (%d elements) in %.0fms",
        format_file_size(result.stats.original_byte_size),
        config.component.name,
        result.stats.element_count,
        elapsed,
    )
    return result


def convert_svg_sync(svg_input: str, config: ConverterConfig) -> ConversionResult:
    """Same pipeline without the optimizer and formatter adapters."""
    try:
        validation = validate_svg(svg_input)
        if not validation.valid:
            return ConversionResult.failure(
                validation.error or "Invalid SVG",
                validation.error_kind or ErrorKind.MALFORMED_MARKUP,
                validation.warnings,
            )
        return _run_pipeline(svg_input, svg_input, config, validation.warnings)
    except Exception as e:
        logger.exception("Unexpected conversion failure")
        return ConversionResult.failure(str(e) or type(e).__name__)
