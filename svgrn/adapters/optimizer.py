"""SVGO adapter — generic SVG minification, treated as a black box."""

from __future__ import annotations

import json
import logging
import os
import tempfile

from svgrn.adapters.process import ToolError, run_tool
from svgrn.config import settings
from svgrn.models.converter_config import OptimizerConfig

logger = logging.getLogger(__name__)


def _write_config(config: OptimizerConfig) -> str:
    """SVGO only takes plugin lists from a JS config file."""
    body = json.dumps({"multipass": True, "plugins": list(config.plugins)}, indent=2)
    fd, path = tempfile.mkstemp(prefix="svgo-", suffix=".config.mjs")
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        f.write(f"export default {body};\n")
    return path


async def optimize_svg(svg_text: str, config: OptimizerConfig) -> str:
    """Run SVGO over the markup. Never raises; returns the input on any failure."""
    if not config.enabled:
        return svg_text

    config_path = None
    try:
        config_path = _write_config(config)
        optimized = await run_tool(
            [settings.svgo_command, "--config", config_path, "-i", "-", "-o", "-"],
            svg_text,
            settings.tool_timeout_s,
        )
    except (ToolError, OSError) as e:
        logger.warning("SVGO optimization failed, using original SVG: %s", e)
        return svg_text
    finally:
        if config_path:
            os.unlink(config_path)

    if not optimized.strip():
        logger.warning("SVGO returned empty output, using original SVG")
        return svg_text
    return optimized


def get_optimization_stats(original: str, optimized: str) -> dict[str, float]:
    original_size = len(original.encode("utf-8"))
    optimized_size = len(optimized.encode("utf-8"))
    saved = original_size - optimized_size
    percent = round(saved / original_size * 100, 2) if original_size else 0.0
    return {
        "original_size": original_size,
        "optimized_size": optimized_size,
        "saved_bytes": saved,
        "saved_percent": percent,
    }
