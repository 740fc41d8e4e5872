"""Prettier adapter — pretty-prints generated component source."""

from __future__ import annotations

import logging

from svgrn.adapters.process import ToolError, run_tool
from svgrn.config import settings
from svgrn.models.converter_config import CodeStyleConfig

logger = logging.getLogger(__name__)


def prettier_args(style: CodeStyleConfig, filename: str) -> list[str]:
    args = [
        settings.prettier_command,
        "--stdin-filepath",
        filename,
        "--tab-width",
        str(style.tab_width),
        "--print-width",
        str(style.print_width),
        "--trailing-comma",
        "es5",
        "--arrow-parens",
        "always",
        "--end-of-line",
        "lf",
    ]
    if not style.semi:
        args.append("--no-semi")
    if style.single_quote:
        args.append("--single-quote")
    return args


async def format_code(code: str, style: CodeStyleConfig, filename: str = "Component.tsx") -> str:
    """Format with Prettier. Never raises; returns the input on any failure."""
    try:
        formatted = await run_tool(prettier_args(style, filename), code, settings.tool_timeout_s)
    except (ToolError, OSError) as e:
        logger.warning("Prettier formatting failed, using unformatted code: %s", e)
        return code

    return formatted or code
