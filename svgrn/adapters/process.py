"""Async subprocess helper for the Node-based tools (SVGO, Prettier)."""

from __future__ import annotations

import asyncio

from svgrn.utils.helpers import truncate


class ToolError(RuntimeError):
    """An external tool could not be run or exited unsuccessfully."""


async def run_tool(args: list[str], stdin: str, timeout: float) -> str:
    """Pipe ``stdin`` through a command and return its stdout.

    Raises ToolError when the executable cannot be started (missing, not
    executable, bad format), on timeout, or on a non-zero exit.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ToolError(f"{args[0]} not available: {e}") from e

    try:
        out, err = await asyncio.wait_for(proc.communicate(stdin.encode("utf-8")), timeout)
    except asyncio.TimeoutError as e:
        proc.kill()
        await proc.wait()
        raise ToolError(f"{args[0]} timed out after {timeout:.1f}s") from e

    if proc.returncode != 0:
        stderr = truncate(err.decode("utf-8", "replace").strip(), 200)
        raise ToolError(f"{args[0]} exited {proc.returncode}: {stderr}")
    return out.decode("utf-8", "replace")
