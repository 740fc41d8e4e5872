"""Tests for the SVGO / Prettier adapters and the subprocess helper."""

import asyncio
import os
import sys

import pytest

from svgrn.adapters import formatter, optimizer
from svgrn.adapters.process import ToolError, run_tool
from svgrn.config import settings
from svgrn.engine import convert as convert_module
from svgrn.engine.convert import convert_svg
from svgrn.models.converter_config import CodeStyleConfig, ConverterConfig, OptimizerConfig
from svgrn.utils.helpers import format_file_size, truncate

SVG = '<svg viewBox="0 0 1 1"><path d="M0 0"/></svg>'


def test_run_tool_missing_executable():
    with pytest.raises(ToolError, match="not available"):
        asyncio.run(run_tool(["svgrn-no-such-tool"], "", 5))


def test_run_tool_pipes_stdin():
    out = asyncio.run(run_tool([sys.executable, "-c", "import sys; print(sys.stdin.read().upper())"], "abc", 10))
    assert out.strip() == "ABC"


def test_run_tool_nonzero_exit():
    args = [sys.executable, "-c", "import sys; sys.stderr.write('bad'); sys.exit(3)"]
    with pytest.raises(ToolError, match="exited 3: bad"):
        asyncio.run(run_tool(args, "", 10))


def test_run_tool_timeout():
    args = [sys.executable, "-c", "import time; time.sleep(5)"]
    with pytest.raises(ToolError, match="timed out"):
        asyncio.run(run_tool(args, "", 0.2))


def test_optimizer_disabled_returns_input(monkeypatch):
    async def fail(*args):
        raise AssertionError("tool should not run")

    monkeypatch.setattr(optimizer, "run_tool", fail)
    out = asyncio.run(optimizer.optimize_svg(SVG, OptimizerConfig(enabled=False)))
    assert out == SVG


def test_optimizer_falls_back_on_tool_error(monkeypatch):
    seen = {}

    async def fail(args, stdin, timeout):
        seen["config"] = args[2]
        raise ToolError("svgo not available")

    monkeypatch.setattr(optimizer, "run_tool", fail)
    out = asyncio.run(optimizer.optimize_svg(SVG, OptimizerConfig()))
    assert out == SVG
    # Temporary config file is cleaned up
    assert not os.path.exists(seen["config"])


def test_optimizer_writes_plugin_config(monkeypatch):
    async def fake(args, stdin, timeout):
        with open(args[2], encoding="utf-8") as f:
            body = f.read()
        assert body.startswith("export default {")
        assert '"name": "removeComments"' in body
        assert '"multipass": true' in body
        return "<svg/>"

    monkeypatch.setattr(optimizer, "run_tool", fake)
    assert asyncio.run(optimizer.optimize_svg(SVG, OptimizerConfig())) == "<svg/>"


def test_optimizer_ignores_empty_output(monkeypatch):
    async def empty(args, stdin, timeout):
        return "  \n"

    monkeypatch.setattr(optimizer, "run_tool", empty)
    assert asyncio.run(optimizer.optimize_svg(SVG, OptimizerConfig())) == SVG


def test_optimization_stats():
    stats = optimizer.get_optimization_stats("a" * 200, "a" * 150)
    assert stats == {
        "original_size": 200,
        "optimized_size": 150,
        "saved_bytes": 50,
        "saved_percent": 25.0,
    }
    assert optimizer.get_optimization_stats("", "")["saved_percent"] == 0.0


def test_prettier_args():
    args = formatter.prettier_args(CodeStyleConfig(semi=False, single_quote=False, tab_width=4), "Logo.jsx")
    assert args[1:3] == ["--stdin-filepath", "Logo.jsx"]
    assert "--no-semi" in args
    assert "--single-quote" not in args
    assert args[args.index("--tab-width") + 1] == "4"


def test_formatter_falls_back_on_tool_error(monkeypatch):
    async def fail(args, stdin, timeout):
        raise ToolError("prettier exited 2: SyntaxError")

    monkeypatch.setattr(formatter, "run_tool", fail)
    code = "const A = () => null;\n"
    assert asyncio.run(formatter.format_code(code, CodeStyleConfig())) == code


def test_formatter_returns_tool_output(monkeypatch):
    async def fake(args, stdin, timeout):
        return stdin.replace(";", "")

    monkeypatch.setattr(formatter, "run_tool", fake)
    assert asyncio.run(formatter.format_code("a;", CodeStyleConfig())) == "a"


def test_format_file_size():
    assert format_file_size(0) == "0 Bytes"
    assert format_file_size(500) == "500 Bytes"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(1024 * 1024) == "1 MB"


def test_truncate():
    assert truncate("abc", 5) == "abc"
    assert truncate("abcdef", 3) == "abc..."


@pytest.fixture
def broken_executable(tmp_path):
    """An executable file the OS refuses to start (no shebang, not a binary)."""
    path = tmp_path / "broken-tool"
    path.write_bytes(b"\x00\x01\x02 not a program\n")
    path.chmod(0o755)
    return str(path)


def test_run_tool_unstartable_executable(broken_executable):
    with pytest.raises(ToolError, match="not available"):
        asyncio.run(run_tool([broken_executable], "", 5))


def test_formatter_falls_back_on_os_error(monkeypatch):
    async def fail(args, stdin, timeout):
        raise OSError(7, "Argument list too long")

    monkeypatch.setattr(formatter, "run_tool", fail)
    code = "const A = () => null;\n"
    assert asyncio.run(formatter.format_code(code, CodeStyleConfig())) == code


def test_unstartable_prettier_keeps_conversion_successful(monkeypatch, broken_executable):
    async def passthrough(svg, config):
        return svg

    monkeypatch.setattr(convert_module, "optimize_svg", passthrough)
    monkeypatch.setattr(settings, "prettier_command", broken_executable)

    result = asyncio.run(convert_svg(SVG, ConverterConfig()))
    assert result.success
    assert '<Path d="M0 0" />' in result.code
