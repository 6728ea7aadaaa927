"""Unit tests for the subprocess transpiler adapter.

The real esbuild binary is not required: the current Python interpreter
stands in as the external command.
"""

from __future__ import annotations

import sys

import pytest

from mdtovue.errors import ErrorCode, TranspileError
from mdtovue.transpiler import SubprocessTranspiler

UPPERCASE = [sys.executable, "-c", "import sys; sys.stdout.write(sys.stdin.read().upper())"]
FAILING = [sys.executable, "-c", "import sys; sys.stderr.write('bad syntax'); sys.exit(2)"]
MISSING = ["mdtovue-no-such-transpiler"]
INVALID_UTF8 = [
    sys.executable,
    "-c",
    "import sys; sys.stdin.read(); sys.stdout.buffer.write(b'\\xff\\xfe')",
]


class TestSubprocessTranspiler:
    async def test_output_is_stdout_stripped(self) -> None:
        transpiler = SubprocessTranspiler(UPPERCASE)
        assert await transpiler.transpile("\nconst a = 1\n") == "CONST A = 1"

    async def test_empty_input_skips_process(self) -> None:
        # Would fail to start if it were invoked
        transpiler = SubprocessTranspiler(MISSING)
        assert await transpiler.transpile("  \n") == ""

    async def test_non_zero_exit_raises(self) -> None:
        with pytest.raises(TranspileError, match="bad syntax") as exc_info:
            await SubprocessTranspiler(FAILING).transpile("let a: number = 1")
        assert exc_info.value.code == ErrorCode.TRANSPILE_FAILED

    async def test_undecodable_output_raises(self) -> None:
        with pytest.raises(TranspileError, match="UTF-8") as exc_info:
            await SubprocessTranspiler(INVALID_UTF8).transpile("let a = 1")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    async def test_missing_executable_raises(self) -> None:
        with pytest.raises(TranspileError, match="Could not start transpiler"):
            await SubprocessTranspiler(MISSING).transpile("let a = 1")

    def test_empty_command_rejected(self) -> None:
        with pytest.raises(ValueError):
            SubprocessTranspiler([])
