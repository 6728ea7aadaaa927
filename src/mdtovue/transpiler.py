"""Type-stripping transpiler that shells out to an external tool.

The script body is piped to the configured command on stdin and the vanilla
JavaScript is read back from stdout. The default command is esbuild with the
TypeScript loader.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import structlog

from mdtovue.errors import TranspileError

if TYPE_CHECKING:
    from collections.abc import Sequence

log = structlog.get_logger()


class SubprocessTranspiler:
    """TranspilerProtocol implementation."""

    def __init__(self, command: Sequence[str]) -> None:
        if not command:
            raise ValueError("Transpiler command must not be empty")
        self._command = list(command)

    async def transpile(self, source: str) -> str:
        if not source.strip():
            return ""

        try:
            proc = await asyncio.create_subprocess_exec(
                *self._command,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise TranspileError(
                f"Could not start transpiler {self._command[0]!r}: {exc}",
                suggestion="Install the transpiler or set transpiler.command in mdtovue.yaml.",
            ) from exc

        stdout, stderr = await proc.communicate(source.encode("utf-8"))
        if proc.returncode != 0:
            log.warning("transpile_failed", returncode=proc.returncode)
            raise TranspileError(
                f"Transpiler exited with status {proc.returncode}: "
                f"{stderr.decode('utf-8', errors='replace').strip()}"
            )
        try:
            return stdout.decode("utf-8").strip()
        except UnicodeDecodeError as exc:
            raise TranspileError(f"Transpiler output is not valid UTF-8: {exc}") from exc
