from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    MISSING_FILE = "MISSING_FILE"
    RENDER_FAILED = "RENDER_FAILED"
    TRANSPILE_FAILED = "TRANSPILE_FAILED"
    FRONTMATTER_INVALID = "FRONTMATTER_INVALID"


class MdToVueError(Exception):
    """Raised by the compile pipeline and its adapters for expected failures.

    Every failure is fatal for the document being compiled. Never catch this
    inside the pipeline to produce degraded output; let it propagate to the
    caller so nothing partial reaches the compile cache.
    """

    code: ErrorCode

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: str,
        recoverable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.recoverable = recoverable

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "suggestion": self.suggestion,
                "recoverable": self.recoverable,
            }
        }


class MissingFileError(MdToVueError):
    """The source file could not be stat'ed for its modification time."""

    def __init__(self, message: str, suggestion: str = "Check that the file exists.") -> None:
        super().__init__(ErrorCode.MISSING_FILE, message, suggestion, recoverable=True)


class RenderError(MdToVueError):
    """The markdown renderer rejected the document."""

    def __init__(self, message: str, suggestion: str = "Fix the markdown syntax.") -> None:
        super().__init__(ErrorCode.RENDER_FAILED, message, suggestion)


class TranspileError(MdToVueError):
    """Stripping types from a demo script failed.

    Aborts the whole document, not just the demo preview.
    """

    def __init__(
        self,
        message: str,
        suggestion: str = "Check the demo <script> block and the transpiler command.",
    ) -> None:
        super().__init__(ErrorCode.TRANSPILE_FAILED, message, suggestion)


class FrontmatterError(MdToVueError):
    def __init__(
        self,
        message: str,
        suggestion: str = "Frontmatter must be a YAML mapping between '---' lines.",
    ) -> None:
        super().__init__(ErrorCode.FRONTMATTER_INVALID, message, suggestion)
