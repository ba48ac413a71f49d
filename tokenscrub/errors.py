"""Domain exceptions for pipeline and CLI diagnostics.

Stream filters never raise these; they let upstream failures propagate
unchanged. Only the file pipeline and the CLI map failures to stage errors.
"""

from __future__ import annotations


class PipelineStageError(RuntimeError):
    """Raised when a named pipeline stage (`config`, `read`, `write`) fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
