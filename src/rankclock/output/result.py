"""CommandResult and CommandError — what every CLI command hands to the renderer.

INVARIANT: Commands never print directly.  They build a CommandResult and
pass it to ``AppContext.emit`` for human or JSON rendering.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CommandError(BaseModel):
    """Structured error payload within a CommandResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class CommandResult(BaseModel):
    """Outcome of one CLI operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: CommandError | None = None

    @classmethod
    def success(cls, op: str, **data: Any) -> CommandResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> CommandResult:
        return cls(
            ok=False,
            op=op,
            error=CommandError(code=code, message=message, detail=detail),
        )
