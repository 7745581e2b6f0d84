"""ServiceResult and ServiceError — the discriminated service contract.

INVARIANT: All service-layer methods return ServiceResult.
``ok`` is the discriminant: ``data`` is meaningful only when it is True,
``error`` only when it is False. The CLI consumes this type, and so can
any library caller that prefers branching on a value to catching
:class:`~isoperiod.domain.errors.PeriodParseError`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult.

    ``code`` is the upper-cased parse error kind (e.g. ``"TRAILING_TEXT"``)
    or a service-level code such as ``"INVALID_PERIODS"``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"parse"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as a truncated fraction.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        error = ServiceError(code=code, message=message, detail=detail or {})
        return cls(ok=False, op=op, error=error)
