"""Outcome of a catalog fetch from the web application."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ServiceError(BaseModel):
    """Why a fetch failed: ``catalog_unavailable`` or ``catalog_invalid``."""

    code: str
    message: str
    details: dict[str, int | str] | None = None


class ServiceResult(BaseModel, Generic[T]):
    """Either fetched ``data`` or an ``error``; failures are never retried."""

    success: bool
    data: T | None = None
    error: ServiceError | None = None
    duration_ms: float | None = Field(default=None, ge=0)

    @classmethod
    def ok(cls, data: T, duration_ms: float | None = None) -> "ServiceResult[T]":
        return cls(success=True, data=data, duration_ms=duration_ms)

    @classmethod
    def fail(cls, code: str, message: str, **details: int | str) -> "ServiceResult[T]":
        return cls(
            success=False,
            error=ServiceError(code=code, message=message, details=details or None),
        )

    def unwrap_or(self, default: T) -> T:
        """``data`` on success, *default* (usually an empty catalog) otherwise."""
        return self.data if self.success and self.data is not None else default
