"""Success/failure envelope for coordinate conversions.

Malformed coordinate text is an expected outcome of user input, not a
fault, so the conversion endpoints answer HTTP 200 with ``success=False``
and an error naming the rejected text and the axis it was entered for.
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field, model_validator

from skyplan.services.errors import DMSFormatError

T = TypeVar("T")

Axis = Literal["latitude", "longitude"]


class ServiceError(BaseModel):
    """Why a conversion was rejected."""

    code: str = Field(..., description="Machine-readable error code, e.g. invalid_dms")
    message: str = Field(..., description="Message suitable for display next to the field")
    text: str | None = Field(default=None, description="The rejected input")
    axis: Axis | None = None


class ServiceResult(BaseModel, Generic[T]):
    """Either ``data`` (on success) or ``error`` (on failure), never both."""

    success: bool
    data: T | None = None
    error: ServiceError | None = None

    @model_validator(mode="after")
    def check_outcome(self) -> "ServiceResult[T]":
        if self.success and self.error is not None:
            raise ValueError("A successful result carries no error")
        if not self.success and self.error is None:
            raise ValueError("A failed result needs an error")
        return self

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        text: str | None = None,
        axis: Axis | None = None,
    ) -> "ServiceResult[T]":
        return cls(
            success=False,
            error=ServiceError(code=code, message=message, text=text, axis=axis),
        )

    @classmethod
    def invalid_dms(cls, exc: DMSFormatError, axis: Axis | None = None) -> "ServiceResult[T]":
        """Failure built from a strict-parser rejection."""
        return cls.fail("invalid_dms", exc.reason, text=exc.text, axis=axis)
