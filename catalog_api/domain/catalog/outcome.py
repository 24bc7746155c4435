"""
Outcome types returned by every data-access call.

A data-access function never raises for an expected domain result.
It returns exactly one of:

    Ok(value)         the call succeeded
    NotFound(message) the addressed entity does not exist
    Invalid(message)  the input was rejected before touching data
    Failure(message)  anything else went wrong

Collaborators that still speak the two-slot ``{error, result}`` envelope
with the ``code == 0`` not-found sentinel are converted with
``ResultEnvelope.to_outcome``.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")

NOT_FOUND_CODE = 0


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful data-access result."""

    value: T


@dataclass(frozen=True)
class NotFound:
    """The addressed entity does not exist."""

    message: str = "Not found"


@dataclass(frozen=True)
class Invalid:
    """The request input was rejected."""

    message: str


@dataclass(frozen=True)
class Failure:
    """Unexpected data-access failure. ``message`` is for logs only."""

    message: str
    code: Optional[int] = None


Outcome = Union[Ok[T], NotFound, Invalid, Failure]


@dataclass(frozen=True)
class ErrorInfo:
    """Structured error slot of a ResultEnvelope."""

    code: int
    message: str = ""

    @property
    def is_not_found(self) -> bool:
        return self.code == NOT_FOUND_CODE


@dataclass(frozen=True)
class ResultEnvelope(Generic[T]):
    """Two-slot outcome: ``result`` on success, ``error`` on failure."""

    error: Optional[ErrorInfo] = None
    result: Optional[T] = None

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ResultEnvelope[Any]":
        """Build an envelope from a plain ``{"error": ..., "result": ...}`` dict."""
        raw_error = payload.get("error")
        error = None
        if raw_error is not None:
            if isinstance(raw_error, ErrorInfo):
                error = raw_error
            else:
                error = ErrorInfo(
                    code=raw_error.get("code", -1),
                    message=raw_error.get("message", ""),
                )
        return cls(error=error, result=payload.get("result"))

    def to_outcome(self) -> "Outcome[T]":
        """Translate the sentinel convention into a tagged outcome."""
        if self.error is None:
            return Ok(self.result)
        if self.error.is_not_found:
            return NotFound(self.error.message or "Not found")
        return Failure(self.error.message, code=self.error.code)


def as_outcome(value: Any) -> "Outcome[Any]":
    """Normalize an envelope (object or dict) or outcome into an outcome."""
    if isinstance(value, (Ok, NotFound, Invalid, Failure)):
        return value
    if isinstance(value, ResultEnvelope):
        return value.to_outcome()
    if isinstance(value, dict) and ("error" in value or "result" in value):
        return ResultEnvelope.from_dict(value).to_outcome()
    raise TypeError(f"Not a data-access outcome: {type(value).__name__}")
