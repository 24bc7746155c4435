"""
Outcome classifier.

Maps a data-access outcome to an HTTP status code and JSON body.
One classifier is built per resource; the resource name only
changes the wording of the not-found message.

    NotFound                    -> 404 {"error": "<Resource> Not Found"}
    Invalid                     -> 400 {"error": "<reason>"}
    Failure                     -> 500 {"error": "Server Error"}
    Ok(empty) + EMPTY_IS_ERROR  -> 500 {"error": "Server Error"}
    Ok(value)                   -> success_status, serialized value
"""

import logging
from collections.abc import Callable, Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from catalog_api.domain.catalog.outcome import (
    Failure,
    Invalid,
    NotFound,
    as_outcome,
)

logger = logging.getLogger(__name__)

SERVER_ERROR = "Server Error"


class EmptyPolicy(Enum):
    """Whether an empty successful result is legitimate for an endpoint."""

    EMPTY_IS_OK = "empty_is_ok"
    EMPTY_IS_ERROR = "empty_is_error"


@dataclass(frozen=True)
class Classification:
    """HTTP status code and JSON-ready body for one outcome."""

    status_code: int
    body: Any


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, Sized) and len(value) == 0


class ErrorClassifier:
    """Classifies data-access outcomes for a single resource."""

    def __init__(self, resource: str, server_error: str = SERVER_ERROR) -> None:
        self.resource = resource
        self.not_found_message = f"{resource} Not Found"
        self.server_error_message = server_error

    def classify(
        self,
        outcome: Any,
        *,
        success_status: int = 200,
        empty_policy: EmptyPolicy = EmptyPolicy.EMPTY_IS_OK,
        not_found_is_failure: bool = False,
        server_error: Optional[str] = None,
        present: Optional[Callable[[Any], Any]] = None,
        wrap: Optional[str] = None,
    ) -> Classification:
        """Classify an outcome or a legacy ``{error, result}`` envelope.

        Args:
            outcome: Outcome, ResultEnvelope, or envelope-shaped dict.
            success_status: Status for a successful result (201 on creation).
            empty_policy: How to treat an empty successful result.
            not_found_is_failure: Report NotFound as a server error.
            server_error: Message override for server errors on this endpoint.
            present: Converts the success value before serialization.
            wrap: Key to nest the success body under.

        Returns:
            The status code and body to send.
        """
        outcome = as_outcome(outcome)
        failure_body = {"error": server_error or self.server_error_message}

        if isinstance(outcome, NotFound):
            if not_found_is_failure:
                logger.error("%s missing: %s", self.resource, outcome.message)
                return Classification(500, failure_body)
            logger.warning("%s not found: %s", self.resource, outcome.message)
            return Classification(404, {"error": self.not_found_message})

        if isinstance(outcome, Invalid):
            logger.warning("%s query rejected: %s", self.resource, outcome.message)
            return Classification(400, {"error": outcome.message})

        if isinstance(outcome, Failure):
            logger.error(
                "%s data access failed (code=%s): %s",
                self.resource,
                outcome.code,
                outcome.message,
            )
            return Classification(500, failure_body)

        value = outcome.value
        if empty_policy is EmptyPolicy.EMPTY_IS_ERROR and _is_empty(value):
            logger.error("%s data access returned an empty result", self.resource)
            return Classification(500, failure_body)

        if present is not None and value is not None:
            value = present(value)
        body = jsonable_encoder(value)
        if wrap:
            body = {wrap: body}
        return Classification(success_status, body)

    def respond(self, outcome: Any, **options: Any) -> JSONResponse:
        """Classify ``outcome`` and build the JSON response."""
        classification = self.classify(outcome, **options)
        return JSONResponse(
            status_code=classification.status_code, content=classification.body
        )
