"""Tagged results returned by the repository and their HTTP translation."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel


T = TypeVar("T")

NOT_FOUND_MESSAGE = "Job not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class StorageError:
    error: Exception


Outcome = Union[Ok[T], NotFound, StorageError]


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def internal_error() -> JSONResponse:
    return error_response(INTERNAL_ERROR_MESSAGE, 500)


def _encode(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, list):
        return [_encode(item) for item in value]
    return jsonable_encoder(value)


def to_response(outcome: Outcome, status_code: int = 200) -> JSONResponse:
    """
    Translate a repository outcome into an HTTP response.

    Args:
        outcome: Result of a repository call
        status_code: Status used for a successful outcome

    Returns:
        JSON response; storage errors never expose their details
    """
    if isinstance(outcome, Ok):
        return JSONResponse(status_code=status_code, content=_encode(outcome.value))
    if isinstance(outcome, NotFound):
        return error_response(NOT_FOUND_MESSAGE, 404)
    return internal_error()
