"""
Classification of transport outcomes into ``Ok(Response)`` or ``Err(Error)``.

``resolve`` is a pure function: it keeps no state between calls, performs no
I/O and never raises for any transport outcome. Each body is handed to
exactly one reader, exactly once.
"""
from typing import Any, TypeVar, Union

from .errors import BadStatus, BadUrl, DecodingFailure, Error, NetworkError, Timeout
from .http.types import (
    RawBadUrl,
    RawNetworkError,
    RawSuccess,
    RawTimeout,
    TransportOutcome,
)
from .readers import BodyReader
from .result import Err, Ok, Result
from .types import Response

A = TypeVar("A")
B = TypeVar("B")


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def resolve(
    outcome: TransportOutcome,
    success_reader: BodyReader[A],
    error_reader: BodyReader[B],
    *,
    allow_zero_status: bool = False,
) -> Result[Response[A], Error[B]]:
    if isinstance(outcome, RawBadUrl):
        return Err(BadUrl(outcome.url))
    if isinstance(outcome, RawTimeout):
        return Err(Timeout())
    if isinstance(outcome, RawNetworkError):
        return Err(NetworkError())
    if isinstance(outcome, RawSuccess):
        if is_success_status(outcome.status) or (
            allow_zero_status and outcome.status == 0
        ):
            return _read_success(outcome, success_reader)
        return _read_error(outcome, error_reader)
    raise TypeError(f"unknown transport outcome {outcome!r}")


def _response(outcome: RawSuccess, data: Any) -> Response[Any]:
    return Response(
        data=data,
        status=outcome.status,
        status_text=outcome.status_text,
        headers=outcome.headers,
        url=outcome.url,
    )


def _read_success(
    outcome: RawSuccess, reader: BodyReader[A]
) -> Union[Ok[Response[A]], Err[DecodingFailure]]:
    decoded = reader(outcome.body)
    if isinstance(decoded, Ok):
        return Ok(_response(outcome, decoded.value))
    # response metadata is not kept on decoding failures
    return Err(DecodingFailure(decoded.error))


def _read_error(
    outcome: RawSuccess, reader: BodyReader[B]
) -> Err[Union[BadStatus[B], DecodingFailure]]:
    decoded = reader(outcome.body)
    if isinstance(decoded, Ok):
        return Err(BadStatus(_response(outcome, decoded.value)))
    return Err(DecodingFailure(decoded.error))
