from __future__ import annotations

import asyncio
import time
from typing import TYPE_CHECKING, Any, TypeVar

from .errors import Error
from .http.types import Transport
from .readers import BodyReader, string_reader
from .resolver import resolve
from .result import Result
from .types import Response
from .utils import logger

if TYPE_CHECKING:
    from .builder import RequestSpec

A = TypeVar("A")
B = TypeVar("B")


def _now_millis() -> int:
    return int(time.time() * 1000)


async def send(
    spec: RequestSpec[A],
    transport: Transport,
    *,
    error_reader: BodyReader[B] = string_reader,  # type: ignore[assignment]
) -> Result[Response[A], Error[B]]:
    """
    Send the request described by ``spec`` through ``transport`` and resolve
    the outcome. Transport failures, non-2xx statuses and unreadable bodies
    are all returned as ``Err``.
    """
    if spec.cache_buster is not None:
        spec = spec.with_query_param(spec.cache_buster, str(_now_millis()))
    request = spec.to_request()
    logger.debug("sending request %r", request)
    outcome = await transport(request)
    logger.debug("received %s", type(outcome).__name__)
    return resolve(
        outcome,
        spec.expect,
        error_reader,
        allow_zero_status=spec.zero_status_allowed,
    )


def to_task(
    spec: RequestSpec[A],
    transport: Transport,
    *,
    error_reader: BodyReader[B] = string_reader,  # type: ignore[assignment]
) -> asyncio.Task[Result[Response[A], Error[B]]]:
    return asyncio.create_task(send(spec, transport, error_reader=error_reader))
