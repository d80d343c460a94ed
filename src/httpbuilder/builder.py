from __future__ import annotations

import asyncio
import json
from dataclasses import dataclass, field, replace
from typing import Any, Generic, Iterable, Optional, Tuple, TypeVar

from .client import send, to_task
from .http.types import Transport, TransportRequest
from .readers import BodyReader, accept_nothing, string_reader
from .result import Result
from .types import (
    EMPTY_BODY,
    Body,
    BytesBody,
    Method,
    Pairs,
    Part,
    Response,
    Seconds,
    StringPart,
)
from .utils import append_query, encode_multipart, encode_pairs

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")


@dataclass(frozen=True)
class RequestSpec(Generic[T]):
    """
    Immutable request configuration. Every ``with_*`` method returns a new
    spec and leaves the receiver untouched.
    """

    method: Method
    url: str
    headers: Pairs = ()
    body: Body = EMPTY_BODY
    timeout: Optional[Seconds] = None
    credentialed: bool = False
    query_params: Pairs = ()
    expect: BodyReader[T] = field(  # type: ignore[assignment]
        default=accept_nothing, repr=False
    )
    cache_buster: Optional[str] = None
    zero_status_allowed: bool = False

    def with_header(self, name: str, value: str) -> RequestSpec[T]:
        return replace(self, headers=((name, value),) + self.headers)

    def with_headers(self, pairs: Iterable[Tuple[str, str]]) -> RequestSpec[T]:
        return replace(self, headers=tuple(pairs) + self.headers)

    def with_bearer_token(self, token: str) -> RequestSpec[T]:
        return self.with_header("Authorization", f"Bearer {token}")

    def with_body(self, body: Body) -> RequestSpec[T]:
        return replace(self, body=body)

    def with_string_body(self, mime_type: str, content: str) -> RequestSpec[T]:
        return self.with_body(BytesBody(mime_type, content.encode("utf-8")))

    def with_json_body(self, value: Any) -> RequestSpec[T]:
        return self.with_string_body("application/json", json.dumps(value))

    def with_url_encoded_body(
        self, pairs: Iterable[Tuple[str, str]]
    ) -> RequestSpec[T]:
        return self.with_string_body(
            "application/x-www-form-urlencoded", encode_pairs(pairs)
        )

    def with_multipart_body(
        self, parts: Iterable[Part], *, boundary: Optional[str] = None
    ) -> RequestSpec[T]:
        mime_type, content = encode_multipart(parts, boundary)
        return self.with_body(BytesBody(mime_type, content))

    def with_multipart_string_body(
        self, pairs: Iterable[Tuple[str, str]], *, boundary: Optional[str] = None
    ) -> RequestSpec[T]:
        return self.with_multipart_body(
            [StringPart(name, value) for name, value in pairs], boundary=boundary
        )

    def with_timeout(self, timeout: Seconds) -> RequestSpec[T]:
        return replace(self, timeout=timeout)

    def with_credentials(self) -> RequestSpec[T]:
        return replace(self, credentialed=True)

    def with_query_param(self, key: str, value: str) -> RequestSpec[T]:
        return replace(self, query_params=self.query_params + ((key, value),))

    def with_query_params(self, pairs: Iterable[Tuple[str, str]]) -> RequestSpec[T]:
        return replace(self, query_params=self.query_params + tuple(pairs))

    def with_expect(self, reader: BodyReader[U]) -> RequestSpec[U]:
        return replace(self, expect=reader)  # type: ignore[return-value,arg-type]

    def with_cache_buster(self, param_name: str) -> RequestSpec[T]:
        """
        Append ``param_name`` with the current time in milliseconds to the
        query string when the request is sent.
        """
        return replace(self, cache_buster=param_name)

    def with_zero_status_allowed(self, allowed: bool = True) -> RequestSpec[T]:
        """
        Treat a status of 0 (``file://`` URLs and some embedded webviews) as
        a success status for this request.
        """
        return replace(self, zero_status_allowed=allowed)

    def to_request(self) -> TransportRequest:
        return TransportRequest(
            method=self.method,
            url=append_query(self.url, self.query_params),
            headers=self.headers,
            body=self.body,
            timeout=self.timeout,
            credentialed=self.credentialed,
        )

    async def send(
        self,
        transport: Transport,
        *,
        error_reader: BodyReader[B] = string_reader,  # type: ignore[assignment]
    ) -> Result[Response[T], Any]:
        return await send(self, transport, error_reader=error_reader)

    def to_task(
        self,
        transport: Transport,
        *,
        error_reader: BodyReader[B] = string_reader,  # type: ignore[assignment]
    ) -> asyncio.Task[Result[Response[T], Any]]:
        return to_task(self, transport, error_reader=error_reader)


def get(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.get, url)


def post(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.post, url)


def put(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.put, url)


def patch(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.patch, url)


def delete(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.delete, url)


def options(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.options, url)


def trace(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.trace, url)


def head(url: str) -> RequestSpec[None]:
    return RequestSpec(Method.head, url)
