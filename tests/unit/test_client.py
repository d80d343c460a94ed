import asyncio
import json
from typing import Any, Dict, Optional

import pytest

from httpbuilder import builder
from httpbuilder.client import send, to_task
from httpbuilder.errors import BadStatus, BadUrl, DecodingFailure, NetworkError, Timeout
from httpbuilder.http.mock import MockTransport
from httpbuilder.http.types import (
    RawBadUrl,
    RawNetworkError,
    RawSuccess,
    RawTimeout,
    TransportRequest,
)
from httpbuilder.readers import json_reader, string_reader
from httpbuilder.result import Err, Ok
from httpbuilder.types import Method, Response

pytestmark = [pytest.mark.asyncio]


def bjson(data: Any) -> str:
    return json.dumps(data)


def reply(
    status: int, body: str, headers: Optional[Dict[str, str]] = None
) -> RawSuccess:
    return RawSuccess(
        status=status,
        status_text="",
        headers=headers or {},
        url="http://example.com/users",
        body=body,
    )


async def test_send_success_with_json_reader() -> None:
    transport = MockTransport([reply(200, bjson({"id": 1}), {"ETag": "v1"})])
    result = await send(
        builder.get("http://example.com/users").with_expect(json_reader()),
        transport,
    )
    assert result == Ok(
        Response(
            data={"id": 1},
            status=200,
            status_text="",
            headers={"ETag": "v1"},
            url="http://example.com/users",
        )
    )


async def test_send_passes_finalized_request_to_transport() -> None:
    transport = MockTransport([reply(201, "")])
    spec = (
        builder.post("http://example.com/users")
        .with_header("A", "1")
        .with_header("B", "2")
        .with_query_param("dry run", "yes")
        .with_url_encoded_body([("name", "Ada L")])
        .with_timeout(5)
        .with_credentials()
    )
    await send(spec, transport)
    (request,) = transport.requests
    assert request == TransportRequest(
        method=Method.post,
        url="http://example.com/users?dry+run=yes",
        headers=(("B", "2"), ("A", "1")),
        body=spec.body,
        timeout=5,
        credentialed=True,
    )


async def test_send_default_error_reader_is_string_reader() -> None:
    transport = MockTransport([reply(404, "Not Found")])
    result = await send(builder.get("http://example.com/users"), transport)
    assert isinstance(result, Err)
    assert isinstance(result.error, BadStatus)
    assert result.error.response.data == "Not Found"
    assert result.error.response.status == 404


async def test_send_custom_error_reader() -> None:
    transport = MockTransport([reply(400, bjson({"message": "bad input"}))])
    result = await send(
        builder.post("http://example.com/users"),
        transport,
        error_reader=json_reader(lambda value: value["message"]),
    )
    assert isinstance(result, Err)
    assert isinstance(result.error, BadStatus)
    assert result.error.response.data == "bad input"


async def test_send_decoding_failure() -> None:
    transport = MockTransport([reply(200, "{not json")])
    result = await send(
        builder.get("http://example.com/users").with_expect(json_reader()),
        transport,
    )
    assert isinstance(result, Err)
    assert isinstance(result.error, DecodingFailure)


@pytest.mark.parametrize(
    "outcome,error",
    [
        (RawBadUrl("::"), BadUrl("::")),
        (RawTimeout(), Timeout()),
        (RawNetworkError("refused"), NetworkError()),
    ],
)
async def test_send_transport_failures(outcome: Any, error: Any) -> None:
    result = await send(builder.get("::"), MockTransport([outcome]))
    assert result == Err(error)


async def test_send_zero_status_policy() -> None:
    transport = MockTransport([reply(0, "[1]")])
    spec = builder.get("file:///data.json").with_expect(json_reader())
    result = await send(spec, transport)
    assert isinstance(result, Err)
    assert isinstance(result.error, BadStatus)

    result = await send(spec.with_zero_status_allowed(), transport)
    assert isinstance(result, Ok)
    assert result.value.data == [1]


async def test_send_cache_buster(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("httpbuilder.client._now_millis", lambda: 1234)
    transport = MockTransport([reply(200, "")])
    spec = (
        builder.get("http://example.com/users")
        .with_query_param("a", "1")
        .with_cache_buster("_")
    )
    await send(spec, transport)
    assert transport.requests[0].url == "http://example.com/users?a=1&_=1234"
    assert spec.query_params == (("a", "1"),)


async def test_cache_buster_uses_current_time() -> None:
    transport = MockTransport([reply(200, "")])
    await send(builder.get("http://x").with_cache_buster("cb"), transport)
    url = transport.requests[0].url
    assert url.startswith("http://x?cb=")
    assert url.split("=", 1)[1].isdigit()


async def test_spec_send_and_to_task() -> None:
    transport = MockTransport([reply(200, "hello"), reply(500, "boom")])
    spec = builder.get("http://example.com/users").with_expect(string_reader)

    result = await spec.send(transport)
    assert isinstance(result, Ok)
    assert result.value.data == "hello"

    task = spec.to_task(transport)
    assert isinstance(task, asyncio.Task)
    result = await task
    assert isinstance(result, Err)
    assert isinstance(result.error, BadStatus)
    assert result.error.response.data == "boom"


async def test_to_task_can_be_cancelled() -> None:
    started = asyncio.Event()

    async def hanging(request: TransportRequest) -> RawSuccess:
        started.set()
        await asyncio.sleep(3600)
        raise AssertionError("unreachable")

    task = to_task(builder.get("http://x"), hanging)
    await started.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task


async def test_mock_transport_cycles() -> None:
    transport = MockTransport([reply(200, "a"), reply(200, "b")])
    spec = builder.get("http://x").with_expect(string_reader)
    bodies = []
    for _ in range(3):
        result = await send(spec, transport)
        bodies.append(result.unwrap().data)
    assert bodies == ["a", "b", "a"]
