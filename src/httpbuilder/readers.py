"""
Body readers turn the raw text of a response body into ``Ok(value)`` or
``Err(message)``. They are plain functions so any callable with the same
shape can be used with ``RequestSpec.with_expect`` or as an error reader.
"""
import json
from typing import Any, Callable, Optional, TypeVar

from .result import Err, Ok, Result

T = TypeVar("T")

BodyReader = Callable[[str], Result[T, str]]
Decoder = Callable[[Any], T]


def string_reader(body: str) -> Result[str, str]:
    return Ok(body)


def accept_nothing(body: str) -> Result[None, str]:
    return Ok(None)


def json_reader(decoder: Optional[Decoder[T]] = None) -> BodyReader[T]:
    """
    Return a reader parsing the body as JSON and handing the parsed value
    to ``decoder``. Without a decoder the parsed value is returned as is.

    Invalid or too deeply nested JSON, or a decoder raising ``ValueError``,
    ``TypeError``, ``LookupError`` or ``AttributeError``, produces ``Err``
    with the error text.
    """

    def reader(body: str) -> Result[T, str]:
        try:
            parsed = json.loads(body)
        except (json.JSONDecodeError, RecursionError) as exc:
            return Err(str(exc))
        if decoder is None:
            return Ok(parsed)
        try:
            return Ok(decoder(parsed))
        except (ValueError, TypeError, LookupError, AttributeError) as exc:
            return Err(f"{type(exc).__name__}: {exc}")

    return reader
