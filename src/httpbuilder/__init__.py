from .builder import (
    RequestSpec,
    delete,
    get,
    head,
    options,
    patch,
    post,
    put,
    trace,
)
from .client import send, to_task
from .errors import (
    BadStatus,
    BadUrl,
    DecodingFailure,
    Error,
    HttpBuilderError,
    NetworkError,
    Timeout,
    UnwrapError,
)
from .readers import BodyReader, accept_nothing, json_reader, string_reader
from .resolver import resolve
from .result import Err, Ok, Result
from .types import (
    EMPTY_BODY,
    Body,
    BytesBody,
    BytesPart,
    EmptyBody,
    Method,
    Response,
    StringPart,
)

__all__ = (
    "RequestSpec",
    "get",
    "post",
    "put",
    "patch",
    "delete",
    "options",
    "trace",
    "head",
    "send",
    "to_task",
    "resolve",
    "BodyReader",
    "string_reader",
    "json_reader",
    "accept_nothing",
    "Ok",
    "Err",
    "Result",
    "Response",
    "Error",
    "BadUrl",
    "Timeout",
    "NetworkError",
    "BadStatus",
    "DecodingFailure",
    "HttpBuilderError",
    "UnwrapError",
    "Method",
    "Body",
    "EmptyBody",
    "BytesBody",
    "EMPTY_BODY",
    "StringPart",
    "BytesPart",
)
