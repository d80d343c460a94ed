from dataclasses import dataclass, field
from enum import Enum, unique
from types import MappingProxyType
from typing import Generic, Mapping, Tuple, TypeVar, Union

T = TypeVar("T")

Seconds = Union[float, int]
Headers = Mapping[str, str]
Pairs = Tuple[Tuple[str, str], ...]


@unique
class Method(Enum):
    get = "GET"
    post = "POST"
    put = "PUT"
    patch = "PATCH"
    delete = "DELETE"
    options = "OPTIONS"
    trace = "TRACE"
    head = "HEAD"


@dataclass(frozen=True)
class EmptyBody:
    pass


@dataclass(frozen=True)
class BytesBody:
    mime_type: str
    content: bytes


Body = Union[EmptyBody, BytesBody]

EMPTY_BODY = EmptyBody()


@dataclass(frozen=True)
class Response(Generic[T]):
    """
    A response from the server along with its decoded body.

    ``headers`` keeps header names exactly as the transport received them
    and is read-only. It is left out of the hash.
    """

    data: T
    status: int
    status_text: str
    headers: Headers = field(hash=False)
    url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


@dataclass(frozen=True)
class StringPart:
    name: str
    value: str


@dataclass(frozen=True)
class BytesPart:
    name: str
    filename: str
    mime_type: str
    content: bytes


Part = Union[StringPart, BytesPart]
