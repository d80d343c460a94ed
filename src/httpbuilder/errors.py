from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .types import Response

B = TypeVar("B")


class HttpBuilderError(Exception):
    pass


class UnwrapError(HttpBuilderError):
    def __init__(self, error: Any):
        self.error = error
        super().__init__(error)


@dataclass(frozen=True)
class BadUrl:
    url: str


@dataclass(frozen=True)
class Timeout:
    pass


@dataclass(frozen=True)
class NetworkError:
    pass


@dataclass(frozen=True)
class BadStatus(Generic[B]):
    """
    The server replied outside of the 2xx range. ``response.data`` holds the
    body as decoded by the error reader.
    """

    response: Response[B]


@dataclass(frozen=True)
class DecodingFailure:
    message: str


Error = Union[BadUrl, Timeout, NetworkError, BadStatus[B], DecodingFailure]
