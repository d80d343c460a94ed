from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional, Tuple, Union

from ..types import Body, BytesBody, Headers, Method, Seconds


@dataclass(frozen=True)
class TransportRequest:
    method: Method
    url: str
    headers: Tuple[Tuple[str, str], ...] = field(repr=False)
    body: Body
    timeout: Optional[Seconds]
    credentialed: bool

    @property
    def content(self) -> Optional[bytes]:
        if isinstance(self.body, BytesBody):
            return self.body.content
        return None

    def outgoing_headers(self) -> List[Tuple[str, str]]:
        """
        Headers to put on the wire: the configured ones plus a
        ``Content-Type`` taken from the body unless one was set explicitly.
        """
        headers = list(self.headers)
        if isinstance(self.body, BytesBody) and not any(
            name.lower() == "content-type" for name, _ in headers
        ):
            headers.append(("Content-Type", self.body.mime_type))
        return headers


@dataclass(frozen=True)
class RawSuccess:
    """
    The server replied. Any status code, including 4xx and 5xx, ends up here.
    """

    status: int
    status_text: str
    headers: Headers
    url: str
    body: str


@dataclass(frozen=True)
class RawBadUrl:
    url: str


@dataclass(frozen=True)
class RawTimeout:
    pass


@dataclass(frozen=True)
class RawNetworkError:
    reason: str = ""


TransportOutcome = Union[RawSuccess, RawBadUrl, RawTimeout, RawNetworkError]

Transport = Callable[[TransportRequest], Awaitable[TransportOutcome]]
