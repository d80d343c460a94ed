from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from ..utils import collect_headers, logger
from .types import (
    RawBadUrl,
    RawNetworkError,
    RawSuccess,
    RawTimeout,
    TransportOutcome,
    TransportRequest,
)


@dataclass(frozen=True)
class HTTPX:
    """
    Transport backed by ``httpx.AsyncClient``.

    Credentialed requests go through ``credentialed_client`` if one is given,
    otherwise through ``client`` with its auth and cookies. Plain requests
    never carry the client's auth or cookies.
    """

    client: httpx.AsyncClient
    credentialed_client: Optional[httpx.AsyncClient] = None

    async def __call__(self, request: TransportRequest) -> TransportOutcome:
        client = self.client
        options: Dict[str, Any] = {}
        if request.credentialed:
            if self.credentialed_client is not None:
                client = self.credentialed_client
        else:
            options["auth"] = None
        try:
            outgoing = client.build_request(
                method=request.method.value,
                url=request.url,
                headers=request.outgoing_headers(),
                content=request.content,
                timeout=request.timeout,
            )
            if not request.credentialed:
                outgoing.headers.pop("Cookie", None)
            response = await client.send(outgoing, **options)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol):
            logger.debug("invalid url %r", request.url)
            return RawBadUrl(request.url)
        except httpx.TimeoutException:
            logger.debug("request to %r timed out", request.url)
            return RawTimeout()
        except httpx.HTTPError as exc:
            logger.debug("request to %r failed: %r", request.url, exc)
            return RawNetworkError(str(exc))
        return RawSuccess(
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=collect_headers(response.headers.raw),
            url=str(response.url),
            body=response.text,
        )
