import asyncio
from dataclasses import dataclass
from typing import Optional

import aiohttp
from yarl import URL

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
class AIOHTTP:
    """
    Transport backed by ``aiohttp.ClientSession``.

    Credentialed requests go through ``credentialed_session`` if one is
    given, otherwise through ``session``.
    """

    session: aiohttp.ClientSession
    credentialed_session: Optional[aiohttp.ClientSession] = None

    async def __call__(self, request: TransportRequest) -> TransportOutcome:
        session = self.session
        if request.credentialed and self.credentialed_session is not None:
            session = self.credentialed_session
        try:
            # the query string is already encoded
            url = URL(request.url, encoded=True)
        except (ValueError, TypeError):
            logger.debug("invalid url %r", request.url)
            return RawBadUrl(request.url)
        try:
            async with session.request(
                request.method.value,
                url,
                headers=request.outgoing_headers(),
                data=request.content,
                timeout=aiohttp.ClientTimeout(total=request.timeout),
            ) as response:
                body = await response.text(errors="replace")
                return RawSuccess(
                    status=response.status,
                    status_text=response.reason or "",
                    headers=collect_headers(response.raw_headers),
                    url=str(response.url),
                    body=body,
                )
        except aiohttp.InvalidURL:
            logger.debug("invalid url %r", request.url)
            return RawBadUrl(request.url)
        except asyncio.TimeoutError:
            logger.debug("request to %r timed out", request.url)
            return RawTimeout()
        except aiohttp.ClientError as exc:
            logger.debug("request to %r failed: %r", request.url, exc)
            return RawNetworkError(str(exc))
