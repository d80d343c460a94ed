import logging
import uuid
from typing import Dict, Iterable, Optional, Sequence, Tuple
from urllib.parse import quote_plus

from .types import BytesPart, Part, StringPart

logger = logging.getLogger("httpbuilder")


def encode_pairs(pairs: Iterable[Tuple[str, str]]) -> str:
    """
    Percent-encode ``key=value`` pairs and join them with ``&``. Spaces are
    encoded as ``+``.
    """
    return "&".join(f"{quote_plus(key)}={quote_plus(value)}" for key, value in pairs)


def append_query(url: str, pairs: Sequence[Tuple[str, str]]) -> str:
    if not pairs:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{encode_pairs(pairs)}"


def _quote_header_param(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def encode_multipart(
    parts: Iterable[Part], boundary: Optional[str] = None
) -> Tuple[str, bytes]:
    """
    Encode parts as ``multipart/form-data``, returning the content type
    (including the boundary) and the body.
    """
    boundary = boundary or uuid.uuid4().hex
    chunks = []
    for part in parts:
        chunks.append(f"--{boundary}\r\n".encode("utf-8"))
        name = _quote_header_param(part.name)
        disposition = f'Content-Disposition: form-data; name="{name}"'
        if isinstance(part, StringPart):
            chunks.append(f"{disposition}\r\n\r\n".encode("utf-8"))
            chunks.append(part.value.encode("utf-8"))
        elif isinstance(part, BytesPart):
            chunks.append(
                (
                    f'{disposition}; filename="{_quote_header_param(part.filename)}"\r\n'
                    f"Content-Type: {part.mime_type}\r\n\r\n"
                ).encode("utf-8")
            )
            chunks.append(part.content)
        else:
            raise TypeError(f"unsupported multipart part {part!r}")
        chunks.append(b"\r\n")
    chunks.append(f"--{boundary}--\r\n".encode("utf-8"))
    return f"multipart/form-data; boundary={boundary}", b"".join(chunks)


def collect_headers(raw: Iterable[Tuple[bytes, bytes]]) -> Dict[str, str]:
    """
    Build a header mapping from raw header pairs, keeping names as received.
    Repeated names are joined with ``", "``.
    """
    headers: Dict[str, str] = {}
    for raw_name, raw_value in raw:
        name = raw_name.decode("latin-1")
        value = raw_value.decode("latin-1")
        if name in headers:
            headers[name] = f"{headers[name]}, {value}"
        else:
            headers[name] = value
    return headers
