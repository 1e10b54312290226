"""Construction of response descriptors and conversion to and from httpx."""

import logging
from typing import Mapping

import httpx

from .protocols import HTTPResponseDescriptor

logger = logging.getLogger(__name__)


class InvalidArgumentError(ValueError):
    """Raised when a descriptor cannot be built from the given arguments."""


def create(
    url: str | httpx.URL,
    status_code: int,
    http_version: str,
    header_fields: Mapping[str, str] | None,
) -> HTTPResponseDescriptor:
    """Build a new descriptor whose fields are exactly the given arguments.

    A missing ``url`` is rejected; ``header_fields=None`` means no headers.
    Status code and version are stored as given, without validation.
    """
    if url is None:
        raise InvalidArgumentError("url is required")
    if header_fields is None:
        header_fields = {}

    logger.debug("Creating descriptor: %s %s %s", http_version, status_code, url)
    return HTTPResponseDescriptor(
        url=str(url),
        status_code=status_code,
        http_version=http_version,
        header_fields=header_fields,
    )


def _merge_headers(headers: httpx.Headers) -> dict[str, str]:
    """Collapse repeated headers into one comma separated value, keeping case."""
    merged: dict[str, str] = {}
    names: dict[str, str] = {}
    for raw_key, raw_value in headers.raw:
        key = raw_key.decode(headers.encoding)
        value = raw_value.decode(headers.encoding)
        lower = key.lower()
        if lower in names:
            merged[names[lower]] += f", {value}"
        else:
            names[lower] = key
            merged[key] = value
    return merged


def from_httpx(
    response: httpx.Response, url: str | httpx.URL | None = None
) -> HTTPResponseDescriptor:
    """Describe an httpx response, taking the URL from its request if not given."""
    if url is None:
        try:
            url = response.request.url
        except RuntimeError:
            raise InvalidArgumentError(
                "response has no request and no url was given"
            ) from None

    return create(
        url=url,
        status_code=response.status_code,
        http_version=response.http_version,
        header_fields=_merge_headers(response.headers),
    )


def to_httpx(
    descriptor: HTTPResponseDescriptor, content: bytes | None = None
) -> httpx.Response:
    """Build an httpx response equivalent to the descriptor.

    Header names and values are passed as UTF-8 bytes. When ``content`` is
    given httpx adds a matching Content-Length header, so converting back
    with ``from_httpx`` only yields an equal descriptor for a bodiless response.
    """
    headers = [
        (key.encode("utf-8"), value.encode("utf-8"))
        for key, value in descriptor.header_fields.items()
    ]
    return httpx.Response(
        status_code=descriptor.status_code,
        headers=headers,
        content=content or None,
        request=httpx.Request("GET", descriptor.url),
        extensions={"http_version": descriptor.http_version.encode("utf-8")},
    )
