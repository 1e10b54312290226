"""Protocol definitions for descriptor components."""

from dataclasses import dataclass, field
from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping, Protocol


@dataclass(frozen=True)
class HTTPResponseDescriptor:
    """Immutable HTTP response head, detached from any connection.

    ``header_fields`` is a read-only view over a private copy of the mapping
    passed in, so later changes to the caller's dict are not visible here.
    """

    url: str
    status_code: int
    http_version: str
    header_fields: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(
            self, "header_fields", MappingProxyType(dict(self.header_fields))
        )

    def header(self, name: str, default: str | None = None) -> str | None:
        """Look up a header field ignoring case."""
        wanted = name.lower()
        for key, value in self.header_fields.items():
            if key.lower() == wanted:
                return value
        return default

    @property
    def is_upgrade(self) -> bool:
        """Whether this is a 101 response switching to websocket."""
        if self.status_code != HTTPStatus.SWITCHING_PROTOCOLS:
            return False
        connection = self.header("Connection", "")
        tokens = [token.strip().lower() for token in connection.split(",")]
        upgrade = self.header("Upgrade", "")
        return "upgrade" in tokens and upgrade.lower() == "websocket"

    @property
    def serialized_data(self) -> bytes:
        """Serialize the status line and headers as they appear on the wire.

        Text is encoded as UTF-8, which leaves ASCII heads byte-for-byte
        identical to their latin-1 form.
        """
        try:
            reason = HTTPStatus(self.status_code).phrase
        except ValueError:
            reason = ""
        status_line = f"{self.http_version} {self.status_code}"
        if reason:
            status_line += f" {reason}"

        lines = [status_line]
        lines.extend(f"{key}: {value}" for key, value in self.header_fields.items())
        return ("\r\n".join(lines) + "\r\n\r\n").encode("utf-8")

    def to_dict(self) -> dict:
        """Return a JSON-serializable dict."""
        return {
            "url": self.url,
            "status_code": self.status_code,
            "http_version": self.http_version,
            "headers": dict(self.header_fields),
        }


class Fetcher(Protocol):
    """Protocol for anything that turns a URL into a response descriptor."""

    async def fetch(self, url: str, method: str = "GET") -> HTTPResponseDescriptor:
        """Fetch a URL and describe the response."""
        ...

    async def close(self):
        """Release any held resources."""
        ...
