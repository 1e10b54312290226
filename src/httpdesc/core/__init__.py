"""Core descriptor components."""

from .factory import InvalidArgumentError, create, from_httpx, to_httpx
from .fetcher import HttpFetcher
from .protocols import Fetcher, HTTPResponseDescriptor

__all__ = [
    "Fetcher",
    "HTTPResponseDescriptor",
    "HttpFetcher",
    "InvalidArgumentError",
    "create",
    "from_httpx",
    "to_httpx",
]
