"""Immutable HTTP response descriptors and their httpx adapters."""

from .core import HTTPResponseDescriptor, InvalidArgumentError, create

__version__ = "0.1.0"

__all__ = ["HTTPResponseDescriptor", "InvalidArgumentError", "create", "__version__"]
