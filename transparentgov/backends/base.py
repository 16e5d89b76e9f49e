"""Base protocol and error taxonomy for text-generation backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class GenerationError(Exception):
    """A generation attempt failed; ``str(exc)`` is safe to show to users."""


class ConfigurationError(GenerationError):
    """Credential or endpoint configuration is missing."""


class TransportError(GenerationError):
    """The request could not be completed (DNS, timeout, connection reset)."""


class RemoteError(GenerationError):
    """The endpoint answered with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(GenerationError):
    """The endpoint answered successfully but without candidate text."""


@runtime_checkable
class GenerationBackend(Protocol):
    """Interface that all text-generation backends must implement."""

    name: str

    async def generate(self, prompt: str) -> str:
        """Send a single-turn prompt and return the generated text verbatim."""
        ...
