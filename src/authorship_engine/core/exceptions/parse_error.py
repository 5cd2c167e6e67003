from __future__ import annotations

from dataclasses import dataclass

from authorship_engine.core.exceptions.infra_error import InfraError


@dataclass
class ParseError(InfraError):
    """A provider response body could not be decoded into the expected shape."""

    provider: str
    message: str
    snippet: str | None = None

    def __str__(self) -> str:
        snippet = f" snippet={self.snippet!r}" if self.snippet else ""
        return f"{self.provider}: {self.message}{snippet}"
