from __future__ import annotations

from dataclasses import dataclass

from authorship_engine.core.exceptions.infra_error import InfraError


@dataclass
class NetworkError(InfraError):
    """API unreachable, timed out, or answered with a non-success status."""

    provider: str
    message: str
    status_code: int | None = None
    body: str | None = None

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        body = f" body={self.body!r}" if self.body else ""
        return f"{self.provider}: {self.message}{code}{body}"
