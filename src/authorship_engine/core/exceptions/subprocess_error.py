from __future__ import annotations

from dataclasses import dataclass, field

from authorship_engine.core.exceptions.infra_error import InfraError


@dataclass
class SubprocessError(InfraError):
    """A git invocation could not be started or exited non-zero.

    ``command`` must already be redacted; it is rendered verbatim.
    """

    command: list[str] = field(default_factory=list)
    returncode: int | None = None
    stderr: str = ""

    def __str__(self) -> str:
        rendered = " ".join(self.command)
        if self.returncode is None:
            return f"Failed to start `{rendered}`: {self.stderr}"
        return f"`{rendered}` exited with status {self.returncode}: {self.stderr.strip()}"
