import os
import subprocess
from pathlib import Path

from authorship_engine.core.exceptions import SubprocessError
from authorship_engine.infrastructure.observability.logger_factory_service import get_logger
from authorship_engine.infrastructure.observability.redaction_service import (
    redact_command,
    redact_text,
)

logger = get_logger(__name__)


class GitCommandRunner:
    """Runs the git binary with an argument vector. Any non-zero exit is fatal."""

    def __init__(self, git_binary: str = "git") -> None:
        self._git_binary = git_binary

    def run(self, args: list[str], cwd: Path | None = None) -> str:
        command = [self._git_binary, *args]
        safe_command = redact_command(command)
        logger.debug("Running git", command=safe_command, cwd=str(cwd) if cwd else None)

        env = {**os.environ, "GIT_TERMINAL_PROMPT": "0"}
        try:
            completed = subprocess.run(
                command,
                cwd=cwd,
                env=env,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise SubprocessError(
                command=safe_command, returncode=None, stderr=str(exc)
            ) from exc

        if completed.returncode != 0:
            logger.error(
                "git command failed",
                command=safe_command,
                returncode=completed.returncode,
            )
            raise SubprocessError(
                command=safe_command,
                returncode=completed.returncode,
                stderr=redact_text(_decode(completed.stderr)),
            )
        return _decode(completed.stdout)


def _decode(output: bytes) -> str:
    # Text mode would fold a lone "\r" into "\n" and shift line numbers.
    return output.decode("utf-8", errors="surrogateescape")
