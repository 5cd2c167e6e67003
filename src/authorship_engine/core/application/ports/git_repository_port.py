from abc import ABC, abstractmethod
from pathlib import Path

from authorship_engine.core.domain.diff import AddedLineSet


class GitRepositoryPort(ABC):
    """Handle to a local working copy the engine can run git against."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """Root directory of the working copy."""
        pass

    @abstractmethod
    def run(self, args: list[str]) -> str:
        """Run a git subcommand inside the working copy and return its stdout."""
        pass

    @abstractmethod
    def rev_parse(self, rev: str) -> str:
        pass

    @abstractmethod
    def diff_added_lines(
        self, from_rev: str, to_rev: str, paths: list[str] | None = None
    ) -> AddedLineSet:
        """Lines added between two revisions, as reported by git's own differ."""
        pass

    @abstractmethod
    def discard(self) -> None:
        """Delete the working copy from disk."""
        pass
