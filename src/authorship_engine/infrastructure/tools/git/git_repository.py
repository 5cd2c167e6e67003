from __future__ import annotations

import shutil
from pathlib import Path

from authorship_engine.core.application.ports import GitRepositoryPort
from authorship_engine.core.domain.diff import AddedLineSet
from authorship_engine.infrastructure.observability.logger_factory_service import get_logger
from authorship_engine.infrastructure.tools.git.git_command_runner import GitCommandRunner
from authorship_engine.infrastructure.tools.git.git_diff_parser import parse_added_lines

logger = get_logger(__name__)

# Pinned so user configuration (diff.noprefix, diff.algorithm, external drivers, renames)
# cannot change the output.
_DIFF_ARGS = [
    "-c",
    "core.quotePath=true",
    "diff",
    "--unified=0",
    "--no-color",
    "--no-ext-diff",
    "--no-renames",
    "--diff-algorithm=myers",
    "--indent-heuristic",
    "--src-prefix=a/",
    "--dst-prefix=b/",
]


class GitRepository(GitRepositoryPort):
    def __init__(self, path: Path, runner: GitCommandRunner | None = None) -> None:
        self._path = Path(path)
        self._runner = runner or GitCommandRunner()

    @classmethod
    def open(cls, path: str | Path, runner: GitCommandRunner | None = None) -> GitRepository:
        """Open the working copy containing ``path``; fails if it is not inside one."""
        runner = runner or GitCommandRunner()
        toplevel = runner.run(["-C", str(path), "rev-parse", "--show-toplevel"]).strip()
        return cls(Path(toplevel), runner)

    @property
    def path(self) -> Path:
        return self._path

    def run(self, args: list[str]) -> str:
        return self._runner.run(["-C", str(self._path), *args])

    def rev_parse(self, rev: str) -> str:
        return self.run(["rev-parse", "--verify", rev]).strip()

    def diff_added_lines(
        self, from_rev: str, to_rev: str, paths: list[str] | None = None
    ) -> AddedLineSet:
        args = [*_DIFF_ARGS, from_rev, to_rev]
        if paths:
            args += ["--", *paths]
        return parse_added_lines(self.run(args))

    def show_file(self, rev: str, path: str) -> str:
        return self.run(["show", f"{rev}:{path}"])

    def changed_paths(self, from_rev: str, to_rev: str) -> list[str]:
        """Paths touched between two revisions, including deleted ones."""
        output = self.run(["diff", "--name-only", "-z", "--no-renames", from_rev, to_rev])
        return [path for path in output.split("\0") if path]

    def read_files(self, rev: str, paths: list[str]) -> dict[str, str]:
        """Contents at ``rev`` of those ``paths`` that exist there."""
        if not paths:
            return {}
        listing = self.run(["ls-tree", "-r", "-z", "--name-only", rev, *paths])
        return {path: self.show_file(rev, path) for path in listing.split("\0") if path}

    def fetch_notes(self, remote: str, notes_ref: str) -> None:
        self.run(["fetch", remote, f"+{notes_ref}:{notes_ref}"])

    def discard(self) -> None:
        if self._path.exists():
            shutil.rmtree(self._path)
        logger.info("Workspace removed", path=str(self._path))

    def __repr__(self) -> str:
        return f"GitRepository({str(self._path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GitRepository):
            return NotImplemented
        return self._path == other._path

    def __hash__(self) -> int:
        return hash(self._path)
