from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class MergeRecord:
    """A merged merge/pull request as reported by the CI provider.

    Transient: fetched in bulk, filtered down to at most one match, then dropped.
    """

    id: int
    source_branch: str
    target_branch: str
    head_sha: str
    title: str | None = None
    merge_commit_sha: str | None = None
    squash_commit_sha: str | None = None
    squash: bool | None = None

    def matches(self, commit_sha: str) -> bool:
        return commit_sha in (self.merge_commit_sha, self.squash_commit_sha)
