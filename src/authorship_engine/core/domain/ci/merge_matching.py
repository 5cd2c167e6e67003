"""Pure functions that pick the merge record behind a CI commit and its rewrite target."""

from collections.abc import Iterable

from authorship_engine.core.domain.ci.merge_record import MergeRecord


def find_matching_record(records: Iterable[MergeRecord], commit_sha: str) -> MergeRecord | None:
    """Return the first record whose merge or squash commit is ``commit_sha``."""
    return next((record for record in records if record.matches(commit_sha)), None)


def resolve_effective_rewrite_sha(record: MergeRecord, commit_sha: str) -> str:
    """Return the commit that carries the merged content.

    When the match happened on the merge commit but the provider also created a
    squash commit, the squash commit is the one whose tree holds the changes.
    """
    if record.squash_commit_sha == commit_sha:
        return commit_sha
    if record.squash_commit_sha:
        return record.squash_commit_sha
    return commit_sha
