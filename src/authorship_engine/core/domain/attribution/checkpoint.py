from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

HUMAN_AUTHOR = "human"


@dataclass(frozen=True, kw_only=True)
class CheckpointSnapshot:
    """File contents right after one recorded checkpoint.

    ``author`` is the contributor the checkpoint's new lines belong to, e.g. the
    name of an AI agent, or ``HUMAN_AUTHOR``.
    """

    checkpoint_id: str
    author: str
    files: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class AttributionResult:
    """Author of every line of the final tree, keyed by path; index 0 is line 1."""

    target_sha: str | None
    lines_by_path: Mapping[str, tuple[str, ...]]

    def lines_by_author(self, path: str) -> dict[str, list[int]]:
        grouped: dict[str, list[int]] = {}
        for index, author in enumerate(self.lines_by_path.get(path, ()), start=1):
            grouped.setdefault(author, []).append(index)
        return grouped
