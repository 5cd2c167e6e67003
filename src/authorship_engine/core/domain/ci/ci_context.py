from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from authorship_engine.core.application.ports.git_repository_port import GitRepositoryPort


class CiEventKind(StrEnum):
    MERGE = "merge"


@dataclass(frozen=True, kw_only=True)
class MergeEvent:
    """A merge request landed on its target branch.

    ``base_sha`` is empty when the provider's list API does not expose it;
    consumers should check ``has_base_sha`` rather than assume it is set.
    """

    merge_commit_sha: str
    head_ref: str
    head_sha: str
    base_ref: str
    base_sha: str = ""
    merge_request_id: int | None = None
    head_fetch_ref: str = ""

    @property
    def kind(self) -> CiEventKind:
        return CiEventKind.MERGE

    @property
    def has_base_sha(self) -> bool:
        return bool(self.base_sha)

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "merge_commit_sha": self.merge_commit_sha,
            "head_ref": self.head_ref,
            "head_sha": self.head_sha,
            "base_ref": self.base_ref,
            "base_sha": self.base_sha,
            "merge_request_id": self.merge_request_id,
            "head_fetch_ref": self.head_fetch_ref,
        }


CiEvent: TypeAlias = MergeEvent


@dataclass(frozen=True)
class CiContext:
    """Resolved merge event plus the working copy it was materialized into."""

    repository: GitRepositoryPort
    event: CiEvent
