from pydantic import BaseModel, ConfigDict, TypeAdapter

from authorship_engine.core.domain.ci import MergeRecord


class GitLabMergeRequestDto(BaseModel):
    """Subset of GitLab's merge request resource the resolver reads."""

    model_config = ConfigDict(extra="ignore")

    iid: int
    title: str | None = None
    source_branch: str
    target_branch: str
    sha: str
    merge_commit_sha: str | None = None
    squash_commit_sha: str | None = None
    squash: bool | None = None

    def to_domain(self) -> MergeRecord:
        return MergeRecord(
            id=self.iid,
            title=self.title,
            source_branch=self.source_branch,
            target_branch=self.target_branch,
            head_sha=self.sha,
            merge_commit_sha=self.merge_commit_sha,
            squash_commit_sha=self.squash_commit_sha,
            squash=self.squash,
        )


MERGE_REQUEST_LIST = TypeAdapter(list[GitLabMergeRequestDto])
