from authorship_engine.infrastructure.tools.ci.gitlab.dtos.gitlab_merge_request_dto import (
    MERGE_REQUEST_LIST,
    GitLabMergeRequestDto,
)

__all__ = ["MERGE_REQUEST_LIST", "GitLabMergeRequestDto"]
