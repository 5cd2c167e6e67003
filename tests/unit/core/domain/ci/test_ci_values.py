from unittest.mock import MagicMock

import pytest
from pydantic import SecretStr

from authorship_engine.core.domain.ci import CiContext, CiEventKind, MergeEvent
from authorship_engine.core.domain.ci.value_objects import (
    CiCredential,
    CiProviderType,
    CredentialKind,
)


def test_job_token_is_sent_as_job_token_header():
    credential = CiCredential(kind=CredentialKind.JOB_TOKEN, token=SecretStr("t1"))

    assert credential.auth_headers() == {"JOB-TOKEN": "t1"}
    assert credential.profile.url_username == "gitlab-ci-token"


def test_personal_token_is_sent_as_private_token_header():
    credential = CiCredential(kind=CredentialKind.PERSONAL_TOKEN, token=SecretStr("t2"))

    assert credential.auth_headers() == {"PRIVATE-TOKEN": "t2"}
    assert credential.profile.url_username == "oauth2"


def test_credential_repr_hides_the_token():
    credential = CiCredential(kind=CredentialKind.JOB_TOKEN, token=SecretStr("very-secret"))

    assert "very-secret" not in repr(credential)


def test_provider_marker_variable():
    assert CiProviderType.GITLAB.marker_variable == "GITLAB_CI"
    assert CiProviderType("gitlab") is CiProviderType.GITLAB


class TestMergeEvent:
    def test_kind_is_merge(self):
        event = MergeEvent(merge_commit_sha="m", head_ref="f", head_sha="h", base_ref="main")

        assert event.kind is CiEventKind.MERGE

    def test_base_sha_defaults_to_empty(self):
        event = MergeEvent(merge_commit_sha="m", head_ref="f", head_sha="h", base_ref="main")

        assert event.base_sha == ""
        assert not event.has_base_sha

    def test_to_dict(self):
        event = MergeEvent(
            merge_commit_sha="m",
            head_ref="f",
            head_sha="h",
            base_ref="main",
            base_sha="b",
            merge_request_id=7,
            head_fetch_ref="refs/gitlab/mr/7",
        )

        assert event.to_dict() == {
            "kind": "merge",
            "merge_commit_sha": "m",
            "head_ref": "f",
            "head_sha": "h",
            "base_ref": "main",
            "base_sha": "b",
            "merge_request_id": 7,
            "head_fetch_ref": "refs/gitlab/mr/7",
        }

    def test_is_immutable(self):
        event = MergeEvent(merge_commit_sha="m", head_ref="f", head_sha="h", base_ref="main")

        with pytest.raises(AttributeError):
            event.head_ref = "other"


def test_contexts_with_equal_parts_are_equal():
    repository = MagicMock()
    event = MergeEvent(merge_commit_sha="m", head_ref="f", head_sha="h", base_ref="main")

    assert CiContext(repository=repository, event=event) == CiContext(repository=repository, event=event)
