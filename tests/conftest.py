import shutil
from datetime import datetime, timezone

import pytest
from pydantic import SecretStr

from authorship_engine.core.domain.ci.value_objects import CiCredential, CredentialKind
from authorship_engine.infrastructure.configuration import EngineSettings, GitLabCiSettings

_CI_VARIABLES = (
    "CI",
    "GITLAB_CI",
    "CI_API_V4_URL",
    "CI_PROJECT_ID",
    "CI_COMMIT_SHA",
    "CI_SERVER_URL",
    "CI_PROJECT_PATH",
    "CI_JOB_TOKEN",
    "GITLAB_TOKEN",
    "AUTHORSHIP_LOOKBACK_MINUTES",
    "AUTHORSHIP_PAGE_SIZE",
    "AUTHORSHIP_REQUEST_TIMEOUT_SECONDS",
    "AUTHORSHIP_CLONE_DIR",
    "AUTHORSHIP_GIT_BINARY",
    "AUTHORSHIP_RESOLVE_BASE_SHA",
    "AUTHORSHIP_NOTES_REF",
    "AUTHORSHIP_NOTES_REMOTE",
)


@pytest.fixture(autouse=True)
def clean_ci_env(monkeypatch):
    """Tests never see the variables of the CI job running them."""
    for name in _CI_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def gitlab_env(monkeypatch):
    values = {
        "GITLAB_CI": "true",
        "CI_API_V4_URL": "https://gitlab.example.com/api/v4",
        "CI_PROJECT_ID": "42",
        "CI_COMMIT_SHA": "c0ffee",
        "CI_SERVER_URL": "https://gitlab.example.com",
        "CI_PROJECT_PATH": "group/project",
        "CI_JOB_TOKEN": "job-secret",
    }
    for name, value in values.items():
        monkeypatch.setenv(name, value)
    return values


@pytest.fixture
def ci_settings():
    return GitLabCiSettings(
        CI_API_V4_URL="https://gitlab.example.com/api/v4",
        CI_PROJECT_ID="42",
        CI_COMMIT_SHA="c0ffee",
        CI_SERVER_URL="https://gitlab.example.com",
        CI_PROJECT_PATH="group/project",
        CI_JOB_TOKEN="job-secret",
    )


@pytest.fixture
def engine_settings():
    return EngineSettings()


@pytest.fixture
def job_credential():
    return CiCredential(kind=CredentialKind.JOB_TOKEN, token=SecretStr("job-secret"))


@pytest.fixture
def personal_credential():
    return CiCredential(kind=CredentialKind.PERSONAL_TOKEN, token=SecretStr("glpat-secret"))


@pytest.fixture
def fixed_clock():
    now = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)
    return lambda: now


@pytest.fixture
def git_binary():
    binary = shutil.which("git")
    if binary is None:
        pytest.skip("git is not installed")
    return binary
