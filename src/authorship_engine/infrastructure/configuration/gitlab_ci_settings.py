from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from authorship_engine.core.domain.ci.value_objects import CiCredential, CredentialKind
from authorship_engine.core.exceptions import ConfigurationError

_REQUIRED_VARIABLES = (
    ("api_url", "CI_API_V4_URL"),
    ("project_id", "CI_PROJECT_ID"),
    ("commit_sha", "CI_COMMIT_SHA"),
    ("server_url", "CI_SERVER_URL"),
    ("project_path", "CI_PROJECT_PATH"),
)


class GitLabCiSettings(BaseSettings):
    """Predefined variables GitLab exports into every CI job."""

    # ── Job variables ──
    api_url: str | None = Field(default=None, alias="CI_API_V4_URL")
    project_id: str | None = Field(default=None, alias="CI_PROJECT_ID")
    commit_sha: str | None = Field(default=None, alias="CI_COMMIT_SHA")
    server_url: str | None = Field(default=None, alias="CI_SERVER_URL")
    project_path: str | None = Field(default=None, alias="CI_PROJECT_PATH")

    # ── Credentials (job token preferred) ──
    job_token: SecretStr | None = Field(default=None, alias="CI_JOB_TOKEN")
    gitlab_token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")

    model_config = SettingsConfigDict(env_file=None, extra="ignore")

    def validate_ci_environment(self) -> None:
        """
        Validates that every variable the resolver needs is present,
        including one of the two credential forms.
        """
        missing = [alias for name, alias in _REQUIRED_VARIABLES if not getattr(self, name)]
        if missing:
            raise ConfigurationError(
                f"GitLab CI environment variable(s) not set: {', '.join(missing)}"
            )
        self.credential()

    def credential(self) -> CiCredential:
        if self.job_token and self.job_token.get_secret_value():
            return CiCredential(kind=CredentialKind.JOB_TOKEN, token=self.job_token)
        if self.gitlab_token and self.gitlab_token.get_secret_value():
            return CiCredential(kind=CredentialKind.PERSONAL_TOKEN, token=self.gitlab_token)
        raise ConfigurationError(
            "Neither CI_JOB_TOKEN nor GITLAB_TOKEN environment variable is set"
        )
