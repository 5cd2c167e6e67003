from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import SecretStr


class CredentialKind(StrEnum):
    JOB_TOKEN = "job_token"
    PERSONAL_TOKEN = "personal_token"


@dataclass(frozen=True)
class CredentialProfile:
    """How one credential kind is presented to the provider."""

    header_name: str
    url_username: str


CREDENTIAL_PROFILES: dict[CredentialKind, CredentialProfile] = {
    CredentialKind.JOB_TOKEN: CredentialProfile(header_name="JOB-TOKEN", url_username="gitlab-ci-token"),
    CredentialKind.PERSONAL_TOKEN: CredentialProfile(header_name="PRIVATE-TOKEN", url_username="oauth2"),
}


@dataclass(frozen=True)
class CiCredential:
    kind: CredentialKind
    token: SecretStr

    @property
    def profile(self) -> CredentialProfile:
        return CREDENTIAL_PROFILES[self.kind]

    def auth_headers(self) -> dict[str, str]:
        return {self.profile.header_name: self.token.get_secret_value()}
