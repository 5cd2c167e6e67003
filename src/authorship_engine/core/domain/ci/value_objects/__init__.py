from authorship_engine.core.domain.ci.value_objects.ci_provider_type import CiProviderType
from authorship_engine.core.domain.ci.value_objects.credential import (
    CREDENTIAL_PROFILES,
    CiCredential,
    CredentialKind,
    CredentialProfile,
)

__all__ = [
    "CREDENTIAL_PROFILES",
    "CiCredential",
    "CiProviderType",
    "CredentialKind",
    "CredentialProfile",
]
