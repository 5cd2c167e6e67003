from enum import StrEnum


class CiProviderType(StrEnum):
    """Closed set of CI platforms whose merge events the engine can resolve.

    Each member is detected by a marker variable the platform always exports.
    """

    GITLAB = "gitlab"

    @property
    def marker_variable(self) -> str:
        return _MARKER_VARIABLES[self]


_MARKER_VARIABLES = {
    CiProviderType.GITLAB: "GITLAB_CI",
}
