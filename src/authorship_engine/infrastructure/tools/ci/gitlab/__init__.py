from authorship_engine.infrastructure.tools.ci.gitlab.gitlab_ci_context_resolver import (
    GitLabCiContextResolver,
)
from authorship_engine.infrastructure.tools.ci.gitlab.gitlab_http_client import GitLabHttpClient

__all__ = ["GitLabCiContextResolver", "GitLabHttpClient"]
