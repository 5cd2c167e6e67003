from authorship_engine.infrastructure.configuration.engine_settings import EngineSettings
from authorship_engine.infrastructure.configuration.gitlab_ci_settings import GitLabCiSettings

__all__ = ["EngineSettings", "GitLabCiSettings"]
