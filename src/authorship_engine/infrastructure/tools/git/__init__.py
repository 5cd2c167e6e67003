from authorship_engine.infrastructure.tools.git.git_command_runner import GitCommandRunner
from authorship_engine.infrastructure.tools.git.git_repository import GitRepository

__all__ = ["GitCommandRunner", "GitRepository"]
