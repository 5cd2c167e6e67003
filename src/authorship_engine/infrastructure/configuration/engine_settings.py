from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EngineSettings(BaseSettings):
    """Tunables of the attribution engine, read from ``AUTHORSHIP_*`` variables."""

    # ── Merge request query ──
    lookback_minutes: int = Field(
        default=15,
        gt=0,
        description="How far back merged requests are searched; exceeds typical CI start latency",
    )
    page_size: int = Field(default=100, gt=0, le=100)
    request_timeout_seconds: float = Field(default=30.0, gt=0)

    # ── Workspace ──
    clone_dir: str = Field(default="authorship-ci-clone", description="Fixed, non-reentrant")
    git_binary: str = "git"
    resolve_base_sha: bool = Field(
        default=False,
        description="Fill base_sha with the first parent of the rewrite target (one extra git call)",
    )

    # ── Notes sync ──
    notes_ref: str = "refs/notes/ai"
    notes_remote: str = "origin"

    model_config = SettingsConfigDict(env_prefix="AUTHORSHIP_", env_file=None, extra="ignore")
