from __future__ import annotations

import urllib.parse
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

from pydantic import ValidationError

from authorship_engine.core.application.ports import CiContextResolverPort
from authorship_engine.core.domain.ci import (
    CiContext,
    MergeEvent,
    MergeRecord,
    find_matching_record,
    resolve_effective_rewrite_sha,
)
from authorship_engine.core.domain.ci.value_objects import CiCredential, CiProviderType
from authorship_engine.core.exceptions import ParseError
from authorship_engine.infrastructure.configuration import EngineSettings, GitLabCiSettings
from authorship_engine.infrastructure.observability.logger_factory_service import get_logger
from authorship_engine.infrastructure.tools.ci.gitlab.dtos import MERGE_REQUEST_LIST
from authorship_engine.infrastructure.tools.ci.gitlab.gitlab_http_client import GitLabHttpClient
from authorship_engine.infrastructure.tools.git import GitCommandRunner, GitRepository

logger = get_logger(__name__)

_UPDATED_AFTER_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def build_authenticated_clone_url(
    server_url: str, project_path: str, credential: CiCredential
) -> str:
    """``{scheme}://{username}:{token}@{host}/{project_path}.git``; username depends on the credential kind."""
    scheme = "https" if server_url.startswith("https") else "http"
    host = server_url.removeprefix("https://").removeprefix("http://").rstrip("/")
    token = urllib.parse.quote(credential.token.get_secret_value(), safe="")
    return f"{scheme}://{credential.profile.url_username}:{token}@{host}/{project_path}.git"


def merge_request_refspec(iid: int) -> tuple[str, str]:
    """Provider-maintained head ref of a merge request and the local ref it is fetched into."""
    return f"refs/merge-requests/{iid}/head", f"refs/gitlab/mr/{iid}"


class GitLabCiContextResolver(CiContextResolverPort):
    """Resolves the merge request behind a GitLab CI job and materializes its workspace.

    Steps run strictly in order and the first failure propagates:
    environment, candidate query, matching, squash disambiguation,
    clone + fetch, context emission.
    """

    provider = CiProviderType.GITLAB

    def __init__(
        self,
        ci_settings: GitLabCiSettings | None = None,
        engine_settings: EngineSettings | None = None,
        http_client_factory: Callable[[str, CiCredential, float], GitLabHttpClient] | None = None,
        runner: GitCommandRunner | None = None,
        clock: Callable[[], datetime] | None = None,
        workdir: Path | None = None,
    ) -> None:
        self._ci_settings = ci_settings or GitLabCiSettings()
        self._engine_settings = engine_settings or EngineSettings()
        self._http_client_factory = http_client_factory or GitLabHttpClient
        self._runner = runner or GitCommandRunner(self._engine_settings.git_binary)
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._workdir = workdir or Path.cwd()

    def resolve(self) -> CiContext | None:
        ci = self._ci_settings
        ci.validate_ci_environment()
        credential = ci.credential()
        logger.info(
            "GitLab CI environment",
            commit_sha=ci.commit_sha,
            project_id=ci.project_id,
            project_path=ci.project_path,
            auth=credential.kind.value,
        )

        records = self.fetch_recent_merge_requests(credential)
        record = find_matching_record(records, ci.commit_sha)
        if record is None:
            logger.info(
                "No recent merge request corresponds to this commit. Skipping...",
                commit_sha=ci.commit_sha,
                candidates=len(records),
            )
            return None

        effective_sha = resolve_effective_rewrite_sha(record, ci.commit_sha)
        logger.info(
            "Found matching merge request",
            iid=record.id,
            matched_on="squash_commit_sha" if record.squash_commit_sha == ci.commit_sha else "merge_commit_sha",
            effective_sha=effective_sha,
        )

        repository, head_fetch_ref = self._materialize_workspace(record, credential)
        base_sha = self._lookup_base_sha(repository, effective_sha)

        event = MergeEvent(
            merge_commit_sha=effective_sha,
            head_ref=record.source_branch,
            head_sha=record.head_sha,
            base_ref=record.target_branch,
            base_sha=base_sha,
            merge_request_id=record.id,
            head_fetch_ref=head_fetch_ref,
        )
        logger.info("Created CiContext", **event.to_dict())
        return CiContext(repository=repository, event=event)

    # ── Candidate query ──

    def fetch_recent_merge_requests(self, credential: CiCredential) -> list[MergeRecord]:
        ci = self._ci_settings
        engine = self._engine_settings
        cutoff = self._clock() - timedelta(minutes=engine.lookback_minutes)
        project = urllib.parse.quote(ci.project_id, safe="")
        params = {
            "state": "merged",
            "updated_after": cutoff.astimezone(timezone.utc).strftime(_UPDATED_AFTER_FORMAT),
            "order_by": "updated_at",
            "sort": "desc",
            "per_page": engine.page_size,
        }

        client = self._http_client_factory(ci.api_url, credential, engine.request_timeout_seconds)
        response = client.get(f"projects/{project}/merge_requests", params=params)

        try:
            dtos = MERGE_REQUEST_LIST.validate_json(response.content)
        except ValidationError as exc:
            raise ParseError(
                provider="GitLab",
                message=f"Failed to parse GitLab merge request list: {exc.error_count()} error(s)",
                snippet=response.text[:200],
            ) from exc

        records = [dto.to_domain() for dto in dtos]
        logger.info("Recently merged merge requests", count=len(records))
        for record in records:
            logger.debug(
                "Candidate merge request",
                iid=record.id,
                title=record.title or "(no title)",
                source_branch=record.source_branch,
                target_branch=record.target_branch,
                head_sha=record.head_sha,
                merge_commit_sha=record.merge_commit_sha,
                squash_commit_sha=record.squash_commit_sha,
                squash=record.squash,
                matches=record.matches(ci.commit_sha),
            )
        return records

    # ── Workspace materialization ──

    def _materialize_workspace(
        self, record: MergeRecord, credential: CiCredential
    ) -> tuple[GitRepository, str]:
        ci = self._ci_settings
        clone_dir = self._workdir / self._engine_settings.clone_dir
        clone_url = build_authenticated_clone_url(ci.server_url, ci.project_path, credential)

        self._runner.run(["clone", "--branch", record.target_branch, clone_url, str(clone_dir)])

        # The source branch may be gone after merge; GitLab keeps the head under refs/merge-requests.
        remote_ref, local_ref = merge_request_refspec(record.id)
        self._runner.run(["-C", str(clone_dir), "fetch", clone_url, f"{remote_ref}:{local_ref}"])

        return GitRepository(clone_dir, self._runner), local_ref

    def _lookup_base_sha(self, repository: GitRepository, effective_sha: str) -> str:
        if not self._engine_settings.resolve_base_sha:
            return ""
        return repository.rev_parse(f"{effective_sha}^1")
