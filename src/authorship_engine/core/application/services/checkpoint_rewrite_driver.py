import logging
from collections.abc import Mapping, Sequence

from authorship_engine.core.application.ports.attribution_rewrite_driver_port import (
    AttributionRewriteDriverPort,
)
from authorship_engine.core.application.services.added_line_resolver import (
    added_lines_for_files,
    is_binary,
)
from authorship_engine.core.application.services.diff_oracle import diff_lines, line_count
from authorship_engine.core.domain.attribution import (
    HUMAN_AUTHOR,
    AttributionResult,
    CheckpointSnapshot,
)
from authorship_engine.core.domain.ci import CiContext
from authorship_engine.core.domain.diff import AddedLineSet, EditTag

logger = logging.getLogger(__name__)


def _carried_lines(old_text: str, new_text: str) -> dict[int, int]:
    """Map each unchanged line of ``new_text`` to its line in ``old_text``."""
    return {
        op.new_line: op.old_line
        for op in diff_lines(old_text, new_text)
        if op.tag is EditTag.EQUAL
    }


class CheckpointRewriteDriver(AttributionRewriteDriverPort):
    """Replays checkpoints in order and carries line authorship onto the final tree.

    Each step splits the new revision of a file into lines it added (owned by the
    step's author) and lines carried from the previous revision (which keep their
    author). The last step compares against the merged tree and gives anything it
    introduced on its own to a human.
    """

    def rewrite(
        self,
        context: CiContext | None,
        baseline: Mapping[str, str],
        checkpoints: Sequence[CheckpointSnapshot],
        final_files: Mapping[str, str],
    ) -> AttributionResult:
        texts = {path: text for path, text in baseline.items() if not is_binary(text)}
        authors = {path: [HUMAN_AUTHOR] * line_count(text) for path, text in texts.items()}

        for checkpoint in checkpoints:
            logger.info(
                "[Rewrite] Applying checkpoint %s by %s (%d files)",
                checkpoint.checkpoint_id,
                checkpoint.author,
                len(checkpoint.files),
            )
            self._apply(texts, authors, checkpoint.files, checkpoint.author)

        final_texts = dict(texts)
        final_authors = dict(authors)
        self._apply(final_texts, final_authors, final_files, HUMAN_AUTHOR)

        target_sha = context.event.merge_commit_sha if context is not None else None
        return AttributionResult(
            target_sha=target_sha,
            lines_by_path={
                path: tuple(final_authors[path])
                for path in final_files
                if path in final_authors
            },
        )

    def _apply(
        self,
        texts: dict[str, str],
        authors: dict[str, list[str]],
        files: Mapping[str, str],
        author: str,
    ) -> None:
        files = {path: text for path, text in files.items() if not is_binary(text)}
        added: AddedLineSet = added_lines_for_files(texts, files)
        for path, new_text in files.items():
            old_text = texts.get(path, "")
            previous = authors.get(path, [])
            carried = _carried_lines(old_text, new_text)
            new_lines = added.lines_for(path)
            authors[path] = [
                author if line in new_lines else previous[carried[line] - 1]
                for line in range(1, line_count(new_text) + 1)
            ]
            texts[path] = new_text
