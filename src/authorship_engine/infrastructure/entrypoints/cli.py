"""
authorship-engine CLI.

Commands:
    authorship-engine ci run                 Resolve the merge context of the detected CI provider
    authorship-engine ci gitlab run          Resolve the merge context of a GitLab CI job
    authorship-engine ci gitlab install      Print the .gitlab-ci.yml job template
    authorship-engine diff added-lines A B   Added lines between two files
    authorship-engine diff added-lines --git FROM TO [PATH ...]
                                             Added lines between two revisions, per git
    authorship-engine hooks post-clone --exit-code N -- <clone args>
                                             Fetch authorship notes after git clone
    authorship-engine attribute BASE FINAL [PATH ...] --checkpoint REV=AUTHOR ...
                                             Author of every line of FINAL
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from authorship_engine import __version__
from authorship_engine.core.application.services import (
    CheckpointRewriteDriver,
    CiContextService,
    added_lines,
)
from authorship_engine.core.domain.attribution import CheckpointSnapshot
from authorship_engine.core.domain.ci.value_objects import CiProviderType
from authorship_engine.core.domain.diff import AddedLineSet
from authorship_engine.core.exceptions import DomainError
from authorship_engine.infrastructure.configuration import EngineSettings
from authorship_engine.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from authorship_engine.infrastructure.resolution import CiProviderResolver
from authorship_engine.infrastructure.tools.ci.gitlab.gitlab_ci_template import (
    render_install_instructions,
)
from authorship_engine.infrastructure.tools.git import GitRepository
from authorship_engine.infrastructure.tools.git.clone_hook import post_clone_hook

logger = get_logger(__name__)


# ── Command handlers ──


def _resolve_ci(args: argparse.Namespace, provider: CiProviderType | None) -> int:
    resolver = CiProviderResolver(EngineSettings()).resolve(provider)
    service = CiContextService(resolver)
    with service.resolved(keep_workspace=args.keep_workspace) as context:
        if context is None:
            print(json.dumps({"context": None}))
            return 0
        payload = {
            "provider": resolver.provider.value,
            "workspace": str(context.repository.path),
            "event": context.event.to_dict(),
        }
        print(json.dumps(payload, indent=2))
    return 0


def cmd_ci_run(args: argparse.Namespace) -> int:
    return _resolve_ci(args, args.provider)


def cmd_ci_gitlab_run(args: argparse.Namespace) -> int:
    return _resolve_ci(args, CiProviderType.GITLAB)


def cmd_ci_gitlab_install(args: argparse.Namespace) -> int:
    print(render_install_instructions())
    return 0


def _format_lines(lines: list[int]) -> str:
    return ", ".join(str(line) for line in lines)


def _print_added_lines(added: AddedLineSet) -> None:
    for path in sorted(added):
        print(f"{path}: {_format_lines(added.sorted_lines(path))}")


def cmd_diff_added_lines(args: argparse.Namespace) -> int:
    if args.git:
        repository = GitRepository.open(args.repo)
        _print_added_lines(repository.diff_added_lines(args.old, args.new, args.paths or None))
        return 0

    old_path, new_path = Path(args.old), Path(args.new)
    try:
        old_bytes = old_path.read_bytes() if old_path.exists() else b""
        new_bytes = new_path.read_bytes()
    except OSError as exc:
        logger.error("Cannot read file", path=exc.filename, error=exc.strerror or str(exc))
        return 1
    lines = added_lines(old_bytes, new_bytes)
    _print_added_lines(AddedLineSet.from_lines({new_path.as_posix(): lines} if lines else {}))
    return 0


def cmd_attribute(args: argparse.Namespace) -> int:
    repository = GitRepository.open(args.repo)
    paths = args.paths or repository.changed_paths(args.base, args.final)
    checkpoints = [
        CheckpointSnapshot(
            checkpoint_id=rev, author=author, files=repository.read_files(rev, paths)
        )
        for rev, author in args.checkpoints
    ]
    result = CheckpointRewriteDriver().rewrite(
        None,
        repository.read_files(args.base, paths),
        checkpoints,
        repository.read_files(args.final, paths),
    )
    for path in sorted(result.lines_by_path):
        by_author = result.lines_by_author(path)
        rendered = "; ".join(
            f"{author}: {_format_lines(lines)}" for author, lines in sorted(by_author.items())
        )
        print(f"{path}: {rendered}" if rendered else f"{path}:")
    return 0


def cmd_hooks_post_clone(args: argparse.Namespace) -> int:
    clone_args = list(args.clone_args)
    if clone_args[:1] == ["--"]:
        clone_args = clone_args[1:]
    post_clone_hook(clone_args, args.exit_code, EngineSettings())
    return 0


# ── Parser ──


def _checkpoint_argument(value: str) -> tuple[str, str]:
    rev, _, author = value.partition("=")
    if not rev or not author:
        raise argparse.ArgumentTypeError(f"expected REV=AUTHOR, got {value!r}")
    return rev, author


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="authorship-engine",
        description="Line-level AI/human authorship attribution across CI merges",
    )
    parser.add_argument("--version", action="version", version=f"authorship-engine {__version__}")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    # ci {run,gitlab}
    ci = sub.add_parser("ci", help="Resolve CI merge contexts")
    ci_sub = ci.add_subparsers(dest="ci_command", metavar="ACTION", required=True)

    ci_run = ci_sub.add_parser("run", help="Resolve the merge context of the detected provider")
    ci_run.add_argument(
        "--provider",
        choices=[p.value for p in CiProviderType],
        default=None,
        help="Skip detection and use this provider",
    )
    ci_run.add_argument("--keep-workspace", action="store_true", help="Do not delete the clone")
    ci_run.set_defaults(handler=cmd_ci_run)

    gitlab = ci_sub.add_parser("gitlab", help="GitLab CI")
    gitlab_sub = gitlab.add_subparsers(dest="gitlab_command", metavar="ACTION", required=True)
    gitlab_run = gitlab_sub.add_parser("run", help="Resolve the merge context of this GitLab job")
    gitlab_run.add_argument("--keep-workspace", action="store_true", help="Do not delete the clone")
    gitlab_run.set_defaults(handler=cmd_ci_gitlab_run)
    gitlab_install = gitlab_sub.add_parser("install", help="Print the .gitlab-ci.yml template")
    gitlab_install.set_defaults(handler=cmd_ci_gitlab_install)

    # diff added-lines
    diff = sub.add_parser("diff", help="Line diff utilities")
    diff_sub = diff.add_subparsers(dest="diff_command", metavar="ACTION", required=True)
    diff_added = diff_sub.add_parser("added-lines", help="Print net-new line numbers")
    diff_added.add_argument("old", help="Old file (or revision with --git)")
    diff_added.add_argument("new", help="New file (or revision with --git)")
    diff_added.add_argument("paths", nargs="*", help="Limit --git output to these paths")
    diff_added.add_argument("--git", action="store_true", help="Compare revisions with git diff")
    diff_added.add_argument("--repo", default=".", help="Repository for --git (default: cwd)")
    diff_added.set_defaults(handler=cmd_diff_added_lines)

    # attribute
    attribute = sub.add_parser("attribute", help="Attribute final lines to checkpoint authors")
    attribute.add_argument("base", help="Revision the work started from")
    attribute.add_argument("final", help="Revision holding the final tree")
    attribute.add_argument("paths", nargs="*", help="Files to attribute (default: changed files)")
    attribute.add_argument(
        "--checkpoint",
        dest="checkpoints",
        metavar="REV=AUTHOR",
        type=_checkpoint_argument,
        action="append",
        default=[],
        help="Checkpoint revision and its author, oldest first (repeatable)",
    )
    attribute.add_argument("--repo", default=".", help="Repository (default: cwd)")
    attribute.set_defaults(handler=cmd_attribute)

    # hooks post-clone
    hooks = sub.add_parser("hooks", help="Git hook entry points")
    hooks_sub = hooks.add_subparsers(dest="hook", metavar="HOOK", required=True)
    post_clone = hooks_sub.add_parser("post-clone", help="Fetch authorship notes after git clone")
    post_clone.add_argument("--exit-code", type=int, default=0, help="Exit status of git clone")
    post_clone.add_argument("clone_args", nargs=argparse.REMAINDER, help="Arguments given to git clone")
    post_clone.set_defaults(handler=cmd_hooks_post_clone)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        return args.handler(args)
    except DomainError as exc:
        logger.error("Command failed", error_type=type(exc).__name__, error=str(exc))
        return 1


if __name__ == "__main__":
    sys.exit(main())
