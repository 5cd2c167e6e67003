"""Post-clone hook: pull authorship notes into a freshly cloned repository.

Notes live outside the default refspec, so a plain ``git clone`` leaves them
behind. The hook never fails the clone; problems are only logged.
"""

from pathlib import Path

from authorship_engine.core.exceptions import DomainError
from authorship_engine.infrastructure.configuration import EngineSettings
from authorship_engine.infrastructure.observability.logger_factory_service import get_logger
from authorship_engine.infrastructure.tools.git.git_command_runner import GitCommandRunner
from authorship_engine.infrastructure.tools.git.git_repository import GitRepository

logger = get_logger(__name__)

_LONG_OPTIONS_WITH_VALUE = frozenset(
    {
        "--branch",
        "--config",
        "--depth",
        "--filter",
        "--jobs",
        "--origin",
        "--reference",
        "--reference-if-able",
        "--separate-git-dir",
        "--server-option",
        "--shallow-exclude",
        "--shallow-since",
        "--template",
        "--upload-pack",
    }
)
_SHORT_OPTIONS_WITH_VALUE = frozenset({"-b", "-c", "-j", "-o", "-u"})


def is_option_with_value(arg: str) -> bool:
    """True when ``arg`` is a clone option whose value is the next argument."""
    if arg.startswith("--"):
        return "=" not in arg and arg in _LONG_OPTIONS_WITH_VALUE
    return arg in _SHORT_OPTIONS_WITH_VALUE


def derive_directory_from_url(url: str) -> str | None:
    """Directory name git picks for a clone: last path component without ``.git``."""
    url = url.rstrip("/")
    slash, colon = url.rfind("/"), url.rfind(":")
    if slash != -1:
        last_component = url[slash + 1:]
    elif colon != -1:
        last_component = url[colon + 1:]
    else:
        last_component = url

    if last_component.endswith(".git"):
        last_component = last_component[: -len(".git")]
    return last_component or None


def extract_clone_target_directory(args: list[str]) -> str | None:
    """Target directory of a ``git clone`` invocation given its arguments (after ``clone``)."""
    positional: list[str] = []
    after_double_dash = False
    index = 0
    while index < len(args):
        arg = args[index]
        if not after_double_dash:
            if arg == "--":
                after_double_dash = True
                index += 1
                continue
            if is_option_with_value(arg):
                index += 2
                continue
            if arg.startswith("-"):
                index += 1
                continue
        positional.append(arg)
        index += 1

    if not positional:
        return None
    if len(positional) >= 2:
        return positional[1]
    return derive_directory_from_url(positional[0])


def post_clone_hook(
    clone_args: list[str],
    exit_code: int,
    settings: EngineSettings | None = None,
    runner: GitCommandRunner | None = None,
) -> bool:
    """Fetch authorship notes after a successful clone. Returns True when notes were fetched."""
    if exit_code != 0:
        return False

    settings = settings or EngineSettings()
    target_dir = extract_clone_target_directory(clone_args)
    if target_dir is None:
        logger.info("Could not derive clone target directory; skipping authorship fetch")
        return False

    runner = runner or GitCommandRunner(settings.git_binary)
    try:
        repository = GitRepository.open(Path(target_dir), runner)
        repository.fetch_notes(settings.notes_remote, settings.notes_ref)
    except DomainError as exc:
        logger.info(
            "Authorship notes fetch skipped",
            target_dir=target_dir,
            remote=settings.notes_remote,
            reason=str(exc),
        )
        return False

    logger.info("Fetched authorship notes", target_dir=target_dir, notes_ref=settings.notes_ref)
    return True
