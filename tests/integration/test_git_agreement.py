"""The in-process diff must report the same added lines as ``git diff``."""

import random

import pytest

from authorship_engine.core.application.services import added_lines, added_lines_for_files, split_lines
from authorship_engine.infrastructure.configuration import EngineSettings
from authorship_engine.infrastructure.entrypoints import cli
from authorship_engine.infrastructure.tools.git import GitCommandRunner, GitRepository
from authorship_engine.infrastructure.tools.git.clone_hook import post_clone_hook

pytestmark = pytest.mark.integration

_IDENTITY = ["-c", "user.name=Test", "-c", "user.email=test@example.com", "-c", "commit.gpgsign=false"]


@pytest.fixture
def runner(git_binary):
    return GitCommandRunner(git_binary)


@pytest.fixture
def repository(tmp_path, runner):
    path = tmp_path / "repo"
    path.mkdir()
    runner.run(["init", "-q", str(path)])
    return GitRepository.open(path, runner)


def _commit(repository, files):
    for name, text in files.items():
        target = repository.path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(text.encode("utf-8"))
    repository.run(["add", "-A"])
    repository.run([*_IDENTITY, "commit", "-q", "--allow-empty", "-m", "snapshot"])
    return repository.rev_parse("HEAD")


_README_BEFORE = "## A quick demo of Git AI Rewrites\n\ndasdas\n\nHUMAN"

_README_AFTER = """\
# Set Operations Library

A TypeScript library providing essential set operations for working with JavaScript `Set` objects.

## Features

This library provides the following set operations:

- **Union** - Combine all elements from two sets
- **Intersection** - Find elements common to both sets
- **Difference** - Find elements in the first set but not in the second

## Installation

Since this is a TypeScript project, you can use the functions directly by importing them:

```typescript
import { union, intersection, difference } from './set-ops';
```

## Usage

```typescript
const setA = new Set([1, 2, 3, 4]);
const setB = new Set([3, 4, 5, 6]);

// Result: Set { 1, 2, 3, 4, 5, 6 }
const unionResult = union(setA, setB);
```

## License

This project is open source and available for use.
"""


CASES = {
    "insert_in_middle": ("a\nb\nc\n", "a\nb\nnew\nc\n"),
    "append": ("a\nb\n", "a\nb\nc\nd\n"),
    "blank_lines": (
        "Line 1\nLine 2\nLine 3\n",
        "Line 1\n\nLine 2\n\nLine 3\n\nNew Line\n",
    ),
    "repeated_block": ("a\nb\n", "a\nb\na\nb\n"),
    "python_function": (
        "def a():\n    pass\n\ndef c():\n    pass\n",
        "def a():\n    pass\n\ndef b():\n    pass\n\ndef c():\n    pass\n",
    ),
    "closing_braces": (
        "if (a) {\n  x();\n}\n",
        "if (a) {\n  x();\n}\nif (b) {\n  y();\n}\n",
    ),
    "modification": ("x = 1\ny = 2\nz = 3\n", "x = 1\ny = 20\nz = 3\n"),
    "deletion_only": ("a\nb\nc\n", "a\nc\n"),
    "repeated_lines_matched_minimally": (
        "}\nd\nb\n  x\na\nc\nc\nc\n",
        "}\nd\nb\n  x\na\nb\nc\nd\nc\nc\n  x\n  x\n",
    ),
    "lone_carriage_return": ("a\nb\n", "a\nx\ry\nb\n"),
    "no_final_newline": ("a\nb", "a\nb\nc"),
    "readme_rewrite": (_README_BEFORE, _README_AFTER),
}


@pytest.mark.parametrize("old,new", CASES.values(), ids=CASES.keys())
def test_added_lines_match_git(repository, old, new):
    before = _commit(repository, {"file.txt": old})
    after = _commit(repository, {"file.txt": new})

    from_git = repository.diff_added_lines(before, after)

    assert from_git.lines_for("file.txt") == frozenset(added_lines(old, new))


def test_multi_file_revisions_match_git(repository):
    old_files = {"src/app.py": "import os\n\nmain()\n", "README.md": "# app\n"}
    new_files = {"src/app.py": "import os\nimport sys\n\nmain()\n", "README.md": "# app\n", "docs/new.md": "hi\n"}
    before = _commit(repository, old_files)
    after = _commit(repository, new_files)

    assert repository.diff_added_lines(before, after) == added_lines_for_files(old_files, new_files)


def test_diff_can_be_limited_to_paths(repository):
    before = _commit(repository, {"a.txt": "1\n", "b.txt": "1\n"})
    after = _commit(repository, {"a.txt": "1\n2\n", "b.txt": "1\n2\n"})

    assert set(repository.diff_added_lines(before, after, ["b.txt"])) == {"b.txt"}


def test_post_clone_hook_fetches_notes(tmp_path, repository, runner):
    _commit(repository, {"file.txt": "content\n"})
    repository.run([*_IDENTITY, "notes", "--ref=ai", "add", "-m", "{}", "HEAD"])
    target = tmp_path / "clone"
    runner.run(["clone", "-q", str(repository.path), str(target)])

    fetched = post_clone_hook([str(repository.path), str(target)], 0, EngineSettings(), runner)

    assert fetched is True
    notes = GitRepository(target, runner).run(["notes", "--ref=ai", "list"])
    assert notes.strip()


def test_form_feed_lines_keep_later_files(repository):
    old_files = {"a.py": "bar\n", "b.py": "one\n"}
    new_files = {"a.py": "foo\x0c y\nbaz\x1c qux\n", "b.py": "one\ntwo\n"}
    before = _commit(repository, old_files)
    after = _commit(repository, new_files)

    from_git = repository.diff_added_lines(before, after)

    assert from_git == {"a.py": frozenset({1, 2}), "b.py": frozenset({2})}
    assert from_git == added_lines_for_files(old_files, new_files)


_FUZZ_LINES = ["a", "b", "c", "d", "}", "  x", ""]


def _random_text(rng):
    return "".join(rng.choice(_FUZZ_LINES) + "\n" for _ in range(rng.randint(0, 12)))


def _random_edit(rng, text):
    lines = split_lines(text)
    for _ in range(rng.randint(1, 4)):
        position = rng.randint(0, len(lines))
        roll = rng.random()
        if roll < 0.5 or not lines:
            lines.insert(position, rng.choice(_FUZZ_LINES))
        elif roll < 0.8:
            del lines[min(position, len(lines) - 1)]
        else:
            lines[min(position, len(lines) - 1)] = rng.choice(_FUZZ_LINES)
    return "".join(line + "\n" for line in lines)


@pytest.mark.parametrize("seed", [7, 2024])
def test_random_edits_match_git(repository, seed):
    rng = random.Random(seed)
    old_files = {f"case_{index}.txt": _random_text(rng) for index in range(200)}
    new_files = {path: _random_edit(rng, text) for path, text in old_files.items()}
    before = _commit(repository, old_files)
    after = _commit(repository, new_files)

    from_git = repository.diff_added_lines(before, after)

    disagreements = {
        path: (from_git.sorted_lines(path), sorted(added_lines(old_files[path], new_files[path])))
        for path in old_files
        if from_git.lines_for(path) != frozenset(added_lines(old_files[path], new_files[path]))
    }
    assert disagreements == {}


def test_attribute_command_reads_checkpoints_from_git(repository, capsys):
    base = _commit(repository, {"app.py": "import os\n\nmain()\n"})
    checkpoint = _commit(repository, {"app.py": "import os\nimport sys\n\nmain()\n"})
    final = _commit(repository, {"app.py": "import os\nimport sys\n\nmain()\nexit()\n"})

    exit_code = cli.main(
        ["attribute", base, final, "--checkpoint", f"{checkpoint}=claude", "--repo", str(repository.path)]
    )

    assert exit_code == 0
    assert capsys.readouterr().out == "app.py: claude: 2; human: 1, 3, 4, 5\n"
