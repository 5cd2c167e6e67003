from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True, eq=False)
class AddedLineSet(Mapping[str, frozenset[int]]):
    """Net-new lines per file.

    Keys are repository-relative, forward-slash paths (case-sensitive). Values are
    1-indexed line numbers in the new revision of that file.
    """

    lines_by_path: Mapping[str, frozenset[int]] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines_by_path: Mapping[str, Iterable[int]]) -> AddedLineSet:
        return cls({path: frozenset(lines) for path, lines in lines_by_path.items()})

    def __getitem__(self, path: str) -> frozenset[int]:
        return self.lines_by_path[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines_by_path)

    def __len__(self) -> int:
        return len(self.lines_by_path)

    def lines_for(self, path: str) -> frozenset[int]:
        return self.lines_by_path.get(path, frozenset())

    def sorted_lines(self, path: str) -> list[int]:
        return sorted(self.lines_for(path))
