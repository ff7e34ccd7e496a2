from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from ...contracts.artifacts import PatternRule


class LineStore:
    """Ordered, mutable sequence of netlist lines (no trailing newlines).

    An entry may carry embedded newlines (banner blocks); it is kept as a single
    entry and rendered verbatim by :meth:`join`.
    """

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines: List[str] = list(lines)

    @classmethod
    def split(cls, text: str) -> "LineStore":
        """Split on ``\\n``, dropping empty lines."""
        return cls(line for line in text.split("\n") if line)

    def join(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)

    def prepend(self, text: str) -> None:
        self.lines.insert(0, text)

    def insert(self, index: int, text: str) -> None:
        self.lines.insert(index, text)

    def replace_all(self, rules: Sequence[PatternRule]) -> int:
        """Literal substring replacement of every rule over every line.

        Returns the number of lines whose text changed.
        """
        changed = 0
        for idx, line in enumerate(self.lines):
            updated = line
            for rule in rules:
                updated = updated.replace(rule.pattern, rule.replacement)
            if updated != line:
                self.lines[idx] = updated
                changed += 1
        return changed

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def __setitem__(self, index: int, value: str) -> None:
        self.lines[index] = value

    def __repr__(self) -> str:
        return f"LineStore({len(self.lines)} lines)"
