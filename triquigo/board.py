"""The 3x3 tic-tac-toe board and its win detection."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from typing import Optional, Tuple, Union

Trio = Tuple[int, int, int]

SIZE = 9

# Lines in the order they are examined; a line only counts when its
# first cell holds a mark.
_LINES: Tuple[Trio, ...] = (
    (0, 1, 2),
    (0, 3, 6),
    (0, 4, 8),
    (1, 4, 7),
    (2, 5, 8),
    (2, 4, 6),
    (3, 4, 5),
    (6, 7, 8),
)


class Mark(str, Enum):
    """What a cell can hold."""

    EMPTY = " "
    X = "X"
    O = "O"
    BLOCKED = "-"

    def __str__(self) -> str:
        return self.value


class NoWinner(Exception):
    """Raised when no winning trio exists for a mark."""

    def __init__(self, mark: Union[Mark, str]) -> None:
        self.mark = Mark(mark)
        if self.mark in (Mark.X, Mark.O):
            message = f"board: no winning trio found for mark {self.mark.value!r}"
        else:
            message = "board: no winner found"
        super().__init__(message)


def all_cells() -> list[int]:
    """Return the indices of every cell on a board."""
    return list(range(SIZE))


class Board:
    """Nine cells laid out row by row: 0|1|2 / 3|4|5 / 6|7|8."""

    def __init__(
        self,
        cells: Optional[Union[Iterable[Union[Mark, str]], Mapping[int, Union[Mark, str]]]] = None,
    ) -> None:
        self._cells = [Mark.EMPTY] * SIZE
        if cells is None:
            return
        if isinstance(cells, Mapping):
            for index, mark in cells.items():
                self[index] = mark
            return
        marks = [Mark(mark) for mark in cells]
        if len(marks) > SIZE:
            raise ValueError(f"a board holds at most {SIZE} cells, got {len(marks)}")
        self._cells[: len(marks)] = marks

    def __getitem__(self, index: int) -> Mark:
        return self._cells[index]

    def __setitem__(self, index: int, value: Union[Mark, str]) -> None:
        self._cells[index] = Mark(value)

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._cells)

    def __len__(self) -> int:
        return SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board({''.join(mark.value for mark in self._cells)!r})"

    def available(self) -> list[int]:
        """Indices of the empty cells, in order."""
        return [index for index, mark in enumerate(self._cells) if mark is Mark.EMPTY]

    def random_available(self, rng: Optional[random.Random] = None) -> int:
        """Pick an empty cell at random."""
        cells = self.available()
        if not cells:
            raise ValueError("the board has no available cells")
        return (rng or random).choice(cells)

    def first_available(self) -> int:
        """Index of the first empty cell, or 0 when there is none."""
        return next(
            (index for index, mark in enumerate(self._cells) if mark is Mark.EMPTY), 0
        )

    def clear_blocked(self) -> None:
        """Empty the first blocked cell, if any."""
        for index, mark in enumerate(self._cells):
            if mark is Mark.BLOCKED:
                self._cells[index] = Mark.EMPTY
                break

    def _same(self, trio: Trio) -> bool:
        a, b, c = trio
        return self._cells[a] == self._cells[b] == self._cells[c]

    def winner(self) -> Tuple[Optional[Trio], Mark]:
        """Return the first completed line and the mark on it.

        When no line is complete, the result is ``(None, Mark.EMPTY)``.
        """
        for trio in _LINES:
            if self._cells[trio[0]] is not Mark.EMPTY and self._same(trio):
                return trio, self._cells[trio[0]]
        return None, Mark.EMPTY

    def winning_trio(self, mark: Union[Mark, str]) -> Trio:
        """Return the first line completed by ``mark``; raise NoWinner otherwise."""
        mark = Mark(mark)
        for trio in _LINES:
            if self._cells[trio[0]] is mark and self._same(trio):
                return trio
        raise NoWinner(mark)

    def fill_trio(self, trio: Iterable[int], mark: Union[Mark, str]) -> None:
        """Put ``mark`` on every cell of ``trio``."""
        for index in trio:
            self[index] = mark

    def empty_trio(self, trio: Iterable[int]) -> None:
        """Empty every cell of ``trio``."""
        self.fill_trio(trio, Mark.EMPTY)