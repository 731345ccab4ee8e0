"""Game state for the traditional and synchronized modes."""

from __future__ import annotations

import random
from enum import Enum, IntEnum
from typing import Optional

from triquigo.board import Board, Mark, NoWinner


class GameStatus(IntEnum):
    IN_PLAY = 0
    WON = 1
    LOST = 2
    DRAW = 3


class GameMode(str, Enum):
    TRADITIONAL = "tradicional"
    SYNCHRONIZED = "sincronizado"


def parse_cell_index(text: str) -> int:
    """Read a cell index from the first character of ``text``."""
    if not text:
        raise ValueError("the string is empty")
    digit = ord(text[0]) - ord("0")
    if not 0 <= digit <= 9:
        raise ValueError(f"the string {text!r} starts with {text[0]!r}, which is not a digit")
    return digit


class Game:
    """One game against the computer, which plays O."""

    def __init__(
        self,
        mode: GameMode = GameMode.TRADITIONAL,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.mode = GameMode(mode)
        self._rng = rng
        self.board = Board()
        self.winning_board = Board()
        self.status = GameStatus.IN_PLAY

    def reset(self) -> None:
        """Start over with empty boards."""
        self.board = Board()
        self.winning_board = Board()
        self.status = GameStatus.IN_PLAY

    def play_traditional(self, index: int) -> GameStatus:
        """Place X at ``index``, then let the computer answer at random."""
        self.board[index] = Mark.X
        if self.board.winner()[1] is Mark.X:
            self.status = GameStatus.WON
            return self.status
        if not self.board.available():
            self.status = GameStatus.DRAW
            return self.status
        self.board[self.board.random_available(self._rng)] = Mark.O
        if self.board.winner()[1] is Mark.O:
            self.status = GameStatus.LOST
        return self.status

    def play_synchronized(self, index: int) -> GameStatus:
        """Play X at ``index`` while the computer plays O at the first empty cell.

        Choosing the same cell blocks it for a turn. When both sides complete
        a line at once, both lines are recorded and cleared from the board.
        """
        self.winning_board = Board()
        computer_cell = self.board.first_available()
        self.board.clear_blocked()

        if index == computer_cell:
            self.board[index] = Mark.BLOCKED
            if not self.board.available():
                self.status = GameStatus.DRAW
            return self.status

        self.board[index] = Mark.X
        self.board[computer_cell] = Mark.O

        trio_x = self._trio_for(Mark.X)
        trio_o = self._trio_for(Mark.O)

        if trio_x is not None and trio_o is not None:
            self.winning_board.fill_trio(trio_x, Mark.X)
            self.winning_board.fill_trio(trio_o, Mark.O)
            self.board.empty_trio(trio_x)
            self.board.empty_trio(trio_o)
            return self.status
        if trio_x is not None:
            self.status = GameStatus.WON
            self.winning_board.fill_trio(trio_x, Mark.X)
            return self.status
        if trio_o is not None:
            self.status = GameStatus.LOST
            self.winning_board.fill_trio(trio_o, Mark.O)
            return self.status
        if not self.board.available():
            self.status = GameStatus.DRAW
        return self.status

    def _trio_for(self, mark: Mark):
        try:
            return self.board.winning_trio(mark)
        except NoWinner:
            return None