"""Tic-tac-toe on a 3x3 board between a person and the machine."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

SIZE = 3
EMPTY = "0"
PLAYER_SYMBOLS = ("x", "o")

_CLEAR_SCREEN = "\033[2J\033[H"


class Board:
    """A 3x3 board whose empty cells hold ``'0'``."""

    def __init__(self) -> None:
        self._cells: List[List[str]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        self.finished = False

    def _check(self, row: int, column: int) -> None:
        if not (0 <= row < SIZE and 0 <= column < SIZE):
            raise IndexError(f"cell ({row}, {column}) is off the board")

    def symbol_at(self, row: int, column: int) -> str:
        self._check(row, column)
        return self._cells[row][column]

    def place(self, row: int, column: int, symbol: str) -> None:
        self._check(row, column)
        self._cells[row][column] = symbol

    @staticmethod
    def _is_line(symbols: Sequence[str]) -> bool:
        return symbols[0] in PLAYER_SYMBOLS and len(set(symbols)) == 1

    def _mark(self, won: bool) -> bool:
        if won:
            self.finished = True
        return won

    def check_rows(self) -> bool:
        """Return whether some row holds three equal player symbols."""
        return self._mark(any(self._is_line(row) for row in self._cells))

    def check_columns(self) -> bool:
        """Return whether some column holds three equal player symbols."""
        return self._mark(any(self._is_line(column) for column in zip(*self._cells)))

    def check_diagonals(self) -> bool:
        """Return whether the main diagonal holds three equal player symbols."""
        diagonal = [self._cells[i][i] for i in range(SIZE)]
        return self._mark(self._is_line(diagonal))

    def render(self) -> str:
        return "\n".join(
            "| |" + "".join(f"{symbol}  " for symbol in row) + "| |"
            for row in self._cells
        )


class HumanPlayer:
    """A player whose moves are chosen by a person."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol

    def play(self, board: Board, row: int, column: int) -> None:
        board.place(row, column, self.symbol)


class MachinePlayer:
    """A player that takes the first empty cell of the top row."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol

    def play(self, board: Board) -> Optional[Tuple[int, int]]:
        """Place the symbol; return the cell used, or None if none was free."""
        for column in range(SIZE):
            if board.symbol_at(0, column) == EMPTY:
                board.place(0, column, self.symbol)
                return 0, column
        return None


def _read_move() -> Tuple[int, int]:
    row = int(input("ingrese la fila: "))
    column = int(input("ingrese la columna"))
    return row, column


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game at the terminal until a line is completed."""
    board = Board()
    person = HumanPlayer("x")
    machine = MachinePlayer("o")
    print(board.render())
    while not board.finished:
        try:
            row, column = _read_move()
            person.play(board, row, column)
        except EOFError:
            return 0
        except (ValueError, IndexError):
            print("jugada invalida")
            continue
        machine.play(board)
        print(_CLEAR_SCREEN, end="")
        board.check_rows()
        board.check_diagonals()
        board.check_columns()
        print(board.render())
    print(_CLEAR_SCREEN, end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())