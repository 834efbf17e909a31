"""Match-three game on a square board of symbol candies."""

from __future__ import annotations

import random
from enum import Enum
from typing import List, Optional, Sequence, Tuple

SYMBOLS = "@#$%&"
MIN_SIZE = 3
MAX_SIZE = 54
INITIAL_MOVES = 20
POINTS_PER_TRIO = 100
BONUS_THRESHOLD = 800
BONUS_MOVES = 5

_CLEAR_SCREEN = "\033[2J\033[H"


class Direction(Enum):
    """Direction a candy is moved in, numbered as in the game menu."""

    LEFT = 1
    RIGHT = 2
    DOWN = 3
    UP = 4

    @property
    def offset(self) -> Tuple[int, int]:
        return _OFFSETS[self]

    @property
    def label(self) -> str:
        return _LABELS[self]


_OFFSETS = {
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.UP: (-1, 0),
}

_LABELS = {
    Direction.LEFT: "la izquierda",
    Direction.RIGHT: "la derecha",
    Direction.DOWN: "abajo",
    Direction.UP: "arriba",
}


class InvalidMove(ValueError):
    """Raised when a candy cannot be moved the way asked."""


class CandyGame:
    """State of one game: the board, the score and the moves left."""

    def __init__(self, size: int, rng: Optional[random.Random] = None) -> None:
        if not MIN_SIZE <= size <= MAX_SIZE:
            raise ValueError(
                f"board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}"
            )
        self.size = size
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.moves = INITIAL_MOVES
        self.board: List[List[str]] = [
            [self._random_symbol() for _ in range(size)] for _ in range(size)
        ]

    def _random_symbol(self) -> str:
        return SYMBOLS[self.rng.randrange(len(SYMBOLS))]

    def _on_board(self, row: int, column: int) -> bool:
        return 0 <= row < self.size and 0 <= column < self.size

    def swap(self, row: int, column: int, direction: Direction | int) -> None:
        """Exchange the candy at ``(row, column)`` with its neighbour."""
        direction = Direction(direction)
        if not self._on_board(row, column):
            raise InvalidMove("posicion fuera del tablero")
        d_row, d_column = direction.offset
        other_row, other_column = row + d_row, column + d_column
        if not self._on_board(other_row, other_column):
            raise InvalidMove(f"no puedes mover este elemento hacia {direction.label}")
        board = self.board
        board[row][column], board[other_row][other_column] = (
            board[other_row][other_column],
            board[row][column],
        )

    def _replace(self, cells: Sequence[Tuple[int, int]]) -> None:
        for row, column in cells:
            self.board[row][column] = self._random_symbol()

    def find_trios(self) -> int:
        """Replace every run of three equal candies; return how many were found.

        Rows are scanned first, then columns, and replacements made during the
        scan are seen by the rest of it. Each trio scores ``POINTS_PER_TRIO``.
        """
        found = 0
        board = self.board
        for row in range(self.size):
            for column in range(self.size - 2):
                if board[row][column] == board[row][column + 1] == board[row][column + 2]:
                    self._replace([(row, column + k) for k in range(3)])
                    found += 1
        for row in range(self.size - 2):
            for column in range(self.size):
                if board[row][column] == board[row + 1][column] == board[row + 2][column]:
                    self._replace([(row + k, column) for k in range(3)])
                    found += 1
        self.score += found * POINTS_PER_TRIO
        return found

    def play(self, row: int, column: int, direction: Direction | int) -> int:
        """Make one move and return the points it earned.

        An invalid move still costs a move and raises ``InvalidMove``.
        """
        if self.is_over():
            raise InvalidMove("no quedan jugadas")
        try:
            self.swap(row, column, direction)
        except InvalidMove:
            self.moves -= 1
            raise
        self.moves -= 1
        before = self.score
        self.find_trios()
        if self.score >= BONUS_THRESHOLD:
            self.moves += BONUS_MOVES
        return self.score - before

    def render(self) -> str:
        return "\n".join(
            "| |" + "".join(f"{symbol}  " for symbol in row) + "| |"
            for row in self.board
        )

    def is_over(self) -> bool:
        return self.moves <= 0


_MENU = (
    "0 - salir del juego\n"
    "1 - mover hacia la izquierda\n"
    "2 - mover hacia la derecha \n"
    "3 - mover hacia abajo\n"
    "4 - mover hacia arriba"
)


def _ask_size() -> int:
    while True:
        try:
            size = int(input("ingrese el tamano del tablero: "))
        except ValueError:
            print("tamano invalido")
            continue
        if MIN_SIZE <= size <= MAX_SIZE:
            return size
        print("tamano invalido")


def _status(game: CandyGame) -> str:
    return f"PUNTAJE: {game.score}\nJUGADAS: {game.moves}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a game at the terminal."""
    try:
        size = _ask_size()
    except EOFError:
        return 0
    game = CandyGame(size)
    print(_CLEAR_SCREEN, end="")
    print(_status(game))
    print(game.render())
    try:
        while not game.is_over():
            print(_MENU)
            try:
                option = int(input("eliga una opcion: "))
            except ValueError:
                continue
            if option == 0:
                break
            if option not in (1, 2, 3, 4):
                continue
            try:
                row = int(input("digite la fila: "))
                column = int(input("digite la columna: "))
            except ValueError:
                continue
            try:
                game.play(row, column, Direction(option))
            except InvalidMove as exc:
                print(exc)
                continue
            print(_CLEAR_SCREEN, end="")
            print(_status(game))
            print(game.render())
    except EOFError:
        pass
    print(_CLEAR_SCREEN, end="")
    print("FIN DEL JUEGO!!")
    print(f"PUNTUACION FINAL: {game.score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())