"""Naval battle on a 20x20 board with carriers and destroyers for two players."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Iterator, List, Optional, Sequence

SIZE = 20
FLEET_SIZE = 7
FLEET_SPACING = 3
EMPTY = "."
WRECK = "*"

_CLEAR_SCREEN = "\033[2J\033[H"


@dataclass
class Ship:
    """A ship on the board; a sunk ship sits at ``(-1, -1)``."""

    x: int = 0
    y: int = 0
    player: int = 0

    symbol: ClassVar[str] = "?"

    @property
    def alive(self) -> bool:
        return self.x >= 0

    def sink(self) -> None:
        self.x = -1
        self.y = -1


@dataclass
class Destroyer(Ship):
    """A destroyer, drawn as ``N``."""

    name: str = "U.S. ARIZONA"

    symbol: ClassVar[str] = "N"


@dataclass
class Carrier(Ship):
    """An aircraft carrier, drawn as ``P``."""

    name: str = "Fortrex"

    symbol: ClassVar[str] = "P"


class Board:
    """The grid and the two fleets.

    Cells are addressed as ``(x, y)``; ``render`` prints one line per ``x``.
    Player 0 starts on columns 0 and 1, player 1 on columns 18 and 19.
    """

    def __init__(self) -> None:
        self._grid: List[List[str]] = [[EMPTY] * SIZE for _ in range(SIZE)]
        self._carriers: List[Carrier] = []
        self._destroyers: List[Destroyer] = []
        for player, carrier_y, destroyer_y in ((0, 0, 1), (1, SIZE - 2, SIZE - 1)):
            for i in range(FLEET_SIZE):
                x = i * FLEET_SPACING
                carrier = Carrier(x, carrier_y, player)
                self._grid[x][carrier_y] = carrier.symbol
                self._carriers.append(carrier)
                destroyer = Destroyer(x, destroyer_y, player)
                self._grid[x][destroyer_y] = destroyer.symbol
                self._destroyers.append(destroyer)

    @property
    def carriers(self) -> List[Carrier]:
        return list(self._carriers)

    @property
    def destroyers(self) -> List[Destroyer]:
        return list(self._destroyers)

    @staticmethod
    def _check(x: int, y: int) -> None:
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise IndexError(f"cell ({x}, {y}) is off the board")

    def cell(self, x: int, y: int) -> str:
        self._check(x, y)
        return self._grid[x][y]

    def add_carrier(self, carrier: Carrier) -> None:
        self._carriers.append(carrier)

    def add_destroyer(self, destroyer: Destroyer) -> None:
        self._destroyers.append(destroyer)

    def _ships(self) -> Iterator[Ship]:
        yield from self._carriers
        yield from self._destroyers

    def _move(
        self, fleet: Sequence[Ship], index: int, x: int, y: int, player: int
    ) -> List[Ship]:
        if not 0 <= index < len(fleet):
            raise IndexError(f"no ship at index {index}")
        ship = fleet[index]
        if not ship.alive:
            raise ValueError(f"ship {index} has been sunk")
        self._check(x, y)
        self._grid[ship.x][ship.y] = EMPTY
        ship.x, ship.y = x, y
        self._grid[x][y] = ship.symbol
        destroyed: List[Ship] = []
        for other in self._ships():
            if other is ship:
                continue
            if other.player != player and other.x == x and other.y == y:
                other.sink()
                destroyed.append(other)
        return destroyed

    def move_carrier(self, index: int, x: int, y: int, player: int) -> List[Ship]:
        """Move a carrier; return the enemy ships it collided with and sank."""
        return self._move(self._carriers, index, x, y, player)

    def move_destroyer(self, index: int, x: int, y: int, player: int) -> List[Ship]:
        """Move a destroyer; return the enemy ships it collided with and sank."""
        return self._move(self._destroyers, index, x, y, player)

    def shoot(self, x: int, y: int, player: int) -> List[Ship]:
        """Fire at ``(x, y)``; return the ships destroyed there, of either side."""
        self._check(x, y)
        destroyed: List[Ship] = []
        for ship in self._ships():
            if ship.x == x and ship.y == y:
                ship.sink()
                destroyed.append(ship)
                self._grid[x][y] = WRECK
        return destroyed

    def render(self) -> str:
        return "\n".join("".join(f"{c} " for c in row) for row in self._grid)


_MENU = (
    "0. mover portavion a x y q\n"
    "1. mover nave a x y q\n"
    "2. disparar misil a x y\n"
    "3. salir"
)


def _fleet_listing(board: Board, player: int) -> str:
    lines = [
        f"Portavion{i}"
        for i, ship in enumerate(board.carriers)
        if ship.alive and ship.player == player
    ]
    lines += [
        f"Nave{i}"
        for i, ship in enumerate(board.destroyers)
        if ship.alive and ship.player == player
    ]
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play a two-player game at the terminal."""
    board = Board()
    print(board.render())
    turn = 0
    while True:
        player = turn % 2
        print(f"Jugador {player + 1}: ")
        listing = _fleet_listing(board, player)
        if listing:
            print(listing)
        print(_MENU)
        try:
            command = int(input().strip())
            if command == 3:
                print(_CLEAR_SCREEN, end="")
                return 0
            if command not in (0, 1, 2):
                continue
            numbers = [int(token) for token in input().split()]
            if command == 2:
                x, y = numbers[:2]
                for _ in board.shoot(x, y, player):
                    print("Elemento destruido")
            else:
                x, y, index = numbers[:3]
                mover = board.move_carrier if command == 0 else board.move_destroyer
                for _ in mover(index, x, y, player):
                    print("Colision")
                print("Movida exitosa")
        except EOFError:
            return 0
        except (ValueError, IndexError) as exc:
            print(f"jugada invalida: {exc}")
            continue
        turn += 1
        print(board.render())


if __name__ == "__main__":
    raise SystemExit(main())