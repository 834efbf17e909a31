# minijuegos

Small console games, a round-robin process scheduler, and the classic
container types they are built around. The games talk to the player in
Spanish.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

Each command reads its input from standard input. The games clear the
terminal with ANSI escape sequences. End of input ends a game quietly.

| Command                   | What it does                                                    |
|---------------------------|-----------------------------------------------------------------|
| `minijuegos-triqui`       | Tic-tac-toe against a very simple machine player.               |
| `minijuegos-candy`        | A match-three game on a square board of symbols.                |
| `minijuegos-batalla`      | A two-player naval battle on a 20 × 20 board.                   |
| `minijuegos-planificador` | Round-robin simulation of a priority-ordered process scheduler. |

### Tic-tac-toe (`minijuegos-triqui`)

Empty cells show `0`. You play `x` and the machine plays `o`. Each turn you
enter a row and then a column, from 0 to 2. A cell off the board or input that
is not a number prints `jugada invalida` and asks again. After your move the
machine takes the first empty cell of the top row, if one is left. The board
is then checked for three equal symbols in a row, in a column, or on the
diagonal from the top-left to the bottom-right corner. The game ends when one
of those lines is complete.

### Match-three (`minijuegos-candy`)

You first choose the board size, from 3 to 54. The board is filled with random
symbols out of `@ # $ % &`. You start with 20 moves. Each turn you pick a
direction from the menu (1 left, 2 right, 3 down, 4 up, 0 to quit) and then a
row and a column, counted from 0. The chosen cell swaps with its neighbour in
that direction. The board is then scanned, rows first and then columns. Every
run of three equal symbols gets fresh random symbols and scores 100 points.
Once your score has reached 800, each move also gives you 5 extra moves. A
move that would leave the board still costs a move. The game ends when you run
out of moves or quit, and it shows your final score.

### Naval battle (`minijuegos-batalla`)

Each player has seven carriers (`P`) and seven destroyers (`N`). The board is
printed one line per `x` coordinate. Player 1's ships start at `y` 0 and 1,
and player 2's at `y` 18 and 19. Each turn the current player's living ships
are listed, then the player enters a command on one line:

- `0`: move a carrier. Then enter `x y q` on the next line, where `q` is the
  carrier's index.
- `1`: move a destroyer. Then enter `x y q` on the next line.
- `2`: fire a missile. Then enter `x y` on the next line.
- `3`: quit.

A ship that moves onto an enemy ship sinks it (`Colision`). A missile sinks
every ship in the target cell, whichever side it belongs to, and leaves `*`
there (`Elemento destruido`). An index or cell off the board, or a sunk ship,
makes the move invalid, and the same player plays again.

### Scheduler (`minijuegos-planificador`)

Five built-in processes are queued by priority. The process at the front runs
for one time slice, printing one line per tick. It goes back in the queue if it
still has time left, and it becomes `inactivo` once its time is used up. The
queue is printed before every round.

Options:

- `--timeslice N`: ticks per round (default 10).
- `--delay SECONDS`: pause after each tick (default 0.4; use 0 to run at once).

## Library

The containers can be used on their own.

```python
from minijuegos.linked import LinkedList, LinkedStack, LinkedQueue
from minijuegos.containers import ArrayStack, ArrayQueue, DoubleEndedList

numbers = LinkedList([3, 5, 7, 1])
numbers.insert_at(9, 3)       # positions for insert_at start at 1
numbers[3]                    # indexing starts at 0 -> 7
numbers.index(5)              # -> 1, or -1 when absent
print(numbers.render())       # "3 5 9 7 1 "

stack = LinkedStack()
stack.push(2)
stack.push(4)
stack.pop()                   # -> 4

queue = ArrayQueue()
for value in (1, 2, 4, 3):
    queue.enqueue(value)
queue.dequeue()               # -> 1
print(queue.render())         # "[2,4,3]"
```

- `minijuegos.linked`: `LinkedList` has `append`, `insert_at` (returns `False`
  and changes nothing for a position outside `1..len`), `pop_front`, `index`,
  `render`, `save(path)` and the class method `load(path)`. `save` writes the
  values separated by spaces, and `load` reads whitespace-separated integers
  back into a new list. `LinkedStack` adds `push`/`pop`, and `LinkedQueue`
  adds `enqueue`/`dequeue`.
- `minijuegos.containers`: `ArrayStack`, `ArrayQueue` and `DoubleEndedList`,
  which has `push_back`, `push_front`, `pop_back`, `front`, `back` and
  `is_empty`. Removing from or reading an empty container raises `IndexError`.
- `minijuegos.scheduler`: `Process`, `PriorityQueue`, `ProcessingUnit` and
  `run_schedule`. `run_schedule` returns the process ids in the order they
  were served. `PriorityQueue.push` puts a process in front of the first one
  with a strictly lower priority. It accepts any process into an empty queue.
  If no queued process has a lower priority, it drops the process and returns
  `False`.
- `minijuegos.tictactoe`: `Board`, `HumanPlayer`, `MachinePlayer`.
- `minijuegos.candy`: `CandyGame`, `Direction` and `InvalidMove`. `play`
  raises `InvalidMove` for a move off the board or when no moves are left.
- `minijuegos.battleship`: `Board`, `Ship`, `Carrier`, `Destroyer`.

## What it does not do

The games keep no state between runs, and they have no saved games or high
scores. The naval battle is played by two people at one terminal, with no
computer opponent and no network play. The tic-tac-toe machine player does not
look ahead, and nothing detects a drawn game.