"""Round-robin processing of prioritised processes."""

from __future__ import annotations

import argparse
import time as _time
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

ACTIVE = "activo"
INACTIVE = "inactivo"

DEFAULT_TIMESLICE = 10
DEFAULT_TICK_DELAY = 0.4

_CLEAR_SCREEN = "\033[2J\033[H"


@dataclass
class Process:
    """A unit of work with an identifier, a priority, a state and remaining time."""

    pid: int
    priority: int
    state: str = ACTIVE
    time: int = 0

    def reduce_time(self, amount: int) -> None:
        """Take ``amount`` off the remaining time."""
        self.time -= amount

    def describe(self) -> str:
        """Return ``id<TAB>state<TAB>time<TAB>priority``."""
        return f"{self.pid}\t{self.state}\t{self.time}\t{self.priority}"


class PriorityQueue:
    """Queue of processes kept highest priority first.

    A process is only queued into a non-empty queue when some queued process
    has a strictly lower priority; it then goes in front of the first such one.
    """

    def __init__(self) -> None:
        self._items: List[Process] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Process]:
        return iter(self._items)

    def push(self, process: Process) -> bool:
        """Queue ``process``; return whether it was accepted."""
        if not self._items:
            self._items.append(process)
            return True
        for position, queued in enumerate(self._items):
            if process.priority > queued.priority:
                self._items.insert(position, process)
                return True
        return False

    def pop(self) -> Process:
        """Remove and return the process at the front."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.pop(0)

    def peek(self) -> Process:
        """Return the process at the front without removing it."""
        if not self._items:
            raise IndexError("peek into an empty queue")
        return self._items[0]

    def render(self) -> str:
        """Return one described process per line, front first."""
        return "\n".join(process.describe() for process in self._items)


class ProcessingUnit:
    """Runs a process for one timeslice at a time."""

    def __init__(
        self,
        timeslice: int = DEFAULT_TIMESLICE,
        tick_delay: float = DEFAULT_TICK_DELAY,
    ) -> None:
        if timeslice <= 0:
            raise ValueError("timeslice must be positive")
        if tick_delay < 0:
            raise ValueError("tick_delay must not be negative")
        self.timeslice = timeslice
        self.tick_delay = tick_delay

    def process(self, process: Process) -> None:
        """Run ``process`` for one timeslice and mark it inactive when done."""
        process.reduce_time(self.timeslice)
        for tick in range(1, self.timeslice + 1):
            print(f"procesando tiempo: {tick}")
            if self.tick_delay:
                _time.sleep(self.tick_delay)
        if process.time <= 0:
            process.state = INACTIVE
        print(_CLEAR_SCREEN, end="")


def run_schedule(
    processes: Iterable[Process], unit: Optional[ProcessingUnit] = None
) -> List[int]:
    """Run every process to completion; return the pids in the order served."""
    unit = unit or ProcessingUnit()
    queue = PriorityQueue()
    for process in processes:
        queue.push(process)
        print("se inserto")
    served: List[int] = []
    while queue:
        print(queue.render())
        current = queue.pop()
        unit.process(current)
        served.append(current.pid)
        if current.state == ACTIVE:
            queue.push(current)
    return served


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Schedule the built-in set of processes."""
    parser = argparse.ArgumentParser(description="Priority process scheduler.")
    parser.add_argument("--timeslice", type=int, default=DEFAULT_TIMESLICE)
    parser.add_argument("--delay", type=float, default=DEFAULT_TICK_DELAY)
    args = parser.parse_args(argv)

    processes = [
        Process(111, 1, ACTIVE, 50),
        Process(134, 5, ACTIVE, 40),
        Process(234, 8, ACTIVE, 60),
        Process(464, 9, ACTIVE, 30),
        Process(987, 30, ACTIVE, 90),
    ]
    for process in processes:
        print(process.describe())
    run_schedule(processes, ProcessingUnit(args.timeslice, args.delay))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())