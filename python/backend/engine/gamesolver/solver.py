"""Generic breadth-first puzzle solver."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable
from typing import Protocol, TypeVar, runtime_checkable

log = logging.getLogger(__name__)


@runtime_checkable
class Configuration(Protocol):
    """A puzzle state the solver can search over.

    Implementations must be hashable with value equality, so that two
    equal states found along different paths collapse to one.
    """

    def is_solution(self) -> bool: ...

    def neighbors(self) -> Iterable[Configuration]: ...

    def __eq__(self, other: object) -> bool: ...

    def __hash__(self) -> int: ...


C = TypeVar("C", bound=Configuration)


class Solver:
    """Finds the shortest path from a configuration to any solution.

    Every ``solve`` call uses its own frontier and predecessor map.  The
    counters describe the most recent call only.
    """

    def __init__(self) -> None:
        self._total = 0
        self._unique = 0

    @property
    def total_configs(self) -> int:
        """Configurations generated, duplicates included (start counts)."""
        return self._total

    @property
    def unique_configs(self) -> int:
        """Distinct configurations discovered (start counts)."""
        return self._unique

    def solve(self, start: C) -> list[C] | None:
        """Return the shortest path ordered solution-first, or ``None``.

        ``path[-1]`` is *start* and ``path[0]`` is the solved
        configuration; reverse it to replay the moves.
        """
        queue: deque[C] = deque([start])
        predecessors: dict[C, C | None] = {start: None}
        self._total = 1
        self._unique = 1
        log.debug("Solving from:\n%s", start)

        while queue:
            current = queue.popleft()
            if current.is_solution():
                path = self._trace(current, predecessors)
                log.debug(
                    "Solved in %d moves (%d total, %d unique configs).",
                    len(path) - 1, self._total, self._unique,
                )
                return path

            for neighbor in current.neighbors():
                self._total += 1
                if neighbor not in predecessors:
                    self._unique += 1
                    predecessors[neighbor] = current
                    queue.append(neighbor)

        log.debug(
            "No solution (%d total, %d unique configs).",
            self._total, self._unique,
        )
        return None

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _trace(end: C, predecessors: dict[C, C | None]) -> list[C]:
        path = [end]
        prev = predecessors[end]
        while prev is not None:
            path.append(prev)
            prev = predecessors[prev]
        return path
