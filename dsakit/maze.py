"""Path finding through a grid maze by depth-first and breadth-first search."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from typing import Optional

Cell = tuple[int, int]

DEFAULT_GRID: tuple[tuple[int, ...], ...] = (
    (0, 1, 0, 0, 0),
    (0, 1, 0, 1, 0),
    (0, 0, 0, 1, 0),
    (0, 1, 1, 1, 0),
    (0, 0, 0, 0, 0),
)

# Up, down, left, right.
_MOVES: tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


class Maze:
    """A rectangular grid where 0 is open and anything else is a wall.

    Searches run from the top-left cell to the bottom-right cell.
    """

    def __init__(self, grid: Iterable[Sequence[int]] = DEFAULT_GRID) -> None:
        rows = [tuple(row) for row in grid]
        if not rows or not rows[0] or any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("maze must be a non-empty rectangular grid")
        self.grid = rows
        self.start: Cell = (0, 0)
        self.goal: Cell = (len(rows) - 1, len(rows[0]) - 1)

    def _neighbours(self, cell: Cell, visited: set[Cell]) -> Iterator[Cell]:
        rows, cols = len(self.grid), len(self.grid[0])
        row, col = cell
        for d_row, d_col in _MOVES:
            nxt = (row + d_row, col + d_col)
            if (
                0 <= nxt[0] < rows
                and 0 <= nxt[1] < cols
                and self.grid[nxt[0]][nxt[1]] == 0
                and nxt not in visited
            ):
                yield nxt

    def _trace(self, parents: dict[Cell, Optional[Cell]]) -> list[Cell]:
        path: list[Cell] = []
        cell: Optional[Cell] = self.goal
        while cell is not None:
            path.append(cell)
            cell = parents[cell]
        path.reverse()
        return path

    def dfs(self) -> Optional[list[Cell]]:
        """Return the first path found depth-first, or None if the goal is unreachable."""
        visited = {self.start}
        parents: dict[Cell, Optional[Cell]] = {self.start: None}
        if self.start == self.goal:
            return self._trace(parents)
        stack = [(self.start, self._neighbours(self.start, visited))]
        while stack:
            cell, moves = stack[-1]
            nxt = next(moves, None)
            if nxt is None:
                stack.pop()
                continue
            visited.add(nxt)
            parents[nxt] = cell
            if nxt == self.goal:
                return self._trace(parents)
            stack.append((nxt, self._neighbours(nxt, visited)))
        return None

    def bfs(self) -> Optional[list[Cell]]:
        """Return a shortest path found breadth-first, or None if the goal is unreachable."""
        visited = {self.start}
        parents: dict[Cell, Optional[Cell]] = {self.start: None}
        queue = deque([self.start])
        while queue:
            cell = queue.popleft()
            if cell == self.goal:
                return self._trace(parents)
            for nxt in self._neighbours(cell, visited):
                visited.add(nxt)
                parents[nxt] = cell
                queue.append(nxt)
        return None


def _format_path(path: list[Cell]) -> str:
    return " -> ".join(f"({row},{col})" for row, col in path)


def main(argv: Optional[list[str]] = None) -> int:
    """Search the built-in maze both ways and print the paths found."""
    argparse.ArgumentParser(description="Maze search demonstration").parse_args(argv)
    maze = Maze()
    for name, search in (("DFS", maze.dfs), ("BFS", maze.bfs)):
        path = search()
        print(f"{name} from (0,0): {'Yes' if path else 'No'}")
        if path:
            print("Path:")
            print(_format_path(path))
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())