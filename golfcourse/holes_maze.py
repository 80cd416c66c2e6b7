"""The maze hole: random mazes carved by backtracking, drawn with and without the solution."""

from __future__ import annotations

import random
from dataclasses import dataclass

NORTH = 1
SOUTH = 2
WEST = 4
EAST = 8

WIDTH = 25
HEIGHT = 25

_MAZES = 5
_WALL = "█"
_EXIT_ROULETTE = 0.1

_STEPS = {NORTH: (-1, 0), SOUTH: (1, 0), WEST: (0, -1), EAST: (0, 1)}
_OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, WEST: EAST, EAST: WEST}

Cell = tuple[int, int]


def _in_bounds(i: int, j: int) -> bool:
    return 0 <= i < HEIGHT and 0 <= j < WIDTH


def _shuffled_directions():
    directions = list(_STEPS)
    random.shuffle(directions)
    return iter(directions)


def _dig(start: Cell) -> tuple[list[list[int]], list[list[int]]]:
    """Carve passages from start; returns the passage bits and each cell's distance."""
    grid = [[0] * WIDTH for _ in range(HEIGHT)]
    dist = [[0] * WIDTH for _ in range(HEIGHT)]
    stack = [(start, _shuffled_directions())]

    while stack:
        (i, j), directions = stack[-1]
        for direction in directions:
            di, dj = _STEPS[direction]
            ni, nj = i + di, j + dj
            if _in_bounds(ni, nj) and grid[ni][nj] == 0:
                grid[i][j] |= direction
                dist[ni][nj] = dist[i][j] + 1
                grid[ni][nj] |= _OPPOSITE[direction]
                stack.append(((ni, nj), _shuffled_directions()))
                break
        else:
            stack.pop()

    return grid, dist


def _find_exit(dist: list[list[int]]) -> Cell:
    """Scan for far cells, stopping early at random so the exit is not always the farthest."""
    best = -1
    exit_cell = (0, 0)
    for i, row in enumerate(dist):
        for j, distance in enumerate(row):
            if distance > best:
                best = distance
                exit_cell = (i, j)
                if random.random() < _EXIT_ROULETTE:
                    return exit_cell
    return exit_cell


def _trace_path(grid: list[list[int]], dist: list[list[int]], exit_cell: Cell) -> frozenset[Cell]:
    """Follow passages from the exit back to the start, always one step closer."""
    i, j = exit_cell
    path = {exit_cell}
    while dist[i][j] > 0:
        for direction, (di, dj) in _STEPS.items():
            ni, nj = i + di, j + dj
            if grid[i][j] & direction and dist[ni][nj] == dist[i][j] - 1:
                i, j = ni, nj
                path.add((i, j))
                break
    return frozenset(path)


@dataclass(frozen=True)
class Maze:
    """A maze: passage bits per cell, distances from the start, and the solution path."""

    grid: tuple[tuple[int, ...], ...]
    distances: tuple[tuple[int, ...], ...]
    start: Cell
    exit: Cell
    path: frozenset[Cell]

    def draw(self, solved: bool) -> str:
        """Render the maze in block characters; solved marks the path with dots."""
        track = "." if solved else " "
        lines = [_WALL + _WALL * 2 * WIDTH]

        for i, row in enumerate(self.grid):
            top = [_WALL]
            bottom = [_WALL]
            for j, passages in enumerate(row):
                on_path = (i, j) in self.path
                if (i, j) == self.start:
                    cell = "S"
                elif (i, j) == self.exit:
                    cell = "E"
                else:
                    cell = track if on_path else " "

                if passages & EAST:
                    east = track if on_path and (i, j + 1) in self.path else " "
                else:
                    east = _WALL

                if passages & SOUTH:
                    south = track if on_path and (i + 1, j) in self.path else " "
                else:
                    south = _WALL

                top.append(cell + east)
                bottom.append(south + _WALL)

            lines.append("".join(top))
            lines.append("".join(bottom))

        return "\n".join(lines)


def generate_maze(start: Cell | None = None) -> Maze:
    """Carve a maze from start, or from a random cell, and pick its exit and path."""
    if start is None:
        start = (random.randrange(HEIGHT), random.randrange(WIDTH))
    if not _in_bounds(*start):
        raise ValueError(f"start {start} is outside the {HEIGHT}x{WIDTH} maze")

    grid, dist = _dig(start)
    exit_cell = _find_exit(dist)
    path = _trace_path(grid, dist, exit_cell)

    return Maze(
        grid=tuple(map(tuple, grid)),
        distances=tuple(map(tuple, dist)),
        start=start,
        exit=exit_cell,
        path=path,
    )


def maze() -> tuple[list[str], str]:
    """Five mazes and their solved drawings, separated by blank lines."""
    mazes = [generate_maze() for _ in range(_MAZES)]
    return [m.draw(False) for m in mazes], "\n\n".join(m.draw(True) for m in mazes)