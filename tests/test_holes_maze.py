import pytest

from golfcourse.holes_maze import (
    EAST,
    HEIGHT,
    NORTH,
    SOUTH,
    WEST,
    WIDTH,
    generate_maze,
    maze,
)

STEPS = {NORTH: (-1, 0), SOUTH: (1, 0), WEST: (0, -1), EAST: (0, 1)}
OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, WEST: EAST, EAST: WEST}
CENTRE = (12, 12)


def test_every_cell_is_reached():
    m = generate_maze(CENTRE)
    assert len(m.grid) == HEIGHT
    assert all(len(row) == WIDTH for row in m.grid)
    assert min(cell for row in m.grid for cell in row) >= 1


def test_passages_form_a_spanning_tree():
    m = generate_maze(CENTRE)
    passages = sum(
        bool(cell & EAST) + bool(cell & SOUTH)
        for row in m.grid
        for cell in row
    )
    assert passages == WIDTH * HEIGHT - 1


def test_passages_are_symmetric_and_in_bounds():
    grid = generate_maze(CENTRE).grid
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            for direction, (di, dj) in STEPS.items():
                if cell & direction:
                    ni, nj = i + di, j + dj
                    assert 0 <= ni < HEIGHT and 0 <= nj < WIDTH
                    assert grid[ni][nj] & OPPOSITE[direction]


def test_distances_step_by_one_along_passages():
    m = generate_maze(CENTRE)
    dist = m.distances
    assert dist[12][12] == 0
    for i, row in enumerate(m.grid):
        for j, cell in enumerate(row):
            for direction, (di, dj) in STEPS.items():
                if cell & direction:
                    assert abs(dist[i + di][j + dj] - dist[i][j]) == 1


def test_path_connects_exit_to_start():
    m = generate_maze(CENTRE)
    assert m.start in m.path
    assert m.exit in m.path
    ei, ej = m.exit
    assert len(m.path) == m.distances[ei][ej] + 1
    for i, j in m.path - {m.start}:
        steps_back = [
            (i + di, j + dj)
            for direction, (di, dj) in STEPS.items()
            if m.grid[i][j] & direction
            and (i + di, j + dj) in m.path
            and m.distances[i + di][j + dj] == m.distances[i][j] - 1
        ]
        assert len(steps_back) == 1


def test_exit_is_not_the_start_when_start_is_central():
    m = generate_maze(CENTRE)
    ei, ej = m.exit
    assert m.distances[ei][ej] > 0


def test_drawing_dimensions_and_frame():
    lines = generate_maze(CENTRE).draw(False).split("\n")
    assert len(lines) == 2 * HEIGHT + 1
    assert all(len(line) == 2 * WIDTH + 1 for line in lines)
    assert set(lines[0]) == {"█"}
    assert set(lines[-1]) == {"█"}
    assert all(line[0] == "█" and line[-1] == "█" for line in lines)


def test_start_and_exit_marked_once():
    drawing = generate_maze(CENTRE).draw(True)
    assert drawing.count("S") == 1
    assert drawing.count("E") == 1


def test_solved_drawing_only_adds_dots():
    m = generate_maze(CENTRE)
    unsolved = m.draw(False)
    solved = m.draw(True)
    assert "." not in unsolved
    assert solved.replace(".", " ") == unsolved


def test_solved_drawing_dots_cover_path():
    m = generate_maze(CENTRE)
    path_length = len(m.path)
    # Path cells other than S and E, plus the openings between consecutive path cells.
    assert m.draw(True).count(".") == (path_length - 2) + (path_length - 1)


@pytest.mark.parametrize("start", [(-1, 0), (0, WIDTH), (HEIGHT, 3)])
def test_start_out_of_bounds_rejected(start):
    with pytest.raises(ValueError):
        generate_maze(start)


def test_random_start_is_in_bounds():
    m = generate_maze()
    i, j = m.start
    assert 0 <= i < HEIGHT and 0 <= j < WIDTH
    assert m.distances[i][j] == 0


def test_maze_hole_pairs_inputs_with_solutions():
    args, out = maze()
    solutions = out.split("\n\n")
    assert len(args) == 5
    assert len(solutions) == 5
    for arg, solved in zip(args, solutions):
        assert solved.replace(".", " ") == arg
        assert not arg.endswith("\n")