import pytest

from cptricks.grids import PrefixSum2D, matrix_multiply, parse_star_grid


GRID_ROWS = ["*.*.", ".**.", "....", "****"]


@pytest.fixture
def grid():
    return parse_star_grid(GRID_ROWS)


def test_parse_star_grid_marks_stars():
    assert parse_star_grid(["*.", ".*"]) == [[1, 0], [0, 1]]


def test_parse_star_grid_counts_match_text(grid):
    assert sum(map(sum, grid)) == "".join(GRID_ROWS).count("*")


def test_whole_grid_query_equals_total(grid):
    ps = PrefixSum2D(grid)
    assert ps.query(0, 0, 3, 3) == sum(map(sum, grid))


def test_single_cell_queries(grid):
    ps = PrefixSum2D(grid)
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            assert ps.query(i, j, i, j) == value


def test_every_rectangle_matches_slice_sum(grid):
    ps = PrefixSum2D(grid)
    for x1 in range(4):
        for x2 in range(x1, 4):
            for y1 in range(4):
                for y2 in range(y1, 4):
                    expected = sum(sum(row[y1:y2 + 1]) for row in grid[x1:x2 + 1])
                    assert ps.query(x1, y1, x2, y2) == expected


def test_query_outside_grid_raises(grid):
    ps = PrefixSum2D(grid)
    with pytest.raises(IndexError):
        ps.query(0, 0, 4, 0)


def test_query_reversed_corners_raises(grid):
    ps = PrefixSum2D(grid)
    with pytest.raises(ValueError):
        ps.query(2, 0, 1, 0)


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        PrefixSum2D([[1, 0], [1]])


def test_matrix_multiply_example():
    assert matrix_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_matrix_multiply_identity():
    a = [[2, -1, 7], [0, 3, 5]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert matrix_multiply(a, identity) == a


def test_matrix_multiply_shape():
    result = matrix_multiply([[1, 2, 3]], [[1], [2], [3]])
    assert len(result) == 1 and len(result[0]) == 1


def test_matrix_multiply_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])