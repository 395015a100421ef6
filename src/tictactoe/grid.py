"""
Geometry of the board

(placed in its own module as multiple other modules need to import it)
"""

# 3x3 grid, cells are numbered 0-8 row by row (row-major):
#  0 | 1 | 2
#  3 | 4 | 5
#  6 | 7 | 8
BOARD_DIMENSIONS = (3, 3)
BOARD_SIZE = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]

CENTER = 4
CORNERS = (0, 2, 6, 8)

Line = tuple[int, int, int]

ROWS: tuple[Line, ...] = ((0, 1, 2), (3, 4, 5), (6, 7, 8))
COLUMNS: tuple[Line, ...] = ((0, 3, 6), (1, 4, 7), (2, 5, 8))
DIAGONALS: tuple[Line, ...] = ((0, 4, 8), (2, 4, 6))

WIN_LINES: tuple[Line, ...] = ROWS + COLUMNS + DIAGONALS


def is_within_bounds(index: int) -> bool:
    return 0 <= index < BOARD_SIZE
