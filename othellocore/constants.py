"""Constants for the Othello engine."""

### Board
BOARD_DIM = 8
NUM_SQUARES = BOARD_DIM * BOARD_DIM

### Cells
BLACK = -1
WHITE = 1
EMPTY = 0

# (dx, dy) steps, x to the right and y downward
DIRECTIONS = [(dx, dy) for dy in [-1, 0, 1] for dx in [-1, 0, 1] if not (dx == 0 and dy == 0)]

### Notation
# Columns are lettered by x, rows numbered by y: (2, 3) is "c4".
letters = "abcdefgh"
number = "12345678"

tuple2square = {(x, y): letters[x] + number[y] for y in range(BOARD_DIM) for x in range(BOARD_DIM)}

square2tuple = {letters[x] + number[y]: (x, y) for y in range(BOARD_DIM) for x in range(BOARD_DIM)}

SQUARES = list(square2tuple.keys())
