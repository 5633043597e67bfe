"""Step-by-step simulations: a rolling die, a cleaning robot, slopes and gears."""

from itertools import pairwise

# Commands 1-4: east, west, north, south, as (drow, dcol).
_MOVES = {1: (0, 1), 2: (0, -1), 3: (-1, 0), 4: (1, 0)}
# Face order: top, north, east, west, south, bottom.
_ROLLS = {
    1: (3, 1, 0, 5, 4, 2),
    2: (2, 1, 5, 0, 4, 3),
    3: (4, 0, 2, 3, 5, 1),
    4: (1, 5, 2, 3, 0, 4),
}
# Headings 0-3: north, east, south, west, as (drow, dcol).
_HEADINGS = ((-1, 0), (0, 1), (1, 0), (0, -1))
_GEAR_TEETH = 8


def _dimensions(grid):
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must have equal length")
    return len(grid), cols


def roll_dice(grid, row, col, commands):
    """Top face after each roll that stays on the map; off-map rolls are skipped.

    Landing on 0 copies the die's bottom onto the cell; landing on a number
    copies it onto the bottom and clears the cell.  The grid is not modified.
    """
    rows, cols = _dimensions(grid)
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError("the die must start on the map")
    board = [list(line) for line in grid]
    die = (0,) * 6
    tops = []
    for command in commands:
        try:
            dr, dc = _MOVES[command]
        except KeyError:
            raise ValueError(f"unknown command {command}") from None
        nr, nc = row + dr, col + dc
        if not (0 <= nr < rows and 0 <= nc < cols):
            continue
        die = tuple(die[face] for face in _ROLLS[command])
        tops.append(die[0])
        if board[nr][nc]:
            die = die[:5] + (board[nr][nc],)
            board[nr][nc] = 0
        else:
            board[nr][nc] = die[5]
        row, col = nr, nc
    return tops


def cleaned_cells(room, row, col, direction):
    """Cells a robot cleans, turning left to find dirty cells and backing up otherwise.

    ``direction`` is 0 north, 1 east, 2 south or 3 west; cells other than 0
    and cells off the room count as walls.
    """
    if direction not in range(4):
        raise ValueError("direction must be 0, 1, 2 or 3")
    rows, cols = _dimensions(room)

    def is_open(r, c):
        return 0 <= r < rows and 0 <= c < cols and room[r][c] == 0

    if not is_open(row, col):
        raise ValueError("the robot must start on an open cell")
    cleaned = {(row, col)}
    while True:
        for turn in range(4):
            heading = (direction + 3 - turn) % 4
            dr, dc = _HEADINGS[heading]
            nr, nc = row + dr, col + dc
            if (nr, nc) not in cleaned and is_open(nr, nc):
                row, col, direction = nr, nc, heading
                cleaned.add((row, col))
                break
        else:
            dr, dc = _HEADINGS[(direction + 2) % 4]
            nr, nc = row + dr, col + dc
            if not is_open(nr, nc):
                return len(cleaned)
            row, col = nr, nc


def _passable(line, length):
    run = 1
    for previous, current in pairwise(line):
        if current == previous:
            run += 1
        elif current == previous + 1:
            if run < length:
                return False
            run = 1
        elif current == previous - 1:
            if run < 0:
                return False
            run = 1 - length
        else:
            return False
    return run >= 0


def count_slopes(grid, length):
    """Rows and columns walkable end to end using ramps of the given length."""
    if length < 1:
        raise ValueError("ramp length must be at least 1")
    _dimensions(grid)
    lines = [*grid, *zip(*grid)]
    return sum(_passable(line, length) for line in lines)


def _turn(gear, direction):
    if direction == 1:
        return gear[-1] + gear[:-1]
    return gear[1:] + gear[0]


def gear_score(gears, rotations):
    """Score of the gears after ``(number, direction)`` rotations; direction 1 is clockwise.

    A turning gear turns its neighbour the other way when their touching
    teeth differ.  Gear ``i`` adds ``2 ** i`` when its top tooth is '1'.
    """
    wheels = list(gears)
    for gear in wheels:
        if len(gear) != _GEAR_TEETH or set(gear) - {"0", "1"}:
            raise ValueError("each gear is eight '0' or '1' teeth")
    for number, direction in rotations:
        if not 1 <= number <= len(wheels):
            raise ValueError(f"gear {number} does not exist")
        if direction not in (1, -1):
            raise ValueError("direction must be 1 or -1")
        start = number - 1
        spins = {start: direction}
        index, spin = start, direction
        while index + 1 < len(wheels) and wheels[index][2] != wheels[index + 1][6]:
            index += 1
            spin = -spin
            spins[index] = spin
        index, spin = start, direction
        while index > 0 and wheels[index][6] != wheels[index - 1][2]:
            index -= 1
            spin = -spin
            spins[index] = spin
        for index, spin in spins.items():
            wheels[index] = _turn(wheels[index], spin)
    return sum(1 << index for index, gear in enumerate(wheels) if gear[0] == "1")