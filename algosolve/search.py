"""Backtracking and search problems on boards, teams, ladders and offices."""

from collections import deque
from itertools import combinations, product

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_WALL = 6
# Camera sight directions as (drow, dcol): down, right, up, left.
_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_CAMERA_VIEWS = {
    1: ((0,), (1,), (2,), (3,)),
    2: ((0, 2), (1, 3)),
    3: ((0, 1), (1, 2), (2, 3), (3, 0)),
    4: ((0, 1, 2), (1, 2, 3), (2, 3, 0), (3, 0, 1)),
    5: ((0, 1, 2, 3),),
}


def _dimensions(grid):
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must have equal length")
    return len(grid), cols


def _square_size(matrix):
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return size


def longest_unique_path(board):
    """Longest walk from the top-left cell that never repeats a letter."""
    rows, cols = _dimensions(board)
    used = {board[0][0]}
    best = 0

    def walk(row, col, length):
        nonlocal best
        best = max(best, length)
        for dr, dc in _STEPS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols and board[nr][nc] not in used:
                letter = board[nr][nc]
                used.add(letter)
                walk(nr, nc, length + 1)
                used.discard(letter)

    walk(0, 0, 1)
    return best


def _lay_pipe(blocked, row, rows, cols):
    path = [(row, -1, iter((-1, 0, 1)))]
    while path:
        r, c, moves = path[-1]
        if c == cols - 1:
            return True
        for shift in moves:
            nr, nc = r + shift, c + 1
            if 0 <= nr < rows and not blocked[nr][nc]:
                blocked[nr][nc] = True
                path.append((nr, nc, iter((-1, 0, 1))))
                break
        else:
            path.pop()
    return False


def max_pipelines(grid):
    """Most pipes laid left to right through '.' cells, each step up-right, right or down-right."""
    rows, cols = _dimensions(grid)
    blocked = [[cell == "x" for cell in row] for row in grid]
    return sum(_lay_pipe(blocked, row, rows, cols) for row in range(rows))


def steal_documents(grid, keys):
    """Documents ('$') reachable from outside a building, opening doors with found keys.

    ``keys`` lists the lowercase keys held at the start, or "0" for none.
    """
    rows, cols = _dimensions(grid)
    held = set() if keys.startswith("0") else set(keys)
    seen = [[False] * cols for _ in range(rows)]
    waiting = {}
    queue = deque()
    stolen = 0

    def enter(row, col):
        nonlocal stolen
        cell = grid[row][col]
        if cell == "*" or seen[row][col]:
            return
        if "A" <= cell <= "Z" and cell.lower() not in held:
            waiting.setdefault(cell, []).append((row, col))
            return
        seen[row][col] = True
        queue.append((row, col))
        if cell == "$":
            stolen += 1
        elif "a" <= cell <= "z" and cell not in held:
            held.add(cell)
            for door in waiting.pop(cell.upper(), ()):
                enter(*door)

    for row in range(rows):
        for col in range(cols):
            if row in (0, rows - 1) or col in (0, cols - 1):
                enter(row, col)

    while queue:
        row, col = queue.popleft()
        for dr, dc in _STEPS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                enter(nr, nc)
    return stolen


def min_team_difference(abilities):
    """Smallest strength gap when people are split into two teams of half size."""
    size = _square_size(abilities)
    if size < 2:
        raise ValueError("at least two people are needed")

    def strength(team):
        return sum(abilities[a][b] + abilities[b][a] for a, b in combinations(team, 2))

    best = None
    for rest in combinations(range(1, size), size // 2 - 1):
        team = {0, *rest}
        other = [person for person in range(size) if person not in team]
        gap = abs(strength(sorted(team)) - strength(other))
        best = gap if best is None else min(best, gap)
    return best


def best_lineup(abilities):
    """Highest total ability placing each player in a distinct position he can play.

    Row ``i`` holds one player's abilities by position; 0 means he cannot play
    there.  Returns 0 when no full lineup exists.
    """
    size = _square_size(abilities)
    taken = [False] * size
    best = 0

    def assign(row, total):
        nonlocal best
        if row == size:
            best = max(best, total)
            return
        for col, value in enumerate(abilities[row]):
            if value and not taken[col]:
                taken[col] = True
                assign(row + 1, total + value)
                taken[col] = False

    assign(0, 0)
    return best


def min_ladder_additions(columns, rows, ladders):
    """Fewest rungs (at most 3) to add so every column ends where it started, or -1.

    ``ladders`` holds ``(row, col)`` rungs joining ``col`` and ``col + 1``.
    """
    rungs = set()
    for row, col in ladders:
        if not (1 <= row <= rows and 1 <= col < columns):
            raise ValueError("ladder lies outside the board")
        rungs.add((row, col))
    slots = [(row, col) for row in range(1, rows + 1) for col in range(1, columns)]

    def settles():
        for start in range(1, columns + 1):
            col = start
            for row in range(1, rows + 1):
                if (row, col) in rungs:
                    col += 1
                elif (row, col - 1) in rungs:
                    col -= 1
            if col != start:
                return False
        return True

    def place(remaining, begin, placed):
        if placed > rows:
            return False
        if not remaining:
            return settles()
        for index in range(begin, len(slots)):
            row, col = slots[index]
            if (row, col) in rungs or (row, col - 1) in rungs or (row, col + 1) in rungs:
                continue
            rungs.add((row, col))
            found = place(remaining - 1, index + 1, placed + 1)
            rungs.discard((row, col))
            if found:
                return True
        return False

    for extra in range(4):
        if place(extra, 0, 0):
            return extra
    return -1


def _sight(office, row, col, direction, rows, cols):
    dr, dc = _DIRECTIONS[direction]
    cells = set()
    r, c = row + dr, col + dc
    while 0 <= r < rows and 0 <= c < cols and office[r][c] != _WALL:
        cells.add((r, c))
        r += dr
        c += dc
    return cells


def min_blind_spots(office):
    """Fewest empty cells left unwatched after turning every camera (1-5); 6 is a wall."""
    rows, cols = _dimensions(office)
    blanks = {
        (r, c) for r, line in enumerate(office) for c, value in enumerate(line) if value == 0
    }
    choices = []
    for r, line in enumerate(office):
        for c, value in enumerate(line):
            if value in _CAMERA_VIEWS:
                lines = [_sight(office, r, c, d, rows, cols) & blanks for d in range(4)]
                choices.append(
                    [frozenset().union(*(lines[d] for d in view)) for view in _CAMERA_VIEWS[value]]
                )
            elif value not in (0, _WALL):
                raise ValueError(f"unknown office cell {value}")
    return min(len(blanks.difference(*combo)) for combo in product(*choices))