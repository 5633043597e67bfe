"""Grid search problems: 0-1 breadth-first search, flood fills and component sizes."""

from collections import deque

_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_FIELD = 501


def _dimensions(grid):
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must have equal length")
    return len(grid), cols


def _neighbours(row, col, rows, cols):
    for dr, dc in _STEPS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def min_walls_to_break(grid):
    """Fewest walls ('1') to break walking from the top-left to the bottom-right cell."""
    rows, cols = _dimensions(grid)
    seen = [[False] * cols for _ in range(rows)]
    seen[0][0] = True
    queue = deque([(0, 0, 0)])
    while queue:
        row, col, cost = queue.popleft()
        if row == rows - 1 and col == cols - 1:
            return cost
        for nr, nc in _neighbours(row, col, rows, cols):
            if seen[nr][nc]:
                continue
            seen[nr][nc] = True
            if grid[nr][nc] == "0":
                queue.appendleft((nr, nc, cost))
            else:
                queue.append((nr, nc, cost + 1))
    raise ValueError("the bottom-right cell cannot be reached")


def current_percolates(grid):
    """Whether current entering open top cells ('0') can reach the bottom row."""
    rows, cols = _dimensions(grid)
    seen = [[False] * cols for _ in range(rows)]
    queue = deque()
    for col, cell in enumerate(grid[0]):
        if cell == "0":
            seen[0][col] = True
            queue.append((0, col))
    while queue:
        row, col = queue.popleft()
        if row == rows - 1:
            return True
        for nr, nc in _neighbours(row, col, rows, cols):
            if grid[nr][nc] == "1" or seen[nr][nc]:
                continue
            seen[nr][nc] = True
            queue.append((nr, nc))
    return False


def _fill(field, zone):
    x1, y1, x2, y2 = zone
    if not all(0 <= value < _FIELD for value in zone):
        raise ValueError("zone lies outside the field")
    low_x, high_x = sorted((x1, x2))
    for y in range(min(y1, y2), max(y1, y2) + 1):
        start = y * _FIELD
        field[start + low_x:start + high_x + 1] = b"\x01" * (high_x - low_x + 1)


def min_life_loss(danger_zones, death_zones):
    """Least life lost walking from (0, 0) to (500, 500), or -1 if it cannot be done.

    Each zone is ``(x1, y1, x2, y2)``; entering a danger cell costs one life and
    death cells cannot be entered.
    """
    danger = bytearray(_FIELD * _FIELD)
    blocked = bytearray(_FIELD * _FIELD)
    for zone in danger_zones:
        _fill(danger, zone)
    for zone in death_zones:
        _fill(blocked, zone)

    goal = _FIELD * _FIELD - 1
    last = _FIELD - 1
    blocked[0] = 1
    queue = deque([(0, 0)])
    while queue:
        index, cost = queue.popleft()
        if index == goal:
            return cost
        y, x = divmod(index, _FIELD)
        candidates = []
        if x < last:
            candidates.append(index + 1)
        if y < last:
            candidates.append(index + _FIELD)
        if x > 0:
            candidates.append(index - 1)
        if y > 0:
            candidates.append(index - _FIELD)
        for nxt in candidates:
            if blocked[nxt]:
                continue
            blocked[nxt] = 1
            if danger[nxt]:
                queue.append((nxt, cost + 1))
            else:
                queue.appendleft((nxt, cost))
    return -1


def wall_reach_map(grid):
    """For each wall, the size of the open area it would join if removed, mod 10."""
    rows, cols = _dimensions(grid)
    label = [[None] * cols for _ in range(rows)]
    sizes = []
    for row in range(rows):
        for col in range(cols):
            if grid[row][col] == "1" or label[row][col] is not None:
                continue
            ident = len(sizes)
            label[row][col] = ident
            queue = deque([(row, col)])
            size = 0
            while queue:
                r, c = queue.popleft()
                size += 1
                for nr, nc in _neighbours(r, c, rows, cols):
                    if grid[nr][nc] != "1" and label[nr][nc] is None:
                        label[nr][nc] = ident
                        queue.append((nr, nc))
            sizes.append(size)

    result = []
    for row in range(rows):
        cells = []
        for col in range(cols):
            if grid[row][col] != "1":
                cells.append("0")
                continue
            touching = {
                label[nr][nc]
                for nr, nc in _neighbours(row, col, rows, cols)
                if label[nr][nc] is not None
            }
            cells.append(str((1 + sum(sizes[ident] for ident in touching)) % 10))
        result.append("".join(cells))
    return result


def paintings(grid):
    """Number of connected pictures of 1s and the area of the largest one."""
    if not grid:
        return 0, 0
    rows, cols = _dimensions(grid)
    seen = [[False] * cols for _ in range(rows)]
    count = 0
    largest = 0
    for row in range(rows):
        for col in range(cols):
            if not grid[row][col] or seen[row][col]:
                continue
            count += 1
            seen[row][col] = True
            queue = deque([(row, col)])
            area = 0
            while queue:
                r, c = queue.popleft()
                area += 1
                for nr, nc in _neighbours(r, c, rows, cols):
                    if grid[nr][nc] and not seen[nr][nc]:
                        seen[nr][nc] = True
                        queue.append((nr, nc))
            largest = max(largest, area)
    return count, largest


def sections_and_spaces(grid):
    """Connected open sections starting from '.' cells, and the open cells they hold."""
    rows, cols = _dimensions(grid)
    seen = [[False] * cols for _ in range(rows)]
    sections = 0
    spaces = 0
    for row in range(rows):
        for col in range(cols):
            if seen[row][col] or grid[row][col] != ".":
                continue
            sections += 1
            seen[row][col] = True
            queue = deque([(row, col)])
            while queue:
                r, c = queue.popleft()
                spaces += 1
                for nr, nc in _neighbours(r, c, rows, cols):
                    if grid[nr][nc] != "#" and not seen[nr][nc]:
                        seen[nr][nc] = True
                        queue.append((nr, nc))
    return sections, spaces


def format_sections(sections, spaces):
    """Describe section and space counts with the right plural forms."""
    section_word = "section" if sections == 1 else "sections"
    space_word = "space" if spaces == 1 else "spaces"
    return f"{sections} {section_word}, {spaces} {space_word}"


def elevator_presses(floors, start, goal, up, down):
    """Fewest button presses from ``start`` to ``goal``, or None if unreachable."""
    if not (1 <= start <= floors and 1 <= goal <= floors):
        raise ValueError("start and goal must be between 1 and floors")
    seen = {start}
    current = [start]
    presses = 0
    while current:
        upcoming = []
        for floor in current:
            if floor == goal:
                return presses
            for nxt in (floor + up, floor - down):
                if 1 <= nxt <= floors and nxt not in seen:
                    seen.add(nxt)
                    upcoming.append(nxt)
        current = upcoming
        presses += 1
    return None