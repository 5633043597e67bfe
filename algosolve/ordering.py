"""Topological-order problems: levels, critical paths, part counts and rankings."""

from collections import Counter, deque


def _check_node(node, count):
    if not 1 <= node <= count:
        raise ValueError(f"node {node} is outside 1..{count}")


def semester_levels(n, prerequisites):
    """Earliest semester for each course 1..n; courses stuck in a cycle get 0.

    ``prerequisites`` holds ``(before, after)`` pairs.
    """
    following = [[] for _ in range(n + 1)]
    pending = [0] * (n + 1)
    for before, after in prerequisites:
        _check_node(before, n)
        _check_node(after, n)
        following[before].append(after)
        pending[after] += 1

    levels = [0] * (n + 1)
    current = [node for node in range(1, n + 1) if not pending[node]]
    level = 1
    while current:
        upcoming = []
        for node in current:
            levels[node] = level
            for after in following[node]:
                pending[after] -= 1
                if not pending[after]:
                    upcoming.append(after)
        current = upcoming
        level += 1
    return levels[1:]


def critical_path(n, roads, start, end):
    """Longest travel time from ``start`` to ``end`` and the number of roads on such paths.

    ``roads`` holds one-way ``(from, to, time)`` roads forming an acyclic graph.
    """
    _check_node(start, n)
    _check_node(end, n)
    outgoing = [[] for _ in range(n + 1)]
    incoming = [[] for _ in range(n + 1)]
    pending = [0] * (n + 1)
    for a, b, cost in roads:
        _check_node(a, n)
        _check_node(b, n)
        outgoing[a].append((b, cost))
        incoming[b].append((a, cost))
        pending[b] += 1

    arrival = [0] * (n + 1)
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt, cost in outgoing[node]:
            arrival[nxt] = max(arrival[nxt], arrival[node] + cost)
            pending[nxt] -= 1
            if not pending[nxt]:
                queue.append(nxt)

    used = set()
    visited = {end}
    queue = deque([end])
    while queue:
        node = queue.popleft()
        for prev, cost in incoming[node]:
            if arrival[prev] == arrival[node] - cost:
                used.add((node, prev))
                if prev not in visited:
                    visited.add(prev)
                    queue.append(prev)
    return arrival[end], len(used)


def min_completion_time(tasks):
    """Least time to finish every task.

    ``tasks[i]`` is ``(duration, linked)`` for task ``i + 1``; each task in
    ``linked`` (1-based) can only start once task ``i + 1`` is done.
    """
    count = len(tasks)
    pending = [0] * count
    for _, linked in tasks:
        for other in linked:
            _check_node(other, count)
            pending[other - 1] += 1

    finish = [0] * count
    queue = deque()
    for index, (duration, _) in enumerate(tasks):
        if not pending[index]:
            queue.append(index)
            finish[index] = duration

    best = 0
    while queue:
        index = queue.popleft()
        best = max(best, finish[index])
        for other in tasks[index][1]:
            other -= 1
            pending[other] -= 1
            finish[other] = max(finish[other], finish[index] + tasks[other][0])
            if not pending[other]:
                queue.append(other)
    return best


def best_cycle(n, edges):
    """Highest-scoring route leaving node 1 and returning to it.

    ``edges`` holds ``(from, to, points)``; the graph is acyclic apart from
    edges back into node 1.  Returns ``(score, path)``.
    """
    if n == 1:
        return 0, [1]
    outgoing = [[] for _ in range(n + 1)]
    pending = [0] * (n + 1)
    for a, b, points in edges:
        _check_node(a, n)
        _check_node(b, n)
        outgoing[a].append((b, points))
        pending[b] += 1

    score = [0] * (n + 1)
    parent = [0] * (n + 1)
    parent[1] = 1
    queue = deque([1])
    while queue:
        node = queue.popleft()
        for nxt, points in outgoing[node]:
            if score[nxt] < score[node] + points:
                score[nxt] = score[node] + points
                parent[nxt] = node
            if nxt == 1:
                continue
            pending[nxt] -= 1
            if not pending[nxt]:
                queue.append(nxt)

    path = [1]
    node = parent[1]
    while node != 1:
        if node == 0 or len(path) > n:
            raise ValueError("no route returns to node 1")
        path.append(node)
        node = parent[node]
    path.append(1)
    path.reverse()
    return score[1], path


def base_parts(product, relations):
    """Basic parts and how many of each the product needs, sorted by part number.

    ``relations`` holds ``(whole, part, amount)``: ``whole`` uses ``amount`` of ``part``.
    """
    needs = {}
    pending = Counter()
    for whole, part, amount in relations:
        needs.setdefault(whole, []).append((part, amount))
        pending[part] += 1

    counts = Counter({product: 1})
    basic = []
    queue = deque([product])
    while queue:
        item = queue.popleft()
        parts = needs.get(item, ())
        if not parts:
            basic.append(item)
        for part, amount in parts:
            counts[part] += counts[item] * amount
            pending[part] -= 1
            if not pending[part]:
                queue.append(part)
    return [(part, counts[part]) for part in sorted(basic)]


def strahler_order(node_count, edges):
    """Strahler order of a river network whose outlet is node ``node_count``."""
    downstream = [[] for _ in range(node_count + 1)]
    pending = [0] * (node_count + 1)
    for a, b in edges:
        _check_node(a, node_count)
        _check_node(b, node_count)
        downstream[a].append(b)
        pending[b] += 1

    order = [0] * (node_count + 1)
    ties = [0] * (node_count + 1)
    queue = deque()
    for node in range(1, node_count + 1):
        if not pending[node]:
            order[node] = 1
            queue.append(node)

    while queue:
        node = queue.popleft()
        for nxt in downstream[node]:
            if order[nxt] < order[node]:
                order[nxt] = order[node]
                ties[nxt] = 1
            elif order[nxt] == order[node]:
                ties[nxt] += 1
            pending[nxt] -= 1
            if not pending[nxt]:
                if ties[nxt] >= 2:
                    order[nxt] += 1
                queue.append(nxt)
    return order[node_count]


def reorder_ranking(ranking, swaps):
    """Apply swaps of neighbouring teams, deferring those not yet adjacent.

    Returns the new ranking, or None when the swaps cannot all be applied.
    """
    order = list(ranking)
    position = {team: index for index, team in enumerate(order)}
    if len(position) != len(order):
        raise ValueError("teams in a ranking must be distinct")
    pending = list(swaps)
    for a, b in pending:
        if a not in position or b not in position:
            raise ValueError("swap names a team that is not ranked")

    while pending:
        remaining = []
        for a, b in pending:
            i, j = position[a], position[b]
            if abs(i - j) == 1:
                order[i], order[j] = b, a
                position[a], position[b] = j, i
            else:
                remaining.append((a, b))
        if len(remaining) == len(pending):
            return None
        pending = remaining
    return order