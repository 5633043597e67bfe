"""Graph problems: union-find, tree ancestry, bipartiteness and shortest paths."""

import math
from collections import deque


def _find(parent, node):
    while parent[node] != node:
        parent[node] = parent[parent[node]]
        node = parent[node]
    return node


def max_docked_planes(gates, planes):
    """Planes docked in order, each at the highest free gate up to its limit."""
    parent = list(range(gates + 1))
    docked = 0
    for plane in planes:
        if not 1 <= plane <= gates:
            raise ValueError("plane limit must name an existing gate")
        gate = _find(parent, plane)
        if gate == 0:
            break
        parent[gate] = _find(parent, gate - 1)
        docked += 1
    return docked


def min_friend_cost(costs, pairs, budget):
    """Cheapest cost of befriending everyone through friends, or None if over budget.

    ``costs[i]`` belongs to student ``i + 1``; ``pairs`` are 1-based friendships.
    """
    parent = list(range(len(costs)))
    for a, b in pairs:
        if a == b:
            continue
        root_a = _find(parent, a - 1)
        root_b = _find(parent, b - 1)
        if costs[root_a] < costs[root_b]:
            parent[root_b] = root_a
        else:
            parent[root_a] = root_b
    roots = {_find(parent, student) for student in range(len(costs))}
    total = sum(costs[root] for root in roots)
    return total if total <= budget else None


class RootedTree:
    """A tree on nodes 1..n rooted at 1, answering ancestor and distance queries.

    Edges are ``(a, b)`` or ``(a, b, length)``; unweighted edges have length 1.
    """

    def __init__(self, node_count, edges):
        if node_count < 1:
            raise ValueError("a tree needs at least one node")
        self.node_count = node_count
        adjacency = [[] for _ in range(node_count + 1)]
        for a, b, *rest in edges:
            length = rest[0] if rest else 1
            adjacency[a].append((b, length))
            adjacency[b].append((a, length))

        depth = [-1] * (node_count + 1)
        distance = [0] * (node_count + 1)
        parent = [0] * (node_count + 1)
        depth[1] = 0
        stack = [1]
        while stack:
            node = stack.pop()
            for child, length in adjacency[node]:
                if depth[child] == -1:
                    depth[child] = depth[node] + 1
                    distance[child] = distance[node] + length
                    parent[child] = node
                    stack.append(child)
        if -1 in depth[1:]:
            raise ValueError("edges do not connect every node")

        self._depth = depth
        self._distance = distance
        self._up = [parent]
        for _ in range(1, max(1, node_count.bit_length())):
            previous = self._up[-1]
            self._up.append([previous[ancestor] for ancestor in previous])

    def _check(self, node):
        if not 1 <= node <= self.node_count:
            raise ValueError(f"node {node} is not in the tree")

    def lca(self, a, b):
        """Lowest common ancestor of ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        diff = self._depth[a] - self._depth[b]
        for level, table in enumerate(self._up):
            if diff >> level & 1:
                a = table[a]
        if a == b:
            return a
        for table in reversed(self._up):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._up[0][a]

    def distance(self, a, b):
        """Total edge length on the path between ``a`` and ``b``."""
        ancestor = self.lca(a, b)
        return self._distance[a] + self._distance[b] - 2 * self._distance[ancestor]


def is_bipartite(vertex_count, edges):
    """Whether the graph on vertices 1..n can be two-coloured."""
    adjacency = [[] for _ in range(vertex_count + 1)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    colour = [None] * (vertex_count + 1)
    for start in range(1, vertex_count + 1):
        if colour[start] is not None:
            continue
        colour[start] = 0
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency[node]:
                if colour[neighbour] is None:
                    colour[neighbour] = 1 - colour[node]
                    queue.append(neighbour)
                elif colour[neighbour] == colour[node]:
                    return False
    return True


def min_burn_time(node_count, edges):
    """Least time for fire lit at one node to burn every ``(a, b, length)`` edge."""
    if node_count < 1:
        raise ValueError("the graph needs at least one node")
    shortest = [[0 if i == j else math.inf for j in range(node_count)] for i in range(node_count)]
    longest = {}
    for a, b, length in edges:
        a -= 1
        b -= 1
        shortest[a][b] = shortest[b][a] = min(shortest[a][b], length)
        heaviest = max(longest.get((a, b), length), length)
        longest[(a, b)] = longest[(b, a)] = heaviest

    for k in range(node_count):
        through = shortest[k]
        for row in shortest:
            via = row[k]
            if via == math.inf:
                continue
            for j, onward in enumerate(through):
                if via + onward < row[j]:
                    row[j] = via + onward

    return min(
        max(
            ((row[i] + row[j] + length) / 2 for (i, j), length in longest.items()),
            default=0.0,
        )
        for row in shortest
    )