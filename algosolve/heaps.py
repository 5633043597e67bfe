"""Priority-queue problems: greedy selection, merging and scheduling."""

import heapq
from collections import Counter
from string import ascii_uppercase


def max_jewel_value(jewels, bags):
    """Greatest total value stealing one ``(weight, value)`` jewel per bag."""
    pending = sorted(jewels)
    available = []
    total = 0
    position = 0
    for capacity in sorted(bags):
        while position < len(pending) and pending[position][0] <= capacity:
            heapq.heappush(available, -pending[position][1])
            position += 1
        if available:
            total -= heapq.heappop(available)
    return total


def votes_to_bribe(votes):
    """Votes the first candidate must buy to have strictly more than every rival."""
    if not votes:
        raise ValueError("votes must not be empty")
    mine, *others = votes
    if not others:
        return 0
    rivals = [-count for count in others]
    heapq.heapify(rivals)
    bribes = 0
    while -rivals[0] >= mine:
        heapq.heapreplace(rivals, rivals[0] + 1)
        mine += 1
        bribes += 1
    return bribes


def _evacuate_one(parties):
    count, code = heapq.heappop(parties)
    if count + 1:
        heapq.heappush(parties, (count + 1, code))
    return chr(-code)


def evacuation_plan(counts):
    """Steps evacuating senators one or two at a time, never leaving a majority."""
    if len(counts) > len(ascii_uppercase):
        raise ValueError("at most 26 parties are supported")
    if any(count < 1 for count in counts):
        raise ValueError("every party needs at least one senator")
    parties = [(-count, -ord(letter)) for letter, count in zip(ascii_uppercase, counts)]
    heapq.heapify(parties)
    remaining = sum(counts)
    steps = []
    while parties:
        step = _evacuate_one(parties)
        remaining -= 1
        if parties and -parties[0][0] * 2 > remaining:
            step += _evacuate_one(parties)
            remaining -= 1
        steps.append(step)
    return steps


def min_merge_cost(sizes):
    """Least total comparisons to merge card bundles two at a time."""
    bundles = list(sizes)
    heapq.heapify(bundles)
    cost = 0
    while len(bundles) > 1:
        merged = heapq.heappop(bundles) + heapq.heappop(bundles)
        cost += merged
        heapq.heappush(bundles, merged)
    return cost


def _combine(a, b):
    return max(a * b, a + b)


def max_tied_sum(numbers):
    """Largest sum when numbers may be tied in pairs and each pair multiplied."""
    positives = sorted((n for n in numbers if n > 0), reverse=True)
    others = sorted(n for n in numbers if n <= 0)
    total = sum(_combine(a, b) for a, b in zip(positives[::2], positives[1::2]))
    total += sum(_combine(a, b) for a, b in zip(others[::2], others[1::2]))
    lone_positive = positives[-1] if len(positives) % 2 else None
    lone_other = others[-1] if len(others) % 2 else None
    if lone_positive is not None and lone_other is not None:
        total += _combine(lone_positive, lone_other)
    elif lone_positive is not None:
        total += lone_positive
    elif lone_other is not None:
        total += lone_other
    return total


def select_vents(values, count, cuts):
    """Pick up to ``count`` segment starts with the largest sums, sorted ascending.

    ``values`` is indexed from 1; ``cuts`` lists segment starts in increasing
    order, and each segment runs from its start to just before the next one.
    """
    pending = list(cuts)
    ranked = []
    run = 0
    for position, value in zip(range(len(values), 0, -1), reversed(values)):
        if not pending:
            break
        run += value
        if pending[-1] == position:
            ranked.append((-run, position))
            pending.pop()
            run = 0
    return sorted(position for _, position in heapq.nsmallest(count, ranked))


def common_subsequence(a, b):
    """Lexicographically largest common subsequence, built greedily from the top."""
    left = [(-value, index) for index, value in enumerate(a)]
    right = [(-value, index) for index, value in enumerate(b)]
    heapq.heapify(left)
    heapq.heapify(right)
    last_left = last_right = -1
    result = []
    while left and right:
        value_left, index_left = left[0]
        value_right, index_right = right[0]
        if value_left == value_right:
            if index_left > last_left and index_right > last_right:
                result.append(-value_left)
                heapq.heappop(left)
                heapq.heappop(right)
                last_left, last_right = index_left, index_right
            elif index_left < last_left:
                heapq.heappop(left)
            elif index_right < last_right:
                heapq.heappop(right)
            else:
                break
        elif value_left < value_right:
            heapq.heappop(left)
        else:
            heapq.heappop(right)
    return result


def min_unplugs(slots, usage):
    """Fewest unplugs needed for a power strip with ``slots`` sockets."""
    remaining = Counter(usage)
    devices = sorted(remaining)
    plugged = set()
    free = slots
    unplugs = 0
    for step, device in enumerate(usage):
        remaining[device] -= 1
        if device in plugged:
            continue
        if free:
            free -= 1
            plugged.add(device)
            continue
        unplugs += 1
        idle = next(
            (item for item in devices if item in plugged and not remaining[item]), None
        )
        if idle is None:
            seen = set()
            latest = 0
            for later, upcoming in enumerate(usage[step:], start=step):
                if upcoming in plugged and upcoming not in seen:
                    seen.add(upcoming)
                    latest = max(latest, later)
            idle = usage[latest]
        plugged.discard(idle)
        plugged.add(device)
    return unplugs