"""Greedy problems over sorted sequences, intervals and deliveries."""

from collections import Counter
from itertools import count, pairwise


def max_after_swaps(values, swaps):
    """Largest arrangement reachable with at most ``swaps`` adjacent swaps."""
    result = list(values)
    order = sorted(result, reverse=True)
    for current in range(len(result)):
        if not swaps:
            break
        for candidate in order:
            if candidate == result[current]:
                break
            position = result.index(candidate)
            if position < current:
                continue
            if position - current <= swaps:
                swaps -= position - current
                result.insert(current, result.pop(position))
                break
    return result


def min_group_cost(heights, groups):
    """Least total height spread when sorted heights are split into ``groups`` runs."""
    if not 1 <= groups <= len(heights):
        raise ValueError("groups must be between 1 and the number of heights")
    gaps = sorted(b - a for a, b in pairwise(heights))
    return sum(gaps[:len(heights) - groups])


def max_word_sum(words):
    """Largest sum of the words when each capital letter is given a distinct digit."""
    weights = Counter()
    for word in words:
        for power, letter in enumerate(reversed(word)):
            weights[letter] += 10 ** power
    ranked = sorted(weights.values(), reverse=True)
    return sum(weight * digit for weight, digit in zip(ranked, count(9, -1)))


def bubble_passes(values):
    """Number of passes a bubble sort makes before noticing the list is sorted."""
    order = sorted(range(len(values)), key=values.__getitem__)
    return max((original - placed for placed, original in enumerate(order)), default=-1) + 1


def min_transfers(positions, reaches, target):
    """Fewest hand-offs to carry a message from the first person to ``target``, or -1.

    Person ``i`` stands at ``positions[i]`` (in increasing order) and can pass
    the message as far as ``positions[i] + reaches[i]``.
    """
    people = [(position, position + reach) for position, reach in zip(positions, reaches, strict=True)]
    if not people:
        raise ValueError("at least one person is needed")
    if max(end for _, end in people) < target:
        return -1
    current = people[0]
    index = 1
    stuck = False
    transfers = 0
    while current[1] < target:
        if index >= len(people) or stuck:
            return -1
        best = people[index]
        stuck = True
        while index < len(people) and current[1] >= people[index][0]:
            stuck = False
            if people[index][1] > best[1]:
                best = people[index]
            index += 1
        current = best
        transfers += 1
    return -1 if stuck else transfers


def max_triple_imbalance(values):
    """Largest |a + b + c - 3b| over sorted triples using the extremes as partners."""
    ordered = sorted(values)
    best = 0
    for index in range(1, len(ordered) - 1):
        middle = ordered[index]
        low = abs(ordered[0] + middle + ordered[index + 1] - 3 * middle)
        high = abs(ordered[index - 1] + middle + ordered[-1] - 3 * middle)
        best = max(best, low, high)
    return best


def smallest_unmeasurable(weights):
    """Smallest positive weight that no subset of the given weights adds up to."""
    reachable = 0
    for weight in sorted(weights):
        if reachable + 1 < weight:
            break
        reachable += weight
    return reachable + 1


def max_delivered(capacity, village_count, orders):
    """Most boxes a truck of ``capacity`` delivers for ``(from, to, boxes)`` orders."""
    load = [0] * (village_count + 1)
    delivered = 0
    for start, stop, amount in sorted(orders, key=lambda order: (order[1], -order[0])):
        segment = load[start:stop]
        heaviest = max((carried for carried in segment if amount + carried > capacity), default=0)
        taken = amount if heaviest + amount <= capacity else capacity - heaviest
        load[start:stop] = [carried + taken for carried in segment]
        delivered += taken
    return delivered


def _blocked_from_right(position, start):
    return position > start - 1


def can_cross(width, rows):
    """Whether a runner can cross rows of sensors, each row a list of ``(start, side)``.

    ``side`` is ``"L"`` or ``"R"``; a row holds at most two sensors.
    """
    position = 1
    for sensors in rows:
        if not sensors:
            continue
        if len(sensors) == 1:
            ((start, side),) = sensors
            if side == "R":
                if _blocked_from_right(position, start):
                    return False
            else:
                if start == width:
                    return False
                position = max(position, start + 1)
        elif len(sensors) == 2:
            (first, first_side), (second, second_side) = sensors
            if first_side == second_side:
                if first_side == "R":
                    if _blocked_from_right(position, min(first, second)):
                        return False
                else:
                    start = max(first, second)
                    if start == width:
                        return False
                    position = max(position, start + 1)
            else:
                if first_side == "L" and second_side == "R":
                    first, second = second, first
                if first <= second:
                    if position >= first:
                        if second == width:
                            return False
                        position = max(position, second + 1)
                else:
                    if position >= first or first - second == 1:
                        return False
                    position = max(position, second + 1)
        else:
            raise ValueError("a row holds at most two sensors")
    return True