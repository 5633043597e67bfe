"""Stack, deque and two-pointer problems over sequences."""

from collections import deque


def sliding_minimums(numbers, window):
    """Minimum of each window of the last ``window`` numbers, one per position."""
    if window < 1:
        raise ValueError("window must be at least 1")
    candidates = deque()
    result = []
    for index, value in enumerate(numbers):
        if candidates and candidates[0][1] <= index - window:
            candidates.popleft()
        while candidates and candidates[-1][0] > value:
            candidates.pop()
        candidates.append((value, index))
        result.append(candidates[0][0])
    return result


def count_good_numbers(numbers):
    """Count numbers equal to the sum of two other numbers in the list."""
    values = sorted(numbers)
    if len(values) <= 2:
        return 0
    good = 0
    for index, target in enumerate(values):
        lo, hi = 0, len(values) - 1
        while lo < hi:
            total = values[lo] + values[hi]
            if total > target:
                hi -= 1
            elif total < target:
                lo += 1
            elif lo == index:
                lo += 1
            elif hi == index:
                hi -= 1
            else:
                good += 1
                break
    return good


def shortest_subarray_at_least(numbers, target):
    """Length of the shortest contiguous run summing to at least ``target``, or 0."""
    best = None
    total = 0
    left = 0
    for right, value in enumerate(numbers):
        total += value
        while left <= right and total >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            total -= numbers[left]
            left += 1
    return best or 0


def count_visible_pairs(heights):
    """Count pairs in a line who can see each other (no one taller between)."""
    pairs = 0
    stack = []
    for height in heights:
        while stack and stack[-1][0] < height:
            pairs += stack.pop()[1]
        if stack and stack[-1][0] == height:
            same = stack.pop()[1]
            pairs += same
            if stack:
                pairs += 1
            stack.append((height, same + 1))
        else:
            if stack:
                pairs += 1
            stack.append((height, 1))
    return pairs


def count_rooftop_views(heights):
    """Sum over buildings of how many rooftops to the right each can see."""
    views = 0
    stack = []
    for height in heights:
        while stack and stack[-1] <= height:
            stack.pop()
        views += len(stack)
        stack.append(height)
    return views


def largest_rectangle(heights):
    """Area of the largest rectangle in a histogram of unit-width bars."""
    best = 0
    stack = []
    for index, height in enumerate([*heights, 0]):
        start = index
        while stack and stack[-1][1] > height:
            start, bar = stack.pop()
            best = max(best, bar * (index - start))
        stack.append((start, height))
    return best


def membership(notebook, queries):
    """For each query, whether it appears in the notebook."""
    seen = set(notebook)
    return [query in seen for query in queries]