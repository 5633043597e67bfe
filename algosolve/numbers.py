"""Number-theory problems: square-free counts, prime sums and divisor tables."""


def count_square_free(low, high):
    """Count integers in [low, high] not divisible by any square greater than 1."""
    if low > high:
        raise ValueError("low must not exceed high")
    marks = bytearray(high - low + 1)
    base = 2
    while base * base <= high:
        square = base * base
        first = -(-low // square) * square - low
        hits = len(range(first, len(marks), square))
        marks[first::square] = b"\x01" * hits
        base += 1
    return marks.count(0)


def _primes_up_to(n):
    sieve = bytearray([1]) * (n + 1)
    sieve[0:2] = b"\x00\x00"
    base = 2
    while base * base <= n:
        if sieve[base]:
            sieve[base * base::base] = bytes(len(range(base * base, n + 1, base)))
        base += 1
    return [value for value, flag in enumerate(sieve) if flag]


def consecutive_prime_sums(n):
    """Count the ways ``n`` is a sum of one or more consecutive primes."""
    if n < 1:
        raise ValueError("n must be positive")
    primes = _primes_up_to(n)
    ways = 0
    total = 0
    left = 0
    for prime in primes:
        total += prime
        while total > n:
            total -= primes[left]
            left += 1
        if total == n:
            ways += 1
    return ways


def divisor_sum_total(n):
    """Sum of sigma(i), the sum of divisors, for i from 1 to n."""
    return sum(i * (n // i) for i in range(1, n + 1))


def card_scores(cards):
    """Score each card: +1 for each card it divides, -1 for each that divides it."""
    if any(card < 1 for card in cards):
        raise ValueError("cards must be positive")
    present = set(cards)
    top = max(cards, default=0)
    scores = dict.fromkeys(cards, 0)
    for card in cards:
        for multiple in range(card * 2, top + 1, card):
            if multiple in present:
                scores[card] += 1
                scores[multiple] -= 1
    return [scores[card] for card in cards]


def adversarial_sequence():
    """A fixed sequence of a thousand 1s followed by a thousand 1000s."""
    return [1] * 1000 + [1000] * 1000


class BadnessTable:
    """Badness |n - sum of proper divisors of n| for every n up to a limit."""

    def __init__(self, limit):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        sums = [0] * (limit + 1)
        for divisor in range(1, limit // 2 + 1):
            for multiple in range(divisor * 2, limit + 1, divisor):
                sums[multiple] += divisor
        self._badness = [abs(n - s) for n, s in enumerate(sums)]

    def count(self, start, stop, badness):
        """Count n in [start, stop] whose badness is at most ``badness``."""
        if start < 1 or stop > self.limit:
            raise ValueError("range lies outside the table")
        return sum(1 for value in self._badness[start:stop + 1] if value <= badness)