"""String matching problems: signal patterns, substring search and markup checks."""

import re

_SIGNAL = re.compile(r"(01|100+1+)+")
_SUBMARINE = re.compile(r"(100+1+|01)+")

_INVALID_TAG = re.compile(r"<[^/a-z0-9]")
_ENTITY = re.compile(r"&(lt|gt|amp);")
_HEX_ENTITY = re.compile(r"&x([a-fA-F0-9]{2})+;")
_SELF_CLOSING = re.compile(r"<[a-z0-9]+/>")
_OPEN_CLOSE = re.compile(r"</?[a-z0-9]+>")
_STRAY = re.compile(r"[<&>]")


def matches_signal(signal):
    """Return True if the whole signal matches ``(01|100+1+)+``."""
    return _SIGNAL.fullmatch(signal) is not None


def submarine_verdict(signal):
    """Return "SUBMARINE" if the signal is a submarine's sound, else "NOISE"."""
    match = _SUBMARINE.fullmatch(signal)
    if match is None:
        return "NOISE"
    return "SUBMARINE"


def min_mismatch(a, b):
    """Smallest number of differing characters when ``a`` is laid over ``b``."""
    if len(a) > len(b):
        raise ValueError("the first string must not be longer than the second")
    return min(
        sum(x != y for x, y in zip(a, b[offset:offset + len(a)]))
        for offset in range(len(b) - len(a) + 1)
    )


def count_occurrences(document, target):
    """Count non-overlapping occurrences of ``target``, scanning left to right."""
    if not target:
        raise ValueError("target must not be empty")
    return document.count(target)


def kmp_search(text, pattern):
    """Return the 1-based start of every (possibly overlapping) match."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    size = len(pattern)
    fail = [0] * size
    k = 0
    for i in range(1, size):
        while k and pattern[i] != pattern[k]:
            k = fail[k - 1]
        if pattern[i] == pattern[k]:
            k += 1
        fail[i] = k

    positions = []
    k = 0
    for i, ch in enumerate(text):
        while k and ch != pattern[k]:
            k = fail[k - 1]
        if ch == pattern[k]:
            k += 1
        if k == size:
            positions.append(i - size + 2)
            k = fail[k - 1]
    return positions


def check_markup(line):
    """Return True if a line of simplified XHTML is well formed."""
    invalid = _INVALID_TAG.search(line) is not None
    text = _ENTITY.sub("", line)
    text = _HEX_ENTITY.sub("", text)
    text = _SELF_CLOSING.sub("", text)

    open_tags = []
    for match in _OPEN_CLOSE.finditer(text):
        tag = match.group()
        if tag[1] == "/":
            name = tag[2:-1]
            if not open_tags or open_tags[-1] != name:
                invalid = True
                break
            open_tags.pop()
        else:
            open_tags.append(tag[1:-1])

    text = _OPEN_CLOSE.sub("", text)
    if _STRAY.search(text):
        invalid = True
    return not invalid and not open_tags


def wildcard_matches(pattern, name):
    """Match ``name`` against a pattern where ``*`` stands for lowercase letters."""
    regex = "".join("[a-z]*" if ch == "*" else re.escape(ch) for ch in pattern)
    return re.fullmatch(regex, name) is not None


def largest_after_removal(digits, k):
    """Remove ``k`` digits so the remaining number is as large as possible."""
    if not 0 <= k <= len(digits):
        raise ValueError("k must be between 0 and the number of digits")
    kept = []
    remaining = k
    for ch in digits:
        while kept and remaining and kept[-1] < ch:
            kept.pop()
            remaining -= 1
        kept.append(ch)
    if remaining:
        del kept[-remaining:]
    return "".join(kept)