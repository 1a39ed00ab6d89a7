"""Glob-style pattern matching over raw bytes.

Supported tokens:

- ``*`` matches any run of bytes, including none
- ``?`` matches exactly one byte
- ``[abc]``, ``[a-z]`` match one byte from a set or inclusive range
- ``[^abc]``, ``[^a-z]`` match one byte *not* in the set
- ``\\x`` matches ``x`` literally

Matches are anchored at both ends.  Wildcards work on bytes, so a
multi-byte UTF-8 character needs one ``?`` per byte.
"""

from __future__ import annotations

from .models import CaseMode

_STAR = ord("*")
_QUESTION = ord("?")
_OPEN = ord("[")
_CLOSE = ord("]")
_NEGATE = ord("^")
_RANGE = ord("-")
_ESCAPE = ord("\\")


def _fold(byte: int, case: CaseMode) -> int:
    if case is CaseMode.insensitive and 0x41 <= byte <= 0x5A:
        return byte + 0x20
    return byte


def _match_class(pattern, p: int, byte: int, case: CaseMode) -> tuple[bool, int]:
    """Evaluate the bracket class starting just after ``[`` at offset *p*.

    Returns whether *byte* belongs to the class and the offset just past
    the closing ``]`` (or the end of the pattern if it is unterminated).
    """
    end = len(pattern)
    negated = False
    if p < end and pattern[p] == _NEGATE:
        negated = True
        p += 1

    byte = _fold(byte, case)
    members = 0
    found = False
    while p < end and pattern[p] != _CLOSE:
        members += 1
        if pattern[p] == _ESCAPE and p + 1 < end:
            if _fold(pattern[p + 1], case) == byte:
                found = True
            p += 2
        elif p + 2 < end and pattern[p + 1] == _RANGE and pattern[p + 2] != _CLOSE:
            low = _fold(pattern[p], case)
            high = _fold(pattern[p + 2], case)
            if low > high:
                low, high = high, low
            if low <= byte <= high:
                found = True
            p += 3
        else:
            if _fold(pattern[p], case) == byte:
                found = True
            p += 1

    if p < end:
        p += 1  # closing bracket

    # A class without members has nothing to negate.
    return members > 0 and found != negated, p


def _scan(pattern, subject, p: int, s: int, case: CaseMode) -> tuple[bool, tuple[int, int] | None]:
    """Run one linear match attempt from offsets *p* and *s*.

    Stops at the first ``*`` that is followed by more pattern and hands
    back ``(pattern offset after the star, subject offset)`` so the
    caller can try every split point from there.
    """
    plen = len(pattern)
    slen = len(subject)
    while p < plen and s < slen:
        token = pattern[p]
        if token == _STAR:
            while p + 1 < plen and pattern[p + 1] == _STAR:
                p += 1
            if p + 1 == plen:
                return True, None
            return False, (p + 1, s)

        if token == _QUESTION:
            p += 1
        elif token == _OPEN:
            found, p = _match_class(pattern, p + 1, subject[s], case)
            if not found:
                return False, None
        else:
            if token == _ESCAPE and p + 1 < plen:
                p += 1
                token = pattern[p]
            if _fold(token, case) != _fold(subject[s], case):
                return False, None
            p += 1
        s += 1

    if s == slen:
        while p < plen and pattern[p] == _STAR:
            p += 1
    return p == plen and s == slen, None


def matches(pattern: bytes, subject: bytes, case: CaseMode | str = CaseMode.sensitive) -> bool:
    """Return True if *pattern* matches the whole of *subject*.

    Both arguments are bytes-like.  Every byte sequence is a valid
    pattern: an unterminated ``[`` class is judged on the members seen
    before the end, a trailing lone ``\\`` is a literal backslash, and an
    empty class (``[]`` or ``[^]``) never matches.

    Backtracking for ``*`` uses an explicit work-list of
    ``(pattern offset, subject offset)`` states, so pattern depth is not
    limited by the interpreter's recursion limit, and the work done is
    bounded by ``len(pattern) * len(subject)``.
    """
    if isinstance(pattern, str) or isinstance(subject, str):
        raise TypeError("matches() expects bytes; use stringmatch() for text")
    case = CaseMode(case)

    slen = len(subject)
    pending = [(0, 0)]
    deepest = 0
    while pending:
        p, s = pending.pop()
        found, resume = _scan(pattern, subject, p, s, case)
        if found:
            return True
        if resume is None:
            continue
        rest, s = resume
        if rest > deepest:
            # Tokens between stars have a fixed width, so the first
            # arrival at a later star is the earliest possible one and
            # split points of earlier stars need not be revisited.
            deepest = rest
            pending.clear()
        # Rescanning from the star itself with one more byte consumed
        # yields the next split point; the current one is tried first.
        if s + 1 < slen:
            pending.append((rest - 1, s + 1))
        else:
            pending.append((rest, slen))
        pending.append((rest, s))
    return False


def stringmatch(pattern: str, string: str, case: CaseMode | str = CaseMode.sensitive) -> bool:
    """Match text by comparing the UTF-8 encodings of *pattern* and *string*."""
    return matches(pattern.encode("utf-8"), string.encode("utf-8"), case)


def list_matches(
    patterns: list[str] | None,
    value: str,
    case: CaseMode | str = CaseMode.sensitive,
) -> bool:
    """Return True if *patterns* is None (don't care) or any pattern matches *value*."""
    if patterns is None:
        return True
    return any(stringmatch(p, value, case) for p in patterns)
