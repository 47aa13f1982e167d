from typing import Iterable, Sequence

from wingo.analytics.markov import Vote
from wingo.core.models import BIG, GREEN

ALTERNATING = "Alternating color pattern detected"
NORMAL = "Normal distribution"


def runs(labels: Iterable[str], k: int = 3):
    labels = list(labels)
    out = []
    if not labels:
        return out
    cur = labels[0]
    start = 0
    for i in range(1, len(labels)):
        if labels[i] == cur:
            continue
        # close segment
        seg_len = i - start
        if seg_len >= k:
            out.append((start, i-1, cur, seg_len))
        cur = labels[i]
        start = i
    # tail
    seg_len = len(labels) - start
    if seg_len >= k:
        out.append((start, len(labels)-1, cur, seg_len))
    return out

def alternations(labels: Iterable[str], L: int = 4):
    labels = list(labels)
    out = []
    if len(labels) < 2:
        return out
    start = None
    for i in range(1, len(labels)):
        if labels[i] != labels[i-1]:
            if start is None:
                start = i-1
        else:
            if start is not None and i - start >= L:
                out.append((start, i-1))
            start = None
    if start is not None and len(labels) - start >= L:
        out.append((start, len(labels)-1))
    return out

def trailing_streak(labels: Sequence[str]) -> tuple[str | None, int]:
    """Final symbol and how many times it repeats at the tail."""
    tail = runs(labels, k=1)
    if not tail:
        return None, 0
    _, _, sym, n = tail[-1]
    return sym, n

def is_alternating(window: Sequence[str], span: int = 6) -> bool:
    # only the head of the window is inspected
    if len(window) < 4:
        return False
    head = window[:span]
    return all(a != b for a, b in zip(head, head[1:]))

def detect_patterns(colors: Sequence[str], sizes: Sequence[str], window: int = 10) -> list[str]:
    tags = []
    recent = list(colors[-window:])
    recent_sizes = list(sizes[-window:])

    if is_alternating(recent):
        tags.append(ALTERNATING)

    for track in (recent, recent_sizes):
        sym, n = trailing_streak(track)
        if n >= 3:
            tags.append(f"{sym} streak of {n}")

    if recent:
        green_ratio = recent.count(GREEN) / len(recent)
        # both directions carry the "70%+" label
        if green_ratio > 0.7:
            tags.append("Green hot streak (70%+)")
        elif green_ratio < 0.3:
            tags.append("Red hot streak (70%+)")

    if recent_sizes:
        big_ratio = recent_sizes.count(BIG) / len(recent_sizes)
        if big_ratio > 0.7:
            tags.append("Big numbers dominant")
        elif big_ratio < 0.3:
            tags.append("Small numbers dominant")

    return tags or [NORMAL]

def repeat_predict(colors: Sequence[str], lengths: Sequence[int] = (3, 2)) -> Vote | None:
    """Find the latest earlier occurrence of the trailing pattern and vote for what followed it."""
    colors = list(colors)
    n = len(colors)
    if n < 4:
        return None
    for length in lengths:
        if n < length * 2:
            continue
        pattern = colors[-length:]
        for i in range(n - length * 2, -1, -1):
            if colors[i:i + length] == pattern:
                return Vote(colors[i + length], 65 + length * 5)
    return None
