from __future__ import annotations

import re
from typing import Callable, Dict, List

from .models import HeaderShiftResult, ShiftResult

HEADER_RE = re.compile(r"^(#{1,6})\s")
HEADER_LEVELS = range(1, 7)


def _header_level(line: str) -> int:
    match = HEADER_RE.match(line)
    return len(match.group(1)) if match else 0


def scan_headers(content: str) -> HeaderShiftResult:
    """Count ATX headers per level."""
    counts: Dict[int, int] = {level: 0 for level in HEADER_LEVELS}
    for line in content.split("\n"):
        level = _header_level(line)
        if level:
            counts[level] += 1
    return HeaderShiftResult(header_counts=counts, total_headers=sum(counts.values()))


def promote_headers(content: str) -> ShiftResult:
    """Raise every header one level (## -> #) unless an H1 already exists."""
    lines = content.split("\n")
    if any(_header_level(line) == 1 for line in lines):
        return ShiftResult(
            ok=False,
            shifted=0,
            error="Cannot promote: H1 headers already exist and cannot go higher.",
        )
    return _shift(lines, lambda line: line[1:])


def demote_headers(content: str) -> ShiftResult:
    """Lower every header one level (# -> ##) unless an H6 already exists."""
    lines = content.split("\n")
    if any(_header_level(line) == 6 for line in lines):
        return ShiftResult(
            ok=False,
            shifted=0,
            error="Cannot demote: H6 headers already exist and cannot go lower.",
        )
    return _shift(lines, lambda line: "#" + line)


def _shift(lines: List[str], transform: Callable[[str], str]) -> ShiftResult:
    shifted = 0
    output: List[str] = []
    for line in lines:
        if _header_level(line):
            shifted += 1
            output.append(transform(line))
        else:
            output.append(line)
    return ShiftResult(ok=True, shifted=shifted, content="\n".join(output))
