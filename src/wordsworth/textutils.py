from __future__ import annotations

import math
import re
from typing import List, Tuple

FENCED_CODE_RE = re.compile(r"^```[^\n]*\n[\s\S]*?^```", re.MULTILINE)
INLINE_CODE_RE = re.compile(r"`([^`]+)`")
NON_NEWLINE_RE = re.compile(r"[^\n]")
SENTENCE_END_RE = re.compile(r"[.!?]$")
TRAILING_TERMINATORS_RE = re.compile(r"[.!?]+$")
NON_LETTER_RE = re.compile(r"[^a-z]")

# Applied in order. Links run before images, so "![alt](src)" leaves "!alt".
_MARKDOWN_RULES: List[Tuple[re.Pattern[str], str]] = [
    (FENCED_CODE_RE, ""),
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*\*(.+?)\*\*"), r"\1"),
    (re.compile(r"\*(.+?)\*"), r"\1"),
    (re.compile(r"__(.+?)__"), r"\1"),
    (re.compile(r"_(.+?)_"), r"\1"),
    (re.compile(r"~~(.+?)~~"), r"\1"),
    (re.compile(r"`(.+?)`"), r"\1"),
    (re.compile(r"^\s*[-*+]\s+", re.MULTILINE), ""),
    (re.compile(r"^\s*\d+\.\s+", re.MULTILINE), ""),
    (re.compile(r"\[(.+?)\]\(.+?\)"), r"\1"),
    (re.compile(r"!\[.*?\]\(.+?\)"), ""),
    (re.compile(r"^>\s+", re.MULTILINE), ""),
]

ABBREVIATIONS = frozenset(
    {
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st",
        "vs", "etc", "inc", "ltd", "dept", "est", "approx",
        "e.g", "i.e", "fig", "vol", "no",
    }
)

VOWELS = "aeiouy"


def _blank(match: re.Match[str]) -> str:
    return NON_NEWLINE_RE.sub(" ", match.group(0))


def mask_code_blocks(text: str) -> str:
    """
    Replace fenced code blocks and inline code spans with spaces.

    Newlines inside fenced blocks survive, so the result has exactly the
    same length and line structure as the input and any offset found in the
    masked text is valid in the original.
    """
    masked = FENCED_CODE_RE.sub(_blank, text)
    return INLINE_CODE_RE.sub(_blank, masked)


def strip_markdown(text: str) -> str:
    """Strip common markdown syntax for plain-text counting."""
    for pattern, replacement in _MARKDOWN_RULES:
        text = pattern.sub(replacement, text)
    return text


def count_words(text: str) -> int:
    """Count whitespace-delimited words after markdown is stripped."""
    plain = strip_markdown(text).strip()
    if not plain:
        return 0
    return len(plain.split())


def split_into_sentences(text: str) -> List[str]:
    """Split text into sentences without breaking on common abbreviations."""
    plain = strip_markdown(text).strip()
    if not plain:
        return []

    sentences: List[str] = []
    current: List[str] = []
    for token in plain.split():
        current.append(token)
        if SENTENCE_END_RE.search(token):
            word = TRAILING_TERMINATORS_RE.sub("", token).lower()
            if word in ABBREVIATIONS:
                continue
            sentences.append(" ".join(current))
            current = []
    if current:
        sentences.append(" ".join(current))
    return sentences


def count_sentences(text: str) -> int:
    """Unterminated or empty text still counts as a single sentence."""
    return max(len(split_into_sentences(text)), 1)


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups with silent-e handling."""
    cleaned = NON_LETTER_RE.sub("", word.lower())
    if len(cleaned) <= 2:
        return 1

    count = 0
    prev_vowel = False
    for char in cleaned:
        is_vowel = char in VOWELS
        if is_vowel and not prev_vowel:
            count += 1
        prev_vowel = is_vowel

    if cleaned.endswith("e") and count > 1:
        count -= 1
    if cleaned.endswith("le") and cleaned[-3] not in VOWELS:
        count += 1

    return max(count, 1)


def line_number_at(text: str, index: int) -> int:
    """Return the 1-based line containing the character at ``index``."""
    return text.count("\n", 0, index) + 1


def line_and_offset_at(text: str, index: int) -> Tuple[int, int]:
    """Return the 1-based line and the 0-based column of ``index``."""
    line_start = text.rfind("\n", 0, index) + 1
    return line_number_at(text, index), index - line_start


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, e.g. 2.25 -> 2.3 and -2.5 -> -2.0."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor
