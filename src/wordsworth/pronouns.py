from __future__ import annotations

import re
from typing import Dict, List

from .models import PronounMatch, PronounResult
from .textutils import round_half_up

# Personal, objective, possessive-adjective and possessive-pronoun forms.
PRONOUN_GROUPS: Dict[str, tuple[str, ...]] = {
    "i": ("i", "me", "my", "mine"),
    "you": ("you", "your", "yours"),
    "we": ("we", "us", "our", "ours"),
}

PRONOUN_PATTERNS: Dict[str, re.Pattern[str]] = {
    group: re.compile(
        r"\b(?:" + "|".join(forms) + r")\b", re.IGNORECASE | re.ASCII
    )
    for group, forms in PRONOUN_GROUPS.items()
}


def _assess_tone(counts: Dict[str, int], total: int) -> str:
    if total == 0:
        return "No pronouns detected. Neutral, impersonal tone."

    author_pct = (counts["i"] + counts["we"]) / total * 100
    reader_pct = counts["you"] / total * 100

    if reader_pct > 50:
        return "Strongly reader-focused tone. Addresses the reader directly."
    if reader_pct > author_pct:
        return "Mostly reader-focused tone."
    if author_pct > 50:
        return "Strongly author-focused tone. Centered on the writer/team."
    if author_pct > reader_pct:
        return "Mostly author-focused tone."
    return "Balanced tone between author and reader."


def analyze_pronouns(text: str) -> PronounResult:
    """Count first- and second-person pronouns and assess the resulting tone."""
    matches: List[PronounMatch] = []
    for group, pattern in PRONOUN_PATTERNS.items():
        for match in pattern.finditer(text):
            matches.append(PronounMatch(start=match.start(), end=match.end(), group=group))
    matches.sort(key=lambda m: m.start)

    counts = {group: 0 for group in PRONOUN_GROUPS}
    for match in matches:
        counts[match.group] += 1
    total = len(matches)

    percentages = {
        group: int(round_half_up(count / total * 100)) if total else 0
        for group, count in counts.items()
    }

    return PronounResult(
        counts=counts,
        total=total,
        percentages=percentages,
        tone_assessment=_assess_tone(counts, total),
        matches=matches,
    )
