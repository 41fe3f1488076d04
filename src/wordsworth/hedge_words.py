from __future__ import annotations

import re
from typing import Dict, List

from .models import HedgeMatch, HedgeWordResult
from .textutils import line_number_at, mask_code_blocks, round_half_up

HEDGE_LEXICON: Dict[str, tuple[str, ...]] = {
    "uncertainty": (
        "might", "could", "may", "perhaps", "possibly", "conceivably", "presumably",
    ),
    "frequency": (
        "generally", "usually", "often", "sometimes", "occasionally",
        "typically", "normally", "frequently", "rarely", "seldom",
    ),
    "softener": (
        "somewhat", "fairly", "rather", "quite", "slightly", "relatively",
        "arguably", "practically", "essentially", "basically", "virtually",
    ),
}

HEDGE_PATTERNS: List[tuple[str, re.Pattern[str]]] = [
    (group, re.compile(rf"\b{word}\b", re.IGNORECASE))
    for group, words in HEDGE_LEXICON.items()
    for word in words
]


def _assess_tone(density: float) -> str:
    if density == 0:
        return "Fully assertive: no hedging language detected."
    if density < 1:
        return "Assertive tone with minimal hedging."
    if density <= 3:
        return "Balanced tone with moderate hedging."
    if density <= 5:
        return "Cautious tone with noticeable hedging throughout."
    return "Heavily hedged: hedging language may undermine confidence."


def analyze_hedge_words(text: str) -> HedgeWordResult:
    """Find uncertainty, frequency and softener words outside code."""
    prose = mask_code_blocks(text)

    matches: List[HedgeMatch] = []
    for group, pattern in HEDGE_PATTERNS:
        for match in pattern.finditer(prose):
            matches.append(
                HedgeMatch(
                    start=match.start(),
                    end=match.end(),
                    word=match.group(0).lower(),
                    group=group,
                    line=line_number_at(text, match.start()),
                )
            )
    matches.sort(key=lambda m: m.start)

    counts = {group: 0 for group in HEDGE_LEXICON}
    for match in matches:
        counts[match.group] += 1

    total = len(matches)
    word_count = len(prose.split())
    percentages = {
        group: int(round_half_up(count / total * 100)) if total else 0
        for group, count in counts.items()
    }
    density = total / word_count * 100 if word_count else 0.0

    return HedgeWordResult(
        matches=matches,
        counts=counts,
        total=total,
        word_count=word_count,
        percentages=percentages,
        density=density,
        tone_assessment=_assess_tone(density),
    )
