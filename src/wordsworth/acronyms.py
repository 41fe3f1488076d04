from __future__ import annotations

import re
from typing import Dict, List

from .models import AcronymCheckerResult, AcronymIssue
from .textutils import line_number_at, mask_code_blocks

# Universally understood abbreviations plus two-letter function words that
# show up in all-caps headings.
SKIP_LIST = frozenset(
    {
        "OK", "US", "AM", "PM", "ID", "TV", "UK", "EU", "UN", "DC",
        "AD", "BC", "CE", "IT", "OR", "AN", "AT", "IF", "IN", "IS",
        "NO", "OF", "ON", "SO", "TO", "UP", "VS",
    }
)

ACRONYM_RE = re.compile(r"\b[A-Z]{2,}\b", re.ASCII)


def is_expanded(prose: str, acronym: str) -> bool:
    """
    Return True when the acronym is defined somewhere in the prose.

    Recognized definitions:
      * "Full Phrase (ACR)": the acronym sits inside a parenthetical.
      * "ACR (Full Phrase)": the acronym is followed by a parenthetical.
      * "ACR, or Full Phrase": an inline "or" definition.
    """
    token = re.escape(acronym)
    checks = (
        rf"\([^)]*\b{token}\b[^)]*\)",
        rf"\b{token}\b\s*\([^)]+\)",
        rf"\b{token}\b[,\s]+or\s+[A-Za-z]",
    )
    return any(re.search(pattern, prose, re.ASCII) for pattern in checks)


def check_acronyms(text: str) -> AcronymCheckerResult:
    """Flag acronyms that are used without ever being expanded."""
    prose = mask_code_blocks(text)

    occurrences: Dict[str, List[int]] = {}
    for match in ACRONYM_RE.finditer(prose):
        acronym = match.group(0)
        if acronym in SKIP_LIST:
            continue
        occurrences.setdefault(acronym, []).append(match.start())

    issues: List[AcronymIssue] = []
    for acronym, positions in occurrences.items():
        if is_expanded(prose, acronym):
            continue
        first = positions[0]
        issues.append(
            AcronymIssue(
                acronym=acronym,
                line=line_number_at(text, first),
                absolute_offset=first,
                length=len(acronym),
                count=len(positions),
            )
        )
    issues.sort(key=lambda issue: issue.absolute_offset)

    return AcronymCheckerResult(
        acronyms=issues,
        total_acronyms_found=len(occurrences),
        all_expanded=not issues,
    )
