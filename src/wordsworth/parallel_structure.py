from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass
from typing import List, Optional

from .models import (
    ParallelStructureIssue,
    ParallelStructureItem,
    ParallelStructureList,
    ParallelStructureResult,
)
from .textutils import mask_code_blocks

# Common imperative verbs in procedural and technical writing.
IMPERATIVE_VERBS = frozenset(
    """
    install run click open create delete update configure set add
    remove enable disable start stop restart build deploy test check
    verify select enter type copy paste navigate go use download
    upload import export save load read write connect disconnect log
    sign submit cancel confirm accept reject approve deny allow block
    grant revoke assign unassign close send receive define declare
    initialize call invoke return pass throw catch handle validate
    parse format convert transform merge split sort filter map reduce
    bind attach detach mount unmount render fetch push pull commit
    clone fork publish subscribe unsubscribe register deregister wrap
    unwrap encode decode encrypt decrypt compress decompress scroll drag
    drop hover focus blur toggle switch swap reset clear flush
    purge refresh reload retry skip abort pause resume lock unlock
    pin unpin archive restore backup migrate upgrade downgrade patch
    debug trace monitor profile benchmark audit scan lint specify
    ensure include exclude extend override implement annotate tag label
    name list describe show display print output note document comment
    mark highlight flag indicate point reference link embed insert
    append prepend inject eject require need want expect assert assume
    """.split()
)

DETERMINERS = frozenset(
    """
    the a an this that these those each every
    some any all no your our their its my his her
    """.split()
)

SUBJECT_WORDS = frozenset(
    """
    you we they it he she
    users developers administrators clients servers applications
    systems services components modules functions methods classes
    objects files directories endpoints requests responses
    """.split()
)

AUXILIARY_VERBS = frozenset(
    """
    is are was were has have had can could will would
    should may might must shall do does did need needs
    """.split()
)

VERB_SUFFIXES = ("ate", "ize", "ify")
TRAILING_PUNCTUATION = (".", ";", ":")

UNORDERED_ITEM_RE = re.compile(r"^(\s*)([-*+])\s+(.*)$")
ORDERED_ITEM_RE = re.compile(r"^(\s*)(\d+)\.\s+(.*)$")
CAPITALIZED_RE = re.compile(r"^[A-Z]")


@dataclass(slots=True)
class _RawItem:
    line: int
    text: str
    absolute_offset: int


def _parse_list_line(line: str) -> Optional[re.Match[str]]:
    return UNORDERED_ITEM_RE.match(line) or ORDERED_ITEM_RE.match(line)


def classify_pattern(text: str) -> str:
    """Classify the grammatical form a list item opens with."""
    words = text.split()
    if not words:
        return "other"

    first = words[0]
    first_lower = first.lower()

    if first_lower == "to" and len(words) >= 2:
        second = words[1].lower()
        if second in IMPERATIVE_VERBS or second.endswith(VERB_SUFFIXES):
            return "infinitive"
    if first_lower.endswith("ing") and len(first_lower) > 4:
        return "gerund"
    if first_lower in IMPERATIVE_VERBS:
        return "imperative"
    if first_lower in DETERMINERS:
        return "noun-phrase"
    if first_lower in SUBJECT_WORDS:
        return "sentence"
    if len(words) >= 2 and CAPITALIZED_RE.match(first):
        if words[1].lower() in AUXILIARY_VERBS:
            return "sentence"
    return "other"


def trailing_punctuation(text: str) -> str:
    if text and text[-1] in TRAILING_PUNCTUATION:
        return text[-1]
    return ""


def extract_list_groups(prose: str) -> List[List[_RawItem]]:
    """Group consecutive list-item lines; any other line ends the group."""
    groups: List[List[_RawItem]] = []
    current: List[_RawItem] = []
    line_start = 0

    for line_idx, line in enumerate(prose.split("\n")):
        match = _parse_list_line(line)
        if match and match.group(3).strip():
            current.append(
                _RawItem(
                    line=line_idx + 1,
                    text=match.group(3),
                    absolute_offset=line_start + match.start(3),
                )
            )
        elif current:
            groups.append(current)
            current = []
        line_start += len(line) + 1

    if current:
        groups.append(current)
    return groups


def _dominant_pattern(items: List[ParallelStructureItem]) -> str:
    # Counter preserves first-seen order and most_common keeps it on ties.
    return Counter(item.pattern for item in items).most_common(1)[0][0]


def _dominant_capitalization(items: List[ParallelStructureItem]) -> bool:
    capitalized = sum(1 for item in items if item.capitalized)
    return capitalized >= len(items) - capitalized


def _dominant_punctuation(items: List[ParallelStructureItem]) -> str:
    best = ""
    best_count = 0
    for punct, count in Counter(item.trailing_punctuation for item in items).items():
        if count > best_count:
            best, best_count = punct, count
        elif count == best_count and punct == "":
            best = ""
    return best


def check_parallel_structure(text: str) -> ParallelStructureResult:
    """Check that items within each markdown list share form and punctuation."""
    prose = mask_code_blocks(text)
    lists: List[ParallelStructureList] = []
    issues: List[ParallelStructureIssue] = []

    for list_idx, group in enumerate(extract_list_groups(prose)):
        items = [
            ParallelStructureItem(
                line=raw.line,
                text=raw.text,
                pattern=classify_pattern(raw.text),
                capitalized=bool(CAPITALIZED_RE.match(raw.text)),
                trailing_punctuation=trailing_punctuation(raw.text),
                absolute_offset=raw.absolute_offset,
            )
            for raw in group
        ]
        pattern = _dominant_pattern(items)
        capitalization = _dominant_capitalization(items)
        punctuation = _dominant_punctuation(items)

        list_issues: List[ParallelStructureIssue] = []
        if len(items) >= 2:
            for item_idx, item in enumerate(items):
                list_issues.extend(
                    _item_issues(list_idx, item_idx, item, pattern, capitalization, punctuation)
                )
        issues.extend(list_issues)

        lists.append(
            ParallelStructureList(
                start_line=items[0].line,
                items=items,
                dominant_pattern=pattern,
                dominant_capitalization=capitalization,
                dominant_punctuation=punctuation,
                is_consistent=not list_issues,
            )
        )

    return ParallelStructureResult(lists=lists, issues=issues)


def _item_issues(
    list_idx: int,
    item_idx: int,
    item: ParallelStructureItem,
    pattern: str,
    capitalization: bool,
    punctuation: str,
) -> List[ParallelStructureIssue]:
    messages: List[tuple[str, str]] = []
    if item.pattern != pattern:
        messages.append(
            (
                "pattern",
                f'Expected {pattern} pattern but found {item.pattern}: "{item.text}"',
            )
        )
    if item.capitalized != capitalization:
        this_is = "is" if item.capitalized else "is not"
        most_are = "are" if capitalization else "are not"
        messages.append(
            (
                "capitalization",
                f"Inconsistent capitalization: this item {this_is} capitalized "
                f"while most items {most_are}",
            )
        )
    if item.trailing_punctuation != punctuation:
        actual = item.trailing_punctuation or "no punctuation"
        dominant = punctuation or "no punctuation"
        messages.append(
            (
                "punctuation",
                f'Inconsistent ending punctuation: this item ends with "{actual}" '
                f'while most items end with "{dominant}"',
            )
        )
    return [
        ParallelStructureIssue(
            list_index=list_idx,
            item_index=item_idx,
            item_line=item.line,
            item_absolute_offset=item.absolute_offset,
            item_length=len(item.text),
            kind=kind,
            message=message,
        )
        for kind, message in messages
    ]
