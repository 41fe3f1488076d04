from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from .models import StyleCheckResult, StyleIssue
from .textutils import line_and_offset_at, mask_code_blocks

PASSIVE_RE = re.compile(
    r"\b(was|were|is|are|been|being|be)\s+"
    r"(\w+ed|written|built|made|done|seen|given|taken|found|known|shown|told|sent|kept|left)\b",
    re.IGNORECASE,
)

# (phrase, suggestion); checked in this order.
WORDY_PHRASES: tuple[tuple[str, str], ...] = (
    ("in order to", "to"),
    ("at this point in time", "now"),
    ("due to the fact that", "because"),
    ("in the event that", "if"),
    ("for the purpose of", "to"),
    ("in the process of", "(omit)"),
    ("it is important to note that", "(omit)"),
    ("as a matter of fact", "in fact"),
    ("a large number of", "many"),
    ("utilize", "use"),
    ("leverage", "use"),
    ("facilitate", "help / enable"),
)

# US spelling first; on a tie the first variant wins.
SPELLING_VARIANTS: tuple[tuple[str, ...], ...] = (
    ("color", "colour"),
    ("organize", "organise"),
    ("center", "centre"),
    ("behavior", "behaviour"),
    ("favor", "favour"),
    ("honor", "honour"),
    ("labor", "labour"),
    ("neighbor", "neighbour"),
    ("flavor", "flavour"),
    ("humor", "humour"),
    ("analyze", "analyse"),
    ("realize", "realise"),
    ("recognize", "recognise"),
    ("apologize", "apologise"),
    ("optimize", "optimise"),
    ("customize", "customise"),
    ("prioritize", "prioritise"),
    ("minimize", "minimise"),
    ("maximize", "maximise"),
    ("summarize", "summarise"),
    ("catalog", "catalogue"),
    ("dialog", "dialogue"),
    ("license", "licence"),
    ("defense", "defence"),
    ("gray", "grey"),
    ("theater", "theatre"),
    ("fulfill", "fulfil"),
    ("traveling", "travelling"),
    ("modeling", "modelling"),
)

TERM_VARIANTS: tuple[tuple[str, ...], ...] = (
    ("user", "customer", "client"),
    ("app", "application"),
    ("login", "log in", "log-in"),
    ("email", "e-mail"),
    ("website", "web site"),
    ("online", "on-line"),
    ("database", "data base"),
    ("backend", "back-end", "back end"),
    ("frontend", "front-end", "front end"),
    ("dropdown", "drop-down"),
    ("checkbox", "check box"),
    ("plugin", "plug-in"),
    ("filename", "file name"),
)

TECHNICAL_JARGON = frozenset(
    {
        "api", "endpoint", "middleware", "refactor", "deploy", "repository", "merge",
        "commit", "pipeline", "microservice", "containerize", "kubernetes", "docker",
        "webhook", "sdk", "cli", "dns", "tcp", "http", "ssl", "ssh", "cdn",
        "cron", "daemon", "regex", "mutex", "semaphore", "polymorphism",
        "abstraction", "encapsulation", "serialization", "deserialization",
    }
)

TECHNICAL_AUDIENCE_HINTS = (
    "developer", "engineer", "technical", "programmer", "devops", "architect",
)
NON_TECHNICAL_RE = re.compile(r"\bnon[- ]?technical\b")
WORD_RE = re.compile(r"[A-Za-z]+")


def is_technical_audience(reader_context: str) -> bool:
    """Guess from a free-text reader description whether jargon is acceptable."""
    lower = reader_context.lower()
    if lower == "":
        return True
    if NON_TECHNICAL_RE.search(lower):
        return False
    return any(hint in lower for hint in TECHNICAL_AUDIENCE_HINTS)


def check_style(
    text: str, reader_context: str, *, include_jargon: bool = False
) -> StyleCheckResult:
    """
    Flag passive voice, wordy phrases and inconsistent spelling or terminology.

    Code blocks and inline code are ignored. The audience-gated jargon check
    only runs when ``include_jargon`` is set and ``reader_context`` does not
    describe a technical reader.
    """
    prose = mask_code_blocks(text)
    issues: List[StyleIssue] = []
    issues.extend(_passive_voice_issues(text, prose))
    issues.extend(_wordiness_issues(text, prose))
    issues.extend(_inconsistency_issues(text, prose, SPELLING_VARIANTS, "spelling"))
    issues.extend(_inconsistency_issues(text, prose, TERM_VARIANTS, "terminology"))
    if include_jargon and not is_technical_audience(reader_context):
        issues.extend(_jargon_issues(text, prose))
    return StyleCheckResult(issues=issues)


def _make_issue(
    text: str,
    start: int,
    length: int,
    severity: str,
    category: str,
    message: str,
    suggestion: Optional[str] = None,
) -> StyleIssue:
    line, offset = line_and_offset_at(text, start)
    return StyleIssue(
        severity=severity,
        category=category,
        message=message,
        line=line,
        offset=offset,
        absolute_offset=start,
        length=length,
        suggestion=suggestion,
    )


def _passive_voice_issues(text: str, prose: str) -> Iterable[StyleIssue]:
    for match in PASSIVE_RE.finditer(prose):
        yield _make_issue(
            text,
            match.start(),
            len(match.group(0)),
            "warning",
            "passive-voice",
            f'Passive voice: "{match.group(0)}". Consider rewriting in active voice.',
        )


def _wordiness_issues(text: str, prose: str) -> Iterable[StyleIssue]:
    for phrase, suggestion in WORDY_PHRASES:
        pattern = re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)
        for match in pattern.finditer(prose):
            yield _make_issue(
                text,
                match.start(),
                len(match.group(0)),
                "info",
                "wordiness",
                f'Wordy: "{phrase}" can be simplified.',
                suggestion,
            )


def _inconsistency_issues(
    text: str,
    prose: str,
    groups: Sequence[Sequence[str]],
    label: str,
) -> Iterable[StyleIssue]:
    """Flag every occurrence of the non-dominant variants in each group."""
    for variants in groups:
        found = [
            list(re.finditer(rf"\b{re.escape(variant)}\b", prose, re.IGNORECASE))
            for variant in variants
        ]
        if sum(1 for matches in found if matches) < 2:
            continue
        # max() keeps the first of several equal counts.
        dominant_idx = max(range(len(variants)), key=lambda idx: len(found[idx]))
        dominant = variants[dominant_idx]
        for idx, matches in enumerate(found):
            if idx == dominant_idx:
                continue
            for match in matches:
                yield _make_issue(
                    text,
                    match.start(),
                    len(match.group(0)),
                    "info",
                    "inconsistency",
                    f'Inconsistent {label}: "{match.group(0)}" is used, but the '
                    f'document mostly uses "{dominant}".',
                    dominant,
                )


def _jargon_issues(text: str, prose: str) -> Iterable[StyleIssue]:
    for match in WORD_RE.finditer(prose):
        word = match.group(0).lower()
        if word not in TECHNICAL_JARGON:
            continue
        yield _make_issue(
            text,
            match.start(),
            len(match.group(0)),
            "info",
            "jargon",
            f'"{word}" may be unfamiliar to your target reader.',
            f'Consider explaining or replacing "{word}"',
        )
