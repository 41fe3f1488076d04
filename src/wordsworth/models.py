from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(slots=True)
class StyleIssue:
    """A passive-voice, wordiness, inconsistency or jargon finding."""

    severity: str
    category: str
    message: str
    line: int
    offset: int
    absolute_offset: int
    length: int
    suggestion: Optional[str] = None
    dismissed: bool = False


@dataclass(slots=True)
class StyleCheckResult:
    type: ClassVar[str] = "style-check"

    issues: List[StyleIssue] = field(default_factory=list)


@dataclass(slots=True)
class ReadabilityResult:
    """Readability metrics for a whole document."""

    type: ClassVar[str] = "readability"

    flesch_kincaid: float
    gunning_fog: float
    grade_level: float
    word_count: int
    sentence_count: int
    reading_time_minutes: float
    audience_note: Optional[str] = None


@dataclass(slots=True)
class PronounMatch:
    """A pronoun occurrence with inclusive-exclusive character offsets."""

    start: int
    end: int
    group: str


@dataclass(slots=True)
class PronounResult:
    type: ClassVar[str] = "pronouns"

    counts: Dict[str, int]
    total: int
    percentages: Dict[str, int]
    tone_assessment: str
    matches: List[PronounMatch] = field(default_factory=list)


@dataclass(slots=True)
class HedgeMatch:
    """A hedge word occurrence with inclusive-exclusive character offsets."""

    start: int
    end: int
    word: str
    group: str
    line: int
    dismissed: bool = False


@dataclass(slots=True)
class HedgeWordResult:
    type: ClassVar[str] = "hedge-words"

    matches: List[HedgeMatch]
    counts: Dict[str, int]
    total: int
    word_count: int
    percentages: Dict[str, int]
    density: float
    tone_assessment: str


@dataclass(slots=True)
class AcronymIssue:
    """An acronym that is never expanded, reported at its first occurrence."""

    acronym: str
    line: int
    absolute_offset: int
    length: int
    count: int
    first_expanded: bool = False
    dismissed: bool = False


@dataclass(slots=True)
class AcronymCheckerResult:
    type: ClassVar[str] = "acronym-checker"

    acronyms: List[AcronymIssue]
    total_acronyms_found: int
    all_expanded: bool


@dataclass(slots=True)
class ParallelStructureItem:
    line: int
    text: str
    pattern: str
    capitalized: bool
    trailing_punctuation: str
    absolute_offset: int


@dataclass(slots=True)
class ParallelStructureList:
    """A run of consecutive list items plus their majority conventions."""

    start_line: int
    items: List[ParallelStructureItem]
    dominant_pattern: str
    dominant_capitalization: bool
    dominant_punctuation: str
    is_consistent: bool


@dataclass(slots=True)
class ParallelStructureIssue:
    list_index: int
    item_index: int
    item_line: int
    item_absolute_offset: int
    item_length: int
    kind: str
    message: str
    dismissed: bool = False


@dataclass(slots=True)
class ParallelStructureResult:
    type: ClassVar[str] = "parallel-structure"

    lists: List[ParallelStructureList] = field(default_factory=list)
    issues: List[ParallelStructureIssue] = field(default_factory=list)


@dataclass(slots=True)
class HeaderShiftResult:
    """Header counts keyed by level (1-6)."""

    type: ClassVar[str] = "header-shift"

    header_counts: Dict[int, int]
    total_headers: int


@dataclass(slots=True)
class ShiftResult:
    """Outcome of promoting or demoting every header in a document."""

    ok: bool
    shifted: int
    content: Optional[str] = None
    error: Optional[str] = None


ToolResult = Union[
    ReadabilityResult,
    StyleCheckResult,
    PronounResult,
    HedgeWordResult,
    AcronymCheckerResult,
    ParallelStructureResult,
    HeaderShiftResult,
]


def result_to_dict(result: ToolResult) -> dict[str, Any]:
    """Return a JSON-serializable payload tagged with the result type."""
    payload: dict[str, Any] = {"type": result.type}
    payload.update(asdict(result))
    return payload
