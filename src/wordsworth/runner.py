from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .acronyms import check_acronyms
from .config import DEFAULT_HISTORY_LIMIT, WordsworthConfig
from .header_shift import scan_headers
from .hedge_words import analyze_hedge_words
from .models import ToolResult
from .parallel_structure import check_parallel_structure
from .pronouns import analyze_pronouns
from .readability import analyze_readability
from .style_check import check_style

logger = logging.getLogger(__name__)


class UnknownToolError(ValueError):
    """Raised when a tool id does not name a registered analyzer."""


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    id: str
    label: str
    category: str
    description: str


TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        "readability",
        "Readability",
        "analysis",
        "Flesch-Kincaid, Gunning Fog, grade level, word count, reading time",
    ),
    ToolDefinition(
        "style-check",
        "Style Check",
        "analysis",
        "Passive voice, wordy phrases, inconsistent spelling & terminology",
    ),
    ToolDefinition("pronouns", "Pronouns", "analysis", "Pronoun frequency, tone assessment"),
    ToolDefinition(
        "hedge-words",
        "Hedge Words",
        "analysis",
        "Uncertainty, frequency and softener words, hedging density",
    ),
    ToolDefinition(
        "acronym-checker",
        "Acronyms",
        "analysis",
        "Acronyms used without an expansion",
    ),
    ToolDefinition(
        "parallel-structure",
        "Parallel Structure",
        "analysis",
        "Grammatical form, capitalization and punctuation across list items",
    ),
    ToolDefinition("header-shift", "Header Shift", "analysis", "Header counts per level"),
)

_Analyzer = Callable[[str, str, bool], ToolResult]

_ANALYZERS: Dict[str, _Analyzer] = {
    "readability": lambda text, _ctx, _jargon: analyze_readability(text),
    "style-check": lambda text, ctx, jargon: check_style(text, ctx, include_jargon=jargon),
    "pronouns": lambda text, _ctx, _jargon: analyze_pronouns(text),
    "hedge-words": lambda text, _ctx, _jargon: analyze_hedge_words(text),
    "acronym-checker": lambda text, _ctx, _jargon: check_acronyms(text),
    "parallel-structure": lambda text, _ctx, _jargon: check_parallel_structure(text),
    "header-shift": lambda text, _ctx, _jargon: scan_headers(text),
}


def tool_ids() -> List[str]:
    return [tool.id for tool in TOOLS]


def get_tool(tool_id: str) -> ToolDefinition:
    for tool in TOOLS:
        if tool.id == tool_id:
            return tool
    raise UnknownToolError(f"Unknown tool '{tool_id}'.")


def run_tool(
    tool_id: str,
    text: str,
    reader_context: str = "",
    *,
    include_jargon: bool = False,
) -> ToolResult:
    """Dispatch ``text`` to the analyzer registered under ``tool_id``."""
    analyzer = _ANALYZERS.get(tool_id)
    if analyzer is None:
        raise UnknownToolError(f"Unknown tool '{tool_id}'.")
    logger.debug("Running %s on %d characters", tool_id, len(text))
    return analyzer(text, reader_context, include_jargon)


@dataclass(slots=True)
class ToolRun:
    """A completed tool invocation."""

    tool_id: str
    result: ToolResult
    timestamp: float


@dataclass(slots=True)
class ToolSession:
    """Tracks the active tool, its latest result and a bounded run history."""

    history_limit: int = DEFAULT_HISTORY_LIMIT
    include_jargon: bool = False
    active_tool: Optional[str] = None
    is_running: bool = False
    result: Optional[ToolResult] = None
    history: List[ToolRun] = field(default_factory=list)

    @classmethod
    def from_config(cls, config: WordsworthConfig) -> ToolSession:
        return cls(history_limit=config.history_limit, include_jargon=config.include_jargon)

    def set_active_tool(self, tool_id: str) -> None:
        get_tool(tool_id)
        self.active_tool = tool_id
        self.result = None

    def set_result(self, result: ToolResult) -> None:
        self.result = result
        if self.active_tool is None:
            return
        self.history.append(
            ToolRun(tool_id=self.active_tool, result=result, timestamp=time.time())
        )
        if self.history_limit <= 0:
            self.history = []
        elif len(self.history) > self.history_limit:
            self.history = self.history[-self.history_limit :]

    def run(self, text: str, reader_context: str = "") -> Optional[ToolResult]:
        """
        Run the active tool against ``text``.

        Returns None without running when no tool is active or the document
        is empty. A failing analyzer leaves ``result`` unset and re-raises.
        """
        if self.active_tool is None or not text:
            return None

        self.is_running = True
        try:
            result = run_tool(
                self.active_tool,
                text,
                reader_context,
                include_jargon=self.include_jargon,
            )
        except Exception:
            logger.exception("Tool %s failed", self.active_tool)
            self.result = None
            raise
        finally:
            self.is_running = False

        self.set_result(result)
        return result
