"""
wordsworth package exports the writing analyzers for library consumers.
"""

from __future__ import annotations

from .acronyms import check_acronyms
from .config import WordsworthConfig, config_from_dict, config_from_yaml, load_config
from .header_shift import demote_headers, promote_headers, scan_headers
from .hedge_words import analyze_hedge_words
from .parallel_structure import check_parallel_structure
from .pronouns import analyze_pronouns
from .readability import analyze_readability
from .runner import ToolSession, run_tool
from .style_check import check_style

__all__ = [
    "WordsworthConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze_readability",
    "check_style",
    "analyze_pronouns",
    "analyze_hedge_words",
    "check_acronyms",
    "check_parallel_structure",
    "scan_headers",
    "promote_headers",
    "demote_headers",
    "run_tool",
    "ToolSession",
]

__version__ = "0.1.0"
