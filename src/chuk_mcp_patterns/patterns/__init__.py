"""
Pattern system - the file-backed library.

Patterns are markdown files with YAML frontmatter, one per file.
This package parses them, stores them and searches them.
"""

from chuk_mcp_patterns.patterns.codec import format_pattern, parse_pattern
from chuk_mcp_patterns.patterns.query import PatternQuery, filter_patterns, search_patterns
from chuk_mcp_patterns.patterns.store import PatternStore, validate_pattern_name

__all__ = [
    "PatternQuery",
    "PatternStore",
    "filter_patterns",
    "format_pattern",
    "parse_pattern",
    "search_patterns",
    "validate_pattern_name",
]
