"""
Pydantic models for the pattern library.

This module provides:
- Pattern: A markdown pattern document with metadata
- PatternFrontmatter: The decoded frontmatter block
- PatternSummary: Lightweight listing view
- LoadResult / SkippedFile: Outcome of a directory scan
"""

from chuk_mcp_patterns.models.pattern import (
    LoadResult,
    Pattern,
    PatternFrontmatter,
    PatternSummary,
    SkippedFile,
)

__all__ = [
    "LoadResult",
    "Pattern",
    "PatternFrontmatter",
    "PatternSummary",
    "SkippedFile",
]
