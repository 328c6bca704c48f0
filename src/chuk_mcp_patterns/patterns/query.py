"""
Pattern query - filters a loaded pattern set.

All criteria are AND-combined and case-insensitive. Results keep the
order of the input sequence; there is no relevance ranking.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_patterns.models.pattern import Pattern


class PatternQuery(BaseModel):
    """
    Search criteria. Blank values are treated as absent.
    """

    query: str | None = Field(None, description="Free text matched against name, metadata and body")
    category: str | None = Field(None, description="Exact category (case-insensitive)")
    framework: str | None = Field(None, description="Exact framework (case-insensitive)")
    tag: str | None = Field(None, description="Tag the pattern must carry (case-insensitive)")

    model_config = {"frozen": True}

    @field_validator("query", "category", "framework", "tag")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @property
    def is_empty(self) -> bool:
        return not (self.query or self.category or self.framework or self.tag)

    def matches(self, pattern: Pattern) -> bool:
        """Check a single pattern against every provided criterion."""
        if self.category and not _same(pattern.category, self.category):
            return False

        if self.framework and not _same(pattern.framework, self.framework):
            return False

        if self.tag:
            wanted = self.tag.casefold()
            if not any(t.casefold() == wanted for t in pattern.tags):
                return False

        if self.query:
            needle = self.query.casefold()
            haystack = [
                pattern.name,
                pattern.category or "",
                pattern.framework or "",
                *pattern.tags,
                pattern.content,
            ]
            if not any(needle in text.casefold() for text in haystack):
                return False

        return True


def _same(value: str | None, wanted: str) -> bool:
    return value is not None and value.casefold() == wanted.casefold()


def search_patterns(
    patterns: Iterable[Pattern],
    query: str | None = None,
    category: str | None = None,
    framework: str | None = None,
    tag: str | None = None,
) -> list[Pattern]:
    """
    Filter patterns by text, category, framework and tag.

    Args:
        patterns: Patterns to filter, in the order results should keep
        query: Substring looked for in name, category, framework, tags and content
        category: Category to match exactly
        framework: Framework to match exactly
        tag: Tag the pattern must carry

    Returns:
        Matching patterns in input order. With no criteria, all patterns.

    Example:
        search_patterns(patterns, tag="web", framework="axum")
    """
    criteria = PatternQuery(query=query, category=category, framework=framework, tag=tag)
    return filter_patterns(patterns, criteria)


def filter_patterns(patterns: Iterable[Pattern], criteria: PatternQuery) -> list[Pattern]:
    """Apply a prepared PatternQuery."""
    if criteria.is_empty:
        return list(patterns)
    return [p for p in patterns if criteria.matches(p)]
