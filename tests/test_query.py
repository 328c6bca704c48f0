"""
Tests for pattern search.

Tests cover:
- Each criterion on its own
- AND-combination of criteria
- Case-insensitivity and blank criteria
- Order preservation
"""

import pytest

from chuk_mcp_patterns.models.pattern import Pattern
from chuk_mcp_patterns.patterns import PatternQuery, filter_patterns, search_patterns


@pytest.fixture
def patterns() -> list[Pattern]:
    """A small pattern set."""
    return [
        Pattern(name="p1", category="rust", framework="axum", tags=["web"], content="Router setup"),
        Pattern(name="p2", category="python", framework="click", tags=["cli"], content="Commands"),
        Pattern(
            name="p3",
            category="Rust",
            framework="tokio",
            tags=["async", "web", "web"],
            content="Spawn tasks",
        ),
        Pattern(name="p4", content="Nothing else set"),
    ]


def names(result: list[Pattern]) -> list[str]:
    return [p.name for p in result]


class TestSearchPatterns:
    """Tests for search_patterns."""

    def test_no_criteria_returns_all(self, patterns: list[Pattern]) -> None:
        assert search_patterns(patterns) == patterns

    def test_blank_criteria_ignored(self, patterns: list[Pattern]) -> None:
        assert search_patterns(patterns, query="  ", category="", tag=None) == patterns

    def test_tag(self, patterns: list[Pattern]) -> None:
        two = patterns[:2]
        assert names(search_patterns(two, tag="web")) == ["p1"]

    def test_tag_case_insensitive(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, tag="WEB")) == ["p1", "p3"]

    def test_duplicate_tags_match_once(self, patterns: list[Pattern]) -> None:
        result = search_patterns(patterns, tag="web")
        assert names(result).count("p3") == 1

    def test_tag_is_exact(self, patterns: list[Pattern]) -> None:
        assert search_patterns(patterns, tag="we") == []

    def test_category(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, category="rust")) == ["p1", "p3"]

    def test_category_nonexistent(self, patterns: list[Pattern]) -> None:
        assert search_patterns(patterns, category="nonexistent") == []

    def test_category_is_exact(self, patterns: list[Pattern]) -> None:
        assert search_patterns(patterns, category="rus") == []

    def test_framework(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, framework="CLICK")) == ["p2"]

    def test_query_matches_name(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, query="P4")) == ["p4"]

    def test_query_matches_content(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, query="router")) == ["p1"]

    def test_query_matches_metadata(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, query="tok")) == ["p3"]
        assert names(search_patterns(patterns, query="pyth")) == ["p2"]
        assert names(search_patterns(patterns, query="asy")) == ["p3"]

    def test_criteria_are_combined(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(patterns, category="rust", tag="web")) == ["p1", "p3"]
        assert names(search_patterns(patterns, category="rust", framework="tokio")) == ["p3"]
        assert search_patterns(patterns, category="python", tag="web") == []

    def test_preserves_input_order(self, patterns: list[Pattern]) -> None:
        reversed_input = list(reversed(patterns))
        assert names(search_patterns(reversed_input, tag="web")) == ["p3", "p1"]

    def test_accepts_iterables(self, patterns: list[Pattern]) -> None:
        assert names(search_patterns(iter(patterns), framework="axum")) == ["p1"]


class TestPatternQuery:
    """Tests for PatternQuery."""

    def test_is_empty(self) -> None:
        assert PatternQuery().is_empty
        assert PatternQuery(query=" ").is_empty
        assert not PatternQuery(tag="web").is_empty

    def test_blank_values_normalized(self) -> None:
        criteria = PatternQuery(category="  rust ", framework="")
        assert criteria.category == "rust"
        assert criteria.framework is None

    def test_missing_field_never_matches(self) -> None:
        pattern = Pattern(name="bare", content="x")
        assert not PatternQuery(category="rust").matches(pattern)
        assert not PatternQuery(framework="axum").matches(pattern)

    def test_filter_patterns(self, patterns: list[Pattern]) -> None:
        criteria = PatternQuery(tag="cli")
        assert names(filter_patterns(patterns, criteria)) == ["p2"]
