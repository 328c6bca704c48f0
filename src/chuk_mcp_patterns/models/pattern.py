"""
Pattern model - a markdown document with structured metadata.

A pattern describes a reusable development practice. On disk it is a
markdown file whose YAML frontmatter carries the name and classification.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from chuk_mcp_patterns.constants import PREVIEW_LENGTH
from chuk_mcp_patterns.errors import PatternStoreError


class Pattern(BaseModel):
    """
    A complete pattern: metadata plus markdown body.

    ``source_path`` is owned by the store. It is excluded from
    equality and from serialized output.
    """

    name: str = Field(..., min_length=1, description="Unique pattern name")
    category: str | None = Field(None, description="Classification (language, domain)")
    framework: str | None = Field(None, description="Framework the pattern applies to")
    projects: list[str] = Field(default_factory=list, description="Projects using the pattern")
    tags: list[str] = Field(default_factory=list, description="Tags used for filtering")
    content: str = Field("", description="Markdown body")
    source_path: Path | None = Field(None, exclude=True, description="Backing file")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Pattern name must not be blank")
        return v

    @field_validator("category", "framework")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        return v.strip() or None

    @field_validator("content")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Body whitespace is normalized at the file boundary."""
        return v.strip()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    @property
    def preview(self) -> str:
        """First characters of the body for listings."""
        return self.content[:PREVIEW_LENGTH]

    def to_dict(self) -> dict[str, Any]:
        """Full representation for tool responses."""
        data = self.model_dump(mode="json")
        data["file"] = self.source_path.name if self.source_path else None
        return data


class PatternFrontmatter(BaseModel):
    """
    The decoded frontmatter block.

    Exactly five keys are recognised. Anything else lands in ``ignored``
    so that newer files still load.
    """

    pattern: str = Field(..., min_length=1, description="Pattern name")
    category: str | None = None
    framework: str | None = None
    projects: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    ignored: dict[str, Any] = Field(default_factory=dict, description="Unrecognised keys")

    model_config = {"frozen": True}


class PatternSummary(BaseModel):
    """
    Lightweight pattern metadata for listing/discovery.
    """

    name: str = Field(..., description="Pattern name")
    category: str | None = Field(None, description="Classification")
    framework: str | None = Field(None, description="Framework")
    projects: list[str] = Field(default_factory=list, description="Projects using the pattern")
    tags: list[str] = Field(default_factory=list, description="Tags")
    file: str | None = Field(None, description="Backing filename")
    preview: str = Field("", description="Start of the markdown body")

    @classmethod
    def from_pattern(cls, pattern: Pattern) -> PatternSummary:
        """Create a summary from a full pattern."""
        return cls(
            name=pattern.name,
            category=pattern.category,
            framework=pattern.framework,
            projects=list(pattern.projects),
            tags=list(pattern.tags),
            file=pattern.source_path.name if pattern.source_path else None,
            preview=pattern.preview,
        )


@dataclass
class SkippedFile:
    """A file that could not be loaded as a pattern."""

    path: Path
    error: PatternStoreError

    @property
    def code(self) -> str:
        return self.error.code

    def to_dict(self) -> dict[str, str]:
        return {"file": self.path.name, "error": self.code, "message": str(self.error)}

    def __str__(self) -> str:
        return f"[{self.code}] {self.error}"


@dataclass
class LoadResult:
    """Patterns loaded from a directory scan, plus the files that were skipped."""

    patterns: list[Pattern] = field(default_factory=list)
    skipped: list[SkippedFile] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [p.name for p in self.patterns]

    def find(self, name: str) -> Pattern | None:
        """Exact, case-sensitive lookup."""
        for pattern in self.patterns:
            if pattern.name == name:
                return pattern
        return None
