"""
Pattern codec - converts between raw file text and Pattern objects.

Pure functions, no I/O. A pattern file looks like:

    ---
    pattern: axum-error-handling
    category: rust
    framework: axum
    projects: [billing, gateway]
    tags: [errors, web]
    ---

    # Markdown body...
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_patterns.constants import FRONTMATTER_DELIMITER, FRONTMATTER_KEYS, ErrorMessages
from chuk_mcp_patterns.errors import (
    MalformedFrontmatterError,
    MissingDelimiterError,
    MissingRequiredFieldError,
)
from chuk_mcp_patterns.models.pattern import Pattern, PatternFrontmatter

logger = logging.getLogger(__name__)

# Characters YAML reads as line breaks inside single-quoted or plain scalars
_LINE_BREAKS = ("\r", "\n", "\x85", "\u2028", "\u2029")


class _FrontmatterDumper(yaml.SafeDumper):
    """SafeDumper that double-quotes (and so escapes) strings holding line breaks."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.ScalarNode:
    if any(ch in value for ch in _LINE_BREAKS):
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style='"')
    return dumper.represent_str(value)


_FrontmatterDumper.add_representer(str, _represent_str)


def split_frontmatter(raw_text: str, path: Path | None = None) -> tuple[str, str]:
    """
    Split raw text into the frontmatter block and the body.

    Args:
        raw_text: Full file contents
        path: Optional source path for error messages

    Returns:
        (frontmatter, body) with the delimiter lines removed

    Raises:
        MissingDelimiterError: If either marker line is absent
    """
    # Only the marker lines are matched loosely; body line endings are kept
    lines = raw_text.lstrip("\ufeff").split("\n")

    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        raise MissingDelimiterError(ErrorMessages.MISSING_OPENING_DELIMITER, path)

    for index in range(1, len(lines)):
        if lines[index].rstrip() == FRONTMATTER_DELIMITER:
            frontmatter = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            return frontmatter, body

    raise MissingDelimiterError(ErrorMessages.MISSING_CLOSING_DELIMITER, path)


def _as_text(key: str, value: Any, path: Path | None) -> str | None:
    """Coerce a scalar frontmatter value to a string."""
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        raise MalformedFrontmatterError(f"Field '{key}' must be a single value", path)
    text = str(value).strip()
    return text or None


def _as_list(key: str, value: Any, path: Path | None) -> list[str]:
    """Coerce a frontmatter value to a list of strings. A lone scalar becomes one item."""
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]

    result = []
    for item in value:
        if isinstance(item, (dict, list)):
            raise MalformedFrontmatterError(f"Field '{key}' must be a list of values", path)
        if item is None:
            continue
        result.append(str(item))
    return result


def decode_frontmatter(block: str, path: Path | None = None) -> PatternFrontmatter:
    """
    Decode a YAML frontmatter block.

    Raises:
        MalformedFrontmatterError: If the block is not a YAML mapping
        MissingRequiredFieldError: If ``pattern`` is absent or empty
    """
    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise MalformedFrontmatterError(f"Invalid YAML: {e}", path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedFrontmatterError(ErrorMessages.FRONTMATTER_NOT_MAPPING, path)

    name = _as_text("pattern", data.get("pattern"), path)
    if not name:
        raise MissingRequiredFieldError(ErrorMessages.MISSING_PATTERN_FIELD, path)

    ignored = {str(k): v for k, v in data.items() if k not in FRONTMATTER_KEYS}
    if ignored:
        logger.debug(f"Ignoring unrecognised frontmatter keys {sorted(ignored)} in {path}")

    return PatternFrontmatter(
        pattern=name,
        category=_as_text("category", data.get("category"), path),
        framework=_as_text("framework", data.get("framework"), path),
        projects=_as_list("projects", data.get("projects"), path),
        tags=_as_list("tags", data.get("tags"), path),
        ignored=ignored,
    )


def parse_pattern(raw_text: str, source_path: Path | None = None) -> Pattern:
    """
    Parse raw file text into a Pattern.

    Args:
        raw_text: Full file contents
        source_path: Path the text was read from, recorded on the pattern

    Returns:
        The parsed Pattern

    Raises:
        PatternParseError: One of its subclasses, naming what was wrong
    """
    block, body = split_frontmatter(raw_text, source_path)
    frontmatter = decode_frontmatter(block, source_path)

    return Pattern(
        name=frontmatter.pattern,
        category=frontmatter.category,
        framework=frontmatter.framework,
        projects=frontmatter.projects,
        tags=frontmatter.tags,
        content=body,
        source_path=source_path,
    )


def _frontmatter_dict(pattern: Pattern) -> dict[str, Any]:
    """Ordered frontmatter mapping, empty optional fields omitted."""
    result: dict[str, Any] = {"pattern": pattern.name}
    if pattern.category:
        result["category"] = pattern.category
    if pattern.framework:
        result["framework"] = pattern.framework
    if pattern.projects:
        result["projects"] = list(pattern.projects)
    if pattern.tags:
        result["tags"] = list(pattern.tags)
    return result


def format_pattern(pattern: Pattern) -> str:
    """
    Serialize a Pattern to file text.

    Keys are written in a fixed order; lists use YAML flow style.
    """
    frontmatter = yaml.dump(
        _frontmatter_dict(pattern),
        Dumper=_FrontmatterDumper,
        default_flow_style=None,
        sort_keys=False,
        allow_unicode=True,
        width=4096,
    )

    return (
        f"{FRONTMATTER_DELIMITER}\n"
        f"{frontmatter}"
        f"{FRONTMATTER_DELIMITER}\n"
        "\n"
        f"{pattern.content}\n"
    )
