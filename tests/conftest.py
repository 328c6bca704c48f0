"""
Pytest configuration and shared fixtures.
"""

import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from chuk_mcp_patterns.patterns import PatternStore


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for pattern files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_file(temp_dir: Path) -> Callable[[str, str], Path]:
    """Write a raw file into the patterns directory."""

    def _write(filename: str, text: str) -> Path:
        path = temp_dir / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store(temp_dir: Path) -> PatternStore:
    """Store over an empty temporary directory."""
    return PatternStore(temp_dir)


AXUM_ERRORS = """---
pattern: axum-error-handling
category: rust
framework: axum
projects: [billing, gateway]
tags: [errors, web]
---

# Axum error handling

Implement IntoResponse for an AppError enum.
"""

LAMBDA_COLD_START = """---
pattern: lambda-cold-start
category: aws
framework: lambda
tags: [performance]
---

# Cold starts

Keep the deployment package small.
"""


@pytest.fixture
def populated_store(write_file: Callable[[str, str], Path], store: PatternStore) -> PatternStore:
    """Store holding two well-formed patterns."""
    write_file("axum-error-handling.md", AXUM_ERRORS)
    write_file("lambda-cold-start.md", LAMBDA_COLD_START)
    return store
