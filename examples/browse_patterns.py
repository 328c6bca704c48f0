#!/usr/bin/env python3
"""
Example: Creating and searching patterns.

This demonstrates the pattern store without running the MCP server:
create a few patterns in a scratch directory, list them and search them.

Usage:
    python examples/browse_patterns.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_patterns.errors import PatternExistsError
from chuk_mcp_patterns.patterns import PatternStore, search_patterns


def main() -> None:
    """Demonstrate the pattern store."""
    print("CHUK Patterns Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        store = PatternStore(Path(tmp))

        store.create(
            "axum-error-handling",
            "# Axum error handling\n\nImplement IntoResponse for an AppError enum.",
            category="rust",
            framework="axum",
            projects=["billing"],
            tags=["errors", "web"],
        )
        store.create(
            "lambda-cold-start",
            "# Cold starts\n\nKeep the deployment package small.",
            category="aws",
            framework="lambda",
            tags=["performance"],
        )

        # Names are unique
        try:
            store.create("lambda-cold-start", "duplicate")
        except PatternExistsError as e:
            print(f"Rejected: {e}")
            print()

        loaded = store.load_all()
        print("Available patterns:")
        for pattern in loaded.patterns:
            print(f"  - {pattern.name} ({pattern.category}, {pattern.framework})")
        print()

        print("Tagged 'WEB':")
        for pattern in search_patterns(loaded.patterns, tag="WEB"):
            print(f"  - {pattern.name}")
        print()

        print("Raw file:")
        print(store.path_for("axum-error-handling").read_text(encoding="utf-8"))


if __name__ == "__main__":
    main()
