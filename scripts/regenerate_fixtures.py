#!/usr/bin/env python3
"""
Regenerate test fixtures from current bintree implementation.

Usage:
    python scripts/regenerate_fixtures.py [fixture_name]

If fixture_name is provided, only that fixture is regenerated.
Otherwise, all fixtures are regenerated.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintree import run


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def regenerate_fixture(fixture_dir: Path) -> None:
    """Regenerate a fixture (tree.json -> expected.txt)."""
    tree_file = fixture_dir / "tree.json"

    if not tree_file.exists():
        print(f"  Skipping {fixture_dir.name}: no tree.json")
        return

    exit_code, output = run(tree_file, "text")
    if exit_code != 0:
        print(f"  Skipping {fixture_dir.name}: {output}")
        return

    # Matches what main() prints
    (fixture_dir / "expected.txt").write_text(output + "\n")
    print(f"  {fixture_dir.name}: regenerated")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")

    for fixture_dir in sorted(FIXTURES_DIR.iterdir()):
        if not fixture_dir.is_dir():
            continue

        if target and fixture_dir.name != target:
            continue

        regenerate_fixture(fixture_dir)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
