#!/usr/bin/env python3
"""
Regenerate test fixtures from current bstdemo implementation.

Usage:
    python scripts/regenerate_fixtures.py [fixture_name]

If fixture_name is provided, only that fixture is regenerated.
Otherwise, all fixtures are regenerated.

Each fixture directory holds input.txt (the tokens typed at the menu) and
expected.txt (everything the session prints). Sessions run verbose on an
empty tree; fixtures must not use the performance test, whose timings vary.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

# Add parent to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstdemo import BinarySearchTree, read_tokens, run_session


FIXTURES_DIR = Path(__file__).parent.parent / "test" / "fixtures"


def regenerate_session_fixture(fixture_dir: Path) -> None:
    """Regenerate a session fixture (input.txt -> expected.txt)."""
    input_file = fixture_dir / "input.txt"

    if not input_file.exists():
        print(f"  Skipping {fixture_dir.name}: no input.txt")
        return

    out = io.StringIO()
    tokens = read_tokens(io.StringIO(input_file.read_text()))
    code = run_session(BinarySearchTree(), tokens, out, verbose=True)

    if code != 0:
        print(f"  Skipping {fixture_dir.name}: session exited with {code}")
        return

    (fixture_dir / "expected.txt").write_text(out.getvalue())

    print(f"  {fixture_dir.name}: {out.getvalue().count(chr(10))} lines")


def main() -> int:
    """Main entry point."""
    target = sys.argv[1] if len(sys.argv) > 1 else None

    print("Regenerating fixtures...")

    for fixture_dir in sorted(FIXTURES_DIR.iterdir()):
        if not fixture_dir.is_dir():
            continue

        if target and fixture_dir.name != target:
            continue

        regenerate_session_fixture(fixture_dir)

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
