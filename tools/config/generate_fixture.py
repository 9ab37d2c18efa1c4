#!/usr/bin/env python3
"""Generate a sample Mapeo configuration project."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.mapeo_core.config.fixtures import write_fixture
from packages.mapeo_core.config.formats import COMAPEO, LEGACY


def main() -> int:
    parser = argparse.ArgumentParser(description="Generate a sample Mapeo configuration")
    parser.add_argument(
        "--format",
        choices=(LEGACY, COMAPEO),
        default=COMAPEO,
        help="Configuration format to generate",
    )
    parser.add_argument("--out", type=Path, required=True, help="Output directory (must be new or empty)")
    args = parser.parse_args()

    try:
        written = write_fixture(args.out, args.format)
    except FileExistsError as exc:
        print(f"ERROR: {exc}")
        return 1

    print(f"Wrote {len(written)} file(s) for a {args.format} configuration to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
