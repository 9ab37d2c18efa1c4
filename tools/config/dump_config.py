#!/usr/bin/env python3
"""Print the aggregated configuration of a Mapeo configuration directory."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from packages.mapeo_core.config.aggregate import get_config
from packages.mapeo_core.config.errors import ConfigError
from packages.mapeo_core.config.log import verbose_logger


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump a Mapeo configuration as JSON")
    parser.add_argument("config_dir", type=Path, help="Configuration directory")
    parser.add_argument("--protocol", default=None, help="Protocol for icon URLs")
    parser.add_argument("--hostname", default=None, help="Hostname for icon URLs")
    parser.add_argument("--port", default=None, help="Port for icon URLs")
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print counts and format instead of the full JSON",
    )
    parser.add_argument("--debug", action="store_true", help="Log every read to stdout")
    args = parser.parse_args()

    try:
        config = get_config(
            args.config_dir,
            args.protocol,
            args.hostname,
            args.port,
            logger=verbose_logger() if args.debug else None,
        )
    except ConfigError as exc:
        print(f"ERROR: {exc}")
        return 1

    if args.summary:
        print(
            f"{config['_format']}: {len(config['presets'])} preset(s), "
            f"{len(config['fields'])} field(s), {len(config['messages'])} language(s)"
        )
    else:
        print(json.dumps(config, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
