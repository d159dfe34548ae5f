from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict

from .api import parse_file
from .diagnostic import Diagnostic
from .errors import OutputFileError
from .logging import enable_debug_logging


def _diagnostic_json(d: Diagnostic) -> dict[str, object]:
    # File is carried by the enclosing group.
    return {
        "start": asdict(d.range.start),
        "end": asdict(d.range.end),
        "severity": d.severity.value,
        "message": d.message,
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="ghcidlog", description="Parse a ghcid output file into diagnostics")
    ap.add_argument("output", help="File written by ghcid --outputfile")
    ap.add_argument(
        "-b",
        "--base-dir",
        default=None,
        help="Directory relative paths resolve against (default: the output file's directory)",
    )
    ap.add_argument("--json", action="store_true", help="Print grouped diagnostics as JSON")
    ap.add_argument("--debug", action="store_true", help="Enable debug logging on stderr")
    args = ap.parse_args(argv)

    if args.debug:
        enable_debug_logging()

    try:
        groups = parse_file(args.output, base_dir=args.base_dir)
    except OutputFileError as e:
        print(f"ghcidlog: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = [
            {"file": location.path, "diagnostics": [_diagnostic_json(d) for d in diags]}
            for location, diags in groups
        ]
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for _, diags in groups:
            for d in diags:
                print(d.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
