"""Command line entry point: lower a parser JSON document and print the result."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from .api import dump_output, lower_template_json, output_kind_stats
from .template import TemplateLoadError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Lower a parsed template document to a TSX render tree")
    parser.add_argument("file", nargs="?",
                        help="Parser JSON document (default: stdin)")
    parser.add_argument("--json", action="store_true",
                        help="Print the result as JSON")
    parser.add_argument("--stats", action="store_true",
                        help="Print output node kind counts")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log dispatch decisions and diagnostics")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file:
        with open(args.file, encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    try:
        result = lower_template_json(text)
    except TemplateLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps({
            "top_level_statements": [n.model_dump(mode="json") for n in result.top_level_statements],
            "render": [n.model_dump(mode="json") for n in result.render],
            "diagnostics": [d.model_dump(mode="json") for d in result.diagnostics],
        }, indent=2))
    else:
        print(dump_output(result))

    if args.stats:
        print("═══ Stats ═══")
        for kind, count in sorted(output_kind_stats(result).items()):
            print(f"  {kind}: {count}")

    return 1 if result.has_fatal else 0


if __name__ == "__main__":
    sys.exit(main())
