from __future__ import annotations

import argparse
from collections import Counter
import json
import logging
from pathlib import Path

from svgflat_core.config import ConverterConfig, load_config
from svgflat_core.errors import MalformedDocumentError
from svgflat_core.render import parse_file


LOGGER = logging.getLogger(__name__)
EXIT_INPUT = 1
EXIT_MALFORMED = 2


def main(argv: list[str] | None = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("svg_file", type=Path)
    common.add_argument("--config", type=Path, default=None, help="TOML file with a [converter] table.")
    common.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )

    parser = argparse.ArgumentParser(prog="svgflat")
    sub = parser.add_subparsers(dest="command", required=True)

    dump = sub.add_parser(
        "dump", parents=[common], help="Print the primitive sequence of an SVG file as JSON."
    )
    dump.add_argument("--indent", type=int, default=2)

    sub.add_parser("stats", parents=[common], help="Print primitive counts per kind.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")
    try:
        config = load_config(args.config) if args.config is not None else ConverterConfig()
    except (OSError, ValueError) as exc:
        LOGGER.warning("cannot load config %s: %s", args.config, exc)
        return EXIT_INPUT

    try:
        primitives = parse_file(args.svg_file, config)
    except MalformedDocumentError as exc:
        LOGGER.warning("cannot convert %s: %s", args.svg_file, exc)
        return EXIT_MALFORMED
    except OSError as exc:
        LOGGER.warning("cannot read %s: %s", args.svg_file, exc)
        return EXIT_INPUT

    if args.command == "dump":
        indent = args.indent if args.indent > 0 else None
        print(json.dumps([p.to_dict() for p in primitives], indent=indent))
        return 0

    if args.command == "stats":
        counts = Counter(p.kind for p in primitives)
        summary = {"total": len(primitives), **{kind: counts.get(kind, 0) for kind in ("rect", "circle", "path")}}
        print(json.dumps(summary, sort_keys=True))
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


if __name__ == "__main__":
    raise SystemExit(main())
