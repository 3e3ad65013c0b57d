"""Command-line entry point: ``namegen``.

Usage:
    # Default batch (20 names, mixed categories) from the configured files:
    namegen

    # Five female-styled names from explicit files, reproducibly:
    namegen --template nameConstruction.txt --words names.tsv -n 5 --category female --seed 7

Settings not given on the command line come from NAMEGEN_* environment
variables or a .env file.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from pydantic import ValidationError

from namegen.config import NamegenConfig
from namegen.exceptions import NamegenError
from namegen.generator import NameGenerator, NameRequest
from namegen.words.table import OTHER

logger = logging.getLogger("namegen")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namegen",
        description="Generate random names from a construction-language template.",
    )
    parser.add_argument("--template", help="Template file (overrides NAMEGEN_TEMPLATE_PATH)")
    parser.add_argument("--words", help="Word table file (overrides NAMEGEN_WORD_TABLE_PATH)")
    parser.add_argument(
        "-n",
        "--count",
        type=int,
        help="Number of names; omit for the default mixed-category batch",
    )
    parser.add_argument(
        "--category",
        default=OTHER,
        help="Category for every name when --count is given (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, help="Seed for reproducible output")
    parser.add_argument(
        "--log-level",
        choices=["none", "summary", "full"],
        help="Per-name record verbosity (overrides NAMEGEN_LOG_LEVEL)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _config_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.template is not None:
        overrides["template_path"] = args.template
    if args.words is not None:
        overrides["word_table_path"] = args.words
    if args.seed is not None:
        overrides["random_source_type"] = "seeded"
        overrides["random_seed"] = args.seed
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return overrides


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        0 on success, 1 if any name failed to generate, 2 on startup failure.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.count is not None and args.count < 1:
        parser.error("--count must be at least 1")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = NamegenConfig(**_config_overrides(args))
        generator = NameGenerator.from_config(config)
    except (NamegenError, ValidationError) as exc:
        logger.error("Startup failed: %s", exc)
        return 2

    requests = None
    if args.count is not None:
        requests = [NameRequest(id=str(i), category=args.category) for i in range(args.count)]

    exit_code = 0
    for result in generator.generate(requests):
        if result.ok:
            print(result.name)
        else:
            print(f"error: request {result.id}: {result.error}", file=sys.stderr)
            exit_code = 1
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
