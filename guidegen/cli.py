"""Command line entry point: ``guidegen``."""

import argparse
import sys
from pathlib import Path

from .config import GeneratorOptions, parse_only
from .generator import Generator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guidegen",
        description="Generate the HTML guides from <guides-dir>/source into <guides-dir>/output.",
    )
    parser.add_argument("--guides-dir", type=Path, default=None, help="directory holding source/ and assets/ (default: cwd)")
    parser.add_argument("--all", action="store_true", help="regenerate every guide (ALL=1)")
    parser.add_argument("--only", default=None, help="comma separated file name prefixes (ONLY=...)")
    parser.add_argument("--edge", action="store_true", help="mark pages as edge guides (EDGE=1)")
    parser.add_argument("--warnings", action="store_true", help="check anchors and links (WARNINGS=1)")
    parser.add_argument("--numbered", action="store_true", help="number chapters and sections")
    parser.add_argument("--strict", action="store_true", help="exit with status 1 when any warning is reported")
    parser.add_argument("--title", default=None, help="site title used in page titles")
    return parser


def options_from_args(args: argparse.Namespace, environ=None) -> GeneratorOptions:
    options = GeneratorOptions.from_env(environ, guides_dir=args.guides_dir)
    options.all = options.all or args.all
    options.edge = options.edge or args.edge
    options.warnings = options.warnings or args.warnings or args.strict
    options.numbered = args.numbered
    options.strict = args.strict
    if args.only is not None:
        options.only = parse_only(args.only)
    if args.title:
        options.site_title = args.title
    return options


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    options = options_from_args(args)

    if not options.source_dir.is_dir():
        print(f"No source directory found at {options.source_dir}", file=sys.stderr)
        return 1

    report = Generator(options).generate()
    warned = sum(len(diagnostics) for diagnostics in report.values())
    print(f"\nDone. {len(report)} guide(s) generated into {options.output_dir}")
    if warned:
        print(f"{warned} warning(s) reported.")
    return 1 if options.strict and warned else 0


if __name__ == "__main__":
    sys.exit(main())
