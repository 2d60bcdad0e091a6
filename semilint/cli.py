"""Command-line entry point: lint Java files and directories."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Iterator, Optional, Sequence

from .checks import CHECKS, resolve_checks
from .config import ANALYSIS_NAME, ANALYSIS_VERSION, LintConfig
from .errors import SemilintError
from .finder import lint_file

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def find_source_files(paths: Sequence[Path], config: LintConfig) -> Iterator[Path]:
    """Expand directories into the source files below them, in sorted order."""
    for path in paths:
        if path.is_dir():
            found = []
            for dirpath, _dirnames, filenames in os.walk(path, followlinks=config.follow_symlinks):
                for name in filenames:
                    if name.endswith(config.suffixes):
                        found.append(Path(dirpath) / name)
            yield from sorted(found)
        else:
            yield path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=ANALYSIS_NAME,
        description="Report unnecessary semicolons after Java type member declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single file
  python -m semilint src/main/java/com/example/Foo.java

  # Whole source tree
  python -m semilint src/main/java
        """,
    )
    parser.add_argument("paths", nargs="*", type=Path, metavar="PATH",
                        help="Java source files or directories to scan")
    parser.add_argument("--check", action="append", metavar="NAME",
                        help="Run only the named check (repeatable)")
    parser.add_argument("--list-checks", action="store_true",
                        help="List the available checks and exit")
    parser.add_argument("--suffix", action="append", metavar="EXT",
                        help="File suffix to scan in directories (default: .java)")
    parser.add_argument("--follow-symlinks", action="store_true",
                        help="Follow symbolic links while walking directories")
    parser.add_argument("--quiet", "-q", action="store_true",
                        help="Only print violations and errors")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Show debug output")
    parser.add_argument("--version", action="version",
                        version=f"{ANALYSIS_NAME} {ANALYSIS_VERSION}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log_level = logging.DEBUG
    elif args.quiet:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO
    logging.basicConfig(level=log_level, format="%(message)s")

    if args.list_checks:
        for name in CHECKS:
            print(name)
        return EXIT_OK

    if not args.paths:
        parser.print_help()
        return EXIT_ERROR

    config = LintConfig.from_args(args)
    try:
        resolve_checks(config.checks)
    except SemilintError as e:
        log.error("%s", e)
        return EXIT_ERROR

    files = 0
    violations = 0
    failed = False
    for path in find_source_files(args.paths, config):
        files += 1
        try:
            issues = lint_file(path, config.checks)
        except SemilintError as e:
            log.error("%s", e)
            failed = True
            continue
        for issue in issues:
            print(issue.format(str(path)))
        violations += len(issues)

    log.info("%d file(s) checked, %d violation(s)", files, violations)

    if failed:
        return EXIT_ERROR
    return EXIT_VIOLATIONS if violations else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
