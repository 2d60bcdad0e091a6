"""Run configuration for the command-line front end."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from .checks import CHECKS

ANALYSIS_NAME = "semilint"
ANALYSIS_VERSION = "1.0"

DEFAULT_SUFFIXES = (".java",)


@dataclass(frozen=True)
class LintConfig:
    checks: tuple[str, ...] = field(default_factory=lambda: tuple(CHECKS))
    suffixes: tuple[str, ...] = DEFAULT_SUFFIXES
    follow_symlinks: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> LintConfig:
        checks = tuple(args.check) if args.check else tuple(CHECKS)
        suffixes = tuple(
            s if s.startswith(".") else f".{s}" for s in (args.suffix or DEFAULT_SUFFIXES)
        )
        return cls(
            checks=checks,
            suffixes=suffixes,
            follow_symlinks=args.follow_symlinks,
        )
