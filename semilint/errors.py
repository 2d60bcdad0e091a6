"""Exceptions raised by semilint."""

from __future__ import annotations


class SemilintError(Exception):
    """Base class for all semilint errors."""


class UnknownCheckError(SemilintError):
    """A check name was requested that is not registered."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown check '{name}' (available: {', '.join(available)})"
        )


class SourceReadError(SemilintError):
    """A source file could not be read."""

    def __init__(self, path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Cannot read {path}: {cause.strerror or cause}")
