# topmark:header:start
#
#   project      : TypeSchema
#   file         : diagnostics.py
#   file_relpath : src/typeschema/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading configuration."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from yachalk import chalk

from typeschema.config.logging import TypeschemaLogger, get_logger

logger: TypeschemaLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels, ordered by importance: ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function used for human output."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


@dataclass(frozen=True)
class Diagnostic:
    """A message with a severity level."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Mutable, ordered collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        return cls(items=list(diagnostics))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def extend(self, other: Iterable[Diagnostic]) -> None:
        for diagnostic in other:
            self._add(diagnostic)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
