"""Fixture record types."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class FixtureBlock:
    """One side of a fixture: raw text plus its line span in the source file."""
    text: str = ""
    range: tuple[int, int] = (0, 0)

    @property
    def body(self) -> str:
        """The text without its single trailing newline."""
        return self.text[:-1] if self.text.endswith("\n") else self.text


@dataclass
class FixtureRecord:
    """An input/expected-output pair with a human-readable header."""
    header: str
    first: FixtureBlock
    second: FixtureBlock
    type: str = "."


@dataclass
class FixtureFile:
    """Every record parsed from one fixture file."""
    path: Path | None = None
    fixtures: list[FixtureRecord] = field(default_factory=list)
    meta: dict[str, Any] | None = None
