"""Single-pass scanner that replaces generated regions in a document.

States:
    PASSTHROUGH:  copy lines, watch for a fence
    MAYBE_HEADER: a fence was seen; the next directive opens a region
    SKIPPING:     drop old generated lines until the closing fence

Once a fence has been seen the scanner keeps looking for a directive,
so comment lines may sit between a fence and its directive. Lines are
copied unchanged until that directive shows up.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Sequence

from testgen_engine import DIRECTIVE_RE, FENCE_RE
from testgen_engine.codegen.generator import build_region
from testgen_engine.codegen.ident import IdentAllocator
from testgen_engine.errors import UnknownStateError
from testgen_engine.fixtures.models import FixtureRecord

FixtureSource = Callable[[str], Sequence[FixtureRecord]]


class ScanState(enum.Enum):
    PASSTHROUGH = "passthrough"
    MAYBE_HEADER = "maybe_header"
    SKIPPING = "skipping"


class LineKind(enum.Enum):
    FENCE = "fence"
    DIRECTIVE = "directive"
    OTHER = "other"


@dataclass
class RegionReport:
    """What was generated for one directive."""
    group: str
    module: str
    line: int
    tests: list[str] = field(default_factory=list)


@dataclass
class ScanResult:
    lines: list[str]
    regions: list[RegionReport] = field(default_factory=list)


def classify_line(line: str) -> tuple[LineKind, str | None]:
    """Classify a line, returning the group name for directives."""
    if FENCE_RE.match(line):
        return LineKind.FENCE, None
    m = DIRECTIVE_RE.match(line)
    if m:
        return LineKind.DIRECTIVE, m.group(1)
    return LineKind.OTHER, None


def _step(state: ScanState, kind: LineKind) -> tuple[ScanState, bool]:
    """Transition function: return (next_state, keep_line)."""
    if state is ScanState.PASSTHROUGH:
        if kind is LineKind.FENCE:
            return ScanState.MAYBE_HEADER, True
        return ScanState.PASSTHROUGH, True
    if state is ScanState.MAYBE_HEADER:
        if kind is LineKind.DIRECTIVE:
            return ScanState.SKIPPING, True
        return ScanState.MAYBE_HEADER, True
    if state is ScanState.SKIPPING:
        if kind is LineKind.FENCE:
            return ScanState.MAYBE_HEADER, True
        return ScanState.SKIPPING, False
    raise UnknownStateError(state)


def scan_document(
    lines: Sequence[str],
    load: FixtureSource,
    allocator: IdentAllocator | None = None,
) -> ScanResult:
    """Rewrite every generated region in ``lines``.

    Args:
        lines: Document lines without line terminators.
        load: Returns the fixture records of a group, in corpus order.
        allocator: Identifier state for the run. A fresh one is created
            when omitted, so names never leak between documents.

    Returns:
        ScanResult with the new lines and one report per region.

    Raises:
        NoFixturesError: If a directive names a group with no records.
    """
    allocator = allocator if allocator is not None else IdentAllocator()
    result = ScanResult(lines=[])
    state = ScanState.PASSTHROUGH

    for lineno, line in enumerate(lines, start=1):
        kind, group = classify_line(line)
        prev = state
        state, keep = _step(state, kind)
        if keep:
            result.lines.append(line)

        if prev is ScanState.MAYBE_HEADER and kind is LineKind.DIRECTIVE:
            region = build_region(group, load(group), allocator)
            result.lines.extend(region.lines)
            result.regions.append(RegionReport(
                group=group, module=region.module, line=lineno, tests=region.tests,
            ))

    return result


def split_document(text: str) -> list[str]:
    """Split on ``\\n``, dropping the terminator of the last line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def join_document(lines: Sequence[str]) -> str:
    """Join lines back with exactly one trailing newline."""
    return "\n".join(lines) + "\n"


def rewrite_lines(
    lines: Sequence[str],
    load: FixtureSource,
    allocator: IdentAllocator | None = None,
) -> list[str]:
    """Return ``lines`` with every generated region regenerated."""
    return scan_document(lines, load, allocator).lines


def rewrite_document(
    text: str,
    load: FixtureSource,
    allocator: IdentAllocator | None = None,
) -> str:
    """Regenerate a whole document held in memory."""
    return join_document(rewrite_lines(split_document(text), load, allocator))
