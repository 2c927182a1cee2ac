"""Render fixture records as Rust test functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from testgen_engine import BANNER_END, BANNER_START, RUSTFMT_SKIP, USE_RUN, VERIFY_FN
from testgen_engine.codegen.escape import escape
from testgen_engine.codegen.ident import IdentAllocator
from testgen_engine.errors import NoFixturesError
from testgen_engine.fixtures.models import FixtureRecord

_DECLARATION_TEMPLATE = """\
#[test]
fn {name}() {{
    let input = {input};
    let output = {output};
    {verify}(input, output);
}}"""


@dataclass
class GeneratedRegion:
    """The generated module for one directive."""
    group: str
    module: str
    tests: list[str] = field(default_factory=list)
    lines: list[str] = field(default_factory=list)


def _render_declaration(name: str, record: FixtureRecord) -> str:
    return _DECLARATION_TEMPLATE.format(
        name=name,
        input=escape(record.first.body),
        output=escape(record.second.body),
        verify=VERIFY_FN,
    )


def generate_declaration(record: FixtureRecord, allocator: IdentAllocator) -> str:
    """Render one ``#[test]`` function for ``record``.

    The function name is allocated from the record header, so it stays
    unique across every region of the document sharing ``allocator``.
    """
    return _render_declaration(allocator.allocate(record.header), record)


def build_region(
    group: str,
    records: Sequence[FixtureRecord],
    allocator: IdentAllocator,
) -> GeneratedRegion:
    """Render the module that goes between a directive and its closing fence.

    Args:
        group: Fixture group named by the directive.
        records: Records loaded for ``group``, in corpus order.
        allocator: Identifier state for the whole document.

    Returns:
        GeneratedRegion with the allocated names and the module lines.

    Raises:
        NoFixturesError: If ``records`` is empty.
    """
    if not records:
        raise NoFixturesError(group)

    region = GeneratedRegion(group=group, module=allocator.allocate(group))
    region.lines = [
        RUSTFMT_SKIP,
        f"mod {region.module} {{",
        USE_RUN,
        *BANNER_START,
    ]
    for idx, record in enumerate(records):
        if idx > 0:
            region.lines.append("")
        name = allocator.allocate(record.header)
        region.tests.append(name)
        region.lines.extend(_render_declaration(name, record).split("\n"))
    region.lines.append(BANNER_END)
    region.lines.append("}")
    return region


def generate_region(
    group: str,
    records: Sequence[FixtureRecord],
    allocator: IdentAllocator,
) -> list[str]:
    """Return just the lines of :func:`build_region`."""
    return build_region(group, records, allocator).lines
