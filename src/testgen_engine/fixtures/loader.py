"""Parse fixture files and resolve fixture groups."""

from __future__ import annotations

import re
import warnings
from pathlib import Path
from typing import Any, Sequence

import yaml

from testgen_engine.fixtures.models import FixtureBlock, FixtureFile, FixtureRecord
from testgen_engine.paths import fixtures_root

DEFAULT_SEPARATORS = (".",)
FRONT_MATTER_DELIM = "---"

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def _block_text(lines: list[str], start: int, end: int) -> str:
    text = "\n".join(lines[start:end])
    return text + "\n" if text else text


def _read_front_matter(lines: list[str]) -> tuple[dict[str, Any] | None, int]:
    """Return (meta, first_line_after_front_matter)."""
    if not lines or lines[0] != FRONT_MATTER_DELIM:
        return None, 0
    for end in range(1, len(lines)):
        if lines[end] == FRONT_MATTER_DELIM:
            data = yaml.safe_load("\n".join(lines[1:end]))
            if data is None:
                data = {}
            if not isinstance(data, dict):
                raise ValueError("fixture front matter is not a YAML mapping")
            return data, end + 1
    return None, 0


def parse_fixtures(
    text: str,
    sep: Sequence[str] = DEFAULT_SEPARATORS,
    meta: bool = False,
) -> FixtureFile:
    """Parse the records of one fixture file.

    Args:
        text: Whole fixture file.
        sep: Lines that may delimit a record. A record is closed by the
            same separator that opened it.
        meta: Parse a leading ``---`` YAML front matter block.

    Returns:
        FixtureFile with the records in file order.
    """
    lines = _LINE_SPLIT_RE.split(text)
    result = FixtureFile()
    line = 0
    if meta:
        result.meta, line = _read_front_matter(lines)
    lower = line
    max_line = len(lines)

    while line < max_line:
        if lines[line] not in sep:
            line += 1
            continue
        current_sep = lines[line]
        sep_line = line

        line += 1
        first_start = line
        while line < max_line and lines[line] != current_sep:
            line += 1
        if line >= max_line:
            warnings.warn(f"unterminated fixture at line {sep_line + 1}")
            break
        first = FixtureBlock(_block_text(lines, first_start, line), (first_start, line))

        line += 1
        second_start = line
        while line < max_line and lines[line] != current_sep:
            line += 1
        if line >= max_line:
            warnings.warn(f"unterminated fixture at line {sep_line + 1}")
            break
        second = FixtureBlock(_block_text(lines, second_start, line), (second_start, line))
        line += 1

        # header sits on one of the two lines above the opening separator
        header = ""
        i = first_start - 2
        while i >= max(lower, first_start - 3):
            if lines[i] in sep:
                break
            if lines[i].strip():
                header = lines[i].strip()
                break
            i -= 1

        result.fixtures.append(FixtureRecord(
            header=header, first=first, second=second, type=current_sep,
        ))
        lower = line

    return result


def read_fixture_file(
    path: Path | str,
    sep: Sequence[str] = DEFAULT_SEPARATORS,
    meta: bool = False,
) -> FixtureFile:
    """Read and parse one fixture file (UTF-8)."""
    fixture_path = Path(path)
    parsed = parse_fixtures(fixture_path.read_text(encoding="utf-8"), sep=sep, meta=meta)
    parsed.path = fixture_path
    return parsed


def _walk(directory: Path, sep: Sequence[str], meta: bool) -> list[FixtureFile]:
    files: list[FixtureFile] = []
    for child in sorted(directory.iterdir()):
        if child.is_dir():
            files.extend(_walk(child, sep, meta))
        elif child.is_file():
            files.append(read_fixture_file(child, sep=sep, meta=meta))
    return files


def load_fixtures(
    path: Path | str,
    sep: Sequence[str] = DEFAULT_SEPARATORS,
    meta: bool = False,
) -> list[FixtureFile]:
    """Load a fixture file, or every file below a directory.

    Directory entries are visited in sorted name order; subdirectories
    are descended into where they sort.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    p = Path(path)
    if p.is_file():
        return [read_fixture_file(p, sep=sep, meta=meta)]
    if p.is_dir():
        files = _walk(p, sep, meta)
        if not files:
            warnings.warn(f"fixture directory {p} contains no files")
        return files
    raise FileNotFoundError(f"Fixture group not found: {p}")


class FixtureLoader:
    """Callable mapping a group name to its fixture records.

    Relative group names resolve against ``root`` (``TESTGEN_FIXTURES_DIR``
    or the working directory when not given).
    """

    def __init__(
        self,
        root: Path | str | None = None,
        sep: Sequence[str] = DEFAULT_SEPARATORS,
        meta: bool = False,
    ) -> None:
        self.root = Path(root) if root else fixtures_root()
        self.sep = tuple(sep)
        self.meta = meta

    def resolve(self, group: str) -> Path:
        return self.root / Path(group).expanduser()

    def __call__(self, group: str) -> list[FixtureRecord]:
        records: list[FixtureRecord] = []
        for fixture_file in load_fixtures(self.resolve(group), sep=self.sep, meta=self.meta):
            records.extend(fixture_file.fixtures)
        return records
