"""Regenerate a document on disk.

The sync process:
1. Read the whole document (UTF-8, line endings untouched)
2. Rewrite it in memory; any error stops here with the file untouched
3. Move the original aside to ``<path>.old``
4. Write the new content to ``<path>``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from testgen_engine.codegen.ident import IdentAllocator
from testgen_engine.paths import backup_path
from testgen_engine.regen.scanner import (
    FixtureSource,
    join_document,
    scan_document,
    split_document,
)


def sync_file(
    path: Path | str,
    load: FixtureSource,
    dry_run: bool = False,
) -> dict[str, Any]:
    """Regenerate every region of one document in place.

    Args:
        path: Document to rewrite.
        load: Fixture source for the directives in the document.
        dry_run: Compute the result without touching the filesystem.

    Returns:
        Dict with ``path``, ``action`` ("updated" or "unchanged"),
        ``regions`` (list of RegionReport), ``backup`` and ``dry_run``.
    """
    file_path = Path(path)
    with open(file_path, encoding="utf-8", newline="") as f:
        content = f.read()

    scanned = scan_document(split_document(content), load, IdentAllocator())
    new_content = join_document(scanned.lines)

    action = "unchanged" if new_content == content else "updated"
    backup = backup_path(file_path)
    if not dry_run:
        file_path.replace(backup)
        with open(file_path, "w", encoding="utf-8", newline="") as f:
            f.write(new_content)

    return {
        "path": str(file_path),
        "action": action,
        "regions": scanned.regions,
        "backup": str(backup),
        "dry_run": dry_run,
    }
