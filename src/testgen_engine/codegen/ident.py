"""Turn free-form labels into unique Rust identifiers."""

from __future__ import annotations

import re

from testgen_engine import VERIFY_FN

FALLBACK_IDENT = "unnamed"

# Strict and reserved keywords of every Rust edition, plus the name every
# generated module imports from its parent.
RESERVED_IDENTS = frozenset({
    "abstract", "as", "async", "await", "become", "box", "break", "const",
    "continue", "crate", "do", "dyn", "else", "enum", "extern", "false",
    "final", "fn", "for", "gen", "if", "impl", "in", "let", "loop", "macro",
    "match", "mod", "move", "mut", "override", "priv", "pub", "ref",
    "return", "self", "static", "struct", "super", "trait", "true", "try",
    "type", "typeof", "unsafe", "unsized", "use", "virtual", "where",
    "while", "yield", VERIFY_FN,
})

_NON_IDENT_RE = re.compile(r"[^a-z0-9]+")


def normalize(label: str) -> str:
    """Lowercase ``label`` and squash everything else to single underscores.

    A name starting with a digit gets a leading underscore.
    """
    name = _NON_IDENT_RE.sub("_", label.lower()).strip("_")
    if not name:
        return FALLBACK_IDENT
    if name[0].isdigit():
        return "_" + name
    return name


class IdentAllocator:
    """Hands out identifiers that are unique for the allocator's lifetime.

    One allocator covers one document pass, so a header that appears in
    two different regions still gets two distinct names. Keywords are
    treated as already taken and get a numeric suffix like any collision.
    """

    def __init__(self) -> None:
        self._taken: set[str] = set()

    def _is_free(self, name: str) -> bool:
        return name not in self._taken and name not in RESERVED_IDENTS

    def allocate(self, label: str) -> str:
        base = normalize(label)
        result = base
        idx = 0
        while not self._is_free(result):
            idx += 1
            result = f"{base}_{idx}"
        self._taken.add(result)
        return result

    def __contains__(self, name: object) -> bool:
        return name in self._taken

    def __len__(self) -> int:
        return len(self._taken)
