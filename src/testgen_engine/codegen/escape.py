"""Render arbitrary text as a Rust string literal.

Raw strings (``r#"..."#``) keep fixtures readable, but rustfmt and most
editors strip trailing spaces inside them, and tabs get mangled the same
way. Text with either falls back to an ordinary escaped literal. rustc
rejects a bare carriage return in any string literal, so text with one
is escaped too.

A fixture line made only of slashes would read as a region fence on the
next regeneration, so such text is escaped as well, with its first slash
written as ``\\x2f``.
"""

from __future__ import annotations

import re

_NEEDS_ESCAPE_RE = re.compile(r"( $|\t|\r|^/{4,}$)", re.MULTILINE)
_TRAILING_SPACE_RE = re.compile(r" $", re.MULTILINE)
_FENCE_LINE_RE = re.compile(r"^/(/{3,})$", re.MULTILINE)


def _escaped_literal(text: str) -> str:
    body = text.replace("\\", "\\\\").replace('"', '\\"')
    body = _TRAILING_SPACE_RE.sub(r"\\x20", body)
    body = body.replace("\t", "\\t").replace("\r", "\\r")
    body = _FENCE_LINE_RE.sub(r"\\x2f\1", body)
    return f'"{body}"'


def _raw_literal(text: str, hashes: int) -> str:
    fence = "#" * hashes
    return f'r{fence}"{text}"{fence}'


def escape(text: str) -> str:
    """Return Rust source for a literal that evaluates to ``text``.

    Args:
        text: Fixture text, without its trailing newline.

    Returns:
        ``"..."`` when ``text`` has trailing spaces, tabs, carriage
        returns or fence lines, otherwise the narrowest raw string whose
        delimiter cannot occur inside ``text``.
    """
    if _NEEDS_ESCAPE_RE.search(text):
        return _escaped_literal(text)

    if '"#' in text or '#"' in text:
        hashes = 2
        while '"' + "#" * hashes in text:
            hashes += 1
        return _raw_literal(text, hashes)

    return _raw_literal(text, 1)
