"""Regenerate fixture-driven Rust tests embedded in a source file.

Generated regions are demarcated by fence lines and a directive naming
the fixture group:

    ////////////////////////////////////////////////////////////////
    // TESTGEN: tests/fixtures/commonmark/good.txt
    #[rustfmt::skip]
    mod tests_fixtures_commonmark_good_txt {
    ...
    }
    ////////////////////////////////////////////////////////////////

Anything outside these regions is preserved untouched.
"""

import re

# A fence is a line of four or more slashes; the directive follows it directly
FENCE_RE = re.compile(r"^/{4,}$")
DIRECTIVE_RE = re.compile(r"^/{2,}\s+TESTGEN:\s*(.+?)\s*$")

# Scaffolding lines shared by the generator and the scanner
RUSTFMT_SKIP = "#[rustfmt::skip]"
USE_RUN = "use super::run;"
BANNER_START = (
    "// this part of the file is auto-generated",
    "// don't edit it, otherwise your changes might be lost",
)
BANNER_END = "// end of auto-generated module"

# Name of the two-argument function every generated test calls
VERIFY_FN = "run"
