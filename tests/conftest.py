"""Shared test fixtures for testgen-engine."""

from pathlib import Path

import pytest

from testgen_engine.fixtures.models import FixtureBlock, FixtureRecord

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def make_record():
    def _make(header: str, first: str, second: str) -> FixtureRecord:
        return FixtureRecord(
            header=header,
            first=FixtureBlock(first + "\n"),
            second=FixtureBlock(second + "\n"),
        )
    return _make


@pytest.fixture
def corpus(make_record):
    """In-memory fixture source keyed by group name; records calls."""
    class _Corpus(dict):
        def __init__(self):
            super().__init__()
            self.calls: list[str] = []

        def __call__(self, group: str) -> list[FixtureRecord]:
            self.calls.append(group)
            return self.get(group, [])

    c = _Corpus()
    c["basic"] = [make_record("simple case", "a", "b")]
    c["other"] = [make_record("simple case", "c", "d")]
    return c
