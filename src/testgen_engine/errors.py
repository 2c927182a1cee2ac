"""Errors raised while regenerating a document."""

from __future__ import annotations


class TestgenError(Exception):
    """Base class for every error this package raises on purpose."""


class UsageError(TestgenError):
    """The command line was malformed."""


class NoFixturesError(TestgenError):
    """A directive named a fixture group with no records in it."""

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"no data found for {group}")


class UnknownStateError(TestgenError):
    """The region scanner reached a state it has no transition for."""

    def __init__(self, state: object) -> None:
        self.state = state
        super().__init__(f"unknown state: {state!r}")
