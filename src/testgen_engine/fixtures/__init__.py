"""Fixture corpus access.

A fixture file holds input/expected-output pairs separated by lines
containing a single separator character (``.`` by default):

    Header for the first case
    .
    input text
    .
    expected output
    .
"""
