"""Rust source generation for fixture-driven tests."""
