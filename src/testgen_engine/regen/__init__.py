"""Region scanning and in-place document rewriting."""
