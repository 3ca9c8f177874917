"""Evaluator helper modules for the Bella runtime."""

__all__ = [
    "blocks",
    "chains",
    "common",
    "expr",
    "fn",
    "let",
    "loops",
    "output",
]
