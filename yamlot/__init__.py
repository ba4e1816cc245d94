"""Tokenizer for a subset of YAML block syntax, with a command that prints tokens."""

__version__ = "0.1.0"

__all__ = ["tokens", "cli"]