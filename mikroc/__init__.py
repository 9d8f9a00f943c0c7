"""Tokenizer, syntax-tree nodes and interpreter for a small C-like language."""

__version__ = "0.1.0"

__all__ = ["interpreter", "lexer", "literals", "nodes", "source", "tokens"]