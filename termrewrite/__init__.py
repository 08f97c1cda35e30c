"""A small term rewriting engine (terms, rules, rewriter) with boolean truth-table rules."""

__version__ = "0.1.0"