"""Rewrite rules that evaluate ground boolean expressions."""

from __future__ import annotations

from .terms import Leaf, Node, Rule

_TRUE = Leaf("true")
_FALSE = Leaf("false")

_BINARY_TABLE = {
    "or": [
        ((_TRUE, _TRUE), _TRUE),
        ((_TRUE, _FALSE), _TRUE),
        ((_FALSE, _TRUE), _TRUE),
        ((_FALSE, _FALSE), _FALSE),
    ],
    "and": [
        ((_TRUE, _TRUE), _TRUE),
        ((_TRUE, _FALSE), _FALSE),
        ((_FALSE, _TRUE), _FALSE),
        ((_FALSE, _FALSE), _FALSE),
    ],
}


def boolean_rules() -> list[Rule]:
    """Return the or/and/not truth-table rules, in or, and, not order."""
    rules = [
        Rule(Node(operator, args), result)
        for operator, table in _BINARY_TABLE.items()
        for args, result in table
    ]
    rules.append(Rule(Node("not", (_TRUE,)), _FALSE))
    rules.append(Rule(Node("not", (_FALSE,)), _TRUE))
    return rules