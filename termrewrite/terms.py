"""Terms, rewrite rules and a rewriter that reduces terms to normal form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union


class RewriteError(Exception):
    """Raised when a term or rule set cannot be rewritten."""


@dataclass(frozen=True)
class Leaf:
    """A constant or variable symbol."""

    value: str

    def arity(self) -> int:
        """A leaf counts as one argument."""
        return 1

    def equivalent(self, other: Term) -> bool:
        """Leaves are equivalent when their symbols are equal."""
        return isinstance(other, Leaf) and self.value == other.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Node:
    """An operator applied to zero or more child terms."""

    operator: str
    children: tuple[Term, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", tuple(self.children))

    def arity(self) -> int:
        """Number of children."""
        return len(self.children)

    def equivalent(self, other: Term) -> bool:
        """Nodes are equivalent when operator, arity and all children agree."""
        if not isinstance(other, Node):
            return False
        return (
            self.operator == other.operator
            and self.arity() == other.arity()
            and all(a.equivalent(b) for a, b in zip(self.children, other.children))
        )

    def __str__(self) -> str:
        return f"{self.operator}({', '.join(str(c) for c in self.children)})"


Term = Union[Leaf, Node]


@dataclass(frozen=True)
class Rule:
    """A rewrite rule: a term matching ``lhs`` is replaced by ``rhs``."""

    lhs: Term
    rhs: Term

    def key(self) -> str:
        """The operator at the root of the left-hand side."""
        if isinstance(self.lhs, Node):
            return self.lhs.operator
        raise RewriteError("rule is expected to define an operation")


class Rewriter:
    """Rewrites a term with a set of rules, top-down and left to right."""

    def __init__(self, term: Term, rules: Iterable[Rule]) -> None:
        self.term = term
        self.rules: dict[str, list[Rule]] = {}
        for rule in rules:
            self.rules.setdefault(rule.key(), []).append(rule)

    def _matches(self, node: Node, rule: Rule) -> bool:
        pattern = rule.lhs
        if not isinstance(pattern, Node):
            raise RewriteError("unexpected rule leaf")
        if pattern.arity() != node.arity():
            raise RewriteError(
                f"arity mismatch for {node.operator!r}: "
                f"term has {node.arity()}, rule has {pattern.arity()}"
            )
        return all(
            child.equivalent(sub) for child, sub in zip(node.children, pattern.children)
        )

    def try_rewrite(self, term: Term) -> Optional[Term]:
        """Perform one rewrite pass over ``term``.

        Returns None for a leaf. For a node, returns the right-hand side of the
        first rule whose left-hand side matches it, or else the node with each
        of its node children rewritten by one pass.
        """
        if isinstance(term, Leaf):
            return None
        candidates = self.rules.get(term.operator)
        if candidates is None:
            raise RewriteError(f"no rules for operator {term.operator!r}")
        for rule in candidates:
            if self._matches(term, rule):
                return rule.rhs
        children = tuple(
            (self.try_rewrite(child) or child) if isinstance(child, Node) else child
            for child in term.children
        )
        return Node(term.operator, children)

    def normalize(self) -> Term:
        """Rewrite until no further change is possible; return the normal form."""
        while True:
            rewritten = self.try_rewrite(self.term)
            if rewritten is None or rewritten == self.term:
                return self.term
            self.term = rewritten