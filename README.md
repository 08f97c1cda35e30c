# termrewrite

A small term rewriting engine.

- A term is a `Leaf`, which holds a symbol, or a `Node`, which holds an operator applied to a tuple of child terms.
- A `Rule` pairs a left-hand side pattern (`lhs`) with a right-hand side replacement (`rhs`).
- A `Rewriter` applies its rules again and again until a pass leaves the term unchanged. The term it ends with is the *normal form*.

All of these live in `termrewrite.terms`. Terms and rules are frozen dataclasses, so they can be compared with `==` and used as dictionary keys. `str()` of a term prints it in the form `op(a, b)`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

`termrewrite.boolean_rules.boolean_rules()` returns the truth tables for `or`, `and` and `not` as rewrite rules. It gives ten rules, in the order `or`, `and`, `not`. The following example reduces a nested boolean expression:

```python
from termrewrite.terms import Leaf, Node, Rewriter
from termrewrite.boolean_rules import boolean_rules

# not(and(or(true, false), not(false)))
term = Node("not", (
    Node("and", (
        Node("or", (Leaf("true"), Leaf("false"))),
        Node("not", (Leaf("false"),)),
    )),
))

rewriter = Rewriter(term, boolean_rules())
result = rewriter.normalize()
print(result)                  # false
assert result == Leaf("false")
```

### Your own rules

```python
from termrewrite.terms import Leaf, Node, Rule, Rewriter

rules = [
    Rule(lhs=Node("neg", (Leaf("pos"),)), rhs=Leaf("neg")),
    Rule(lhs=Node("neg", (Leaf("neg"),)), rhs=Leaf("pos")),
]
print(Rewriter(Node("neg", (Node("neg", (Leaf("pos"),)),)), rules).normalize())  # pos
```

## How rewriting works

- The rewriter groups rules by `Rule.key()`, which is the operator at the root of the left-hand side.
- `Rewriter.try_rewrite(term)` makes one pass over a term:
  - For a leaf, it returns `None`.
  - For a node, it tries the rules for that node's operator in the order given. The first rule whose left-hand side children match the node's children wins, and its right-hand side is returned.
  - If no rule matches, the node's node children are rewritten by one pass each, and the rebuilt node is returned.
- `Rewriter.normalize()` repeats these passes until nothing changes. It then returns the result and also stores it in `rewriter.term`.
- Matching uses `equivalent()`:
  - Leaves match when their text is equal.
  - Nodes match when their operator, arity and children all match.

## Errors

The rewriter raises `termrewrite.terms.RewriteError` in these cases:

- A rule's left-hand side is a bare leaf, so it has no operator to group it under.
- A pass reaches a node whose operator has no rules at all.
- A node's arity differs from that of a rule for the same operator.

## Limitations

- Rules do not bind variables. Every symbol in a pattern is matched literally, so a rule such as `add(0, X) -> X` only matches a leaf whose text is `X`.
- There is no parser for terms written as text. Terms are built from `Leaf` and `Node` in Python.
- There is no command-line tool.