"""Parse-tree nodes produced by the parser and consumed by the reader.

A node is tagged with the grammar rule that produced it. Leaves carry their
literal text; containers carry their children in source order, delimiter
tokens and anchors included.
"""

from __future__ import annotations

from dataclasses import dataclass, field

ROOT = "root"
NUMBER = "number"
SYMBOL = "symbol"
SEXPR = "sexpr"
QEXPR = "qexpr"
# Delimiter tokens ( ) { } and the start/end anchors of the root rule
CHAR = "char"
REGEX = "regex"

CONTAINER_TAGS = frozenset({ROOT, SEXPR, QEXPR})
DELIMITERS = frozenset({"(", ")", "{", "}"})


@dataclass
class AstNode:
    tag: str
    contents: str = ""
    children: list[AstNode] = field(default_factory=list)
    position: int = 0

    @property
    def is_container(self) -> bool:
        return self.tag in CONTAINER_TAGS

    @property
    def is_artifact(self) -> bool:
        """True for delimiter tokens and anchors, which carry no value."""
        return self.tag == REGEX or self.contents in DELIMITERS
