"""Syntax tree nodes and the factory that builds them."""

from __future__ import annotations

from dataclasses import dataclass, field

from mikroc.tokens import TokenType


@dataclass(eq=False)
class Variable:
    """A named integer storage cell shared by every node that names it."""

    name: str
    value: int = 0


@dataclass
class Node:
    """A syntax tree node.

    Inner nodes keep up to four children; number nodes keep an ``int``,
    string nodes a ``str`` and variable nodes a shared :class:`Variable`
    in ``value``.
    """

    kind: int
    first: Node | None = None
    second: Node | None = None
    third: Node | None = None
    fourth: Node | None = None
    value: int | str | Variable | None = None


@dataclass
class NodeFactory:
    """Builds nodes, interning strings and sharing variables by name."""

    variables: dict[str, Variable] = field(default_factory=dict)
    strings: dict[str, str] = field(default_factory=dict)

    def node(
        self,
        kind: int,
        first: Node | None = None,
        second: Node | None = None,
        third: Node | None = None,
        fourth: Node | None = None,
    ) -> Node:
        """Return an inner node of the given kind with its children."""
        return Node(kind, first, second, third, fourth)

    def number(self, value: int) -> Node:
        """Return a number literal node."""
        return Node(TokenType.NUMBER, value=value)

    def string(self, text: str) -> Node:
        """Return a string literal node; equal texts share one stored string."""
        stored = self.strings.setdefault(text, text)
        return Node(TokenType.STRING, value=stored)

    def variable(self, name: str) -> Node:
        """Return a variable node bound to the single cell for ``name``."""
        cell = self.variables.get(name)
        if cell is None:
            cell = self.variables[name] = Variable(name)
        return Node(TokenType.VARIABLE, value=cell)