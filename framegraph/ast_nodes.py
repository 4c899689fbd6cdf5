"""
AST Node Definitions for motif patterns
"""

from typing import List, Union
from dataclasses import dataclass
from abc import ABC

# =============================================================================
# Base AST Node
# =============================================================================


class ASTNode(ABC):
    """Base class for all pattern nodes"""

    pass


# =============================================================================
# Vertex Nodes
# =============================================================================


@dataclass(frozen=True)
class AnonymousVertex(ASTNode):
    def __str__(self) -> str:
        return "()"


@dataclass(frozen=True)
class NamedVertex(ASTNode):
    name: str

    def __str__(self) -> str:
        return f"({self.name})"


# =============================================================================
# Edge Nodes
# =============================================================================


@dataclass(frozen=True)
class AnonymousEdge(ASTNode):
    src: "VertexPattern"
    dst: "VertexPattern"

    def __str__(self) -> str:
        return f"{self.src}-[]->{self.dst}"


@dataclass(frozen=True)
class NamedEdge(ASTNode):
    name: str
    src: "VertexPattern"
    dst: "VertexPattern"

    def __str__(self) -> str:
        return f"{self.src}-[{self.name}]->{self.dst}"


@dataclass(frozen=True)
class Negation(ASTNode):
    edge: "EdgePattern"

    def __str__(self) -> str:
        return f"!{self.edge}"


VertexPattern = Union[AnonymousVertex, NamedVertex]
EdgePattern = Union[AnonymousEdge, NamedEdge]
Pattern = Union[AnonymousVertex, NamedVertex, AnonymousEdge, NamedEdge, Negation]


def declared_names(patterns: List[Pattern]) -> List[str]:
    """Names introduced by the given patterns, in first-introduction order.

    Names appearing only under a Negation are not introduced.
    """
    names: List[str] = []

    def visit(pattern):
        if isinstance(pattern, NamedVertex):
            if pattern.name not in names:
                names.append(pattern.name)
        elif isinstance(pattern, (AnonymousEdge, NamedEdge)):
            visit(pattern.src)
            if isinstance(pattern, NamedEdge) and pattern.name not in names:
                names.append(pattern.name)
            visit(pattern.dst)

    for pattern in patterns:
        visit(pattern)
    return names
