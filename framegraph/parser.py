"""
Motif Pattern Parser
Converts motif strings such as "(a)-[e]->(b); !(b)-[]->(a)" into an
ordered list of pattern nodes
"""

import re
import logging
from typing import List, NamedTuple, Optional

from .ast_nodes import (
    AnonymousEdge,
    AnonymousVertex,
    EdgePattern,
    NamedEdge,
    NamedVertex,
    Negation,
    Pattern,
    VertexPattern,
)
from .exceptions import PatternParseError

logger = logging.getLogger(__name__)

RESERVED_PREFIX = "__"


class Token(NamedTuple):
    kind: str
    value: str
    position: int


class PatternParser:
    TOKEN_PATTERN = re.compile(
        r"""
        (?P<NEGATION>!)|
        (?P<IN_EDGE_OPEN><-\[)|
        (?P<OUT_EDGE_OPEN>-\[)|
        (?P<OUT_EDGE_CLOSE>\]->)|
        (?P<IN_EDGE_CLOSE>\]-)|
        (?P<LPAREN>\()|
        (?P<RPAREN>\))|
        (?P<SEMICOLON>;)|
        (?P<NAME>[A-Za-z0-9_]+)|
        (?P<WHITESPACE>\s+)|
        (?P<MISMATCH>.)
        """,
        re.VERBOSE,
    )

    def __init__(self):
        self.tokens: List[Token] = []
        self.position = 0

    def parse(self, text: str) -> List[Pattern]:
        """Parse a motif string into its pattern nodes"""
        self.tokens = self._tokenize(text)
        self.position = 0

        if not self.tokens:
            return []

        patterns = [self._parse_pattern()]
        while self._current_kind() == "SEMICOLON":
            self._consume_token()
            patterns.append(self._parse_pattern())

        token = self._current_token()
        if token is not None:
            raise PatternParseError(f"Unexpected token '{token.value}'", token.position)

        logger.debug(f"Parsed motif {text!r} into {len(patterns)} pattern(s)")
        return patterns

    def _tokenize(self, text: str) -> List[Token]:
        tokens = []
        for match in self.TOKEN_PATTERN.finditer(text):
            kind = match.lastgroup
            if kind == "WHITESPACE":
                continue
            if kind == "MISMATCH":
                raise PatternParseError(f"Unexpected character '{match.group()}'", match.start())
            tokens.append(Token(kind, match.group(), match.start()))
        return tokens

    def _current_token(self) -> Optional[Token]:
        return self.tokens[self.position] if self.position < len(self.tokens) else None

    def _current_kind(self) -> Optional[str]:
        token = self._current_token()
        return token.kind if token else None

    def _consume_token(self) -> Optional[Token]:
        token = self._current_token()
        if token:
            self.position += 1
        return token

    def _expect_token(self, kind: str, expected: str) -> Token:
        token = self._consume_token()
        if token is None:
            raise PatternParseError(f"Expected '{expected}', got end of pattern")
        if token.kind != kind:
            raise PatternParseError(f"Expected '{expected}', got '{token.value}'", token.position)
        return token

    def _parse_name(self) -> Optional[str]:
        if self._current_kind() != "NAME":
            return None
        token = self._consume_token()
        if token.value.startswith(RESERVED_PREFIX):
            raise PatternParseError(
                f"Names starting with '{RESERVED_PREFIX}' are reserved: '{token.value}'", token.position
            )
        return token.value

    def _parse_pattern(self) -> Pattern:
        if self._current_kind() == "NEGATION":
            negation = self._consume_token()
            pattern = self._parse_unnegated()
            if not isinstance(pattern, (AnonymousEdge, NamedEdge)):
                raise PatternParseError("Negation must be applied to an edge", negation.position)
            return Negation(pattern)
        return self._parse_unnegated()

    def _parse_unnegated(self) -> Pattern:
        left = self._parse_vertex()
        if self._current_kind() in ("OUT_EDGE_OPEN", "IN_EDGE_OPEN"):
            return self._parse_edge(left)
        return left

    def _parse_vertex(self) -> VertexPattern:
        self._expect_token("LPAREN", "(")
        name = self._parse_name()
        self._expect_token("RPAREN", ")")
        return NamedVertex(name) if name is not None else AnonymousVertex()

    def _parse_edge(self, left: VertexPattern) -> EdgePattern:
        # (a)-[e]->(b) and (b)<-[e]-(a) describe the same edge
        if self._consume_token().kind == "OUT_EDGE_OPEN":
            name = self._parse_name()
            self._expect_token("OUT_EDGE_CLOSE", "]->")
            right = self._parse_vertex()
            src, dst = left, right
        else:
            name = self._parse_name()
            self._expect_token("IN_EDGE_CLOSE", "]-")
            right = self._parse_vertex()
            src, dst = right, left

        if name is None:
            return AnonymousEdge(src, dst)
        return NamedEdge(name, src, dst)


def parse_pattern(text: str) -> List[Pattern]:
    """Convenience function to parse a motif string"""
    return PatternParser().parse(text)
