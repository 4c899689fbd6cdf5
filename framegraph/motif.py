"""
Motif finding: incremental join compiler

Folds an ordered list of pattern nodes into one lazy polars plan. Each step
joins the accumulated result with the nested vertex/edge frames it needs,
choosing the join shape from which names are already bound. Nothing runs
until the caller collects the returned frame.
"""

import logging
from typing import List, Optional, Sequence, Set, Tuple

import polars as pl

from .ast_nodes import (
    AnonymousEdge,
    AnonymousVertex,
    NamedEdge,
    NamedVertex,
    Negation,
    Pattern,
    declared_names,
)
from .exceptions import InvalidPatternError, MotifInvariantError
from .naming import e_dst_id, e_src_id, field_expr, nest_edges, nest_vertices, v_id

logger = logging.getLogger(__name__)

# Column holding anonymous edges while they are joined in
TMP_EDGE = "__tmp"

_KEY_PREFIX = "__key"
_NEGATED = "__negated"

JoinKeys = Sequence[Tuple[str, str]]


def maybe_join(prev: Optional[pl.LazyFrame], other: pl.LazyFrame) -> pl.LazyFrame:
    """Cross join onto the accumulated result, or start from ``other``"""
    if prev is None:
        return other
    return prev.join(other, how="cross")


def join_on(left: pl.LazyFrame, right: pl.LazyFrame, keys: JoinKeys, how: str = "inner") -> pl.LazyFrame:
    """Equi-join on pairs of (left path, right path).

    Both sides get the key values under shared temporary names, so nested
    fields can be compared without exposing them in the output.
    """
    names = [f"{_KEY_PREFIX}{i}" for i in range(len(keys))]
    left = left.with_columns([field_expr(path).alias(n) for n, (path, _) in zip(names, keys)])
    right = right.with_columns([field_expr(path).alias(n) for n, (_, path) in zip(names, keys)])
    return left.join(right, on=names, how=how, coalesce=True).drop(names)


def maybe_join_on(prev: Optional[pl.LazyFrame], other: pl.LazyFrame, keys: JoinKeys) -> pl.LazyFrame:
    """Join ``other`` onto the accumulated result; keys are (other path, prev path)"""
    if prev is None:
        return other
    return join_on(prev, other, [(prev_path, other_path) for other_path, prev_path in keys])


def except_rows(left: pl.LazyFrame, right: pl.LazyFrame, columns: List[str]) -> pl.LazyFrame:
    """Distinct rows of ``left`` that do not appear in ``right``; nulls compare equal"""
    tagged = pl.concat(
        [
            left.unique().with_columns(pl.lit(False).alias(_NEGATED)),
            right.unique().with_columns(pl.lit(True).alias(_NEGATED)),
        ]
    )
    return (
        tagged.group_by(columns, maintain_order=True)
        .agg(pl.col(_NEGATED).any())
        .filter(~pl.col(_NEGATED))
        .drop(_NEGATED)
    )


def _check_not_edge(name: str, edge_names: Set[str]) -> None:
    if name in edge_names:
        raise MotifInvariantError(f"Edge '{name}' cannot be used as a vertex")


class MotifFinder:
    """Compiles motif patterns into joins over a vertex frame and an edge frame"""

    def __init__(self, vertices: pl.LazyFrame, edges: pl.LazyFrame):
        self.vertices = vertices
        self.edges = edges

    def find(self, patterns: Sequence[Pattern]) -> pl.LazyFrame:
        """Frame containing every match of the given patterns.

        Columns are the declared names in first-introduction order, each a
        struct holding the matched vertex or edge row. An empty pattern list
        gives an empty frame.
        """
        bound: Set[str] = set()
        edge_names: Set[str] = set()
        result: Optional[pl.LazyFrame] = None

        for pattern in patterns:
            logger.debug(f"Adding pattern {pattern} (bound: {sorted(bound)})")
            result = self._find_incremental(bound, result, pattern, edge_names)

        if result is None:
            return pl.LazyFrame()
        return result.select(declared_names(patterns))

    def _nest_v(self, name: str) -> pl.LazyFrame:
        return nest_vertices(self.vertices, name)

    def _nest_e(self, name: str) -> pl.LazyFrame:
        return nest_edges(self.edges, name)

    def _find_incremental(
        self,
        bound: Set[str],
        prev: Optional[pl.LazyFrame],
        pattern: Pattern,
        edge_names: Optional[Set[str]] = None,
    ) -> Optional[pl.LazyFrame]:
        """Augment ``prev`` with one pattern, recording new names in ``bound``.

        ``edge_names`` is the subset of ``bound`` naming edge columns.
        """
        if edge_names is None:
            edge_names = set()

        if isinstance(pattern, AnonymousVertex):
            return prev

        if isinstance(pattern, NamedVertex):
            _check_not_edge(pattern.name, edge_names)
            if pattern.name in bound:
                if prev is None or pattern.name not in prev.collect_schema().names():
                    raise MotifInvariantError(
                        f"Vertex '{pattern.name}' is bound but is not a column of the current result"
                    )
                return prev
            bound.add(pattern.name)
            return maybe_join(prev, self._nest_v(pattern.name))

        if isinstance(pattern, AnonymousEdge):
            result = self._find_edge(bound, prev, NamedEdge(TMP_EDGE, pattern.src, pattern.dst), edge_names)
            bound.discard(TMP_EDGE)
            edge_names.discard(TMP_EDGE)
            return result.drop(TMP_EDGE)

        if isinstance(pattern, NamedEdge):
            return self._find_edge(bound, prev, pattern, edge_names)

        if isinstance(pattern, Negation):
            if prev is None:
                raise InvalidPatternError(
                    f"Negation {pattern} must follow a pattern that produces a result"
                )
            columns = prev.collect_schema().names()
            if not columns:
                raise InvalidPatternError(f"Negation {pattern} has no named columns to compare against")
            # Names bound inside the negation stay private to it
            candidate = self._find_incremental(set(bound), prev, pattern.edge, set(edge_names))
            return except_rows(prev, candidate.select(columns), columns)

        raise InvalidPatternError(f"Unknown pattern node: {pattern!r}")

    def _find_edge(
        self, bound: Set[str], prev: Optional[pl.LazyFrame], edge: NamedEdge, edge_names: Set[str]
    ) -> pl.LazyFrame:
        name, src, dst = edge.name, edge.src, edge.dst
        if name in bound or name in (getattr(src, "name", None), getattr(dst, "name", None)):
            raise MotifInvariantError(f"Edge name '{name}' is already in use")

        e_ren = self._nest_e(name)
        src_key = dst_key = None
        if isinstance(src, NamedVertex):
            _check_not_edge(src.name, edge_names)
            src_key = (e_src_id(name), v_id(src.name))
        if isinstance(dst, NamedVertex):
            _check_not_edge(dst.name, edge_names)
            dst_key = (e_dst_id(name), v_id(dst.name))
        bound.add(name)
        edge_names.add(name)

        if src_key is None and dst_key is None:
            return maybe_join(prev, e_ren)

        if src_key is None:
            if dst.name in bound:
                return maybe_join_on(prev, e_ren, [dst_key])
            bound.add(dst.name)
            # Edges whose destination is missing from the vertex frame are kept
            return join_on(maybe_join(prev, e_ren), self._nest_v(dst.name), [dst_key], how="left")

        if dst_key is None:
            if src.name in bound:
                return maybe_join_on(prev, e_ren, [src_key])
            bound.add(src.name)
            return join_on(maybe_join(prev, e_ren), self._nest_v(src.name), [src_key])

        src_seen, dst_seen = src.name in bound, dst.name in bound

        if src_seen and dst_seen:
            return maybe_join_on(prev, e_ren, [src_key, dst_key])

        if src_seen:
            bound.add(dst.name)
            return join_on(maybe_join_on(prev, e_ren, [src_key]), self._nest_v(dst.name), [dst_key])

        if dst_seen:
            bound.add(src.name)
            return join_on(maybe_join_on(prev, e_ren, [dst_key]), self._nest_v(src.name), [src_key])

        bound.add(src.name)
        joined = join_on(maybe_join(prev, e_ren), self._nest_v(src.name), [src_key])
        if src.name == dst.name:
            # Self loop: the destination is the vertex just bound
            return joined.filter(field_expr(e_dst_id(name)) == field_expr(v_id(dst.name)))
        bound.add(dst.name)
        return join_on(joined, self._nest_v(dst.name), [dst_key])
