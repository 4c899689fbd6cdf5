"""
Column naming conventions for motif finding.

Every entity a pattern declares is packed into a single struct column named
after it, so a base frame can take part in a join any number of times without
its flat column names colliding. Fields inside those structs are addressed
with dot-qualified paths such as ``a.id`` or ``e.src``.
"""

import polars as pl

# Column name for vertex IDs in the vertex frame
ID = "id"

# Column names for source and destination vertex IDs in the edge frame
SRC = "src"
DST = "dst"

# Default name for attribute columns in the generic graph format
ATTR = "attr"


def prefix_with_name(name: str, col: str) -> str:
    return name + "." + col


def v_id(name: str) -> str:
    return prefix_with_name(name, ID)


def e_src_id(name: str) -> str:
    return prefix_with_name(name, SRC)


def e_dst_id(name: str) -> str:
    return prefix_with_name(name, DST)


def field_expr(path: str) -> pl.Expr:
    """Expression reading a dot-qualified path out of a struct column"""
    column, *fields = path.split(".")
    expr = pl.col(column)
    for name in fields:
        expr = expr.struct.field(name)
    return expr


def nest_as_col(name: str) -> pl.Expr:
    """Nest all columns within a single struct column with the given name"""
    return pl.struct(pl.all()).alias(name)


def nest_vertices(vertices: pl.LazyFrame, name: str) -> pl.LazyFrame:
    return vertices.select(nest_as_col(name))


def nest_edges(edges: pl.LazyFrame, name: str) -> pl.LazyFrame:
    return edges.select(nest_as_col(name))
