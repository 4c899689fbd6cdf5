# framegraph/__init__.py

"""FrameGraph - motif finding over vertex and edge frames"""

# Pattern nodes and parser
from .ast_nodes import (
    AnonymousVertex, NamedVertex, AnonymousEdge, NamedEdge, Negation,
    Pattern, declared_names
)
from .parser import PatternParser, Token, parse_pattern

# Motif compiler and graph
from .naming import ID, SRC, DST, ATTR
from .motif import MotifFinder
from .graph import FrameGraph
from .property_graph import PropertyGraph, Edge

# Configuration, errors and utilities
from .config import FrameGraphConfig, create_test_config, create_production_config
from .exceptions import (
    FrameGraphError, GraphConfigurationError, PatternParseError,
    InvalidPatternError, MotifInvariantError, FrameGraphGraphBLASError
)
from .utils import setup_framegraph_logging, format_plan_summary

# Version info
__version__ = "0.1.0"

__all__ = [
    # Main classes
    "FrameGraph",
    "MotifFinder",
    "PatternParser",
    "PropertyGraph",
    "Edge",

    # Convenience functions
    "parse_pattern",
    "declared_names",
    "format_plan_summary",
    "setup_framegraph_logging",

    # Pattern nodes
    "AnonymousVertex", "NamedVertex", "AnonymousEdge", "NamedEdge", "Negation",
    "Pattern", "Token",

    # Column names
    "ID", "SRC", "DST", "ATTR",

    # Configuration and errors
    "FrameGraphConfig", "create_test_config", "create_production_config",
    "FrameGraphError", "GraphConfigurationError", "PatternParseError",
    "InvalidPatternError", "MotifInvariantError", "FrameGraphGraphBLASError",

    # Version
    "__version__"
]
