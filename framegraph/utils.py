# framegraph/utils.py

"""
FrameGraph Utilities
"""

import time
import logging
from functools import wraps
from typing import List

from .ast_nodes import AnonymousEdge, NamedEdge, Negation, Pattern, declared_names

# Operations slower than this (seconds) are logged when no config says otherwise
SLOW_OPERATION_THRESHOLD = 1.0


def framegraph_measure_time(func):
    """Decorator to measure execution time for FrameGraph operations"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        config = getattr(args[0], 'config', None) if args else None
        threshold = getattr(config, 'SLOW_OPERATION_THRESHOLD', SLOW_OPERATION_THRESHOLD)
        if execution_time > threshold:
            logging.getLogger(func.__module__).warning(
                f"Slow operation: {describe_call(func, args)} took {format_execution_time(execution_time)}"
            )

        return result
    return wrapper


def describe_call(func, args) -> str:
    """Name of a timed call, with the motif text when one was passed"""
    if len(args) > 1 and isinstance(args[1], str):
        return f"{func.__name__}({args[1]!r})"
    return func.__name__


def setup_framegraph_logging(level: str = "INFO"):
    """Setup logging for FrameGraph"""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - FrameGraph - %(name)s - %(levelname)s - %(message)s'
    )

    logging.getLogger('framegraph').setLevel(level.upper())

    # Suppress noisy third-party loggers
    logging.getLogger('polars').setLevel(logging.WARNING)
    logging.getLogger('graphblas').setLevel(logging.WARNING)


def format_execution_time(seconds: float) -> str:
    """Render a duration for slow-operation warnings: ms below a second, then s, then m s"""
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    minutes, seconds = divmod(seconds, 60)
    if not minutes:
        return f"{seconds:.2f}s"
    return f"{int(minutes)}m {seconds:.2f}s"


def format_plan_summary(patterns: List[Pattern]) -> str:
    """Generate a human-readable summary of a parsed motif"""

    edges = [p for p in patterns if isinstance(p, (AnonymousEdge, NamedEdge))]
    negations = [p for p in patterns if isinstance(p, Negation)]

    summary = f"""
Motif Summary:
==============
Patterns: {'; '.join(str(p) for p in patterns)}
Columns: {', '.join(declared_names(patterns))}
Edges: {len(edges)}
Negations: {len(negations)}
"""

    return summary.strip()
