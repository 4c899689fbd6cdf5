# framegraph/exceptions.py

"""
FrameGraph Exceptions
"""


class FrameGraphError(Exception):
    """Base exception for FrameGraph errors"""
    pass


class GraphConfigurationError(FrameGraphError, ValueError):
    """Vertex/edge frames or configuration values are unusable"""
    pass


class PatternParseError(FrameGraphError):
    """Motif text could not be parsed"""

    def __init__(self, message: str, position: int = -1):
        self.position = position
        if position >= 0:
            message = f"{message} (at position {position})"
        super().__init__(message)


class InvalidPatternError(FrameGraphError):
    """Parsed motif cannot be translated into a join plan"""
    pass


class MotifInvariantError(FrameGraphError):
    """Name bindings became inconsistent while compiling a motif"""
    pass


class FrameGraphGraphBLASError(FrameGraphError):
    """GraphBLAS-related errors"""
    pass
