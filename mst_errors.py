"""
Exceptions shared by the MST benchmark modules
"""


class MSTError(Exception):
    """Base class for every error raised by the benchmark"""


class ConfigurationError(MSTError, ValueError):
    """Invalid run parameters (rejected before any graph is built)"""


class InvariantViolation(MSTError, RuntimeError):
    """An internal precondition of the graph algorithms does not hold"""


class DisconnectedGraphError(InvariantViolation):
    """The graph does not span all of its vertices"""


class VertexError(InvariantViolation):
    """An edge lookup referenced a vertex the edge does not touch"""
