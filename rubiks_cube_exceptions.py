class RubiksCubeError(Exception):
    pass


class ConfigurationError(RubiksCubeError, ValueError):
    """Raised when a cube, a move or a strategy is set up with invalid values."""


class InvalidIndexError(ConfigurationError, IndexError):
    """Raised when a row, column or lateral column index is outside [0, dim)."""


class NoSolutionError(RubiksCubeError):
    def __init__(self, reason: str) -> None:
        """
        Raised when a resolution strategy meets a cube state it cannot handle
        :param reason: Short human-readable diagnostic
        """
        super().__init__(reason)
        self.reason = reason


class SolverTimeoutError(RubiksCubeError, TimeoutError):
    def __init__(self, max_iterations: int) -> None:
        super().__init__("Iteration budget of {0} exhausted".format(max_iterations))
        self.max_iterations = max_iterations
