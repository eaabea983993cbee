__all__ = ["InvalidParameterError", "InvalidArgumentError", "INVALID_PARAMETERS"]

INVALID_PARAMETERS = "Invalid parameterization for the distribution."


class InvalidParameterError(ValueError):
    """Raised when a distribution is given an inconsistent set of parameters."""

    def __init__(self, message: str = INVALID_PARAMETERS):
        super().__init__(message)


class InvalidArgumentError(TypeError):
    """Raised when a required argument is missing."""
