"""Project-wide exception types."""


class ShapeSamplerError(Exception):
    """Base exception for all sampling engine errors."""


class ConfigError(ShapeSamplerError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when a distribution or run parameter is outside its valid range."""


class ConfigConflictError(ConfigError):
    """Raised when incompatible configuration options are provided."""


class DomainError(ShapeSamplerError):
    """Raised when a uniform draw hits a transform singularity; retried internally."""


class InternalError(ShapeSamplerError):
    """Raised for unrecoverable defects (exhausted retries, broken uniform source)."""


class RootFindError(InternalError):
    """Raised when the bounded raised-cosine inversion does not converge."""

    def __init__(self, message: str, iterations: int) -> None:
        super().__init__(message)
        self.iterations = iterations


class VerificationError(ShapeSamplerError):
    """Raised when a statistical verifier is asked for an impossible layout."""


class DependencyError(ShapeSamplerError):
    """Raised when an unknown distribution or component is requested."""
