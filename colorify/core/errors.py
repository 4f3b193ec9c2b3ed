"""Error taxonomy for palette matching."""

from typing import Optional


class ColorifyError(Exception):
    """Base class for all matcher errors."""


class InitializationError(ColorifyError):
    """The matcher could not be constructed. Fatal to the process."""


class ModelUnavailable(InitializationError):
    """Neither the primary nor the fallback embedding model could be loaded."""

    def __init__(self, message: str, primary_error: Optional[BaseException] = None,
                 fallback_error: Optional[BaseException] = None):
        super().__init__(message)
        self.primary_error = primary_error
        self.fallback_error = fallback_error


class InferenceError(ColorifyError):
    """An embed call failed."""


class QueryError(InferenceError):
    """A single palette query failed. The matcher stays usable."""
