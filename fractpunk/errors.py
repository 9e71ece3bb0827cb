"""
Failure types. `recoverable` tells the pipeline whether a fallback makes sense.
"""


class FractpunkError(Exception):
    """Base for every failure raised by the image pipeline."""
    recoverable = False


class OracleError(FractpunkError):
    """Phrase could not be fetched or extracted (network, bad JSON, wrong shape)."""
    recoverable = True

    def __init__(self, message: str, body: str | None = None):
        super().__init__(message)
        self.body = body


class ImageWriteError(FractpunkError):
    """PNG could not be created or encoded."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path
