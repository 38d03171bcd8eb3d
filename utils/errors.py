"""Error types for the CTS Listing Pages service."""


class APIInternalException(Exception):
    """
    Generic internal error raised to callers of the query service.

    The message is deliberately generic; the underlying cause is available
    through ``__cause__`` and is logged where the error is raised.
    """

    def __init__(self, message: str = "errors occured"):
        super().__init__(message)
        self.message = message
