"""Errors raised by the connection bootstrap."""


class DatabaseConnectionError(Exception):
    """
    The database could not be reached, authenticated against, or opened.

    Unreachable hosts, rejected credentials, unknown databases and unknown,
    malformed or uninstalled drivers all collapse into this one error. `message` holds the underlying
    driver diagnostic; the original exception is chained as `__cause__`.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
