"""
Database Connection Management
==============================

This module provides utilities for sharing one `ConnectionHandle` across
function calls using a Python context variable and a decorator-based
wrapper.

It allows a handle to be propagated through nested calls without explicitly
threading it through arguments. Functions decorated with ``@with_connection``
run with a handle that is guaranteed to be released when the outermost call
returns or raises.

Key features
~~~~~~~~~~~~
- Context variable to store the active handle
- Implicit reuse of an existing handle
- Handle opened from the application settings when none is active
- Clean release after execution, on every exit path
"""

from functools import wraps
import contextvars
from torneo.database.config.config import settings
from torneo.database.core.bootstrap import open_connection

# --------------------------------------------------------------------
# Context variable to store the current connection handle.
# --------------------------------------------------------------------
db_connection_context = contextvars.ContextVar("db_connection_context", default=None)
"""Context variable storing the active ConnectionHandle."""


def with_connection(func):
    """
    Decorator that runs a function with an open `ConnectionHandle`.

    Ensures that:
    - If a handle already exists in context, it is reused and left open.
    - Otherwise, a new handle is opened from the settings, and closed
      once the function finishes.
    - Connection failures propagate as `DatabaseConnectionError`.

    Parameters
    ----------
    func : callable
        The function to wrap. It must accept a `connection` keyword argument.

    Returns
    -------
    callable
        The wrapped function, executed with an open handle.

    Example
    -------
    >>> @with_connection
    ... def server_version(connection=None):
    ...     return connection.execute("SELECT VERSION()").scalar()
    """
    @wraps(func)
    def wrap_func(*args, **kwargs):
        handle = db_connection_context.get()
        if handle is not None:
            return func(*args, connection=handle, **kwargs)

        handle = open_connection(settings.connection_config())
        token = db_connection_context.set(handle)
        try:
            return func(*args, connection=handle, **kwargs)
        finally:
            handle.close()
            db_connection_context.reset(token)

    return wrap_func
