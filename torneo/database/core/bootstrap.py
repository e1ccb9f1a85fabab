"""
Connection Bootstrap
====================

Acquires one configured connection handle or reports why it could not.

Entry points
~~~~~~~~~~~~
- ``open_connection``: single attempt, raises `DatabaseConnectionError`.
- ``acquire_connection``: single attempt, never raises for connection
  failures; prints ``Connection failed: <reason>`` and returns a failed
  `ConnectionResult` instead.
- ``connect``: context manager that opens a handle and always closes it.

There is no retry, backoff or alternate host. The attempt blocks the calling
thread until the driver returns; the driver's own default timeout applies.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from torneo.database.config.config import settings
from torneo.database.config.connection_engine import create_connection_engine
from torneo.database.core.errors import DatabaseConnectionError
from torneo.database.core.models import ConnectionConfig, ConnectionHandle, ConnectionResult

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Connection failed: "


def _diagnostic(exc: SQLAlchemyError) -> str:
    # DBAPI errors wrap the driver exception; its text is the useful part.
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def open_connection(config: ConnectionConfig) -> ConnectionHandle:
    """
    Open a session described by `config`.

    Parameters
    ----------
    config : ConnectionConfig
        Connection parameters. Not validated and not modified.

    Returns
    -------
    ConnectionHandle
        A new handle owned by the caller, who must close it.

    Raises
    ------
    DatabaseConnectionError
        If the driver is unknown, malformed or not installed, the host is
        unreachable, authentication fails or the database does not exist.
    """
    engine = None
    try:
        engine = create_connection_engine(config)
        logger.debug("Connecting to %s", engine.url.render_as_string(hide_password=True))
        connection = engine.connect()
    except SQLAlchemyError as e:
        if engine is not None:
            engine.dispose()
        raise DatabaseConnectionError(_diagnostic(e)) from e
    except (ImportError, ValueError) as e:
        # DBAPI module not installed, or a driver name SQLAlchemy cannot parse.
        if engine is not None:
            engine.dispose()
        raise DatabaseConnectionError(str(e)) from e

    logger.info("Connected to %s", engine.url.render_as_string(hide_password=True))
    return ConnectionHandle(engine, connection)


def acquire_connection(config: ConnectionConfig) -> ConnectionResult:
    """
    Try once to open a session and report the outcome as a result value.

    On failure exactly one line, ``Connection failed: <reason>``, is written
    to standard output and the failure is returned rather than raised, so the
    caller decides whether to abort, retry or degrade.

    Parameters
    ----------
    config : ConnectionConfig
        Connection parameters.

    Returns
    -------
    ConnectionResult
        `handle` set on success, `error` set on failure.

    Example
    -------
    >>> result = acquire_connection(settings.connection_config())
    >>> if result.ok:
    ...     with result.handle as handle:
    ...         ...
    """
    try:
        handle = open_connection(config)
    except DatabaseConnectionError as e:
        print(f"{FAILURE_PREFIX}{e.message}")
        logger.warning("Could not connect to database %r on %r: %s", config.database_name, config.host, e.message)
        return ConnectionResult(error=e)
    return ConnectionResult(handle=handle)


@contextmanager
def connect(config: Optional[ConnectionConfig] = None) -> Iterator[ConnectionHandle]:
    """
    Open a handle for the duration of a ``with`` block.

    Parameters
    ----------
    config : ConnectionConfig, optional
        Connection parameters; defaults to the application settings.

    Raises
    ------
    DatabaseConnectionError
        If the connection cannot be opened.
    """
    if config is None:
        config = settings.connection_config()

    handle = open_connection(config)
    try:
        yield handle
    finally:
        handle.close()
