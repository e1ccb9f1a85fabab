"""
Connection Engine (SQLAlchemy)

Purpose
-------
Turns a `ConnectionConfig` into SQLAlchemy objects:
- Builds the connection URL with `URL.create(...)`.
- Creates a dedicated Engine for one acquisition.

Notes
-----
- `URL.create(...)` escapes credentials, so passwords with special characters
  need no manual quoting.
- Empty host and username become `None` so file-backed dialects (SQLite)
  accept the URL. The password is passed through unchanged, including `""`.
- No engine is shared at module level: every acquisition owns its Engine and
  disposes of it when the handle is closed.
"""


from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from torneo.database.core.models import ConnectionConfig


def build_connection_url(config: ConnectionConfig) -> URL:
    """
    Construct the SQLAlchemy connection URL for `config`.

    Parameters
    ----------
    config : ConnectionConfig
        Connection parameters.

    Returns
    -------
    URL
        e.g. ``mysql+pymysql://c2142086_torneo:@localhost/c2142086_torneo``
    """
    return URL.create(
        drivername=config.driver_name,    # e.g., "mysql+pymysql", "postgresql", "sqlite"
        username=config.username or None,
        password=config.password,
        host=config.host or None,
        port=config.port,
        database=config.database_name,
    )


def create_connection_engine(config: ConnectionConfig) -> Engine:
    """
    Create the Engine for `config`.

    Raises
    ------
    sqlalchemy.exc.ArgumentError
        If the driver name is unknown or the URL is not valid for the dialect.
    """
    return create_engine(build_connection_url(config))
