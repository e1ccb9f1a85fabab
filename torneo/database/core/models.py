"""
Connection data contracts.

`ConnectionConfig` is the immutable set of parameters needed to open a
session, `ConnectionHandle` is an open session owned by whoever acquired it,
and `ConnectionResult` reports the outcome of one acquisition attempt.
"""

from typing import Any, Mapping, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator
from sqlalchemy import text
from sqlalchemy.engine import Connection, CursorResult, Engine
from torneo.database.core.errors import DatabaseConnectionError


class ConnectionConfig(BaseModel):
    """
    Static parameters needed to open a `ConnectionHandle`.

    No validation is performed on field contents: an empty password, host or
    username is attempted as given.
    """
    model_config = ConfigDict(frozen=True)

    driver_name: str = Field(..., description="SQLAlchemy driver name; together with `host` it identifies the engine.", examples=["mysql+pymysql"])
    host: str = Field("", description="Hostname or IP of the database server. Empty for file-backed engines.", examples=["localhost"])
    port: Optional[int] = Field(None, description="Server port, or None for the driver default.")
    database_name: str = Field(..., description="Name of the database (or file path for SQLite).", examples=["c2142086_torneo"])
    username: str = Field("", description="Database username credential.")
    password: str = Field("", repr=False, description="Database password credential.")


class ConnectionHandle:
    """
    An open database session.

    The handle owns both the SQLAlchemy `Connection` and the `Engine` that
    produced it; `close()` releases both. Use it as a context manager to
    guarantee release on every exit path.

    Statements run through `execute` raise on failure (SQLAlchemy's
    `DBAPIError` hierarchy); nothing is reported through return codes.
    """

    def __init__(self, engine: Engine, connection: Connection):
        self._engine = engine
        self._connection = connection

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def connection(self) -> Connection:
        return self._connection

    @property
    def closed(self) -> bool:
        return self._connection.closed

    def execute(self, statement, parameters: Optional[Mapping[str, Any]] = None) -> CursorResult:
        """
        Execute a statement on the underlying connection.

        Parameters
        ----------
        statement : str | sqlalchemy.sql.Executable
            Plain strings are wrapped with `sqlalchemy.text`.
        parameters : Mapping[str, Any], optional
            Bound parameters for the statement.

        Returns
        -------
        CursorResult
            The SQLAlchemy result of the execution.
        """
        if isinstance(statement, str):
            statement = text(statement)
        return self._connection.execute(statement, parameters)

    def close(self) -> None:
        """Close the connection and dispose of its engine. Safe to call twice."""
        if not self._connection.closed:
            self._connection.close()
        self._engine.dispose()

    def __enter__(self) -> "ConnectionHandle":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<ConnectionHandle {self._engine.url!r} ({state})>"


class ConnectionResult(BaseModel):
    """
    Outcome of a single acquisition attempt: exactly one of `handle` or
    `error` is set.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    handle: Optional[ConnectionHandle] = None
    """The acquired handle when the attempt succeeded."""
    error: Optional[DatabaseConnectionError] = None
    """The failure when the attempt did not succeed."""

    @model_validator(mode="after")
    def _exactly_one(self) -> "ConnectionResult":
        if (self.handle is None) == (self.error is None):
            raise ValueError("ConnectionResult needs exactly one of `handle` or `error`.")
        return self

    @property
    def ok(self) -> bool:
        return self.handle is not None

    def unwrap(self) -> ConnectionHandle:
        """Return the handle, or raise the stored `DatabaseConnectionError`."""
        if self.error is not None:
            raise self.error
        return self.handle
