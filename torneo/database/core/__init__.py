"""
The `core` package acquires and describes database connections.

Contents
--------
- models
    `ConnectionConfig` (frozen parameters), `ConnectionHandle` (owned open session)
    and `ConnectionResult` (outcome of one attempt).
- errors
    `DatabaseConnectionError`, the only failure kind.
- bootstrap
    `open_connection`, `acquire_connection` and the `connect` context manager.
"""
