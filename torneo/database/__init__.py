"""
The `database` package is responsible for opening the application's database connection.

Contents:
    - config:
        Environment-driven settings and the SQLAlchemy URL / Engine construction
        built from them.

    - core:
        Connection data contracts, the single `DatabaseConnectionError` kind, and the
        bootstrap functions that acquire a `ConnectionHandle`.

    - helpers:
        Utilities that share an open handle across function calls and guarantee
        its release.
"""
