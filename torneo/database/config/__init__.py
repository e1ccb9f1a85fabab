"""
The `config` package provides two building blocks for establishing database connections.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: Database layer - builds a SQLAlchemy connection URL from a ConnectionConfig and creates the Engine for one acquisition
"""
