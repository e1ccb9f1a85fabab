"""
The `torneo` package bootstraps the tournament application's database connection.

Contents:
    - database: configuration, connection acquisition and connection-scope helpers
    - main: process entry point that proves connectivity once at startup
"""
