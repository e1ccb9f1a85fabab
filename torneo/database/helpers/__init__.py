"""
The `helpers` package provides utilities that support connection handling.

Contents
--------
- connectionManagement
    Provides tools for sharing an open handle:
        - Context variable (`db_connection_context`) for propagating the active handle across function calls without explicit passing
        - `@with_connection` decorator:
            - Reuses an existing handle if one is active in context
            - Opens a new one from the settings otherwise, and closes it afterwards
"""
