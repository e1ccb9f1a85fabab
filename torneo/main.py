"""
Process bootstrap: \n
- Configures logging from `settings.LOG_LEVEL` \n
- Acquires one database connection from the settings, then releases it \n

Environment contract (from `settings`): \n
- DB_DRIVER_NAME, DB_HOST, DB_PORT, DB_DATABASE_NAME, DB_USERNAME, DB_PASSWORD \n
- LOG_LEVEL: root logging level (default INFO). \n

Exit code is 0 when the connection was acquired and 1 otherwise.
"""

import logging
import sys
from torneo.database.config.config import settings
from torneo.database.core.bootstrap import acquire_connection

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send root log records to stderr at `level` (e.g. `"INFO"`)."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> int:
    """
    Run the startup connection check.

    Returns
    -------
    int
        Process exit code.
    """
    configure_logging(settings.LOG_LEVEL)

    result = acquire_connection(settings.connection_config())
    if not result.ok:
        return 1

    with result.handle:
        logger.info("Database connection verified.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
