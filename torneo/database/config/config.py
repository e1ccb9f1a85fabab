"""
Torneo database settings
========================

The six `DB_*` variables describe where the Torneo database lives and who
connects to it; `LOG_LEVEL` tunes the startup check. `Settings` reads them
from the process environment first and falls back to a `.env` file in the
working directory. Variables the class does not declare are skipped.

With nothing set, the defaults point at the tournament site's own MySQL
server: `localhost`, database and user `c2142086_torneo`, empty password.

Usage
-----
from torneo.database.config.config import settings

config = settings.connection_config()

Security
--------
- Never commit secrets or the `.env` file to source control.
- The empty default password is kept for compatibility only; set `DB_PASSWORD`
  in any real deployment.
"""


from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from torneo.database.core.models import ConnectionConfig

class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_DRIVER_NAME: str = Field("mysql+pymysql", description="SQLAlchemy driver name (e.g., `mysql+pymysql`, `postgresql`, `sqlite`).")
    DB_HOST: str = Field("localhost", description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server. Driver default when unset.")
    DB_DATABASE_NAME: str = Field("c2142086_torneo", description="Name of the application’s database.")
    DB_USERNAME: str = Field("c2142086_torneo", description="Database username credential.")
    DB_PASSWORD: str = Field("", description="Database password credential. Empty is accepted as-is.")
    LOG_LEVEL: str = Field("INFO", description="Root logging level used by the bootstrap entry point.")

    def connection_config(self) -> ConnectionConfig:
        """
        Snapshot the database fields into an immutable `ConnectionConfig`.

        Returns
        -------
        ConnectionConfig
            Frozen connection parameters; later changes to the settings
            object do not affect it.
        """
        return ConnectionConfig(
            driver_name=self.DB_DRIVER_NAME,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database_name=self.DB_DATABASE_NAME,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
        )

# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""
