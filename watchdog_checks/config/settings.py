from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, SecretStr, PostgresDsn

ENV_FILE_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


class DatabaseSettings(BaseModel):
        """Stores all environment variables related to connecting to the database."""
        USER: str = "postgres"
        PASS: SecretStr
        HOST: str = "localhost"
        PORT: int = 5432
        NAME: str = "watchdog-checks"

        # Create missing tables on startup (no migrations tool yet)
        CREATE_TABLES: bool = False

        @property
        def DATABASE_URL(self) -> str:
            return str(PostgresDsn.build(
                scheme="postgresql+asyncpg",
                username=self.USER,
                password=self.PASS.get_secret_value(),
                host=self.HOST,
                port=self.PORT,
                path=self.NAME
            ))


class PaginationSettings(BaseModel):
        """Limits applied to check history queries."""
        DEFAULT_ROWS_PER_PAGE: int = 25
        MAX_ROWS_PER_PAGE: int = 100
        # Upper bound when the client asks for no pagination window at all
        MAX_UNPAGED_ROWS: int = 1000


class Settings(BaseSettings):
        """
        The main class aggregator, which is the sole source of configuration for the entire application.
        Pydantic automatically loads and validates settings at startup.
        """

        model_config = SettingsConfigDict(
            env_file=ENV_FILE_PATH,
            env_file_encoding="utf-8",
            extra="ignore",
            case_sensitive=False,
            env_nested_delimiter="__",
        )

        debug_mode: bool = False
        log_level: str = "INFO"

        db: DatabaseSettings
        pagination: PaginationSettings = PaginationSettings()


settings = Settings()
