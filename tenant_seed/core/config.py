from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Database (the tenant schema itself comes from the command line)
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = ""
    db_pool_size: int = 5

    # Directory holding medicines.json, patients.json, ... (defaults to the packaged data)
    seed_data_dir: str | None = None

    log_level: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def database_url(self, schema_name: str) -> URL:
        """
        SQLAlchemy URL pointing at one tenant schema.
        """
        return URL.create(
            "mysql+pymysql",
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=schema_name,
            query={"charset": "utf8mb4"},
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Cached settings instance so the .env is parsed once.
    """
    return Settings()
