"""Application settings, read from ``CATALOG_*`` environment variables or ``.env``."""

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CATALOG_", env_file=".env", case_sensitive=False,
    )

    app_name: str = "Catalog API"
    categories_prefix: str = "/categories"

    # Seed data loaded once when the application is built
    categories_seed_file: Path = DATA_DIR / "categories.json"
    products_seed_file: Path = DATA_DIR / "products.json"

    cors_origins: List[str] = ["*"]

    log_level: str = "INFO"
    log_format: str = "json"

    # Return the fault text in 500 responses. Turn off in production.
    expose_error_details: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
