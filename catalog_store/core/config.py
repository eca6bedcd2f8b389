"""Catalog Store Configuration"""

from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Catalog Store"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4000
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Storage
    data_dir: Path = Path("data")
    carts_dir: Optional[Path] = None
    products_dir: Optional[Path] = None
    id_generation_attempts: int = 3
    seed_sample_products: bool = False

    # GraphQL
    graphql_path: str = "/graphql"
    graphql_ide: Optional[str] = "graphiql"

    class Config:
        env_prefix = "CATALOG_"
        env_file = "config/.env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def cart_directory(self) -> Path:
        """Directory holding one JSON file per cart"""
        return self.carts_dir or self.data_dir / "carts"

    @property
    def product_directory(self) -> Path:
        """Directory holding one JSON file per product"""
        return self.products_dir or self.data_dir / "products"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
