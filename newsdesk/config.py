from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    news_api_key: str = ""
    news_api_base: str = "https://newsapi.org/v2"
    page_size: int = Field(20, gt=0)
    templates_dir: Path = PACKAGE_DIR / "templates"
    assets_dir: Path = PACKAGE_DIR / "assets"
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_ignore_empty": True}


@lru_cache
def get_settings() -> Settings:
    return Settings()
