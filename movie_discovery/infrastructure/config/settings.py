from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    TMDB_API_KEY: str
    TMDB_API_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p/w500"

    APPWRITE_ENDPOINT: str = "https://nyc.cloud.appwrite.io/v1"
    APPWRITE_PROJECT_ID: str = ""
    APPWRITE_DATABASE_ID: str = ""
    APPWRITE_COLLECTION_ID: str = ""
    APPWRITE_API_KEY: Optional[str] = None

    TREND_STORE_BACKEND: Literal["appwrite", "memory"] = "appwrite"


class SearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="SEARCH_", extra="ignore"
    )

    debounce_seconds: float = 0.5
    trending_limit: int = 5
