from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    api_base_url: str = "http://localhost:8000"  # marketplace backend, e.g. https://api.dropcars.example
    api_timeout_seconds: float = 10.0
    api_access_token: str | None = None  # bearer token, never logged
    use_in_memory: bool = True

    vendor_id: str = "vendor-1"
    default_car_type: str = "HATCHBACK"
    default_max_time_hours: int = 0
    default_max_time_minutes: int = 10
    recreate_max_time_minutes: int = 30


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
