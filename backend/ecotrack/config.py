from pydantic_settings import BaseSettings
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///./ecotrack.db"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8030
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Insights (Gemini)
    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-1.5-flash"
    gemini_api_url: str = "https://generativelanguage.googleapis.com/v1beta/models"
    insight_timeout: float = 30.0

    # Passwords
    bcrypt_rounds: int = 12

    # Seed values applied on first start
    default_units: list[str] = ["Warehouse 6", "Warehouse 7", "Warehouse 20", "Warehouse 21"]
    default_electricity_goal: float = 40.0  # renewable share, %
    default_water_goal: float = 40.0  # m3 per unit per month
    default_waste_goal: float = 90.0  # recycling rate, %
    admin_name: str = "Administrator"
    admin_email: str = "admin@ecotrack.local"
    admin_password: str = "change_me"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
