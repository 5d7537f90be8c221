from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    # App Info
    app_name: str = "Mercado Fresh API"
    version: str = "1.0.0"
    debug: bool = False

    # Database
    database_url: str = "sqlite:///./mercado_fresh.db"
    create_tables: bool = True

    # Logging
    log_level: str = "INFO"

    # CORS
    allowed_origins: List[str] = ["http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

settings = Settings()
