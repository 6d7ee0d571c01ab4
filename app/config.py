from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    app_name: str = "Student CRUD API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server settings
    host: str = "0.0.0.0"
    port: int = 3000
    docs_url: str = "/api-docs"

    # Logging settings
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Registry settings
    first_id: int = 1
    delete_reports_missing: bool = False

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
