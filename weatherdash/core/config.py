from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    DATABASE_URL: str
    DB_SSL_CA: Optional[str] = None     # ex: "certs/db-ca.pem"

    APP_NAME: str = "IoT Dashboard"
    LOG_LEVEL: str = "INFO"
    CREATE_TABLES_ON_STARTUP: bool = True
    CORS_ORIGINS: List[str] = []

    class Config:
        env_file = ".env"

settings = Settings()
