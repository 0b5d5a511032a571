#Pydantic class designed specifically for configuration management.
#automatically reads values from Environment variables
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SECRET_KEY = "your-secret-key-change-this"

#all configuration values needed
class Settings(BaseSettings):
    database_url: str = "sqlite:///./tracking.db"
    secret_key: str = DEFAULT_SECRET_KEY
    algorithm: str = "HS256"
    access_token_expire_days: int = 7
    #bcrypt work factor
    bcrypt_rounds: int = 10
    cors_origins: List[str] = ["http://localhost:5173"]
    environment: str = "development"
    log_level: str = "INFO"

    #Tells Pydantic to load variables from a .env file
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in ("prod", "production")


@lru_cache
def get_settings() -> Settings:
    return Settings()


#This configuration module uses Pydantic Settings to load environment-based configuration, so secrets are not hardcoded and misconfiguration is detected at startup
