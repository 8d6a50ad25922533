from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, SecretStr
from functools import lru_cache
from typing import Optional
from urllib.parse import quote_plus

class Settings(BaseSettings):
    # API
    app_name: str = Field(
        default="rental-server",
        validation_alias=AliasChoices("APP_NAME"),
    )
    environment: str = Field(default="local", validation_alias=AliasChoices("DEPLOYMENT_ENV"))
    enable_cors: bool = Field(default=True, validation_alias=AliasChoices("ENABLE_CORS"))
    cors_origins: list[str] = Field(
        default=["*"],
        validation_alias=AliasChoices("CORS_ORIGINS"),
        description="Origins allowed by the CORS middleware (JSON list in env).",
    )
    api_host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("API_HOST"))
    api_port: int = Field(default=5000, validation_alias=AliasChoices("PORT", "API_PORT"))

    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))

    # MongoDB. MONGO_URL wins; otherwise the URL is composed from the parts below.
    mongo_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("MONGO_URL"))
    db_user: Optional[str] = Field(default=None, validation_alias=AliasChoices("DB_USER"))
    db_password: Optional[SecretStr] = Field(default=None, validation_alias=AliasChoices("DB_PASS", "DB_PASSWORD"))
    db_host: str = Field(
        default="localhost:27017",
        validation_alias=AliasChoices("DB_HOST"),
        description="Host (and optional port) of the cluster, e.g. 'cluster0.abcde.mongodb.net'.",
    )
    db_name: str = Field(default="rentalDb", validation_alias=AliasChoices("DB_NAME"))

    # ------------------------------------------------------------------
    # Bearer tokens
    # ------------------------------------------------------------------
    access_token_secret: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("ACCESS_TOKEN_SECRET"),
        description="Shared secret used to sign and verify bearer tokens.",
    )
    token_algorithm: str = Field(
        default="HS256",
        validation_alias=AliasChoices("TOKEN_ALGORITHM"),
        description="JWT signing algorithm (symmetric).",
    )
    token_ttl_minutes: int = Field(
        default=60,
        validation_alias=AliasChoices("TOKEN_TTL_MINUTES"),
        description="Lifetime of issued bearer tokens in minutes.",
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    @property
    def mongo_url_resolved(self) -> str:
        """Connection string handed to the motor client.

        With credentials the URL targets an Atlas style ``mongodb+srv`` cluster,
        without them a plain local ``mongodb://`` host.
        """
        if isinstance(self.mongo_url, str) and self.mongo_url.strip():
            return self.mongo_url.strip()
        host = self.db_host.strip().rstrip('/')
        if self.db_user and self.db_password:
            user = quote_plus(self.db_user)
            password = quote_plus(self.db_password.get_secret_value())
            return f"mongodb+srv://{user}:{password}@{host}/?retryWrites=true&w=majority"
        return f"mongodb://{host}/"

@lru_cache
def get_settings():
    return Settings()
