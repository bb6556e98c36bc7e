from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    env: str = Field(default="local")
    log_level: str = Field(default="INFO")
    log_format: str = Field(
        default="json",
        description="Renderer for structured logs: json or console",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MONTHCALC_",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
