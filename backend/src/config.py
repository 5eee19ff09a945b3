from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List


class Settings(BaseSettings):
    # Application settings
    app_name: str = Field(default="Nihongo Relay API")
    app_version: str = Field(default="0.1.0")
    app_description: str = Field(
        default="Japanese translation relay and kana/romaji script conversion"
    )
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)

    # CORS settings
    allowed_origins: List[str] = Field(default=["*"])

    # DeepL
    deepl_api_key: str = Field(default="")
    deepl_api_url: str = Field(default="")

    # Script conversion
    default_script: str = Field(default="hiragana")
    default_romaji_system: str = Field(default="hepburn")

    # Logging settings
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False)
    log_file_path: str = Field(default="nihongo_relay.log")
    log_max_size_mb: int = Field(default=100)
    log_backup_count: int = Field(default=5)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
