"""Runtime settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TEXTVEIL_", extra="ignore")

    app_name: str = "textveil"
    log_level: str = "info"
    # stderr only unless enabled; the file handler needs a writable logs/ directory
    log_to_file: bool = False
    log_file_path: str = "logs/textveil.log"
    # masked plaintext excerpts are only written at DEBUG
    log_excerpt_max_len: int = Field(default=64, ge=8)

    default_scheme: str = "multiplicative"  # multiplicative | substitution | a | b
    # 0xFFFF restricts input to the BMP (16-bit code units)
    max_code_point: int = Field(default=0x10FFFF, ge=0, le=0x10FFFF)


settings = Settings()
