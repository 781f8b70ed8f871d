from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # App Config
    app_name: str = "FramePromptly"
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = "INFO"
    log_format: str = Field(default="", alias="LOG_FORMAT")

    # Reference data; None means the catalog bundled with the package
    catalog_path: Path | None = None

    # Persistence & invocation backend
    supabase_url: str = Field(default="http://localhost:54321", alias="SUPABASE_URL")
    supabase_anon_key: SecretStr | None = Field(default=None, alias="SUPABASE_ANON_KEY")
    functions_timeout_seconds: float = 30.0
    functions_max_attempts: int = 3

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
