from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    default_locale: str = "en-US"

    image_engine: str = "pillow"
    decoder_engine: str = "opencv"

    download_timeout_seconds: int = 30
    allowed_domains: list[str] = ["feishu.cn"]
    enforce_domain_allowlist: bool = False
