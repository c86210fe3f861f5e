from pydantic_settings import BaseSettings

from app.services.bookmark_cookie import DEFAULT_MAX_AGE_SECONDS


class GlobalConfig(BaseSettings):
    # Signing (HMAC-SHA256 키, 비어 있으면 요청 거부)
    app_secret: str = ""

    # Bookmark cookie
    cookie_max_age: int = DEFAULT_MAX_AGE_SECONDS
    toggle_rate_limit: str = "30/minute"

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # Error reporting
    sentry_dsn: str = ""
    environment: str = "development"

    @property
    def secret_configured(self) -> bool:
        return bool(self.app_secret)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


# Single instance: app.state.settings and the /toggle rate limit both read this
settings = GlobalConfig()
