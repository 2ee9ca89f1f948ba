from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    OPENROUTER_API_KEY: Optional[str] = None
    OPENROUTER_MODEL: str = "openai/gpt-4o-mini"
    OPENROUTER_BASE_URL: str = "https://openrouter.ai/api/v1"

    APP_REFERER: str = "https://veritrace.app"
    APP_TITLE: str = "Veritrace"

    REMOTE_TIMEOUT_SECONDS: float = 30.0

    ANALYSIS_CACHE_ENABLED: bool = True
    ANALYSIS_CACHE_TTL_SECONDS: int = 3600

    LOG_LEVEL: str = "INFO"

    @property
    def OPENROUTER_ENDPOINT(self) -> str:
        return f"{self.OPENROUTER_BASE_URL.rstrip('/')}/chat/completions"

settings = Settings()
