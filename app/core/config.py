from pydantic_settings import BaseSettings
from typing import List, Optional
import logging

from app.core.prompts import DEFAULT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

class Settings(BaseSettings):
    # Application settings
    APP_NAME: str = "Linkwave Chatbot API"
    APP_VERSION: str = "1.0.0"
    SERVICE_NAME: str = "Linkwave Chatbot API"

    # Server settings
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: str = "*"

    # Completion provider
    CHAT_PROVIDER: str = "openai"
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_API_BASE: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    CHAT_SYSTEM_PROMPT: str = DEFAULT_SYSTEM_PROMPT
    CHAT_TEMPERATURE: float = 0.7
    CHAT_MAX_TOKENS: int = 500
    CHAT_SHORT_MAX_TOKENS: int = 300
    CHAT_TIMEOUT_SECONDS: float = 20.0
    CHAT_HISTORY_LIMIT: int = 10

    # Rate limiting
    CHAT_RATE_LIMIT: int = 30  # requests per window
    CHAT_RATE_WINDOW_SECONDS: int = 900  # 15 minutes
    HEALTH_RATE_LIMIT: int = 120
    HEALTH_RATE_WINDOW_SECONDS: int = 60

    # Logging settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        # Validate critical settings
        self._validate_settings()

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def _validate_settings(self):
        """Validate critical settings"""
        self.CHAT_PROVIDER = (self.CHAT_PROVIDER or "local").lower()
        if self.CHAT_PROVIDER not in ("openai", "local"):
            raise ValueError(f"Unsupported CHAT_PROVIDER: {self.CHAT_PROVIDER}")

        if self.CHAT_PROVIDER == "openai" and not self.OPENAI_API_KEY:
            logger.warning("OPENAI_API_KEY not set, falling back to the local provider")
            self.CHAT_PROVIDER = "local"

        if self.CHAT_SHORT_MAX_TOKENS > self.CHAT_MAX_TOKENS:
            raise ValueError("CHAT_SHORT_MAX_TOKENS must not exceed CHAT_MAX_TOKENS")

# Create settings instance
try:
    settings = Settings()
except Exception as e:
    print(f"Configuration error: {e}")
    # Fallback to basic settings for development
    settings = Settings(CHAT_PROVIDER="local", CHAT_SHORT_MAX_TOKENS=300, CHAT_MAX_TOKENS=500)
