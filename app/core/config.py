from typing import List, Optional
from urllib.parse import quote_plus

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: str = "development"
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Banco de dados: DATABASE_URL tem prioridade sobre as partes DB_*
    DATABASE_URL: Optional[str] = None
    DB_DIALECT: str = "mysql+pymysql"
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_NAME: str = "ambassadeur"
    DB_USER: str = "root"
    DB_PASSWORD: str = ""

    CORS_ORIGINS: str = "http://localhost:5173"

    # Assistente de chat
    CHAT_API_KEY: Optional[str] = None
    CHAT_API_URL: str = "https://api.clarifai.com/v2/ext/openai/v1/chat/completions"
    CHAT_MODEL: str = "https://clarifai.com/openai/chat-completion/models/gpt-oss-120b"
    CHAT_TEMPERATURE: float = 0.7
    CHAT_TIMEOUT_SECONDS: float = 60
    CHAT_CONTEXT_MESSAGES: int = 20
    CHAT_MAX_STORED_MESSAGES: int = 100
    CHAT_SESSION_MAX: int = 1000
    CHAT_SESSION_TTL_SECONDS: int = 3600

    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_PER_MINUTE: int = 60

    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"{self.DB_DIALECT}://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def cors_origins_list(self) -> List[str]:
        """Transforma CORS_ORIGINS em lista"""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

settings = Settings()
