# settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Dict, Any, List
import secrets
from urllib.parse import quote_plus

class Settings(BaseSettings):
    # === Server ===
    APP_ENV: str = "production"
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 5000
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # === DB 연결 정보 ===
    # DATABASE_URL 이 있으면 우선, 없으면 DB_USER 기준으로 MySQL URL 조립
    DATABASE_URL: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: str = ""
    DB_HOST: str = "database"
    DB_INTERNAL_PORT: int = 3306
    MANAGER_DB_NAME: str = "social"
    SQLITE_PATH: str = "./social.db"

    # === 엔진 옵션 ===
    DB_ECHO: bool = False
    DB_POOL_PRE_PING: bool = True

    # === JWT ===
    # 비어 있으면 development 에서만 프로세스 단위 임시 키 사용
    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    JWT_EXP_SECONDS: int = 60 * 60 * 24 * 7

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() == "development"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        if self.DB_USER:
            user = quote_plus(self.DB_USER)
            pwd = quote_plus(self.DB_PASSWORD)
            return (
                f"mysql+pymysql://{user}:{pwd}@{self.DB_HOST}:{self.DB_INTERNAL_PORT}/{self.MANAGER_DB_NAME}"
                f"?charset=utf8mb4"
            )
        return f"sqlite:///{self.SQLITE_PATH}"

    def ensure_jwt_secret(self) -> None:
        if self.JWT_SECRET:
            return
        if not self.is_development:
            raise RuntimeError("JWT_SECRET must be set when APP_ENV is not development")
        self.JWT_SECRET = secrets.token_urlsafe(32)

    def engine_kwargs(self) -> Dict[str, Any]:
        # 개발 환경에서는 스키마 동기화 SQL 까지 출력
        return {
            "echo": self.DB_ECHO or self.is_development,
            "pool_pre_ping": self.DB_POOL_PRE_PING,
            "future": True,
        }

settings = Settings()
