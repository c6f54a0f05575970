"""
config/settings.py

- .env에 정의한 환경변수를 읽어 애플리케이션 전역 설정으로 제공합니다.
- pydantic v2 / pydantic-settings v2 사용.
- 저장소 연결 문자열은 DATABASE_URL 하나만 인식합니다.
  (로컬: sqlite:///./attendance.db, 컨테이너: mysql+pymysql://...)
"""

from functools import lru_cache
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # =========================
    # 앱/런타임
    # =========================
    ENV: Literal["dev", "stage", "prod"] = "dev"
    APP_TITLE: str = "Attendance Tracker API"
    APP_DESCRIPTION: str = "출석 기록 조회/등록 백엔드 API"
    APP_VERSION: str = "1.0.0"
    PORT: int = 5000

    # =========================
    # CORS
    # =========================
    # 콤마(,)로 구분된 문자열 → cors_origins 에서 List[str] 로 파싱
    CORS_ORIGINS: str = "http://localhost:3000"

    @property
    def cors_origins(self) -> List[str]:
        # "a,b , c" → ["a","b","c"]
        return [s.strip() for s in self.CORS_ORIGINS.split(",") if s.strip()]

    # =========================
    # Record Store
    # =========================
    DATABASE_URL: str = "sqlite:///./attendance.db"

    # =========================
    # Logging
    # =========================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # =========================
    # BaseSettings Config
    # =========================
    model_config = SettingsConfigDict(
        env_file=".env",               # .env에서 값 로드
        env_file_encoding="utf-8",
        case_sensitive=False,          # 환경변수 대소문자 비구분
        extra="ignore",                # 정의되지 않은 키는 무시
    )


@lru_cache
def get_settings() -> Settings:
    """프로세스 전체에서 한 번만 읽어 재사용"""
    return Settings()
