# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from pydantic import Field

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/app/core/config.py에 있으므로,
# 4단계 상위(.parent 4번)로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

class Settings(BaseSettings):
    APP_NAME: str = "user-api"
    APP_VERSION: str = "1.0.0"
    # "development"이면 요청 로그(메서드/경로/상태코드/소요시간)를 남깁니다.
    ENV: str = "production"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    MONGODB_URI: str = "mongodb://localhost:27017/api-server"
    # 서버 선택 타임아웃(밀리초). 이 시간 안에 연결하지 못하면 ping이 실패합니다.
    MONGODB_TIMEOUT_MS: int = 5000
    DB_CONNECT_ATTEMPTS: int = Field(default=3, ge=1, description="시작 시 MongoDB ping 최대 시도 횟수")

    CORS_ALLOW_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def is_development(self) -> bool:
        return self.ENV.lower() == "development"

    @property
    def cors_origins(self) -> list:
        origins = [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

settings = Settings()
