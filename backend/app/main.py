# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB)
# - 라우터 라우팅 (/v1/api)
# - CORS 설정, 개발 환경 요청 로그
# - 사용자 API 예외 -> HTTP 응답 변환

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .core.config import settings
from .core.database import init_db, close_db
from .core.exceptions import UserServiceError, UserValidationError
from .schemas.user_schema import field_errors_from_pydantic
from .api.v1.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 인스턴스 생성
app = FastAPI(
    title="User API",
    description="MongoDB 기반 사용자 CRUD API",
    version=settings.APP_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)

# 개발 환경에서만 요청 로그 (메서드 경로 상태코드 소요시간)
if settings.is_development:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.3f} ms")
        return response


@app.exception_handler(UserServiceError)
async def user_service_error_handler(request: Request, exc: UserServiceError):
    # 응답 전에 항상 로그를 남김
    logger.error(f"{exc.name}: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # 본문이 JSON 객체가 아닌 경우 등. 422 대신 사용자 검증 오류와 같은 400 형태로 응답
    error = UserValidationError(field_errors_from_pydantic(exc.errors(), strip_prefix=("body",)))
    return await user_service_error_handler(request, error)


@app.on_event("startup")
async def app_init():
    app.state.mongo_client = await init_db()


@app.on_event("shutdown")
async def app_shutdown():
    close_db(getattr(app.state, "mongo_client", None))


@app.get("/", response_class=PlainTextResponse)
async def root():
    return f"Hello, API server {settings.APP_VERSION}"

# API가 떠 있으면 healthy이자 ready
@app.get("/health", response_class=PlainTextResponse)
@app.get("/ready", response_class=PlainTextResponse)
async def health_check():
    return "👍"

# API v1 라우터 등록
app.include_router(users_router, prefix="/v1/api")
