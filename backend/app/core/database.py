# MongoDB 연결 / Beanie 초기화
# - 시작 시 ping으로 연결 확인 (tenacity로 지수 백오프 재시도)
# - 연결 실패 시에도 서버는 시작됨. 이후 저장소 호출은 400 store error로 응답

import logging
from typing import Optional

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import settings
from .retry import create_db_retry_decorator
from ..models.user import User

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "api-server"


async def _ping(client: AsyncIOMotorClient) -> None:
    await client.admin.command("ping")


async def init_db(uri: Optional[str] = None) -> Optional[AsyncIOMotorClient]:
    """MongoDB 클라이언트를 만들고 Beanie에 User Document를 등록합니다.

    Returns:
        연결에 성공하면 AsyncIOMotorClient, 끝내 실패하면 None
    """
    uri = uri or settings.MONGODB_URI
    client = None
    ping = create_db_retry_decorator(max_attempts=settings.DB_CONNECT_ATTEMPTS)(_ping)
    try:
        # 잘못된 URI(InvalidURI, ConfigurationError)도 여기서 처리
        client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS, tz_aware=True)
        await ping(client)
        db = client.get_default_database(DEFAULT_DATABASE)
        await init_beanie(database=db, document_models=[User])
    except PyMongoError as e:
        logger.warning(f"[MongoDB] 연결 실패: {e}")
        logger.warning("[MongoDB] 서버는 계속 시작됩니다. 사용자 API 호출은 저장소 오류(400)로 응답합니다.")
        close_db(client)
        return None
    logger.info(f"[MongoDB] API server is connected to MongoDB: {db.name}")
    return client


def close_db(client: Optional[AsyncIOMotorClient]) -> None:
    if client is not None:
        client.close()
        logger.info("[MongoDB] 연결 종료")
