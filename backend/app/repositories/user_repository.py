# 사용자 저장소 레이어
# - 데이터 접근(생성/전체조회/단건조회/교체/삭제)만 담당 (서비스 로직 분리)
# - 잘못된 id 형식이나 드라이버 오류는 UserStoreError로 변환

import functools
import logging
from typing import List, Optional

from beanie import PydanticObjectId
from beanie.exceptions import CollectionWasNotInitialized, DocumentNotFound
from bson import ObjectId
from pymongo.errors import PyMongoError

from ..core.exceptions import UserStoreError
from ..models.user import User
from ..schemas.user_schema import UserCreate, UserOut

logger = logging.getLogger(__name__)


def _object_id(user_id: str) -> PydanticObjectId:
    if not ObjectId.is_valid(user_id):
        raise UserStoreError(f'Cast to ObjectId failed for value "{user_id}" at path "_id"', name="CastError")
    return PydanticObjectId(user_id)


def _store_errors(func):
    # 드라이버 예외를 그대로 밖으로 내보내지 않음
    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        try:
            # init_beanie 전(DB 연결 실패)이면 CollectionWasNotInitialized
            User.get_motor_collection()
            return await func(*args, **kwargs)
        except (PyMongoError, CollectionWasNotInitialized) as e:
            logger.error(f"[UserRepository] {func.__name__} failed: {e}")
            raise UserStoreError.from_exception(e) from e
    return wrapper


class UserRepository:
    @_store_errors
    async def create(self, data: UserCreate) -> UserOut:
        # createdAt이 없으면 기본값(현재 시각, 밀리초 단위)
        user = User(**data.model_dump(exclude_none=True))
        await user.insert()
        return user.to_out()

    @_store_errors
    async def list_all(self) -> List[UserOut]:
        users = await User.find_all().to_list()
        return [u.to_out() for u in users]

    @_store_errors
    async def get_by_id(self, user_id: str) -> Optional[UserOut]:
        user = await User.get(_object_id(user_id))
        return user.to_out() if user else None

    @_store_errors
    async def replace_by_id(self, user_id: str, data: UserCreate) -> Optional[UserOut]:
        oid = _object_id(user_id)
        existing = await User.get(oid)
        if existing is None:
            return None
        # 전체 교체. createdAt이 없으면 기존 생성일 유지
        user = User(
            id=oid,
            name=data.name,
            email=data.email,
            phone=data.phone,
            created_at=data.created_at or existing.created_at,
        )
        try:
            await user.replace()
        except DocumentNotFound:
            # 조회와 교체 사이에 삭제된 경우
            return None
        return user.to_out()

    @_store_errors
    async def delete_by_id(self, user_id: str) -> None:
        await User.find({"_id": _object_id(user_id)}).delete()
