# 테스트 공용 픽스처
# - MongoDB 없이 라우터를 검증하기 위해 UserRepository를 메모리 저장소로 교체

from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.main import app
from app.repositories.user_repository import UserRepository, _object_id
from app.schemas.user_schema import UserCreate, UserOut


class InMemoryUserRepository:
    def __init__(self):
        self.users: Dict[str, UserOut] = {}

    async def create(self, data: UserCreate) -> UserOut:
        user_id = str(ObjectId())
        user = UserOut(
            id=user_id,
            name=data.name,
            email=data.email,
            phone=data.phone,
            created_at=data.created_at or datetime.now(tz=timezone.utc),
        )
        self.users[user_id] = user
        return user

    async def list_all(self) -> List[UserOut]:
        return list(self.users.values())

    async def get_by_id(self, user_id: str) -> Optional[UserOut]:
        _object_id(user_id)
        return self.users.get(user_id)

    async def replace_by_id(self, user_id: str, data: UserCreate) -> Optional[UserOut]:
        _object_id(user_id)
        existing = self.users.get(user_id)
        if existing is None:
            return None
        user = UserOut(
            id=user_id,
            name=data.name,
            email=data.email,
            phone=data.phone,
            created_at=data.created_at or existing.created_at,
        )
        self.users[user_id] = user
        return user

    async def delete_by_id(self, user_id: str) -> None:
        _object_id(user_id)
        self.users.pop(user_id, None)


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def client(repo):
    # with 블록 없이 생성하므로 startup(MongoDB 연결)은 실행되지 않음
    app.dependency_overrides[UserRepository] = lambda: repo
    yield TestClient(app)
    app.dependency_overrides.clear()
