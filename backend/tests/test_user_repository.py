# 저장소 레이어 테스트 (mongomock_motor + 실제 Beanie 초기화)
import asyncio
import uuid
from datetime import datetime, timezone

import pytest
from beanie import init_beanie
from bson import ObjectId
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.core.exceptions import UserStoreError
from app.main import app
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.user_schema import UserCreate


def _run(scenario):
    # 테스트마다 새 DB에 Beanie를 초기화한 뒤 같은 이벤트 루프에서 시나리오 실행
    async def _main():
        client = AsyncMongoMockClient()
        await init_beanie(database=client[f"users-{uuid.uuid4().hex}"], document_models=[User])
        return await scenario(UserRepository())
    return asyncio.run(_main())

def _payload(**fields):
    return UserCreate(**{"name": "Jane Doe", "email": "jane@doe.com", **fields})

def test_create_then_get_returns_same_record():
    async def scenario(repo):
        created = await repo.create(_payload(phone="019183434344"))
        return created, await repo.get_by_id(created.id)
    created, got = _run(scenario)
    assert got == created
    assert ObjectId.is_valid(created.id)
    assert created.created_at.tzinfo is not None
    assert created.created_at.microsecond % 1000 == 0

def test_create_keeps_supplied_created_at():
    supplied = datetime(2019, 3, 18, 5, 15, 49, 715123, tzinfo=timezone.utc)
    async def scenario(repo):
        created = await repo.create(_payload(created_at=supplied))
        return created, await repo.get_by_id(created.id)
    created, got = _run(scenario)
    assert created.created_at == datetime(2019, 3, 18, 5, 15, 49, 715000, tzinfo=timezone.utc)
    assert got == created

def test_list_all():
    async def scenario(repo):
        await repo.create(_payload())
        await repo.create(_payload(name="Jhon Doe", email="jhon@doe.com"))
        return await repo.list_all()
    users = _run(scenario)
    assert sorted(u.name for u in users) == ["Jane Doe", "Jhon Doe"]

def test_replace_overwrites_fields_and_keeps_created_at():
    async def scenario(repo):
        created = await repo.create(_payload(phone="0101234"))
        replaced = await repo.replace_by_id(created.id, _payload(name="Jhon Doe", email="jhon@doe.com"))
        return created, replaced, await repo.get_by_id(created.id)
    created, replaced, got = _run(scenario)
    assert replaced.id == created.id
    assert replaced.name == "Jhon Doe"
    assert replaced.phone is None
    assert replaced.created_at == created.created_at
    assert got == replaced

def test_replace_absent_id_returns_none():
    async def scenario(repo):
        return await repo.replace_by_id(str(ObjectId()), _payload())
    assert _run(scenario) is None

def test_delete():
    async def scenario(repo):
        created = await repo.create(_payload())
        await repo.delete_by_id(created.id)
        # 없는 id 삭제도 예외 없이 끝나야 함
        await repo.delete_by_id(str(ObjectId()))
        return await repo.get_by_id(created.id)
    assert _run(scenario) is None

def test_malformed_id_is_cast_error():
    async def scenario(repo):
        return await repo.get_by_id("not-an-id")
    with pytest.raises(UserStoreError) as exc_info:
        _run(scenario)
    assert exc_info.value.name == "CastError"
    assert exc_info.value.status_code == 400


@pytest.fixture
def uninitialized_store(monkeypatch):
    # DB 연결 실패로 init_beanie가 호출되지 않은 상태
    monkeypatch.setattr(User, "_document_settings", None)

@pytest.mark.parametrize("call", [
    lambda repo: repo.create(_payload()),
    lambda repo: repo.list_all(),
    lambda repo: repo.get_by_id(str(ObjectId())),
    lambda repo: repo.replace_by_id(str(ObjectId()), _payload()),
    lambda repo: repo.delete_by_id(str(ObjectId())),
])
def test_uninitialized_store_raises_store_error(uninitialized_store, call):
    with pytest.raises(UserStoreError) as exc_info:
        asyncio.run(call(UserRepository()))
    assert exc_info.value.name == "CollectionWasNotInitialized"

def test_uninitialized_store_delete_endpoint_is_400(uninitialized_store):
    resp = TestClient(app).delete(f"/v1/api/users/{ObjectId()}")
    assert resp.status_code == 400
    assert resp.json()["name"] == "CollectionWasNotInitialized"
