# 사용자 서비스 레이어
# - 요청 본문 검증 (생성/교체 모두 같은 스키마로 검증)
# - 저장소 호출 결과를 UserServiceError 계열 예외로 변환

from typing import Any, List

from fastapi import Depends

from ..core.exceptions import UserNotFoundError, UserValidationError
from ..repositories.user_repository import UserRepository
from ..schemas.user_schema import UserCreate, UserOut, validate_user


class UserService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    @staticmethod
    def _validated(data: Any) -> UserCreate:
        result = validate_user(data)
        if not result.ok:
            raise UserValidationError(result.errors)
        return result.user

    async def create(self, data: Any) -> UserOut:
        user = self._validated(data)
        return await self.repo.create(user)

    async def list_all(self) -> List[UserOut]:
        return await self.repo.list_all()

    async def get_by_id(self, user_id: str) -> UserOut:
        user = await self.repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def replace_by_id(self, user_id: str, data: Any) -> UserOut:
        # 교체도 생성과 동일하게 검증 (잘못된 데이터가 update로 들어오지 않도록)
        user = self._validated(data)
        replaced = await self.repo.replace_by_id(user_id, user)
        if replaced is None:
            raise UserNotFoundError(user_id)
        return replaced

    async def delete_by_id(self, user_id: str) -> None:
        # 존재하지 않는 id여도 성공으로 처리
        await self.repo.delete_by_id(user_id)


def get_user_service(repo: UserRepository = Depends(UserRepository)) -> UserService:
    return UserService(repo)
