# User 도메인 모델 (Beanie Document)
# - 이름, 이메일, 전화번호(선택), 생성일
# - 이메일 형식은 쓰기 시점에 검증 (중복 허용, unique 인덱스 없음)
# - MongoDB에는 createdAt 필드명으로 저장

from datetime import datetime, timezone
from typing import Optional
from beanie import Document
from pydantic import ConfigDict, EmailStr, Field, field_validator

from ..schemas.user_schema import UserOut


def to_bson_datetime(value: datetime) -> datetime:
    # MongoDB는 밀리초 단위 UTC로 저장하므로 메모리 값도 같은 정밀도로 맞춤
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utcnow() -> datetime:
    return to_bson_datetime(datetime.now(tz=timezone.utc))


class User(Document):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    class Settings:
        name = "users"  # 컬렉션명
        # 저장 전에도 pydantic 검증을 다시 수행
        validate_on_save = True

    @field_validator("created_at")
    @classmethod
    def _normalize_created_at(cls, value: datetime) -> datetime:
        return to_bson_datetime(value)

    def to_out(self) -> UserOut:
        return UserOut(
            id=str(self.id),
            name=self.name,
            email=self.email,
            phone=self.phone,
            created_at=self.created_at,
        )
