# 요청/응답 스키마 정의 (Pydantic 모델)
# - UserCreate: 생성/교체 요청 본문 (name, email, phone?, createdAt?)
# - UserOut: 응답 본문 ({_id, name, email, phone?, createdAt})
# - validate_user: 저장소와 무관한 순수 검증 함수

from datetime import datetime
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError

class UserCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    created_at: Optional[datetime] = Field(default=None, alias="createdAt")

class UserOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    email: str
    phone: Optional[str] = None
    created_at: datetime = Field(alias="createdAt")

class FieldError(BaseModel):
    path: str
    value: Any = None
    message: str
    kind: str

class ValidationResult(BaseModel):
    ok: bool
    user: Optional[UserCreate] = None
    errors: List[FieldError] = Field(default_factory=list)


def field_errors_from_pydantic(errors: Sequence[dict], strip_prefix: Sequence[str] = ()) -> List[FieldError]:
    """pydantic 에러 목록을 FieldError 목록으로 변환합니다.

    RequestValidationError는 loc 앞에 "body"가 붙으므로 strip_prefix로 제거합니다.
    필드가 아예 빠진 경우(missing) value는 None으로 둡니다.
    """
    result = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        while loc and loc[0] in strip_prefix:
            loc = loc[1:]
        kind = err.get("type", "value_error")
        if kind == "json_invalid":
            # loc가 ("body", 오프셋)이므로 경로는 body로 고정
            loc = []
        value = None if kind in ("missing", "json_invalid") else err.get("input")
        result.append(FieldError(path=".".join(loc) or "body", value=value, message=err.get("msg", ""), kind=kind))
    return result


def validate_user(data: Any) -> ValidationResult:
    if not isinstance(data, dict):
        error = FieldError(path="body", value=data, message="Request body must be a JSON object", kind="model_type")
        return ValidationResult(ok=False, errors=[error])
    try:
        user = UserCreate.model_validate(data)
    except ValidationError as e:
        return ValidationResult(ok=False, errors=field_errors_from_pydantic(e.errors(include_url=False)))
    return ValidationResult(ok=True, user=user)
