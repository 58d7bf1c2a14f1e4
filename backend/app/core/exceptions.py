# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 사용자 API에서 발생하는 모든 실패는 UserServiceError 하나로 표현하고,
# kind(ErrorKind)로 종류를 구분합니다. 라우터 밖에서는 kind만 보고 HTTP 상태코드를 정합니다.
# 드라이버 내부 예외 객체는 절대 클라이언트에게 그대로 내보내지 않습니다.

from enum import Enum
from typing import Any, Dict, List, Optional

from ..schemas.user_schema import FieldError


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORE = "store"


# kind -> HTTP 상태코드
STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.STORE: 400,
}


class UserServiceError(Exception):
    """사용자 API 기본 예외 클래스

    Attributes:
        kind: 에러 종류 (ErrorKind)
        name: 응답 본문의 name 필드 (예: "ValidationError", "UserNotFound")
        message: 사람이 읽을 수 있는 에러 메시지
    """
    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]

    def to_payload(self) -> Dict[str, Any]:
        return {"message": self.message, "name": self.name}


class UserValidationError(UserServiceError):
    """쓰기(생성/교체) 시 필드 검증 실패

    Attributes:
        errors: 실패한 필드 목록 (path, value, message, kind)
    """
    kind = ErrorKind.VALIDATION

    def __init__(self, errors: List[FieldError]):
        self.errors = errors
        details = ", ".join(f"{e.path}: {e.message}" for e in errors)
        super().__init__("ValidationError", f"User validation failed: {details}")

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["errors"] = {e.path: e.model_dump() for e in self.errors}
        return payload


class UserNotFoundError(UserServiceError):
    """조회/교체 대상 id에 해당하는 문서가 없음"""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, user_id: Optional[str] = None):
        self.user_id = user_id
        super().__init__("UserNotFound", "User not found")


class UserStoreError(UserServiceError):
    """잘못된 id 형식이나 MongoDB 드라이버 오류

    name에는 원래 예외의 클래스 이름(또는 "CastError")을 담습니다.
    """
    kind = ErrorKind.STORE

    def __init__(self, message: str, name: str = "StoreError"):
        super().__init__(name, message)

    @classmethod
    def from_exception(cls, exc: Exception) -> "UserStoreError":
        return cls(str(exc) or exc.__class__.__name__, name=exc.__class__.__name__)
