# 사용자 라우터 (/v1/api/users)
# - POST   /users       : 생성 (201)
# - GET    /users       : 전체 조회 (200)
# - GET    /users/{id}  : 단건 조회 (200 / 404)
# - PUT    /users/{id}  : 전체 교체 (201 / 404)
# - DELETE /users/{id}  : 삭제 (204, 없는 id여도 성공)
#
# 실패는 UserServiceError로 올라가고 main.py의 예외 핸들러가 상태코드/본문을 정합니다.

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response, status

from ...schemas.user_schema import UserOut
from ...services.user_service import UserService, get_user_service

router = APIRouter(prefix="/users", tags=["users"])

USER_BODY_EXAMPLE = {"name": "Jhon Doe", "email": "jhon@doe.com", "phone": "019183434344"}

@router.post("", response_model=UserOut, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED, summary="사용자 생성")
async def add_user(payload: Dict[str, Any] = Body(..., examples=[USER_BODY_EXAMPLE]),
                   service: UserService = Depends(get_user_service)):
    return await service.create(payload)

@router.get("", response_model=List[UserOut], response_model_exclude_none=True, summary="사용자 전체 조회")
async def get_users(service: UserService = Depends(get_user_service)):
    return await service.list_all()

@router.get("/{user_id}", response_model=UserOut, response_model_exclude_none=True, summary="사용자 단건 조회")
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_by_id(user_id)

@router.put("/{user_id}", response_model=UserOut, response_model_exclude_none=True,
            status_code=status.HTTP_201_CREATED, summary="사용자 전체 교체")
async def update_user(user_id: str,
                      payload: Dict[str, Any] = Body(..., examples=[USER_BODY_EXAMPLE]),
                      service: UserService = Depends(get_user_service)):
    return await service.replace_by_id(user_id, payload)

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
               summary="사용자 삭제")
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)):
    await service.delete_by_id(user_id)
    # 204는 본문을 가질 수 없으므로 상태코드만 반환
    return Response(status_code=status.HTTP_204_NO_CONTENT)
