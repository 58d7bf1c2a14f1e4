# 재시도 로직 유틸리티
# 주니어 개발자님께: 서버 시작 시 MongoDB가 아직 준비되지 않았을 수 있습니다.
# (예: docker-compose에서 DB 컨테이너가 늦게 뜨는 경우)
# 시작 단계의 연결 확인(ping)만 재시도하고, 요청 처리 중 저장소 호출은 재시도하지 않습니다.

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)
import logging
from typing import Type, Tuple

from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (PyMongoError,)
):
    """
    DB 연결 확인용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    1. max_attempts: 최대 시도 횟수 (3이면 처음 1번 + 재시도 2번)
    2. initial_wait / max_wait: 지수 백오프 대기 시간 범위 (초)
    3. exceptions: 재시도할 예외 타입

    모든 시도가 실패하면 마지막 예외를 그대로 다시 발생시킵니다 (reraise=True).
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
