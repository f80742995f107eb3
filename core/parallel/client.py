"""
core/parallel/client.py - boto3 client 생성 헬퍼

타임아웃 + 연결 풀이 설정된 boto3 client를 생성합니다.
단발성 폴링이므로 기본값은 재시도 없음(max_attempts=1)입니다.
실패한 메트릭은 다음 스케줄 실행에서 다시 조회됩니다.

Example:
    from core.parallel.client import get_client

    cloudwatch = get_client(session, "cloudwatch", region_name="ap-northeast-2", timeout=5)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = 1  # 재시도 없음
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_TIMEOUT = 10  # 초
DEFAULT_MAX_POOL_CONNECTIONS = 10  # 카탈로그 메트릭 수 이상


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    max_pool_connections: int = DEFAULT_MAX_POOL_CONNECTIONS,
    **kwargs: Any,
) -> Any:
    """타임아웃이 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (cloudwatch, sts 등)
        region_name: 리전 (None이면 세션 기본값)
        timeout: 연결/읽기 타임아웃 (초)
        max_attempts: 최대 시도 횟수 (기본: 1, 재시도 없음)
        retry_mode: 재시도 모드
        max_pool_connections: HTTP 연결 풀 크기 (max_workers 이상 권장)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=timeout,
        read_timeout=timeout,
        max_pool_connections=max_pool_connections,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
