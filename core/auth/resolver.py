# core/auth/resolver.py
"""
core/auth/resolver.py - 자격 증명 해석 및 CloudWatch 클라이언트 구성

설정값으로부터 자격 증명 방식을 하나 선택하고(Role > 정적 키 > 기본 체인),
boto3 Session과 CloudWatch 클라이언트를 한 번만 생성합니다.
생성된 클라이언트는 실행 동안 읽기 전용으로 공유됩니다.

실패(잘못된 설정, STS 호출 실패, 자격 증명/리전 없음)는 모두 ConfigurationError로
변환되어 메트릭 조회 전에 실행을 중단시킵니다.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from core.config import TOOL_NAME
from core.parallel.client import DEFAULT_TIMEOUT, get_client

from .types import AmbientDefault, ConfigurationError, Credentials, RoleAssumption, StaticKeyPair

if TYPE_CHECKING:
    from core.config import DxConfig

logger = logging.getLogger(__name__)


def resolve_credentials(
    role_arn: str | None = None,
    access_key_id: str | None = None,
    secret_access_key: str | None = None,
) -> Credentials:
    """설정값으로부터 사용할 자격 증명 variant 선택

    우선순위:
        1. role_arn이 있으면 RoleAssumption (정적 키가 있어도 무시)
        2. access_key_id, secret_access_key 둘 다 있으면 StaticKeyPair
        3. 그 외 AmbientDefault

    Returns:
        Credentials variant
    """
    if role_arn:
        return RoleAssumption(role_arn=role_arn)
    if access_key_id and secret_access_key:
        return StaticKeyPair(access_key=access_key_id, secret_key=secret_access_key)
    return AmbientDefault()


def _role_session_name() -> str:
    return f"{TOOL_NAME}-{int(time.time())}"


def _assume_role(credentials: RoleAssumption, region: str | None, timeout: float) -> boto3.Session:
    """기본 자격 증명 체인으로 AssumeRole 후 임시 키 기반 Session 생성"""
    base = boto3.Session(region_name=region)
    if base.get_credentials() is None:
        raise ConfigurationError(
            "AssumeRole에 사용할 기본 자격 증명을 찾을 수 없습니다",
            config_key="role_arn",
        )

    sts = get_client(base, "sts", timeout=timeout)
    response = sts.assume_role(
        RoleArn=credentials.role_arn,
        RoleSessionName=_role_session_name(),
    )
    temp = response["Credentials"]
    logger.debug("AssumeRole 완료: %s (만료: %s)", credentials.role_arn, temp.get("Expiration"))

    return boto3.Session(
        aws_access_key_id=temp["AccessKeyId"],
        aws_secret_access_key=temp["SecretAccessKey"],
        aws_session_token=temp["SessionToken"],
        region_name=region or base.region_name,
    )


def build_session(
    credentials: Credentials,
    region: str | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> boto3.Session:
    """자격 증명 variant로 boto3 Session 생성

    Args:
        credentials: resolve_credentials()의 결과
        region: 리전 override (None/빈 값이면 자격 증명 체인의 기본 리전)
        timeout: STS 호출 타임아웃 (초)

    Returns:
        boto3.Session

    Raises:
        ConfigurationError: 자격 증명 또는 리전을 확인할 수 없는 경우
    """
    region_name = region or None

    try:
        if isinstance(credentials, RoleAssumption):
            session = _assume_role(credentials, region_name, timeout)
        elif isinstance(credentials, StaticKeyPair):
            session = boto3.Session(
                aws_access_key_id=credentials.access_key,
                aws_secret_access_key=credentials.secret_key,
                region_name=region_name,
            )
        else:
            session = boto3.Session(region_name=region_name)
            if session.get_credentials() is None:
                raise ConfigurationError("AWS 자격 증명을 찾을 수 없습니다 (기본 자격 증명 체인)")
    except (BotoCoreError, ClientError) as e:
        raise ConfigurationError(f"자격 증명 해석 실패 [{credentials.kind}]", cause=e) from e

    if not session.region_name:
        raise ConfigurationError("리전을 확인할 수 없습니다 (--region 또는 AWS_DEFAULT_REGION)", config_key="region")

    return session


def create_cloudwatch_client(config: DxConfig) -> Any:
    """설정으로부터 CloudWatch 클라이언트 생성

    프로세스당 한 번 호출되며, 반환된 클라이언트는 fetch_metrics()에 명시적으로 전달됩니다.

    Args:
        config: 실행 설정

    Returns:
        boto3 CloudWatch client

    Raises:
        ConfigurationError: 자격 증명 해석 또는 클라이언트 생성 실패
    """
    credentials = resolve_credentials(
        role_arn=config.role_arn,
        access_key_id=config.access_key_id,
        secret_access_key=config.secret_access_key,
    )
    logger.debug("자격 증명 방식: %s", credentials.kind)

    session = build_session(credentials, region=config.region, timeout=config.timeout)

    try:
        return get_client(
            session,
            "cloudwatch",
            timeout=config.timeout,
            max_pool_connections=max(config.max_workers, 1),
        )
    except BotoCoreError as e:
        raise ConfigurationError("CloudWatch 클라이언트 생성 실패", cause=e) from e
