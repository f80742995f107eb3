"""
core/config.py - 중앙 설정 관리

CLI 옵션과 환경 변수로부터 한 번 생성되어 이후 변경되지 않는 실행 설정을 정의합니다.

Usage:
    from core.config import DxConfig

    config = DxConfig.from_env(connection_id="dxcon-abc123")
    target = config.target
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from core.exceptions import ConfigurationError
from core.parallel.client import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

VERSION = "0.3.0"

TOOL_NAME = "aws-dx-metrics"

DEFAULT_PREFIX = "Dx"
DEFAULT_MAX_WORKERS = 1

# 환경 변수 이름
ENV_ACCESS_KEY_ID = "AWS_ACCESS_KEY_ID"
ENV_SECRET_ACCESS_KEY = "AWS_SECRET_ACCESS_KEY"
ENV_REGION = "AWS_DEFAULT_REGION"


def get_version() -> str:
    """버전 문자열 반환"""
    return VERSION


def normalize_prefix(prefix: object) -> str:
    """메트릭 키 prefix 정규화 (비어 있거나 문자열이 아니면 기본값)"""
    if not isinstance(prefix, str) or not prefix.strip():
        return DEFAULT_PREFIX
    return prefix.strip()


@dataclass(frozen=True)
class ConnectionTarget:
    """모니터링 대상 Direct Connect 연결

    Attributes:
        resource_id: Direct Connect 연결 ID (예: dxcon-fg5678gh)
        region: 리전 (None이면 자격 증명 체인 기본값)
        prefix: 출력 메트릭 키 prefix
    """

    resource_id: str
    region: str | None = None
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self) -> None:
        object.__setattr__(self, "prefix", normalize_prefix(self.prefix))


@dataclass(frozen=True)
class DxConfig:
    """플러그인 실행 설정

    Attributes:
        prefix: 메트릭 키 prefix ("" → "Dx")
        access_key_id: 정적 Access Key ID
        secret_access_key: 정적 Secret Access Key
        region: 리전 override
        role_arn: AssumeRole 대상 Role ARN
        connection_id: Direct Connect 연결 ID
        full_spec_support: 확장 메트릭 조회 여부
        timeout: API 호출 연결/읽기 타임아웃 (초)
        max_workers: 메트릭 병렬 조회 워커 수 (1이면 순차, 실제 풀 크기는 조회 메트릭 수 이하)
    """

    prefix: str = ""
    access_key_id: str = ""
    secret_access_key: str = field(default="", repr=False)
    region: str = ""
    role_arn: str = ""
    connection_id: str = ""
    full_spec_support: bool = True
    timeout: float = DEFAULT_TIMEOUT
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self) -> None:
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout은 0보다 커야 합니다: {self.timeout}", config_key="timeout")
        if self.max_workers < 1:
            raise ConfigurationError(
                f"max_workers는 1 이상이어야 합니다: {self.max_workers}",
                config_key="max_workers",
            )
        if not self.connection_id:
            logger.warning("Direct Connect 연결 ID가 지정되지 않았습니다 (--direct-connect-connection)")

    @classmethod
    def from_env(cls, **overrides) -> DxConfig:
        """환경 변수 기본값으로 설정 생성

        Args:
            **overrides: 환경 변수보다 우선하는 필드 값

        Returns:
            DxConfig 인스턴스
        """
        values = {
            "access_key_id": os.environ.get(ENV_ACCESS_KEY_ID, ""),
            "secret_access_key": os.environ.get(ENV_SECRET_ACCESS_KEY, ""),
            "region": os.environ.get(ENV_REGION, ""),
        }
        values.update(overrides)
        return cls(**values)

    @property
    def metric_key_prefix(self) -> str:
        return normalize_prefix(self.prefix)

    @property
    def target(self) -> ConnectionTarget:
        """조회 대상 ConnectionTarget"""
        return ConnectionTarget(
            resource_id=self.connection_id,
            region=self.region or None,
            prefix=self.metric_key_prefix,
        )
