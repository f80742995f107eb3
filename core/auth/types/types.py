# core/auth/types/types.py
"""
core/auth/types/types.py - 자격 증명 해석에 사용되는 핵심 타입 정의

포함 항목:
    - CredentialKind: 자격 증명 방식 열거형 (ROLE_ASSUMPTION, STATIC_KEY_PAIR, AMBIENT_DEFAULT)
    - RoleAssumption / StaticKeyPair / AmbientDefault: 자격 증명 variant 데이터 클래스
    - Credentials: 세 variant의 Union 타입
    - ConfigurationError: core.exceptions에서 재노출
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from core.exceptions import ConfigurationError

# =============================================================================
# Credential Kind Enum
# =============================================================================


class CredentialKind(Enum):
    """자격 증명 방식을 나타내는 열거형

    우선순위: ROLE_ASSUMPTION > STATIC_KEY_PAIR > AMBIENT_DEFAULT
    """

    ROLE_ASSUMPTION = "role-assumption"
    STATIC_KEY_PAIR = "static-key-pair"
    AMBIENT_DEFAULT = "ambient-default"

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Credential Variants
# =============================================================================


@dataclass(frozen=True)
class RoleAssumption:
    """AssumeRole로 임시 자격 증명을 발급받는 방식

    기본 자격 증명 체인으로 STS를 호출하여 role_arn의 임시 키를 받습니다.

    Attributes:
        role_arn: 위임받을 IAM Role ARN
    """

    role_arn: str
    kind: CredentialKind = field(default=CredentialKind.ROLE_ASSUMPTION, init=False)


@dataclass(frozen=True)
class StaticKeyPair:
    """정적 액세스 키 방식

    Attributes:
        access_key: AWS Access Key ID
        secret_key: AWS Secret Access Key
    """

    access_key: str
    secret_key: str = field(repr=False)
    kind: CredentialKind = field(default=CredentialKind.STATIC_KEY_PAIR, init=False)


@dataclass(frozen=True)
class AmbientDefault:
    """boto3 기본 자격 증명 체인 (환경 변수, 공유 설정 파일, 인스턴스 프로파일 등)"""

    kind: CredentialKind = field(default=CredentialKind.AMBIENT_DEFAULT, init=False)


Credentials = Union[RoleAssumption, StaticKeyPair, AmbientDefault]


__all__ = [
    "AmbientDefault",
    "ConfigurationError",
    "CredentialKind",
    "Credentials",
    "RoleAssumption",
    "StaticKeyPair",
]
