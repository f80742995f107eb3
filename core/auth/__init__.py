# core/auth/__init__.py
"""
AWS 자격 증명 해석 모듈 (core/auth)

지원하는 자격 증명 방식 (우선순위 순):
- RoleAssumption: 기본 자격 증명으로 STS AssumeRole 후 임시 키 사용
- StaticKeyPair: 정적 액세스 키
- AmbientDefault: boto3 기본 자격 증명 체인

사용 예시:
    from core.auth import create_cloudwatch_client
    from core.config import DxConfig

    config = DxConfig.from_env(connection_id="dxcon-abc123", role_arn="arn:aws:iam::...")
    cloudwatch = create_cloudwatch_client(config)

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
    실제 사용 시점에만 하위 모듈(boto3 등)이 로드됩니다.
"""

__all__ = [
    # Types
    "CredentialKind",
    "Credentials",
    "RoleAssumption",
    "StaticKeyPair",
    "AmbientDefault",
    "ConfigurationError",
    # Resolver
    "resolve_credentials",
    "build_session",
    "create_cloudwatch_client",
]

# Lazy import 매핑 테이블
_IMPORT_MAPPING = {
    # Types
    "CredentialKind": (".types", "CredentialKind"),
    "Credentials": (".types", "Credentials"),
    "RoleAssumption": (".types", "RoleAssumption"),
    "StaticKeyPair": (".types", "StaticKeyPair"),
    "AmbientDefault": (".types", "AmbientDefault"),
    "ConfigurationError": (".types", "ConfigurationError"),
    # Resolver
    "resolve_credentials": (".resolver", "resolve_credentials"),
    "build_session": (".resolver", "build_session"),
    "create_cloudwatch_client": (".resolver", "create_cloudwatch_client"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드

    CLI 시작 시간 최적화를 위해 무거운 의존성(boto3 등)을
    실제 필요한 시점에만 로드합니다.
    """
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
