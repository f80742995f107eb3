# core/auth/types/__init__.py
"""
자격 증명 해석에 사용되는 공통 타입 정의

Note:
    이 모듈은 Lazy Import 패턴을 사용합니다.
"""

__all__ = [
    # Enums
    "CredentialKind",
    # Variants
    "Credentials",
    "RoleAssumption",
    "StaticKeyPair",
    "AmbientDefault",
    # Errors
    "ConfigurationError",
]

_IMPORT_MAPPING = {
    "CredentialKind": (".types", "CredentialKind"),
    "Credentials": (".types", "Credentials"),
    "RoleAssumption": (".types", "RoleAssumption"),
    "StaticKeyPair": (".types", "StaticKeyPair"),
    "AmbientDefault": (".types", "AmbientDefault"),
    "ConfigurationError": (".types", "ConfigurationError"),
}


def __getattr__(name: str):
    """Lazy import - 실제 사용 시점에만 모듈 로드"""
    if name in _IMPORT_MAPPING:
        module_name, attr_name = _IMPORT_MAPPING[name]
        import importlib

        module = importlib.import_module(module_name, __name__)
        return getattr(module, attr_name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
