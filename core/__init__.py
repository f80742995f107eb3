# core/__init__.py
"""
core - Direct Connect 메트릭 플러그인 인프라

아키텍처:
    core/
    ├── auth/           # 자격 증명 해석 및 CloudWatch 클라이언트 구성
    ├── parallel/       # boto3 client 생성 (타임아웃, 재시도 설정)
    ├── config.py       # 실행 설정 (DxConfig, ConnectionTarget)
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.config import DxConfig
    from core.auth import create_cloudwatch_client
    from core.exceptions import ConfigurationError

    try:
        cloudwatch = create_cloudwatch_client(DxConfig.from_env(connection_id="dxcon-abc123"))
    except ConfigurationError as e:
        print(f"설정 오류: {e}")
"""

from core import auth, config, exceptions, parallel

__all__ = ["auth", "config", "exceptions", "parallel"]
