"""공유 유틸리티 - plugins에서 공통 사용.

- aws: AWS 관련 유틸리티 (CloudWatch 메트릭 응답 처리)

의존성 구조:
    core (인프라)
       ↑
    shared (공유 유틸리티)
       ↑
    plugins
"""

from . import aws

__all__ = ["aws"]
