"""AWS 관련 공유 유틸리티.

하위 모듈:
- metrics: CloudWatch GetMetricStatistics 응답 처리
"""

from . import metrics

__all__ = ["metrics"]
