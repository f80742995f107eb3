"""
plugins/directconnect/catalog.py - Direct Connect 메트릭 카탈로그

AWS/DX 네임스페이스에서 조회할 메트릭과 각 메트릭의 통계 타입 정의.
같은 메트릭이라도 요청한 통계에 따라 CloudWatch가 다른 값을 반환하므로
통계 타입 배정은 계약으로 취급합니다.

참고: https://docs.aws.amazon.com/directconnect/latest/UserGuide/monitoring-cloudwatch.html#viewing-metrics
"""

from __future__ import annotations

from dataclasses import dataclass

from shared.aws.metrics import Statistic

NAMESPACE = "AWS/DX"
DIMENSION_NAME = "ConnectionId"


@dataclass(frozen=True)
class MetricDefinition:
    """조회 대상 메트릭 정의

    Attributes:
        name: CloudWatch 메트릭 이름
        statistic: 요청할 통계 타입
        extended: full spec 지원 연결에서만 조회하는 메트릭 여부
    """

    name: str
    statistic: Statistic
    extended: bool = True


METRIC_CATALOG: tuple[MetricDefinition, ...] = (
    # 연결 상태 (1: up, 0: down)
    MetricDefinition("ConnectionState", Statistic.MINIMUM, extended=False),
    # 연결 암호화(MACsec) 상태 (1: up, 0: down)
    MetricDefinition("ConnectionEncryptionState", Statistic.MINIMUM),
    MetricDefinition("ConnectionBpsEgress", Statistic.AVERAGE),
    MetricDefinition("ConnectionBpsIngress", Statistic.AVERAGE),
    MetricDefinition("ConnectionPpsEgress", Statistic.AVERAGE),
    MetricDefinition("ConnectionPpsIngress", Statistic.AVERAGE),
    # 광 신호 세기 (dBm)
    MetricDefinition("ConnectionLightLevelTx", Statistic.AVERAGE),
    MetricDefinition("ConnectionLightLevelRx", Statistic.AVERAGE),
    # MAC 레벨 에러 합계 (CRC 포함)
    MetricDefinition("ConnectionErrorCount", Statistic.SUM),
)


def select_metrics(extended: bool) -> list[MetricDefinition]:
    """확장 모드 여부에 따라 조회할 메트릭 목록 반환 (카탈로그 순서 유지)"""
    return [m for m in METRIC_CATALOG if not m.extended or extended]
