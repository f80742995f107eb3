"""
shared/aws/metrics/statistics.py - GetMetricStatistics 응답 처리

get_metric_statistics() 응답의 Datapoints를 요청한 통계 기준으로 파싱하고,
보고할 데이터포인트 하나를 선택합니다.

가장 최근 데이터포인트는 CloudWatch 쪽에서 아직 집계가 확정되지 않아 값이 바뀔 수 있으므로,
조회 구간에서 가장 오래된(= 가장 최근의 안정된) 데이터포인트를 사용합니다.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Statistic(Enum):
    """CloudWatch 통계 타입"""

    AVERAGE = "Average"
    SUM = "Sum"
    MINIMUM = "Minimum"
    MAXIMUM = "Maximum"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Datapoint:
    """집계된 CloudWatch 데이터포인트 하나

    Attributes:
        timestamp: 집계 구간 시작 시각
        value: 요청한 통계 기준 값
        statistic: 값이 계산된 통계 타입
    """

    timestamp: datetime
    value: float
    statistic: Statistic


def parse_datapoints(raw_datapoints: Iterable[dict[str, Any]], statistic: Statistic) -> list[Datapoint]:
    """응답의 Datapoints를 Datapoint 목록으로 변환

    요청한 통계 키가 없는 항목은 건너뜁니다.

    Args:
        raw_datapoints: response["Datapoints"]
        statistic: 요청한 통계 타입

    Returns:
        Datapoint 목록 (응답 순서 유지)
    """
    datapoints = []
    for dp in raw_datapoints:
        value = dp.get(statistic.value)
        if value is None or "Timestamp" not in dp:
            continue
        datapoints.append(Datapoint(timestamp=dp["Timestamp"], value=float(value), statistic=statistic))
    return datapoints


def pick_stable_datapoint(datapoints: Iterable[Datapoint]) -> Datapoint | None:
    """가장 오래된 타임스탬프의 데이터포인트 반환 (없으면 None)"""
    return min(datapoints, key=lambda dp: dp.timestamp, default=None)
