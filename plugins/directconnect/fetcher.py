"""
plugins/directconnect/fetcher.py - Direct Connect 메트릭 조회

카탈로그의 각 메트릭을 GetMetricStatistics로 조회하여 {메트릭 이름: 값} 매핑을 만듭니다.

조회 구간:
    [now - 180초, now], Period 60초
    Direct Connect 메트릭은 최대 2분 정도 늦게 보고되므로
    1분 단위 집계라도 3분 구간을 조회해야 데이터포인트가 최소 1개 보장됩니다.

실패 처리:
    메트릭 하나의 실패는 다른 메트릭 조회를 중단시키지 않습니다.
    실패한 메트릭은 로그를 남기고 0으로 기록되며, 결과는 항상 선택된 카탈로그 전체 키를 가집니다.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime, timedelta, timezone
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import ConnectionTarget
from core.exceptions import MetricFetchError, UnsupportedMetricCondition, is_access_denied, is_throttling
from shared.aws.metrics import parse_datapoints, pick_stable_datapoint

from .catalog import DIMENSION_NAME, NAMESPACE, MetricDefinition, select_metrics

logger = logging.getLogger(__name__)

LOOKBACK_SECONDS = 180  # 3분 (데이터포인트 최소 1개 확보)
PERIOD_SECONDS = 60


def get_stable_value(
    cloudwatch_client: Any,
    metric: MetricDefinition,
    target: ConnectionTarget,
    extended: bool,
    now: datetime | None = None,
) -> float:
    """메트릭 하나를 조회하여 가장 오래된 데이터포인트 값 반환

    Args:
        cloudwatch_client: boto3 CloudWatch client
        metric: 조회할 메트릭 정의
        target: 조회 대상 연결
        extended: 실행 단위 확장 모드 여부
        now: 조회 기준 시각 (None이면 현재 UTC)

    Returns:
        요청한 통계 기준 값

    Raises:
        UnsupportedMetricCondition: 확장 모드에서 확장 메트릭의 데이터포인트가 없음
        MetricFetchError: API 호출 실패 또는 필수 메트릭의 데이터포인트 없음
    """
    end_time = now or datetime.now(timezone.utc)
    start_time = end_time - timedelta(seconds=LOOKBACK_SECONDS)

    try:
        response = cloudwatch_client.get_metric_statistics(
            Namespace=NAMESPACE,
            MetricName=metric.name,
            Dimensions=[{"Name": DIMENSION_NAME, "Value": target.resource_id}],
            StartTime=start_time,
            EndTime=end_time,
            Period=PERIOD_SECONDS,
            Statistics=[metric.statistic.value],
        )
    except (ClientError, BotoCoreError) as e:
        raise MetricFetchError.from_client_error(metric.name, target.resource_id, e) from e

    datapoints = parse_datapoints(response.get("Datapoints", []), metric.statistic)
    stable = pick_stable_datapoint(datapoints)

    if stable is None:
        if metric.extended and extended:
            raise UnsupportedMetricCondition(metric.name, target.resource_id)
        raise MetricFetchError(metric.name, target.resource_id, "데이터포인트 없음")

    return stable.value


def _fetch_one(
    cloudwatch_client: Any,
    metric: MetricDefinition,
    target: ConnectionTarget,
    extended: bool,
    now: datetime | None,
) -> float:
    """메트릭 하나 조회 - 실패 시 로그 후 0 반환"""
    try:
        return get_stable_value(cloudwatch_client, metric, target, extended, now=now)
    except UnsupportedMetricCondition as e:
        logger.info("%s", e)
    except MetricFetchError as e:
        # TODO: "아직 데이터 없음"과 API 오류를 출력에서도 구분 (현재는 둘 다 0으로 보고)
        if is_access_denied(e):
            logger.warning("%s - CloudWatch 읽기 권한을 확인하세요", e)
        elif is_throttling(e):
            logger.warning("%s - API 호출 제한", e)
        else:
            logger.warning("%s", e)
    except Exception:
        logger.warning("%s/%s 메트릭 조회 중 예기치 않은 오류", metric.name, target.resource_id, exc_info=True)
    return 0.0


def fetch_metrics(
    cloudwatch_client: Any,
    target: ConnectionTarget,
    extended: bool = True,
    max_workers: int = 1,
    now: datetime | None = None,
) -> dict[str, float]:
    """선택된 카탈로그 메트릭 전체 조회

    Args:
        cloudwatch_client: boto3 CloudWatch client (읽기 전용으로 공유)
        target: 조회 대상 연결
        extended: 확장 메트릭 포함 여부 (full spec support)
        max_workers: 병렬 조회 워커 수 (1이면 순차 조회)
        now: 조회 기준 시각 (None이면 현재 UTC, 모든 메트릭에 동일 적용)

    Returns:
        {메트릭 이름: 값} - 선택된 메트릭 전체 키를 항상 포함
    """
    metrics = select_metrics(extended)
    end_time = now or datetime.now(timezone.utc)

    if max_workers <= 1 or len(metrics) <= 1:
        return {m.name: _fetch_one(cloudwatch_client, m, target, extended, end_time) for m in metrics}

    results: dict[str, float] = {}
    lock = threading.Lock()

    def collect(metric: MetricDefinition) -> None:
        value = _fetch_one(cloudwatch_client, metric, target, extended, end_time)
        with lock:
            results[metric.name] = value

    with ThreadPoolExecutor(max_workers=min(max_workers, len(metrics))) as executor:
        futures = [executor.submit(collect, m) for m in metrics]
        for future in as_completed(futures):
            future.result()

    logger.debug("메트릭 조회 완료: %d개 (%s)", len(results), target.resource_id)
    return results
