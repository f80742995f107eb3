"""
cli/output.py - 플러그인 출력 형식

모니터링 에이전트 플러그인 규약에 맞춰 메트릭 값과 그래프 정의를 출력합니다.

값 출력 (한 줄에 메트릭 하나):
    {prefix}.{graph}.{metric}\t{value}\t{epoch}

그래프 정의 출력 (MACKEREL_AGENT_PLUGIN_META 환경 변수 설정 시):
    # mackerel-agent-plugin
    {"graphs": {"{prefix}.{graph}": {"label": ..., "unit": ..., "metrics": [...]}}}
"""

from __future__ import annotations

import json
import logging
import math
import os
import time
from collections.abc import Mapping

from plugins.directconnect.graphs import Graph

logger = logging.getLogger(__name__)

META_ENV = "MACKEREL_AGENT_PLUGIN_META"
META_HEADER = "# mackerel-agent-plugin"


def wants_meta() -> bool:
    """그래프 정의 출력 요청 여부"""
    return bool(os.environ.get(META_ENV))


def format_value(value: float) -> str:
    """정수 값은 정수로, 그 외는 소수점 6자리로 표기"""
    if value == int(value):
        return str(int(value))
    return f"{value:f}"


def render_values(
    prefix: str,
    graphs: Mapping[str, Graph],
    values: Mapping[str, float],
    now: float | None = None,
) -> list[str]:
    """메트릭 값 출력 라인 생성

    그래프 정의 순서대로, 값이 있는 메트릭만 출력합니다.
    NaN/Inf 값은 건너뜁니다.
    """
    epoch = int(now if now is not None else time.time())
    lines = []
    for graph_key, graph in graphs.items():
        for name in graph.metric_names:
            if name not in values:
                continue
            value = values[name]
            if math.isnan(value) or math.isinf(value):
                logger.warning("유효하지 않은 값 건너뜀: %s=%s", name, value)
                continue
            lines.append(f"{prefix}.{graph_key}.{name}\t{format_value(value)}\t{epoch}")
    return lines


def render_definitions(prefix: str, graphs: Mapping[str, Graph]) -> list[str]:
    """그래프 정의 출력 라인 생성 (헤더 + JSON 한 줄)"""
    payload = {"graphs": {f"{prefix}.{key}": graph.to_dict() for key, graph in graphs.items()}}
    return [META_HEADER, json.dumps(payload, ensure_ascii=False)]
