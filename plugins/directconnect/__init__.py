"""
plugins/directconnect - Direct Connect 연결 모니터링

- catalog: 조회 대상 메트릭 정의 (AWS/DX)
- fetcher: GetMetricStatistics 기반 메트릭 조회
- graphs: 그래프/라벨 정의
"""

from .catalog import METRIC_CATALOG, MetricDefinition, select_metrics
from .fetcher import fetch_metrics, get_stable_value
from .graphs import Graph, GraphMetric, Unit, build_graph_definition, label_prefix

__all__ = [
    "METRIC_CATALOG",
    "MetricDefinition",
    "select_metrics",
    "fetch_metrics",
    "get_stable_value",
    "Graph",
    "GraphMetric",
    "Unit",
    "build_graph_definition",
    "label_prefix",
]
