"""
shared/aws/metrics - CloudWatch 메트릭 응답 처리

Usage:
    from shared.aws.metrics import Statistic, parse_datapoints, pick_stable_datapoint
"""

from .statistics import Datapoint, Statistic, parse_datapoints, pick_stable_datapoint

__all__ = [
    "Datapoint",
    "Statistic",
    "parse_datapoints",
    "pick_stable_datapoint",
]
