"""
plugins/directconnect/graphs.py - 그래프 정의

메트릭을 어떤 그래프에 어떤 단위/라벨로 표시할지 기술하는 정적 스키마.
메트릭 이름은 catalog.METRIC_CATALOG의 이름과 정확히 일치해야 합니다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from core.config import normalize_prefix


class Unit(Enum):
    """그래프 단위 (플러그인 메타데이터 표기)"""

    INTEGER = "integer"
    BITS_PER_SECOND = "bits/sec"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class GraphMetric:
    """그래프에 표시되는 메트릭 하나"""

    name: str
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "label": self.label}


@dataclass(frozen=True)
class Graph:
    """그래프 정의

    Attributes:
        label: 그래프 제목
        unit: 단위
        metrics: 표시할 메트릭 목록 (표시 순서)
    """

    label: str
    unit: Unit
    metrics: tuple[GraphMetric, ...] = field(default_factory=tuple)

    @property
    def metric_names(self) -> list[str]:
        return [m.name for m in self.metrics]

    def to_dict(self) -> dict[str, Any]:
        """플러그인 메타데이터 JSON 형식으로 변환"""
        return {
            "label": self.label,
            "unit": self.unit.value,
            "metrics": [m.to_dict() for m in self.metrics],
        }


_WORD_START = re.compile(r"(?<![0-9A-Za-z_])[a-z]")


def label_prefix(prefix: object) -> str:
    """그래프 라벨 prefix 생성

    단어 첫 글자를 대문자로 바꾸고 하이픈을 공백으로 바꿉니다.
    비어 있거나 문자열이 아닌 prefix는 기본값("Dx")을 사용합니다.

    Example:
        label_prefix("foo")        # "Foo"
        label_prefix("my-dx-link") # "My Dx Link"
    """
    titled = _WORD_START.sub(lambda m: m.group(0).upper(), normalize_prefix(prefix))
    return titled.replace("-", " ")


def build_graph_definition(prefix: object, extended: bool) -> dict[str, Graph]:
    """그래프 정의 생성

    Args:
        prefix: 메트릭 키 prefix (라벨에 사용)
        extended: 확장 메트릭 포함 여부

    Returns:
        {그래프 키: Graph} - 확장 모드가 아니면 State 그래프만 포함
    """
    label = label_prefix(prefix)

    if not extended:
        return {
            "State": Graph(
                label=f"{label} connection status",
                unit=Unit.INTEGER,
                metrics=(GraphMetric("ConnectionState", "ConnectionState"),),
            ),
        }

    return {
        "State": Graph(
            label=f"{label} connection status",
            unit=Unit.INTEGER,
            metrics=(
                GraphMetric("ConnectionState", "ConnectionState"),
                GraphMetric("ConnectionEncryptionState", "ConnectionEncryptionState"),
            ),
        ),
        "Bps": Graph(
            label=f"{label} bps",
            unit=Unit.BITS_PER_SECOND,
            metrics=(
                GraphMetric("ConnectionBpsEgress", "bps out"),
                GraphMetric("ConnectionBpsIngress", "bps in"),
            ),
        ),
        "Pps": Graph(
            label=f"{label} pps",
            unit=Unit.INTEGER,
            metrics=(
                GraphMetric("ConnectionPpsEgress", "pps out"),
                GraphMetric("ConnectionPpsIngress", "pps in"),
            ),
        ),
        "LightLevel": Graph(
            label=f"{label} Light level",
            unit=Unit.INTEGER,
            metrics=(
                GraphMetric("ConnectionLightLevelTx", "egress dBm"),
                GraphMetric("ConnectionLightLevelRx", "ingress dBm"),
            ),
        ),
        "Error": Graph(
            label=f"{label} Error",
            unit=Unit.INTEGER,
            metrics=(GraphMetric("ConnectionErrorCount", "CRC Errors"),),
        ),
    }
