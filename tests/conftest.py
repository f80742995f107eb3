"""
tests/conftest.py - pytest 공통 픽스처

AWS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(mock_cloudwatch_client, dx_target):
        # mock_cloudwatch_client: get_metric_statistics를 가진 MagicMock
        # dx_target: 테스트용 ConnectionTarget
        pass
"""

import os
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.config import ConnectionTarget  # noqa: E402

TEST_CONNECTION_ID = "dxcon-fgabc123"
TEST_REGION = "ap-northeast-2"
FIXED_NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정 - 실제 AWS 자격 증명/메타 모드 차단"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("MACKEREL_AGENT_PLUGIN_META", raising=False)

    yield


@pytest.fixture
def dx_target():
    """테스트용 ConnectionTarget"""
    return ConnectionTarget(resource_id=TEST_CONNECTION_ID, region=TEST_REGION)


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def mock_cloudwatch_client():
    """CloudWatch 클라이언트 모킹 (기본: 데이터포인트 없음)"""
    mock_client = MagicMock()
    mock_client.get_metric_statistics.return_value = {"Label": "", "Datapoints": []}
    yield mock_client


@pytest.fixture
def mock_sts_client():
    """STS 클라이언트 모킹"""
    mock_client = MagicMock()

    mock_client.assume_role.return_value = {
        "Credentials": {
            "AccessKeyId": "ASIATEST123",
            "SecretAccessKey": "test-secret",
            "SessionToken": "test-token",
            "Expiration": "2024-12-31T23:59:59Z",
        },
        "AssumedRoleUser": {
            "AssumedRoleId": "AROATEST123:aws-dx-metrics",
            "Arn": "arn:aws:sts::123456789012:assumed-role/DxReadOnly/aws-dx-metrics",
        },
    }

    yield mock_client


# =============================================================================
# 유틸리티 함수
# =============================================================================


def make_datapoint(
    seconds_ago: int,
    value: float,
    statistic: str = "Average",
    now: datetime = FIXED_NOW,
) -> Dict[str, Any]:
    """GetMetricStatistics Datapoint 생성 헬퍼"""
    return {
        "Timestamp": now - timedelta(seconds=seconds_ago),
        statistic: value,
        "Unit": "Count",
    }


def make_response(datapoints: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    """GetMetricStatistics 응답 생성 헬퍼"""
    return {"Label": "", "Datapoints": datapoints or []}


def create_mock_client_error(
    error_code: str,
    error_message: str = "Test error",
    operation: str = "GetMetricStatistics",
) -> Exception:
    """ClientError 생성 헬퍼"""
    from botocore.exceptions import ClientError

    return ClientError(
        {
            "Error": {
                "Code": error_code,
                "Message": error_message,
            }
        },
        operation,
    )


# =============================================================================
# moto 통합 (선택적)
# =============================================================================

try:
    import moto

    @pytest.fixture
    def aws_credentials(monkeypatch):
        """moto 사용 시 AWS 자격 증명 설정"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
        monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
        monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
        monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
        monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)

    @pytest.fixture
    def moto_aws(aws_credentials):
        """moto를 사용한 AWS 모킹 (STS, CloudWatch)"""
        with moto.mock_aws():
            yield

    @pytest.fixture
    def moto_cloudwatch(moto_aws):
        """moto를 사용한 CloudWatch 모킹"""
        import boto3

        yield boto3.client("cloudwatch", region_name=TEST_REGION)

except ImportError:
    # moto가 설치되지 않은 경우 더미 픽스처
    @pytest.fixture
    def moto_aws():
        pytest.skip("moto not installed")

    @pytest.fixture
    def moto_cloudwatch():
        pytest.skip("moto not installed")
