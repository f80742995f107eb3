"""
core/exceptions.py - 통합 예외 계층 구조

플러그인 전체에서 사용되는 예외 클래스들을 정의합니다.
실행 전체를 중단시키는 설정 오류와, 개별 메트릭 단위로 흡수되는 조회 오류를 구분합니다.

예외 계층 구조:
    DxError (베이스)
    ├── ConfigurationError (자격 증명/클라이언트 구성 실패) - 치명적
    └── MetricFetchError (개별 메트릭 조회 실패) - 0으로 대체
        └── UnsupportedMetricCondition (확장 메트릭 미지원) - 오류 아님

Usage:
    from core.exceptions import MetricFetchError

    try:
        response = cloudwatch.get_metric_statistics(**params)
    except ClientError as e:
        raise MetricFetchError.from_client_error(
            metric_name="ConnectionState",
            resource_id="dxcon-xxxx",
            client_error=e,
        ) from e
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# 베이스 예외
# =============================================================================


class DxError(Exception):
    """Direct Connect 플러그인 기본 예외 클래스

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigurationError(DxError):
    """자격 증명 해석 또는 클라이언트 구성 실패

    메트릭 조회 전에 발생하며 실행 전체를 중단시킵니다.

    Attributes:
        config_key: 문제가 된 설정 키 이름 (옵션)
    """

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.config_key = config_key
        if config_key:
            self.details["config_key"] = config_key


# =============================================================================
# 메트릭 조회 관련 예외
# =============================================================================


class MetricFetchError(DxError):
    """단일 메트릭 조회 실패

    API 호출 실패 또는 필수 메트릭의 데이터포인트 부재 시 발생합니다.
    fetch_metrics()에서 로깅 후 0으로 대체되며, 실행 실패로 전파되지 않습니다.
    """

    def __init__(
        self,
        metric_name: str,
        resource_id: str,
        reason: str,
        error_code: str | None = None,
        cause: Exception | None = None,
    ):
        message = f"메트릭 조회 실패 [{metric_name}/{resource_id}]: {reason}"
        if error_code:
            message = f"{message} ({error_code})"
        super().__init__(message, cause)
        self.metric_name = metric_name
        self.resource_id = resource_id
        self.reason = reason
        self.error_code = error_code
        self.details.update(
            {
                "metric_name": metric_name,
                "resource_id": resource_id,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        metric_name: str,
        resource_id: str,
        client_error: Exception,
    ) -> MetricFetchError:
        """botocore 예외로부터 생성

        Args:
            metric_name: 조회한 메트릭 이름
            resource_id: Direct Connect 연결 ID
            client_error: ClientError / BotoCoreError 예외

        Returns:
            MetricFetchError 인스턴스
        """
        error_code = None
        reason = "API 호출 실패"

        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            reason = error_info.get("Message") or reason

        return cls(
            metric_name=metric_name,
            resource_id=resource_id,
            reason=reason,
            error_code=error_code,
            cause=client_error,
        )


class UnsupportedMetricCondition(MetricFetchError):
    """확장 모드에서 확장 메트릭의 데이터포인트가 없는 경우

    해당 연결이 메트릭을 지원하지 않는 것으로 간주합니다. 오류가 아닙니다.
    """

    def __init__(self, metric_name: str, resource_id: str):
        super().__init__(
            metric_name=metric_name,
            resource_id=resource_id,
            reason="데이터포인트 없음 (지원되지 않는 메트릭일 수 있음)",
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

_ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
    "UnrecognizedClientException",
    "InvalidClientTokenId",
}

_THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}


def get_error_code(error: Exception) -> str | None:
    """예외에서 AWS 에러 코드 추출"""
    if isinstance(error, MetricFetchError):
        return error.error_code

    if hasattr(error, "response"):
        return error.response.get("Error", {}).get("Code")

    return None


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return get_error_code(error) in _ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인"""
    return get_error_code(error) in _THROTTLING_CODES
