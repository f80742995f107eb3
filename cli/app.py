"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 플러그인 실행 진입점입니다.
설정 → 자격 증명 해석 → 메트릭 조회 → 출력 순서로 한 번 실행하고 종료합니다.

명령어 구조:
    aws-dx-metrics --direct-connect-connection dxcon-abc123
    aws-dx-metrics --direct-connect-connection dxcon-abc123 --role-arn arn:aws:iam::111122223333:role/ReadOnly
    aws-dx-metrics --direct-connect-connection dxcon-abc123 --no-full-spec-support
    MACKEREL_AGENT_PLUGIN_META=1 aws-dx-metrics   # 그래프 정의 출력

종료 코드:
    0: 성공 (일부 메트릭 조회 실패 포함)
    1: 설정/자격 증명 오류 (메트릭 조회 전 중단)
"""

import logging

import click
from rich.console import Console
from rich.markup import escape

from cli.output import render_definitions, render_values, wants_meta
from core.config import DEFAULT_MAX_WORKERS, DEFAULT_TIMEOUT, ENV_ACCESS_KEY_ID, ENV_REGION, ENV_SECRET_ACCESS_KEY
from core.config import DxConfig, get_version
from core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# stdout은 플러그인 출력 전용이므로 에러 메시지는 stderr로
err_console = Console(stderr=True)


def _setup_logging(debug: bool) -> None:
    # WARNING 레벨 기본, 로그는 stderr로 출력
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.command(name="aws-dx-metrics")
@click.version_option(version=get_version(), prog_name="aws-dx-metrics")
@click.option("--metric-key-prefix", "prefix", default="", help="Metric Key Prefix (기본: Dx)")
@click.option("--access-key-id", "access_key_id", envvar=ENV_ACCESS_KEY_ID, default=None, help="AWS Access Key ID")
@click.option(
    "--secret-key-id",
    "secret_access_key",
    envvar=ENV_SECRET_ACCESS_KEY,
    default=None,
    help="AWS Secret Access Key",
)
@click.option("--region", "region", envvar=ENV_REGION, default=None, help="AWS Region")
@click.option("--role-arn", "role_arn", default="", help="AssumeRole 대상 IAM Role ARN")
@click.option("--direct-connect-connection", "connection_id", default="", help="Direct Connect 연결 ID")
@click.option(
    "--full-spec-support/--no-full-spec-support",
    "full_spec_support",
    default=True,
    show_default=True,
    help="확장 메트릭 전체 조회",
)
@click.option("--timeout", type=float, default=DEFAULT_TIMEOUT, show_default=True, help="API 호출 타임아웃 (초)")
@click.option(
    "--max-workers",
    type=int,
    default=DEFAULT_MAX_WORKERS,
    show_default=True,
    help="메트릭 병렬 조회 워커 수 (1=순차)",
)
@click.option("--debug", is_flag=True, help="디버그 로그 출력")
def cli(
    prefix: str,
    access_key_id: str | None,
    secret_access_key: str | None,
    region: str | None,
    role_arn: str,
    connection_id: str,
    full_spec_support: bool,
    timeout: float,
    max_workers: int,
    debug: bool,
) -> None:
    """Direct Connect 연결 CloudWatch 메트릭 조회"""
    _setup_logging(debug)

    options = {
        "prefix": prefix,
        "access_key_id": access_key_id,
        "secret_access_key": secret_access_key,
        "region": region,
        "role_arn": role_arn,
        "connection_id": connection_id,
        "full_spec_support": full_spec_support,
        "timeout": timeout,
        "max_workers": max_workers,
    }

    try:
        config = DxConfig.from_env(**{k: v for k, v in options.items() if v is not None})
        lines = run(config, meta=wants_meta())
    except ConfigurationError as e:
        err_console.print(f"[red]설정 오류: {escape(str(e))}[/red]")
        raise SystemExit(1) from e

    for line in lines:
        click.echo(line)


def run(config: DxConfig, meta: bool = False) -> list[str]:
    """플러그인 1회 실행

    Args:
        config: 실행 설정
        meta: True면 그래프 정의만 생성 (AWS 호출 없음)

    Returns:
        출력 라인 목록

    Raises:
        ConfigurationError: 자격 증명 해석 또는 클라이언트 생성 실패
    """
    from core.auth import create_cloudwatch_client
    from plugins.directconnect import build_graph_definition, fetch_metrics

    prefix = config.metric_key_prefix
    graphs = build_graph_definition(prefix, config.full_spec_support)

    if meta:
        return render_definitions(prefix, graphs)

    cloudwatch = create_cloudwatch_client(config)
    values = fetch_metrics(
        cloudwatch,
        config.target,
        extended=config.full_spec_support,
        max_workers=config.max_workers,
    )
    return render_values(prefix, graphs, values)


if __name__ == "__main__":
    cli()
