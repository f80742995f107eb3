# tests/cli/test_cli_app.py
"""
cli/app.py 단위 테스트

CLI 엔트리포인트 테스트.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cli.app import cli, run
from core.config import DxConfig
from core.exceptions import ConfigurationError


@pytest.fixture
def runner():
    """Click CliRunner"""
    return CliRunner()


# =============================================================================
# CLI 테스트
# =============================================================================


class TestCLI:
    """cli 명령 테스트"""

    def test_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "aws-dx-metrics" in result.output

    @patch("plugins.directconnect.fetch_metrics")
    @patch("core.auth.resolver.create_cloudwatch_client")
    def test_success_output(self, mock_create_client, mock_fetch, runner):
        mock_fetch.return_value = {"ConnectionState": 1.0}

        result = runner.invoke(
            cli,
            ["--direct-connect-connection", "dxcon-1", "--no-full-spec-support", "--metric-key-prefix", "tokyo"],
        )

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 1
        key, value, _epoch = lines[0].split("\t")
        assert key == "tokyo.State.ConnectionState"
        assert value == "1"
        assert mock_fetch.call_args.kwargs["extended"] is False

    @patch("plugins.directconnect.fetch_metrics")
    @patch("core.auth.resolver.create_cloudwatch_client")
    def test_options_build_config(self, mock_create_client, mock_fetch, runner):
        mock_fetch.return_value = {}

        runner.invoke(
            cli,
            [
                "--direct-connect-connection",
                "dxcon-1",
                "--role-arn",
                "arn:aws:iam::123456789012:role/DxReadOnly",
                "--region",
                "us-east-1",
                "--timeout",
                "3",
                "--max-workers",
                "4",
            ],
        )

        config = mock_create_client.call_args.args[0]
        assert config.role_arn == "arn:aws:iam::123456789012:role/DxReadOnly"
        assert config.region == "us-east-1"
        assert config.timeout == 3
        assert config.full_spec_support is True
        assert mock_fetch.call_args.kwargs["max_workers"] == 4
        assert mock_fetch.call_args.args[1].resource_id == "dxcon-1"

    @patch("plugins.directconnect.fetch_metrics")
    @patch("core.auth.resolver.create_cloudwatch_client")
    def test_env_defaults(self, mock_create_client, mock_fetch, runner, monkeypatch):
        """자격 증명/리전 옵션 기본값은 환경 변수"""
        monkeypatch.setenv("AWS_ACCESS_KEY_ID", "AKIAENV")
        monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-1")
        mock_fetch.return_value = {}

        runner.invoke(cli, ["--direct-connect-connection", "dxcon-1"])

        config = mock_create_client.call_args.args[0]
        assert config.access_key_id == "AKIAENV"
        assert config.region == "eu-west-1"

    @patch("plugins.directconnect.fetch_metrics")
    @patch("core.auth.resolver.create_cloudwatch_client")
    def test_configuration_error_exits_before_fetch(self, mock_create_client, mock_fetch, runner):
        mock_create_client.side_effect = ConfigurationError("AWS 자격 증명을 찾을 수 없습니다")

        result = runner.invoke(cli, ["--direct-connect-connection", "dxcon-1"])

        assert result.exit_code == 1
        mock_fetch.assert_not_called()

    def test_invalid_timeout_exits(self, runner):
        result = runner.invoke(cli, ["--direct-connect-connection", "dxcon-1", "--timeout", "0"])

        assert result.exit_code == 1

    @patch("core.auth.resolver.create_cloudwatch_client")
    def test_meta_mode(self, mock_create_client, runner, monkeypatch):
        """메타 모드는 그래프 정의만 출력 (AWS 호출 없음)"""
        monkeypatch.setenv("MACKEREL_AGENT_PLUGIN_META", "1")

        result = runner.invoke(cli, ["--direct-connect-connection", "dxcon-1"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "# mackerel-agent-plugin"
        assert "Dx.LightLevel" in json.loads(lines[1])["graphs"]
        mock_create_client.assert_not_called()


# =============================================================================
# run 테스트
# =============================================================================


class TestRun:
    """run 함수 테스트"""

    @patch("plugins.directconnect.fetch_metrics")
    @patch("core.auth.resolver.create_cloudwatch_client")
    def test_all_selected_metrics_emitted(self, mock_create_client, mock_fetch):
        cloudwatch = MagicMock()
        mock_create_client.return_value = cloudwatch
        mock_fetch.return_value = {
            "ConnectionState": 1.0,
            "ConnectionEncryptionState": 1.0,
            "ConnectionBpsEgress": 0.0,
            "ConnectionBpsIngress": 0.0,
            "ConnectionPpsEgress": 0.0,
            "ConnectionPpsIngress": 0.0,
            "ConnectionLightLevelTx": -2.5,
            "ConnectionLightLevelRx": -3.0,
            "ConnectionErrorCount": 0.0,
        }

        lines = run(DxConfig(connection_id="dxcon-1"))

        assert len(lines) == 9
        assert mock_fetch.call_args.args[0] is cloudwatch
        assert any(line.startswith("Dx.LightLevel.ConnectionLightLevelTx\t-2.500000\t") for line in lines)
