"""
tests/cli/test_cli_output.py - cli/output.py 테스트
"""

import json

from cli.output import META_HEADER, format_value, render_definitions, render_values, wants_meta
from plugins.directconnect.graphs import build_graph_definition

NOW = 1717243200


class TestFormatValue:
    """format_value 함수 테스트"""

    def test_integral(self):
        assert format_value(1.0) == "1"
        assert format_value(0.0) == "0"

    def test_fraction(self):
        assert format_value(-3.25) == "-3.250000"


class TestRenderValues:
    """render_values 함수 테스트"""

    def test_non_extended(self):
        graphs = build_graph_definition("Dx", extended=False)

        lines = render_values("Dx", graphs, {"ConnectionState": 1.0}, now=NOW)

        assert lines == [f"Dx.State.ConnectionState\t1\t{NOW}"]

    def test_graph_order_and_prefix(self):
        graphs = build_graph_definition("tokyo", extended=True)
        values = {
            "ConnectionState": 1.0,
            "ConnectionEncryptionState": 0.0,
            "ConnectionBpsEgress": 1500.5,
            "ConnectionErrorCount": 2.0,
        }

        lines = render_values("tokyo", graphs, values, now=NOW)

        assert lines == [
            f"tokyo.State.ConnectionState\t1\t{NOW}",
            f"tokyo.State.ConnectionEncryptionState\t0\t{NOW}",
            f"tokyo.Bps.ConnectionBpsEgress\t1500.500000\t{NOW}",
            f"tokyo.Error.ConnectionErrorCount\t2\t{NOW}",
        ]

    def test_skip_nan(self):
        graphs = build_graph_definition("Dx", extended=False)

        assert render_values("Dx", graphs, {"ConnectionState": float("nan")}, now=NOW) == []


class TestRenderDefinitions:
    """render_definitions 함수 테스트"""

    def test_header_and_json(self):
        graphs = build_graph_definition("Dx", extended=True)

        lines = render_definitions("Dx", graphs)

        assert lines[0] == META_HEADER
        payload = json.loads(lines[1])
        assert set(payload["graphs"]) == {"Dx.State", "Dx.Bps", "Dx.Pps", "Dx.LightLevel", "Dx.Error"}
        assert payload["graphs"]["Dx.Bps"]["unit"] == "bits/sec"
        assert payload["graphs"]["Dx.State"]["label"] == "Dx connection status"


def test_wants_meta(monkeypatch):
    assert wants_meta() is False
    monkeypatch.setenv("MACKEREL_AGENT_PLUGIN_META", "1")
    assert wants_meta() is True
