import json
import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "list_resources.py"


@pytest.fixture
def main(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return runpy.run_path(str(SCRIPT), run_name="list_resources")["main"]


def test_lists_mock_resources_as_json_lines(main, capsys):
    assert main(["order_returns", "--mock", "--limit", "2"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert [json.loads(line)["id"] for line in lines] == ["orret_123", "orret_456", "orret_789"]


def test_fetches_one_object(main, capsys):
    assert main(["report_runs", "--mock", "--id", "frr_123"]) == 0

    assert json.loads(capsys.readouterr().out)["report_type"] == "balance.summary.1"


def test_out_of_range_limit_exits_with_usage_code(main, capsys):
    assert main(["order_returns", "--mock", "--limit", "500"]) == 2
    assert capsys.readouterr().out == ""


def test_invalid_config_file_exits_with_usage_code(main, tmp_path):
    config_path = tmp_path / "bad.yml"
    config_path.write_text("timeout_seconds: -5\n", encoding="utf-8")

    assert main(["order_returns", "--config", str(config_path)]) == 2


def test_missing_config_file_exits_with_usage_code(main, tmp_path):
    assert main(["order_returns", "--config", str(tmp_path / "missing.yml")]) == 2


def test_unknown_id_exits_with_request_failure(main):
    assert main(["order_returns", "--mock", "--id", "orret_missing"]) == 1
