import json

import httpx
import pytest

from adserver_acceptance import cli
from adserver_acceptance.config import API_KEY_ENV_VAR, API_URL_ENV_VAR
from adserver_acceptance.runner import run_suite

SUITE = {
    "minimum_hits": 2,
    "precision_threshold": 0.01,
    "requests_limit": 10,
    "api": {"api_url": "https://api.example.test", "api_key": "secret"},
    "scenarios": [{"label": "z1", "publisher": "1", "zone": "2", "targets": {"b1": 1}}],
}


def _stub(click: str) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "api.example.test":
            return httpx.Response(200, json={"result": "https://ads.example.test/vast"})
        return httpx.Response(200, text=f"<VAST><ClickThrough>{click}</ClickThrough></VAST>")

    return httpx.MockTransport(handler)


@pytest.fixture
def suite_file(tmp_path, monkeypatch):
    monkeypatch.delenv(API_URL_ENV_VAR, raising=False)
    monkeypatch.delenv(API_KEY_ENV_VAR, raising=False)
    path = tmp_path / "suite.json"
    path.write_text(json.dumps(SUITE))
    return path


def _patch_transport(monkeypatch, click: str) -> None:
    transport = _stub(click)
    monkeypatch.setattr(
        cli, "run_suite", lambda suite, labels=None: run_suite(suite, labels, transport=transport)
    )


def test_success_exit_code(suite_file, monkeypatch, capsys) -> None:
    _patch_transport(monkeypatch, "b1")
    assert cli.main(["--config", str(suite_file), "--log-level", "WARNING"]) == 0
    assert "z1: converged after 2 requests" in capsys.readouterr().out


def test_unknown_banner_exit_code(suite_file, monkeypatch) -> None:
    _patch_transport(monkeypatch, "b7")
    assert cli.main(["--config", str(suite_file), "--log-level", "WARNING"]) == 1


def test_unknown_scenario_exit_code(suite_file, monkeypatch) -> None:
    _patch_transport(monkeypatch, "b1")
    assert cli.main(["--config", str(suite_file), "--scenario", "nope", "--log-level", "WARNING"]) == 1


def test_missing_config_exit_code(tmp_path) -> None:
    assert cli.main(["--config", str(tmp_path / "absent.json"), "--log-level", "WARNING"]) == 1


def test_bad_arguments_exit_with_usage_error() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--no-such-flag"])
    assert excinfo.value.code == 2
