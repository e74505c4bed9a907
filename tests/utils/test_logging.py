import json
import logging

from adserver_acceptance.utils import JsonFormatter, configure_logging, get_logger, resolve_log_level


def test_get_logger_is_namespaced() -> None:
    assert get_logger("runner").name == "adserver_acceptance.runner"
    assert get_logger("adserver_acceptance.client.api").name == "adserver_acceptance.client.api"


def test_configure_logging_respects_env_level(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    configure_logging()
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_tees_to_file(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    configure_logging(level="INFO", log_file=str(log_file))
    get_logger("test").info("hello file")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello file" in log_file.read_text()


def test_json_formatter_emits_json() -> None:
    record = logging.LogRecord("adserver_acceptance.test", logging.INFO, __file__, 1, "n=%d", (3,), None)
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "INFO"
    assert payload["name"] == "adserver_acceptance.test"
    assert payload["message"] == "n=3"


def test_resolve_log_level(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert resolve_log_level() == logging.INFO
    assert resolve_log_level(" warning ") == logging.WARNING
    assert resolve_log_level("chatty") == logging.INFO
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    assert resolve_log_level() == logging.ERROR
    assert resolve_log_level("DEBUG") == logging.DEBUG


def test_module_loggers_use_short_names() -> None:
    from adserver_acceptance import cli, runner
    from adserver_acceptance.client import api, creative
    from adserver_acceptance.convergence import tracker

    names = {module.logger.name for module in (api, creative, cli, runner, tracker)}
    assert names == {
        "adserver_acceptance.api",
        "adserver_acceptance.creative",
        "adserver_acceptance.cli",
        "adserver_acceptance.runner",
        "adserver_acceptance.convergence",
    }
