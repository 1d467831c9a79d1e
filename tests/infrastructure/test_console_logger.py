from __future__ import annotations

import json

from infrastructure.logging.console_logger import ConsoleLogger


def _payload(line: str, event: str) -> dict:
    assert line.startswith(f"{event} ")
    return json.loads(line.replace(f"{event} ", "", 1))


def test_console_logger_emits_type_field(capsys) -> None:
    logger = ConsoleLogger()

    logger.info("step.start", step_id="s1")

    captured = capsys.readouterr()
    payload = _payload(captured.out.strip(), "step.start")
    assert payload["type"] == "step.start"
    assert payload["level"] == "info"
    assert payload["step_id"] == "s1"


def test_console_logger_bind_merges_fields(capsys) -> None:
    logger = ConsoleLogger().bind(run_id="r1").bind(scenario="users")

    logger.warning("step.failed", step_id="s2")

    payload = _payload(capsys.readouterr().out.strip(), "step.failed")
    assert payload["run_id"] == "r1"
    assert payload["scenario"] == "users"
    assert payload["level"] == "warning"


def test_console_logger_serializes_unknown_types(capsys) -> None:
    logger = ConsoleLogger()

    logger.debug("http.request", body=b"raw")

    payload = _payload(capsys.readouterr().out.strip(), "http.request")
    assert payload["body"] == "b'raw'"
