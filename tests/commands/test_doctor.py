"""Doctor - tests for the diagnostics command (connectivity patched)."""

from typer.testing import CliRunner

import cli.doctor as doctor
import cli.main as cli_main

runner = CliRunner()


def test_doctor_reports_ok(monkeypatch):
    async def fake_check(url, settings):
        return True, "HTTP 200"

    monkeypatch.setattr(doctor, "_check_http", fake_check)
    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "HTTP 200" in result.output


def test_doctor_fails_when_api_unreachable(monkeypatch):
    async def fake_check(url, settings):
        return False, "ConnectError"

    monkeypatch.setattr(doctor, "_check_http", fake_check)
    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output
