"""Tests for the launcher's web portal subprocess handling."""

import subprocess

import pytest

pytest.importorskip("tkinter")

import config  # noqa: E402
import simplecalc  # noqa: E402


class FakeProcess:
    """Stands in for subprocess.Popen; exit_code None means still running."""

    exit_code = None

    def __init__(self, *args, **kwargs):
        self.pid = 4321
        self.terminated = False

    def wait(self, timeout=None):
        if self.exit_code is None and not self.terminated:
            raise subprocess.TimeoutExpired("api.py", timeout)
        return self.exit_code

    def terminate(self):
        self.terminated = True


class CrashingProcess(FakeProcess):
    exit_code = 1


@pytest.fixture(autouse=True)
def no_real_portal(monkeypatch):
    monkeypatch.setattr(config, "API_STARTUP_WAIT", 0)
    monkeypatch.setattr(simplecalc, "get_local_ip", lambda: "192.168.1.20")
    monkeypatch.setattr(simplecalc, "api_process", None)


def test_live_portal_is_announced(monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "Popen", FakeProcess)
    assert simplecalc.start_api_server() is True
    out = capsys.readouterr().out
    assert "PID: 4321" in out
    assert f"http://localhost:{config.WEB_PORT}" in out
    assert f"http://192.168.1.20:{config.WEB_PORT}" in out


def test_portal_that_exits_is_not_announced(monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "Popen", CrashingProcess)
    assert simplecalc.start_api_server() is False
    out = capsys.readouterr().out
    assert "exited during startup (code 1)" in out
    assert "http://" not in out
    assert simplecalc.api_process is None


def test_portal_that_cannot_spawn(monkeypatch, capsys):
    def refuse(*args, **kwargs):
        raise OSError("no python")

    monkeypatch.setattr(subprocess, "Popen", refuse)
    assert simplecalc.start_api_server() is False
    assert "Failed to start API server: no python" in capsys.readouterr().out


def test_cleanup_terminates_running_portal(monkeypatch, capsys):
    monkeypatch.setattr(subprocess, "Popen", FakeProcess)
    simplecalc.start_api_server()
    process = simplecalc.api_process
    simplecalc.cleanup_api_server()
    assert process.terminated
    assert simplecalc.api_process is None
    assert "API server stopped" in capsys.readouterr().out


def test_localhost_only_when_not_bound_to_all_interfaces(monkeypatch):
    monkeypatch.setattr(config, "WEB_HOST", "127.0.0.1")
    assert simplecalc.portal_urls() == [
        ("This PC", f"http://localhost:{config.WEB_PORT}")]
