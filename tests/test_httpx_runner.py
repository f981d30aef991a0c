import subprocess
from unittest import mock

import pytest

from asmm8.httpx_runner import HttpxError, run_httpx


def test_run_httpx_writes_list_runs_tool_and_cleans_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    seen = {}

    def run(command, **kwargs):
        seen["command"] = command
        seen["content"] = (tmp_path / "tempHttpx.txt").read_text()
        return subprocess.CompletedProcess(command, 0)

    with mock.patch("asmm8.httpx_runner.subprocess.run", side_effect=run):
        result = run_httpx(["a.example.com", "b.example.com"])
    assert result is None
    assert seen == {
        "command": ["httpx", "-l", "tempHttpx.txt", "-silent", "-td", "-csv", "-o", "temp.csv"],
        "content": "a.example.com\nb.example.com\n",
    }
    assert not (tmp_path / "tempHttpx.txt").exists()


def test_run_httpx_failure_raises_and_keeps_list(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    error = subprocess.CalledProcessError(1, ["httpx"])
    with mock.patch("asmm8.httpx_runner.subprocess.run", side_effect=error):
        with pytest.raises(HttpxError):
            run_httpx(["a.example.com"])
    assert (tmp_path / "tempHttpx.txt").read_text() == "a.example.com\n"


def test_run_httpx_missing_binary_raises(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with mock.patch("asmm8.httpx_runner.subprocess.run", side_effect=FileNotFoundError("httpx")):
        with pytest.raises(HttpxError):
            run_httpx([])