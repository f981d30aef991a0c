import subprocess
from unittest import mock

from asmm8.amass import run_amass


def _fake_run(fail=None):
    def run(command, **kwargs):
        if command[0] == fail:
            raise subprocess.CalledProcessError(1, command, output="", stderr="boom")
        stdout = "api.example.com\nnoise.org\n\nwww.example.com\n" if command[0] == "oam_subs" else "ignored"
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")
    return run


def test_run_amass_returns_oam_subs_names():
    with mock.patch("asmm8.amass.subprocess.run", side_effect=_fake_run()) as run:
        result = run_amass("example.com")
    assert result == ["api.example.com", "www.example.com"]
    commands = [call.args[0] for call in run.call_args_list]
    assert commands[0] == [
        "amass", "enum", "-passive", "-config", "./configs/amassconfig.yaml",
        "-log", "./amasserror.log", "-nocolor", "-d", "example.com",
    ]
    assert commands[1] == ["oam_subs", "-names", "-config", "./configs/amassconfig.yaml", "-d", "example.com"]


def test_run_amass_enum_failure_stops_early():
    with mock.patch("asmm8.amass.subprocess.run", side_effect=_fake_run(fail="amass")) as run:
        result = run_amass("example.com")
    assert result == []
    assert run.call_count == 1


def test_run_amass_oam_subs_failure_gives_empty():
    with mock.patch("asmm8.amass.subprocess.run", side_effect=_fake_run(fail="oam_subs")) as run:
        result = run_amass("example.com")
    assert result == []
    assert run.call_count == 2


def test_run_amass_missing_binary_gives_empty():
    with mock.patch("asmm8.amass.subprocess.run", side_effect=FileNotFoundError("amass")):
        assert run_amass("example.com") == []