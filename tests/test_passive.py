import subprocess
from unittest import mock

import pytest

from asmm8.passive import PassiveRunner
from asmm8.subfinder import SubfinderError


def _fake_subfinder(fail_for=()):
    def run(command, **kwargs):
        domain = command[2]
        if domain in fail_for:
            raise subprocess.CalledProcessError(1, command, output="", stderr="boom")
        stdout = f"www.{domain}\napi.{domain}\nwww.{domain}\nunrelated.org\n"
        return subprocess.CompletedProcess(command, 0, stdout=stdout, stderr="")
    return run


def test_runner_initialization_with_seed_domains():
    runner = PassiveRunner(seed_domains=["example.com", "test.com"], results=0, subdomains={})
    assert runner.seed_domains == ["example.com", "test.com"]
    assert runner.results == 0
    assert runner.subdomains == {}


def test_runner_initialization_defaults_are_empty():
    runner = PassiveRunner()
    assert runner.seed_domains == []
    assert runner.subdomains == {}


def test_runner_with_subdomains():
    runner = PassiveRunner(
        seed_domains=["example.com"],
        subdomains={"example.com": ["sub1.example.com", "sub2.example.com"]},
    )
    assert len(runner.subdomains["example.com"]) == 2


def test_run_passive_enum_no_domains():
    with mock.patch("asmm8.subfinder.subprocess.run") as run:
        results = PassiveRunner().run_passive_enum({})
    assert results == {}
    assert run.call_count == 0


def test_run_passive_enum_merges_previous_and_dedupes():
    runner = PassiveRunner(seed_domains=["example.com", "test.com"])
    prev = {"example.com": ["old.example.com", "api.example.com"]}
    with mock.patch("asmm8.subfinder.subprocess.run", side_effect=_fake_subfinder()):
        results = runner.run_passive_enum(prev)
    assert results["example.com"] == ["www.example.com", "api.example.com", "old.example.com"]
    assert results["test.com"] == ["www.test.com", "api.test.com"]
    assert set(results) == {"example.com", "test.com"}


def test_run_passive_enum_domain_without_findings_gets_previous():
    runner = PassiveRunner(seed_domains=["example.com"])
    empty = subprocess.CompletedProcess([], 0, stdout="", stderr="")
    with mock.patch("asmm8.subfinder.subprocess.run", return_value=empty):
        results = runner.run_passive_enum({"example.com": ["a.example.com", "a.example.com"]})
    assert results == {"example.com": ["a.example.com"]}


def test_run_passive_enum_error_carries_partial_results():
    runner = PassiveRunner(seed_domains=["example.com", "bad.com"])
    with mock.patch("asmm8.subfinder.subprocess.run", side_effect=_fake_subfinder(fail_for={"bad.com"})):
        with pytest.raises(SubfinderError) as info:
            runner.run_passive_enum({"example.com": ["old.example.com"]})
    assert info.value.seed_domain == "bad.com"
    assert info.value.partial_results == {
        "example.com": ["www.example.com", "api.example.com", "www.example.com"],
    }