import pytest

from slidetree import test_runner


def test_run_tests_forwards_arguments(monkeypatch):
    recorded = {}

    def fake_main(args):
        recorded["args"] = args
        return 0

    monkeypatch.setattr(test_runner.pytest, "main", fake_main)

    exit_code = test_runner.run_tests(["-k", "sample"])

    assert exit_code == 0
    assert recorded["args"] == ["-k", "sample"]


def test_run_default_uses_quiet_option(monkeypatch):
    captured = {}

    def fake_main(args):
        captured["args"] = args
        return 0

    monkeypatch.setattr(test_runner.pytest, "main", fake_main)

    exit_code = test_runner.run_default()

    assert exit_code == 0
    assert captured["args"] == list(test_runner.DEFAULT_PYTEST_ARGS)


def test_run_suite_selects_its_modules(monkeypatch):
    captured = {}

    def fake_main(args):
        captured["args"] = args
        return 5

    monkeypatch.setattr(test_runner.pytest, "main", fake_main)

    exit_code = test_runner.run_suite("diff", ["-x"])

    assert exit_code == 5
    assert captured["args"][:2] == ["-q", "-x"]
    assert [arg.rsplit("/", 1)[-1] for arg in captured["args"][2:]] == list(
        test_runner.SUITES["diff"]
    )


def test_suite_modules_exist():
    for modules in test_runner.SUITES.values():
        for module in modules:
            assert (test_runner.TESTS_DIR / module).is_file(), module


def test_unknown_suite_is_rejected():
    with pytest.raises(ValueError, match="unknown test suite"):
        test_runner.run_suite("nope")
