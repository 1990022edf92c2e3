"""Unit tests for crossrun.config."""

import pytest
from pydantic import ValidationError

from crossrun.config import DEBUG_ENV, FAILURE_EXIT_CODE_ENV, SHELL_ENV, load_config
from crossrun.models import DEFAULT_FAILURE_EXIT_CODE, DEFAULT_SHELL, LauncherConfig


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (SHELL_ENV, DEBUG_ENV, FAILURE_EXIT_CODE_ENV):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    config = load_config()

    assert config == LauncherConfig()
    assert config.shell == DEFAULT_SHELL == "bash"
    assert config.failure_exit_code == DEFAULT_FAILURE_EXIT_CODE == 1
    assert config.debug is False


def test_shell_override(monkeypatch):
    monkeypatch.setenv(SHELL_ENV, " /usr/local/bin/bash ")

    assert load_config().shell == "/usr/local/bin/bash"


def test_blank_shell_override_is_ignored(monkeypatch):
    monkeypatch.setenv(SHELL_ENV, "   ")

    assert load_config().shell == DEFAULT_SHELL


@pytest.mark.parametrize("value", ["1", "true", "YES", "on"])
def test_debug_truthy_values(monkeypatch, value):
    monkeypatch.setenv(DEBUG_ENV, value)

    assert load_config().debug is True


@pytest.mark.parametrize("value", ["", "0", "false", "no"])
def test_debug_falsy_values(monkeypatch, value):
    monkeypatch.setenv(DEBUG_ENV, value)

    assert load_config().debug is False


def test_failure_exit_code_override(monkeypatch):
    monkeypatch.setenv(FAILURE_EXIT_CODE_ENV, "70")

    assert load_config().failure_exit_code == 70


@pytest.mark.parametrize("value", ["0", "256", "-1", "abc"])
def test_invalid_failure_exit_code_raises(monkeypatch, value):
    monkeypatch.setenv(FAILURE_EXIT_CODE_ENV, value)

    with pytest.raises(ValidationError):
        load_config()
