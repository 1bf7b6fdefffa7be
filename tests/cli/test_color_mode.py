# topmark:header:start
#
#   project      : Doculint
#   file         : test_color_mode.py
#   file_relpath : tests/cli/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for color mode resolution."""

from __future__ import annotations

import pytest

from doculint.cli.options import ColorMode, resolve_color_mode

pytestmark = pytest.mark.cli


@pytest.fixture(autouse=True)
def _clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.mark.parametrize("isatty", [True, False])
def test_explicit_mode_wins(isatty: bool, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.ALWAYS, stdout_isatty=isatty) is True
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.NEVER, stdout_isatty=isatty) is False


@pytest.mark.parametrize("mode", [None, ColorMode.AUTO])
def test_auto_follows_tty(mode: ColorMode | None) -> None:
    assert resolve_color_mode(cli_mode=mode, stdout_isatty=True) is True
    assert resolve_color_mode(cli_mode=mode, stdout_isatty=False) is False


def test_force_color_enables_without_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False) is True


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert resolve_color_mode(cli_mode=None, stdout_isatty=False) is False


def test_no_color_disables_on_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False
