"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from nightbase.config import Settings


def test_default_timezone(monkeypatch):
    monkeypatch.delenv("DISPLAY_TIMEZONE", raising=False)
    assert Settings(_env_file=None).display_timezone == "Asia/Tokyo"


def test_timezone_from_env(monkeypatch):
    monkeypatch.setenv("DISPLAY_TIMEZONE", "Europe/London")
    assert Settings(_env_file=None).display_timezone == "Europe/London"


def test_misspelled_timezone_is_rejected(monkeypatch):
    monkeypatch.setenv("DISPLAY_TIMEZONE", "Asia/Tokio")
    with pytest.raises(ValidationError, match="Unknown timezone"):
        Settings(_env_file=None)


def test_negative_visible_groups_rejected(monkeypatch):
    monkeypatch.setenv("FLOOR_BOARD_VISIBLE_GROUPS", "-1")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
