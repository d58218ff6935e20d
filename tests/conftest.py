"""Pytest fixtures for bezierclip tests."""

import pytest

from bezierclip import tolerance
from bezierclip.types import Interval


@pytest.fixture(autouse=True)
def _isolate_tolerance(monkeypatch):
    """Keep the process-wide tolerance and its env override out of each test."""
    monkeypatch.delenv(tolerance.EPSILON_ENV_VAR, raising=False)
    monkeypatch.setattr(tolerance, "_current_epsilon", None)


@pytest.fixture
def no_user_config(tmp_path, monkeypatch):
    """Point the user-level config path at a file that does not exist."""
    monkeypatch.setattr("bezierclip.config.USER_CONFIG_PATH", tmp_path / "no-exist.toml")
    return tmp_path


@pytest.fixture
def empty_interval():
    """The canonical empty interval."""
    return Interval()


@pytest.fixture
def unit_interval():
    """The interval [0, 1]."""
    return Interval(0.0, 1.0)


@pytest.fixture
def spanning_interval():
    """An interval spanning zero, [-2, 3]."""
    return Interval(-2.0, 3.0)
