"""Shared fixtures"""

import pytest

from easy_password.application.services.password_registry import (
    PasswordRegistry,
    reset_registry,
)
from easy_password.infrastructure.config import reset_settings

ENV_VARS = [
    "EASY_PASSWORD_HIDE",
    "EASY_PASSWORD_DEFAULT_GENERATOR",
    "EASY_PASSWORD_DEFAULT_CHECKERS",
    "EASY_PASSWORD_GENERATED_LENGTH",
    "EASY_PASSWORD_MIN_LENGTH",
    "EASY_PASSWORD_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_process_state(monkeypatch):
    """Every test starts with default settings and no process-wide registry"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_registry()
    yield
    reset_settings()
    reset_registry()


@pytest.fixture
def registry():
    """Empty registry isolated from the process-wide one"""
    return PasswordRegistry()
