"""Shared pytest fixtures for labelenum tests."""

from __future__ import annotations

import pytest

from labelenum import LabeledEnum, MetadataCache
from labelenum.config import MISSING_LABEL_ENV_VAR


@pytest.fixture(autouse=True)
def _clear_policy_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test with the default missing label policy."""
    monkeypatch.delenv(MISSING_LABEL_ENV_VAR, raising=False)


@pytest.fixture
def status_enum() -> type[LabeledEnum]:
    """Return a fresh two-constant enum type."""

    class Status(LabeledEnum):
        SUCCESS = 0
        ERROR = 1

        __labels__ = {0: "request success", 1: "request failure"}

    return Status


@pytest.fixture
def cache() -> MetadataCache:
    """Return an empty, private metadata cache."""
    return MetadataCache()
