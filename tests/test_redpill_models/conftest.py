from __future__ import annotations

import pytest

from redpill_models.cache import set_default_cache


@pytest.fixture(autouse=True)
def fresh_default_cache(monkeypatch: pytest.MonkeyPatch):
    for name in ("REDPILL_BASE_URL", "REDPILL_DEFAULT_MODEL", "REDPILL_CACHE_TTL"):
        monkeypatch.delenv(name, raising=False)
    set_default_cache(None)
    yield
    set_default_cache(None)


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
