import random
from datetime import datetime
from typing import Any, Callable, List

import pytest
import requests

from ziamet import config
from ziamet.data import fetchers, generate_mock_stations
from ziamet.models import StationSnapshot


class _StubResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, json_error: bool = False) -> None:
        self.status_code = status_code
        self._payload = payload
        self._json_error = json_error

    def json(self) -> Any:
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


@pytest.fixture
def stations() -> List[StationSnapshot]:
    return generate_mock_stations(rng=random.Random(7), now=datetime(2026, 3, 1, 14, 5))


@pytest.fixture
def stub_api(monkeypatch: pytest.MonkeyPatch) -> Callable[..., List[str]]:
    """Replaces requests.get; returns the list of URLs requested."""
    calls: List[str] = []

    def _apply(status_code: int = 200, payload: Any = None, *, exc: Exception | None = None, json_error: bool = False):
        def _fake_get(url: str, timeout: float | None = None, **kwargs: Any) -> _StubResponse:
            calls.append(url)
            if exc is not None:
                raise exc
            return _StubResponse(status_code, payload, json_error)

        monkeypatch.setattr(fetchers.requests, "get", _fake_get)
        return calls

    return _apply


@pytest.fixture
def network_down(stub_api: Callable[..., List[str]]) -> List[str]:
    return stub_api(exc=requests.ConnectionError("Name or service not known"))


@pytest.fixture
def live_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "USE_LIVE_PAYLOAD", True)
