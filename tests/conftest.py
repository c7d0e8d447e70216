import json

import pytest
import requests

from hourly_weather import config


def make_response(status=200, payload=None, text=None):
    r = requests.Response()
    r.status_code = status
    r.encoding = "utf-8"
    body = text if text is not None else json.dumps(payload)
    r._content = body.encode("utf-8")
    return r


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ("WEATHER_HOURS", "WEATHER_TIMEOUT", "WEATHER_TABLE", "WEATHER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr(config, "CFG_PATH", str(tmp_path / "missing.json"))


@pytest.fixture
def forecast_payload():
    return {
        "latitude": 52.52,
        "longitude": 13.41,
        "timezone": "Europe/Berlin",
        "utc_offset_seconds": 7200,
        "current_weather": {
            "temperature": 14.2,
            "windspeed": 11.5,
            "winddirection": 250,
            "weathercode": 3,
            "time": "2026-10-18T12:00",
        },
        "hourly": {
            "time": [
                "2026-10-18T10:00",
                "2026-10-18T11:00",
                "2026-10-18T12:00",
                "2026-10-18T13:00",
                "2026-10-18T14:00",
            ],
            "temperature_2m": [12.0, 13.1, 14.2, 15.0, 15.4],
            "winddirection_10m": [240, 245, 250, 90, None],
            "windspeed_10m": [10.0, 11.0, 11.5, 12.25, 13.0],
        },
    }


@pytest.fixture
def geocode_payload():
    return {
        "results": [
            {"name": "Berlin", "latitude": 52.52437, "longitude": 13.41053, "country": "Germany"},
        ]
    }


class FakeGet:
    """Stands in for requests.get; answers by URL substring."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def __call__(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        for key, answer in self.routes.items():
            if key in url:
                if isinstance(answer, Exception):
                    raise answer
                return answer
        raise AssertionError(f"unexpected URL {url}")


@pytest.fixture
def fake_get(monkeypatch):
    def install(routes):
        fake = FakeGet(routes)
        monkeypatch.setattr(requests, "get", fake)
        return fake
    return install


@pytest.fixture
def response():
    return make_response
