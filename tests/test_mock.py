import math
import random
from datetime import datetime

from ziamet import config
from ziamet.data import generate_mock_stations


def test_one_station_per_location_with_unique_ids() -> None:
    stations = generate_mock_stations()
    assert [s.name for s in stations] == [loc["name"] for loc in config.MOCK_LOCATIONS]
    assert [s.id for s in stations] == [f"station-{i}" for i in range(len(config.MOCK_LOCATIONS))]


def test_readings_stay_within_configured_ranges() -> None:
    for station in generate_mock_stations(rng=random.Random(1)):
        for field, (low, high) in config.MOCK_RANGES.items():
            value = getattr(station, field)
            assert low <= value < high, field
        assert station.wind_direction in config.WIND_DIRECTIONS


def test_trend_series_shape() -> None:
    station = generate_mock_stations(rng=random.Random(3))[0]
    assert len(station.trends) == 12
    assert [t.time for t in station.trends] == [f"{j * 2}:00" for j in range(12)]
    for j, point in enumerate(station.trends):
        assert 5 <= point.wind < 15
        # sinusoidal base plus jitter in [0, 5)
        assert -0.001 < point.temp - (45 + 20 * math.sin(j / 2)) < 5


def test_last_updated_is_hour_minute() -> None:
    stations = generate_mock_stations(now=datetime(2026, 3, 1, 14, 5))
    assert {s.last_updated for s in stations} == {"02:05 PM"}


def test_values_vary_between_calls_but_shape_does_not() -> None:
    first = generate_mock_stations()
    second = generate_mock_stations()
    assert [s.id for s in first] == [s.id for s in second]
    assert [len(s.trends) for s in first] == [len(s.trends) for s in second]
    assert [s.current_temp for s in first] != [s.current_temp for s in second]


def test_seeded_generation_is_reproducible() -> None:
    now = datetime(2026, 3, 1, 9, 30)
    assert generate_mock_stations(random.Random(42), now) == generate_mock_stations(random.Random(42), now)
