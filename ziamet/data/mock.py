import math
import random
from datetime import datetime
from typing import List, Optional

from .. import config
from ..models import StationSnapshot, TrendPoint

def _trend_series(rng: random.Random) -> tuple:
    """Smooth sinusoidal temperature with jitter, noisy wind, every 2 simulated hours."""
    return tuple(
        TrendPoint(
            time=f"{j * config.TREND_STEP_HOURS}:00",
            temp=45 + math.sin(j / 2) * 20 + rng.random() * 5,
            wind=5 + rng.random() * 10,
        )
        for j in range(config.TREND_POINTS)
    )

def generate_mock_stations(rng: Optional[random.Random] = None, now: Optional[datetime] = None) -> List[StationSnapshot]:
    """Builds one synthetic snapshot per configured NMSU location."""
    rng = rng or random.Random()
    now = now or datetime.now()
    stamp = now.strftime("%I:%M %p")

    def _draw(field: str) -> float:
        low, high = config.MOCK_RANGES[field]
        return low + rng.random() * (high - low)

    stations = []
    for i, loc in enumerate(config.MOCK_LOCATIONS):
        stations.append(StationSnapshot(
            id=f"station-{i}",
            name=loc["name"],
            location=loc["city"],
            latitude=loc["lat"],
            longitude=loc["lon"],
            current_temp=_draw("current_temp"),
            humidity=_draw("humidity"),
            wind_speed=_draw("wind_speed"),
            wind_direction=rng.choice(config.WIND_DIRECTIONS),
            high_temp=_draw("high_temp"),
            low_temp=_draw("low_temp"),
            dew_point=_draw("dew_point"),
            peak_gust=_draw("peak_gust"),
            solar_rad=_draw("solar_rad"),
            soil_temp=_draw("soil_temp"),
            last_updated=stamp,
            trends=_trend_series(rng),
        ))
    return stations
