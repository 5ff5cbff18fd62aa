from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Tuple

import pandas as pd

@dataclass(frozen=True)
class TrendPoint:
    """One sample of a station's recent history."""
    time: str
    temp: float
    wind: float

@dataclass(frozen=True)
class StationSnapshot:
    """Represents a single station's readings for one fetch cycle."""
    id: str
    name: str
    location: str
    latitude: float
    longitude: float
    current_temp: float
    humidity: float
    wind_speed: float
    wind_direction: str
    high_temp: float
    low_temp: float
    dew_point: float
    peak_gust: float
    solar_rad: float
    soil_temp: float
    last_updated: str
    trends: Tuple[TrendPoint, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serializes to the camelCase shape served by the station API."""
        return {
            "id": self.id,
            "name": self.name,
            "location": self.location,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "currentTemp": self.current_temp,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "windDirection": self.wind_direction,
            "highTemp": self.high_temp,
            "lowTemp": self.low_temp,
            "dewPoint": self.dew_point,
            "peakGust": self.peak_gust,
            "solarRad": self.solar_rad,
            "soilTemp": self.soil_temp,
            "lastUpdated": self.last_updated,
            "trends": [asdict(t) for t in self.trends],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "StationSnapshot":
        """Parses one station item. Raises KeyError/TypeError/ValueError on bad input."""
        trends = tuple(
            TrendPoint(time=str(t["time"]), temp=float(t["temp"]), wind=float(t["wind"]))
            for t in d.get("trends") or []
        )
        return cls(
            id=str(d["id"]),
            name=str(d["name"]),
            location=str(d.get("location", "")),
            latitude=float(d["latitude"]),
            longitude=float(d["longitude"]),
            current_temp=float(d["currentTemp"]),
            humidity=float(d["humidity"]),
            wind_speed=float(d["windSpeed"]),
            wind_direction=str(d.get("windDirection", "")),
            high_temp=float(d["highTemp"]),
            low_temp=float(d["lowTemp"]),
            dew_point=float(d["dewPoint"]),
            peak_gust=float(d["peakGust"]),
            solar_rad=float(d["solarRad"]),
            soil_temp=float(d["soilTemp"]),
            last_updated=str(d.get("lastUpdated", "")),
            trends=trends,
        )

class MeasurementType(Enum):
    TEMPERATURE = "Temperature"
    WIND_SPEED = "Wind Speed"

    @property
    def trend_field(self) -> str:
        return "temp" if self is MeasurementType.TEMPERATURE else "wind"

    @property
    def unit(self) -> str:
        return "°F" if self is MeasurementType.TEMPERATURE else "mph"

    @property
    def axis_title(self) -> str:
        return f"{self.value} ({self.unit})"

def trends_frame(station: StationSnapshot) -> pd.DataFrame:
    """Trend series as a DataFrame, row order preserved for charting."""
    return pd.DataFrame([asdict(t) for t in station.trends], columns=["time", "temp", "wind"])
