"""
Configuration module for the ZiaMet Station Dashboard.
Centralizes the API endpoint, mock data parameters, and styling tokens.
"""
import os

# --- API ENDPOINTS ---
STATIONS_API_URL = os.environ.get(
    "ZIAMET_API_URL",
    "https://weatherstations.nmsu.edu/api/weatherstations"
)
REQUEST_TIMEOUT = 10  # seconds

# When False, a successful response is discarded and mock data is shown.
USE_LIVE_PAYLOAD = False

# --- LOGGING ---
LOG_LEVEL = os.environ.get("ZIAMET_LOG_LEVEL", "INFO")

# --- MOCK NETWORK ---
MOCK_LOCATIONS = [
    {"name": "NMSU Main Campus", "city": "Las Cruces, NM", "lat": 32.2821, "lon": -106.7505},
    {"name": "Fabian Garcia RC", "city": "Las Cruces, NM", "lat": 32.2797, "lon": -106.7648},
    {"name": "Leyendecker II PSRC", "city": "Las Cruces, NM", "lat": 32.2014, "lon": -106.7456},
    {"name": "Chihuahuan Desert RRC", "city": "Las Cruces, NM", "lat": 32.5332, "lon": -106.7516},
    {"name": "Alcalde ASC", "city": "Alcalde, NM", "lat": 36.0895, "lon": -106.0545},
    {"name": "Farmington ASC", "city": "Farmington, NM", "lat": 36.6872, "lon": -108.2862},
    {"name": "Los Lunas ASC", "city": "Los Lunas, NM", "lat": 34.7709, "lon": -106.7634},
    {"name": "Tucumcari ASC", "city": "Tucumcari, NM", "lat": 35.2017, "lon": -103.6897},
]

# Half-open [low, high) ranges for each synthetic reading
MOCK_RANGES = {
    "current_temp": (60.0, 70.0),
    "humidity": (15.0, 25.0),
    "wind_speed": (4.0, 9.0),
    "high_temp": (70.0, 75.0),
    "low_temp": (40.0, 45.0),
    "dew_point": (10.0, 20.0),
    "peak_gust": (10.0, 20.0),
    "solar_rad": (800.0, 900.0),
    "soil_temp": (55.0, 60.0),
}

WIND_DIRECTIONS = ("SW", "W", "NW", "S")

TREND_POINTS = 12
TREND_STEP_HOURS = 2

# --- UI STYLING ---
THEME_COLORS = {
    "primary": "#890022",
    "primary_light": "#a61c38",
    "background": "#f8fafc",
    "text_main": "#0f172a",
    "text_muted": "#94a3b8",
    "marker": "#64748b",
}

MAP_ZOOM = 13
