import logging
from typing import Any, Iterable, List, Optional

from .. import config
from ..models import StationSnapshot
from .fetchers import FetchResult, attempt_fetch
from .mock import generate_mock_stations

logger = logging.getLogger(__name__)

def parse_payload(payload: Any) -> List[StationSnapshot]:
    """Normalizes an API body (bare list or {'items'|'stations': [...]}) into snapshots."""
    if isinstance(payload, dict):
        items = payload.get("items", payload.get("stations"))
    else:
        items = payload
    if not isinstance(items, list):
        raise ValueError(f"Unexpected payload type: {type(payload).__name__}")

    for it in items:
        if not isinstance(it, dict):
            raise ValueError(f"Station item is not an object: {it!r}")
        trends = it.get("trends") or []
        if not isinstance(trends, list) or not all(isinstance(t, dict) for t in trends):
            raise ValueError(f"Malformed trend series for station {it.get('id')!r}")

    stations = [StationSnapshot.from_dict(it) for it in items]
    # Stations without a trend series can't be charted
    stations = [s for s in stations if s.trends]

    ids = [s.id for s in stations]
    if len(ids) != len(set(ids)):
        raise ValueError("Duplicate station ids in payload")
    return stations

def reconcile(result: FetchResult, use_live: Optional[bool] = None) -> List[StationSnapshot]:
    """Turns a fetch outcome into the station list shown on the dashboard."""
    if use_live is None:
        use_live = config.USE_LIVE_PAYLOAD

    if not result.ok:
        logger.warning(f"Falling back to mock data due to API error: {result.error}")
        return generate_mock_stations()

    if not use_live:
        return generate_mock_stations()

    try:
        stations = parse_payload(result.payload)
    except (KeyError, TypeError, ValueError) as e:
        logger.warning(f"Falling back to mock data, payload could not be parsed: {e}")
        return generate_mock_stations()

    if not stations:
        logger.warning("Falling back to mock data, payload held no displayable stations")
        return generate_mock_stations()

    logger.info(f"Loaded {len(stations)} live stations")
    return stations

def get_stations() -> List[StationSnapshot]:
    """Main entry point of the data layer: fetch, then reconcile. Never raises."""
    return reconcile(attempt_fetch())

def filter_stations(stations: Iterable[StationSnapshot], term: str) -> List[StationSnapshot]:
    """Case-insensitive substring match on name or location, original order kept."""
    needle = (term or "").lower()
    return [
        s for s in stations
        if needle in s.name.lower() or needle in s.location.lower()
    ]
