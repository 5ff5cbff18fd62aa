from .fetchers import FetchError, FetchResult, attempt_fetch
from .mock import generate_mock_stations
from .processing import filter_stations, get_stations, parse_payload, reconcile
