import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .. import config

logger = logging.getLogger(__name__)

class FetchError(Exception):
    """The station API could not be reached or answered with a non-success status."""

@dataclass
class FetchResult:
    """Outcome of a single request to the station API."""
    payload: Any = None
    error: Optional[FetchError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

def attempt_fetch(url: Optional[str] = None) -> FetchResult:
    """Issues one GET to the station endpoint. Never raises."""
    url = url or config.STATIONS_API_URL
    try:
        resp = requests.get(url, timeout=config.REQUEST_TIMEOUT)
        if not 200 <= resp.status_code < 300:
            raise FetchError(f"API request failed with status {resp.status_code}")
        payload = resp.json()
    except FetchError as e:
        return FetchResult(error=e)
    except (requests.RequestException, ValueError) as e:
        return FetchResult(error=FetchError(str(e)))

    logger.debug(f"Station API answered {resp.status_code} from {url}")
    return FetchResult(payload=payload)
