"""
View state for the dashboard.

One ``DashboardState`` lives in each Streamlit session. It owns the fetched
station list and the user's choices; everything the UI derives from them
(filtered list, plotted trend field) is computed on read.
"""
import logging
from typing import Callable, List, MutableMapping, Optional, Union

from .data import filter_stations, get_stations
from .models import MeasurementType, StationSnapshot

logger = logging.getLogger(__name__)

SESSION_KEY = "dashboard_state"

class DashboardState:
    def __init__(self, provider: Optional[Callable[[], List[StationSnapshot]]] = None):
        self._provider = provider or get_stations
        self.stations: List[StationSnapshot] = []
        self.selected_station: Optional[StationSnapshot] = None
        self.search_term: str = ""
        self.loading: bool = False
        self.measurement_type: MeasurementType = MeasurementType.TEMPERATURE
        self._mounted = False

    def mount(self) -> None:
        """Runs the initial refresh, once per state object."""
        if self._mounted:
            return
        self._mounted = True
        self.refresh()

    def refresh(self) -> None:
        """Replaces the station list and selects the first station if none is selected."""
        self.loading = True
        try:
            stations = self._provider()
            self.stations = list(stations)
            if self.selected_station is None and self.stations:
                self.selected_station = self.stations[0]
            logger.info(f"Refreshed {len(self.stations)} stations")
        finally:
            self.loading = False

    def select(self, station: StationSnapshot) -> None:
        match = next((s for s in self.stations if s.id == station.id), None)
        if match is None:
            logger.debug(f"Ignoring selection of unknown station {station.id}")
            return
        self.selected_station = match

    def set_search_term(self, text: str) -> None:
        self.search_term = text or ""

    def set_measurement_type(self, mtype: Union[MeasurementType, str]) -> None:
        # MeasurementType("Bogus") raises ValueError
        self.measurement_type = MeasurementType(mtype)

    @property
    def filtered(self) -> List[StationSnapshot]:
        return filter_stations(self.stations, self.search_term)

    @property
    def active_trend_field(self) -> str:
        return self.measurement_type.trend_field

def get_dashboard_state(session: MutableMapping, provider=None) -> DashboardState:
    """Returns the session's state, creating and mounting it on first access."""
    state = session.get(SESSION_KEY)
    if state is None:
        state = DashboardState(provider=provider)
        session[SESSION_KEY] = state
    state.mount()
    return state
