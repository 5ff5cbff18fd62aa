import streamlit as st
import folium
from html import escape
from streamlit_folium import st_folium
from typing import List, Optional
from .. import config
from ..models import StationSnapshot

def _create_popup_html(station: StationSnapshot) -> str:
    """Compact station card shown when a marker is clicked."""
    return f"""
    <div style="font-family: 'Inter'; width: 200px; padding: 4px;">
        <b style="font-size:14px; color:{config.THEME_COLORS["text_main"]};">{escape(station.name)}</b><br>
        <span style="color:#666; font-size:11px;">{escape(station.location)}</span>
        <hr style="margin: 8px 0; border:0; border-top: 1px solid #eee;">
        <span style="font-size:20px; font-weight:800; color:{config.THEME_COLORS["primary"]}">
            {station.current_temp:.1f}°F
        </span><br>
        <span style="color:#888; font-size:11px;">
            Wind {station.wind_speed:.1f} mph {escape(station.wind_direction)} | RH {station.humidity:.0f}%
        </span>
    </div>"""

def build_station_map(stations: List[StationSnapshot], selected: Optional[StationSnapshot]) -> folium.Map:
    """Folium map centred on the selected station with one marker per station."""
    if selected is not None:
        center, zoom = [selected.latitude, selected.longitude], config.MAP_ZOOM
    elif stations:
        center, zoom = [stations[0].latitude, stations[0].longitude], 6
    else:
        center, zoom = [34.5, -106.0], 6  # New Mexico

    m = folium.Map(location=center, zoom_start=zoom, tiles="OpenStreetMap")

    for station in stations:
        is_selected = selected is not None and station.id == selected.id
        color = config.THEME_COLORS["primary"] if is_selected else config.THEME_COLORS["marker"]
        folium.CircleMarker(
            location=[station.latitude, station.longitude],
            radius=10 if is_selected else 6,
            color=color,
            fill=True,
            fill_color=color,
            fill_opacity=0.8,
            weight=2,
            popup=folium.Popup(_create_popup_html(station), max_width=240),
            tooltip=escape(station.name),
        ).add_to(m)
    return m

def render_map(stations: List[StationSnapshot], selected: Optional[StationSnapshot]):
    st.markdown("### 🗺️ Network Map")
    m = build_station_map(stations, selected)
    key = f"station_map_{selected.id}" if selected is not None else "station_map"
    st_folium(m, width="100%", height=400, returned_objects=[], key=key)
