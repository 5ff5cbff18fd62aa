import logging
import streamlit as st
from ziamet import config, ui
from ziamet.state import get_dashboard_state

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

# --- PAGE SETUP ---
st.set_page_config(page_title="ZiaMet | NMSU Weather Network", layout="wide", page_icon="🌤️")
ui.apply_custom_css()

# --- DATA LOADING ---
with st.spinner("Syncing with network..."):
    state = get_dashboard_state(st.session_state)

# --- MAIN LAYOUT ---
ui.render_header(state)
ui.render_station_list(state)

station = state.selected_station
if station is not None:
    ui.render_hero(station)
    st.markdown("<br>", unsafe_allow_html=True)

    col_map, col_chart = st.columns(2)
    with col_map:
        ui.render_map(state.stations, station)
    with col_chart:
        ui.render_trend_chart(state)

    ui.render_detail_metrics(station)
    ui.render_footer()
else:
    st.info("No stations available yet. Use Refresh Data to try again.")
