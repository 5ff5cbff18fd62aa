import streamlit as st
import altair as alt
import datetime
from html import escape
from .. import config
from ..models import MeasurementType, StationSnapshot, trends_frame
from ..state import DashboardState

def render_header(state: DashboardState):
    """Crimson title bar with today's date and the refresh action."""
    today = datetime.date.today().strftime("%a, %b %d, %Y")
    c1, c2 = st.columns([5, 1])
    with c1:
        st.markdown(f"""
        <div class="ziamet-header">
            <div>
                <span style="font-size:20px; font-weight:800;">ZiaMet</span><br>
                <span style="font-size:10px; opacity:0.7; letter-spacing:0.15em; text-transform:uppercase;">
                    NMSU Weather Network
                </span>
            </div>
            <span style="font-size:12px;">📈 {today}</span>
        </div>
        """, unsafe_allow_html=True)
    with c2:
        if st.button("🔄 Refresh Data", width="stretch", disabled=state.loading):
            with st.spinner("Syncing with network..."):
                state.refresh()

def render_station_list(state: DashboardState):
    """Sidebar search box and clickable station list."""
    with st.sidebar:
        term = st.text_input("🔍 Find a station...", value=state.search_term, key="station_search")
        state.set_search_term(term)

        if state.loading:
            st.caption("Syncing with network...")
            return

        stations = state.filtered
        if not stations:
            st.info("No stations match your search.")

        selected_id = state.selected_station.id if state.selected_station else None
        for station in stations:
            st.button(
                f"{station.name} · {round(station.current_temp)}°",
                key=f"station_btn_{station.id}",
                help=station.location,
                type="primary" if station.id == selected_id else "secondary",
                on_click=state.select,
                args=(station,),
                width="stretch",
            )

        st.markdown("---")
        st.caption("**NEW MEXICO STATE UNIVERSITY**  \nClimate Center • ZiaMet Network")

def render_hero(station: StationSnapshot):
    """Headline panel for the selected station."""
    st.markdown(f"""
    <div class="ziamet-hero">
        <span class="ziamet-badge">● Live Feed • Updated {escape(station.last_updated)}</span>
        <h1 style="color:white; text-align:left; font-size:3rem; font-weight:900; margin:12px 0 4px 0;">
            {escape(station.name)}
        </h1>
        <div style="color:#cbd5e1; font-weight:500;">📍 {escape(station.location)}</div>
        <div style="display:flex; flex-wrap:wrap; gap:48px; align-items:center; margin-top:32px;">
            <div>
                <div style="font-size:5rem; font-weight:900; line-height:1;">{station.current_temp:.1f}°</div>
                <div style="font-size:12px; opacity:0.6; letter-spacing:0.15em; text-transform:uppercase;">Temperature</div>
            </div>
            <div style="display:grid; grid-template-columns: 1fr 1fr; gap: 16px 48px;">
                <div>💧 <b>{station.humidity:.0f}%</b><br><small style="opacity:0.5;">HUMIDITY</small></div>
                <div>🌬️ <b>{station.wind_speed:.1f} mph {escape(station.wind_direction)}</b><br><small style="opacity:0.5;">WIND</small></div>
                <div>🔺 <b>{station.high_temp:.1f}°</b><br><small style="opacity:0.5;">DAILY HIGH</small></div>
                <div>🔻 <b>{station.low_temp:.1f}°</b><br><small style="opacity:0.5;">DAILY LOW</small></div>
            </div>
        </div>
    </div>
    """, unsafe_allow_html=True)

def build_trend_chart(station: StationSnapshot, measurement_type: MeasurementType) -> alt.Chart:
    """Area chart of the station's trend series for the chosen measurement."""
    field = measurement_type.trend_field
    color = config.THEME_COLORS["primary"]
    return alt.Chart(trends_frame(station)).mark_area(
        line={'color': color, 'strokeWidth': 4},
        color=alt.Gradient(
            gradient='linear',
            stops=[alt.GradientStop(color='white', offset=0),
                   alt.GradientStop(color=color, offset=1)],
            x1=1, x2=1, y1=1, y2=0
        ),
        opacity=0.2,
        interpolate='monotone'
    ).encode(
        x=alt.X('time:N', sort=None, title=None),
        y=alt.Y(f'{field}:Q', title=measurement_type.axis_title, scale=alt.Scale(zero=False)),
        tooltip=['time', alt.Tooltip(f'{field}:Q', format='.1f', title=measurement_type.value)]
    ).properties(height=320)

def render_trend_chart(state: DashboardState):
    st.markdown("### 📈 24h Trend")
    options = [m.value for m in MeasurementType]
    choice = st.radio(
        "Measurement",
        options,
        index=options.index(state.measurement_type.value),
        horizontal=True,
        label_visibility="collapsed",
        key="measurement_type",
    )
    state.set_measurement_type(choice)

    station = state.selected_station
    if station is None or not station.trends:
        st.info("No trend history for this station.")
        return
    st.altair_chart(build_trend_chart(station, state.measurement_type), width='stretch')

def render_detail_metrics(station: StationSnapshot):
    """Detailed conditions in a 4-column grid."""
    st.markdown("### Detailed Conditions")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("💧 Dew Point", f"{station.dew_point:.1f}°F", help="Relative measure")
    c2.metric("🌬️ Peak Gust", f"{station.peak_gust:.1f} mph", help="Last hour")
    c3.metric("☀️ Solar Rad", f"{station.solar_rad:.0f} W/m²", help="Global index")
    c4.metric("🌡️ Soil Temp", f"{station.soil_temp:.1f}°F", help="4 inch depth")

def render_footer():
    st.markdown("---")
    year = datetime.date.today().year
    st.caption(
        f"© {year} New Mexico State University Board of Regents. All rights reserved.  \n"
        "Data provided by the NMSU Climate Center • ZiaMet Network"
    )
