from .styles import apply_custom_css
from .components import (
    render_header, render_station_list, render_hero, render_trend_chart,
    render_detail_metrics, render_footer, build_trend_chart,
)
from .map import render_map, build_station_map
