import streamlit as st
from .. import config

def apply_custom_css():
    """Injects the NMSU crimson theme and metric card styling."""
    st.markdown(f"""
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;600;800;900&display=swap');

        html, body, [class*="css"] {{
            font-family: 'Inter', sans-serif;
            color: {config.THEME_COLORS["text_main"]};
        }}

        .stApp {{
            background-color: {config.THEME_COLORS["background"]};
        }}

        /* Crimson header bar */
        .ziamet-header {{
            background: {config.THEME_COLORS["primary"]};
            color: white;
            border-radius: 16px;
            padding: 14px 24px;
            display: flex;
            align-items: center;
            justify-content: space-between;
            box-shadow: 0 10px 25px rgba(137,0,34,0.25);
        }}

        /* Hero panel */
        .ziamet-hero {{
            background: linear-gradient(120deg, #020617 0%, #0f172a 60%, {config.THEME_COLORS["primary"]} 140%);
            color: white;
            border-radius: 28px;
            padding: 40px;
            min-height: 280px;
        }}
        .ziamet-badge {{
            display: inline-block;
            padding: 4px 12px;
            border-radius: 999px;
            background: rgba(16,185,129,0.2);
            color: #34d399;
            font-size: 10px;
            font-weight: 700;
            letter-spacing: 0.15em;
            text-transform: uppercase;
        }}

        /* Metric cards */
        div[data-testid="stMetric"] {{
            background: #ffffff;
            padding: 20px;
            border-radius: 24px;
            box-shadow: 0 1px 3px rgba(0,0,0,0.05);
            border: 1px solid #e2e8f0;
        }}

        div[data-testid="stMetric"]:hover {{
            border-color: {config.THEME_COLORS["primary_light"]};
        }}

        /* Map container */
        iframe {{
            border-radius: 16px;
        }}
    </style>
    """, unsafe_allow_html=True)
