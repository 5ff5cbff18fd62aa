"""ZiaMet weather-station dashboard for the NMSU climate network."""

__version__ = "1.0.0"
