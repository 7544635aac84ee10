"""Client for TheTVDB XML catalog: series search, lookup and episode rosters."""

__version__ = "0.1.0"
