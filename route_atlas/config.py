#!/usr/bin/env python3

"""
Configuration for the route_atlas library.
"""

import os
from pathlib import Path

# Great circle path resolution (number of segments per path)
EXPLORE_PATH_STEPS = 50
ROUTE_PATH_STEPS = int(os.getenv("ROUTE_ATLAS_PATH_STEPS", "30"))

# Route colors, hsl(hue, saturation%, lightness%)
ROUTE_COLOR_SATURATION = 70
ROUTE_COLOR_LIGHTNESS = 60
HUE_WEIGHT_FIRST = 137
HUE_WEIGHT_SECOND = 59

# Airline code used for color when a route has no operator
UNKNOWN_AIRLINE = "XX"

# Labels and tooltips
MAX_LABEL_OPERATORS = 3
MAX_TOOLTIP_AIRCRAFT = 5
AIRPORT_SEARCH_LIMIT = 10

# Map view hints (latitude, longitude, zoom)
WORLD_VIEW = (30.0, 0.0, 2)
AIRPORT_ZOOM = 4

# Environment Configuration
LOG_LEVEL = os.getenv("ROUTE_ATLAS_LOG_LEVEL", "INFO")


def get_data_dir() -> Path:
    """Directory holding the processed dataset files."""
    return Path(os.getenv("ROUTE_ATLAS_DATA_DIR", "data"))
