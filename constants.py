"""
Global constants used throughout the project
"""

WATER = 0
LAND = 1

# Seconds spent on each node by the delayed traversal
DEFAULT_DELAY = 0.0
# Seconds between two redraws of the animated display
REFRESH_PERIOD = 0.05

# Share of land cells in generated grids
DEFAULT_DENSITY = 0.4

DATA = "data"

# Palette cycled over island ids, RGB
ISLAND_COLORS = [
    (30, 147, 255),  # Blue
    (249, 60, 49),  # Red
    (79, 204, 48),  # Green
    (255, 220, 0),  # Yellow
    (229, 58, 163),  # Magenta
    (255, 133, 27),  # Orange
    (135, 216, 241),  # Light blue
    (146, 18, 49),  # Maroon
]

WATER_COLOR = (0, 0, 0)  # Black
UNASSIGNED_LAND_COLOR = (153, 153, 153)  # Gray, land not reached yet
CURRENT_COLOR = (255, 255, 255)  # White
