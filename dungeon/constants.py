"""Named constants for the chamber kernel.

Lengths are in wall-coordinate units (one grid cell = GRID_SIZE units).
"""
from shared.types import Rgb

# Grid
GRID_SIZE = 50                    # one grid cell, in wall-coordinate units

# Label anchor search
LABEL_CELL_SIZE = float(GRID_SIZE)  # sampling step; samples sit at cell centres

# New chamber defaults
DEFAULT_CHAMBER_ID = 1
DEFAULT_CHAMBER_NAME = "New Chamber"
DEFAULT_CHAMBER_COLOR = Rgb(1.0, 1.0, 1.0)   # white

# Wall id allocation (next id = max id + 1, starting here for an empty chamber)
FIRST_WALL_ID = 1
