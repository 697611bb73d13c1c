"""Shared types, vector arithmetic, bounding boxes, and grid utilities."""

from .types import Point, Coord, BBox, Rgb, Vec, WallId, ChamberId
from .geometry import (
    GeometryError, WallNotFoundError,
    vadd, vsub, vscale, dot, sqr_len, vlen, lerp,
    bbox_empty, bbox_add_point, bbox_union, bbox_of, bbox_is_valid,
    snap_to_grid, grid_cell,
)
