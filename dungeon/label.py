"""Label anchor search: an approximate pole of inaccessibility on a sampling grid."""
import math
from typing import TYPE_CHECKING, Optional

import numpy as np

from shared.types import Point
from shared.geometry import bbox_is_valid
from dungeon.constants import LABEL_CELL_SIZE

if TYPE_CHECKING:
    from dungeon.chamber import Chamber


def sample_centers(chamber: "Chamber", grid: float = LABEL_CELL_SIZE) -> list[Point]:
    """Cell centres covering the chamber's bounding box, x-major order.

    Cells start at the box minimum; a partial cell at the far edge still
    gets a sample, so the samples can lie slightly outside the box.
    """
    bbox = chamber.bounding_box()
    if not bbox_is_valid(bbox):
        return []
    nx = math.ceil((bbox.max.x - bbox.min.x) / grid)
    ny = math.ceil((bbox.max.y - bbox.min.y) / grid)
    xs = bbox.min.x + np.arange(nx) * grid + grid / 2
    ys = bbox.min.y + np.arange(ny) * grid + grid / 2
    return [Point(float(x), float(y)) for x in xs for y in ys]


def find_label_anchor(chamber: "Chamber", grid: float = LABEL_CELL_SIZE) -> Optional[Point]:
    """Contained cell centre farthest from every wall.

    Returns None when no centre lies inside the chamber (chambers smaller
    than a cell, thin or concave outlines); callers then skip the label.
    Ties keep the first centre found.
    """
    walls = chamber.walls()
    best: Optional[Point] = None
    max_min_d = -math.inf
    for p in sample_centers(chamber, grid):
        if not chamber.contains_point(p):
            continue
        d = min(w.distance(p) for w in walls)
        if d > max_min_d:
            best, max_min_d = p, d
    return best
