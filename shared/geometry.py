"""Pure vector arithmetic, bounding boxes, grid snapping, and error types."""
import math
from typing import Iterable, Optional
from .types import Point, Coord, BBox, Vec, WallId, ChamberId

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible or degenerate geometry operations."""

class WallNotFoundError(GeometryError, LookupError):
    """Raised when a wall id is not (or no longer) part of a chamber.

    Ids are chamber-local and go stale across collapse and undo/redo, so
    callers holding an id should be prepared to catch this.
    """
    def __init__(self, wall_id: WallId, chamber_id: Optional[ChamberId] = None):
        self.wall_id = wall_id
        self.chamber_id = chamber_id
        where = f" in chamber {chamber_id}" if chamber_id is not None else ""
        super().__init__(f"No wall with id {wall_id}{where}")

# ============================================================
# Vector Arithmetic
# ============================================================
def vadd(a: Vec, b: Vec) -> Point:
    return Point(a[0]+b[0], a[1]+b[1])

def vsub(a: Vec, b: Vec) -> Point:
    return Point(a[0]-b[0], a[1]-b[1])

def vscale(v: Vec, s: float) -> Point:
    """Scale vector v by scalar s."""
    return Point(v[0]*s, v[1]*s)

def dot(a: Vec, b: Vec) -> float:
    return a[0]*b[0] + a[1]*b[1]

def sqr_len(v: Vec) -> float:
    """Squared length, for comparisons that don't need the square root."""
    return v[0]**2 + v[1]**2

def vlen(v: Vec) -> float:
    return math.sqrt(sqr_len(v))

def lerp(a: Vec, b: Vec, t: float) -> Point:
    """Point at parameter t along a → b (t=0 gives a, t=1 gives b)."""
    return Point(a[0]+t*(b[0]-a[0]), a[1]+t*(b[1]-a[1]))

# ============================================================
# Bounding Boxes
# ============================================================
def bbox_empty() -> BBox:
    """Inverted box that any added point replaces; not valid until then."""
    return BBox(Point(math.inf, math.inf), Point(-math.inf, -math.inf))

def bbox_add_point(b: BBox, p: Vec) -> BBox:
    return BBox(Point(min(b.min.x, p[0]), min(b.min.y, p[1])),
                Point(max(b.max.x, p[0]), max(b.max.y, p[1])))

def bbox_union(a: BBox, b: BBox) -> BBox:
    """Smallest box enclosing both a and b."""
    return BBox(Point(min(a.min.x, b.min.x), min(a.min.y, b.min.y)),
                Point(max(a.max.x, b.max.x), max(a.max.y, b.max.y)))

def bbox_of(pts: Iterable[Vec]) -> BBox:
    b = bbox_empty()
    for p in pts:
        b = bbox_add_point(b, p)
    return b

def bbox_is_valid(b: BBox) -> bool:
    """True when all four bounds are finite (i.e. at least one point was added)."""
    return all(math.isfinite(v) for v in (b.min.x, b.min.y, b.max.x, b.max.y))

# ============================================================
# Grid Snapping
# ============================================================
def _round_half_away(v: float) -> int:
    # round() is banker's rounding; halfway cursor positions must snap outward
    return int(math.copysign(math.floor(abs(v) + 0.5), v))

def snap_to_grid(p: Vec, size: int) -> Coord:
    """Nearest grid intersection to p (rounds each axis to a multiple of size)."""
    return Coord(_round_half_away(p[0]/size)*size, _round_half_away(p[1]/size)*size)

def grid_cell(p: Vec, size: int) -> Coord:
    """Origin (lower-left corner) of the grid cell containing p."""
    return Coord(math.floor(p[0]/size)*size, math.floor(p[1]/size)*size)
