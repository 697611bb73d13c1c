"""Wall segment primitive: one directed edge p1 → p2 of a chamber outline."""
from typing import NamedTuple, Optional

from shared.types import Point, Coord, Vec, WallId, ChamberId
from shared.geometry import GeometryError, vsub, vscale, dot, sqr_len, vlen, lerp


class Wall(NamedTuple):
    """Directed segment of a chamber outline.

    The id is only unique within the owning chamber and may be reused after
    the wall is collapsed away. Walls are values: edits produce new walls.
    """
    id: WallId
    chamber_id: ChamberId
    p1: Coord
    p2: Coord

    def is_degenerate(self) -> bool:
        return self.p1 == self.p2

    def length(self) -> float:
        return vlen(vsub(self.p2, self.p1))

    def _project(self, p: Vec) -> float:
        """Clamped parameter t of the projection of p onto the segment."""
        d = vsub(self.p2, self.p1)
        l2 = sqr_len(d)
        if l2 == 0:
            return 0.0
        return max(0.0, min(1.0, dot(vsub(p, self.p1), d) / l2))

    def nearest_point(self, p: Vec) -> Point:
        """Closest point to p on the closed segment (p1 for a degenerate wall)."""
        return lerp(self.p1, self.p2, self._project(p))

    def distance(self, p: Vec) -> float:
        """Euclidean distance from p to the closed segment."""
        return vlen(vsub(p, self.nearest_point(p)))

    def nearest_relative_pos(self, p: Vec) -> float:
        """Position in [0, 1] of the closest point, measured from p1 toward p2.

        Attachments store this so they keep their relative place when the
        wall changes length. A degenerate wall always gives 0.0.
        """
        return self._project(p)

    def rel_to_world(self, t: float) -> Point:
        """World position of relative position t (inverse of nearest_relative_pos)."""
        return lerp(self.p1, self.p2, t)

    def tangent(self) -> Point:
        """Unit vector pointing from p1 to p2."""
        d = vsub(self.p2, self.p1)
        Ln = vlen(d)
        if Ln == 0:
            raise GeometryError(f"Degenerate wall {self.id}: p1 == p2 == {tuple(self.p1)}")
        return vscale(d, 1.0/Ln)

    def split(self, at: Coord, new_id: Optional[WallId] = None) -> tuple["Wall", "Wall"]:
        """Split into p1 → at and at → p2.

        The first half keeps this wall's id; the second half gets *new_id*
        (or the same id if none is given). *at* is not checked to lie on the
        segment.
        """
        at = Coord(*at)
        first = self._replace(p2=at)
        second = self._replace(id=self.id if new_id is None else new_id, p1=at)
        return first, second
