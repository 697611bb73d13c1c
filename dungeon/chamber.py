"""Chamber: a closed polygon of walls with incremental editing and spatial queries.

The outline is a dense list of walls with implicit wraparound: for every i,
walls[i].p2 == walls[(i+1) % n].p1. The loop is closed again after every
single edit, so there is no separate open-polyline state once two vertices
exist. With fewer than two vertices the wall list is empty and a lone first
vertex is held aside until the second one arrives.
"""
import logging
from typing import Optional

from shared.types import Point, Coord, BBox, Rgb, Vec, WallId, ChamberId
from shared.geometry import (
    GeometryError, WallNotFoundError, vsub, sqr_len, bbox_of, bbox_empty,
)
from dungeon.constants import (
    DEFAULT_CHAMBER_ID, DEFAULT_CHAMBER_NAME, DEFAULT_CHAMBER_COLOR,
    FIRST_WALL_ID, LABEL_CELL_SIZE,
)
from dungeon.wall import Wall
from dungeon.label import find_label_anchor
from dungeon.preview import Preview, preview_projection

logger = logging.getLogger(__name__)


class Chamber:
    """A room drawn as a closed loop of walls, plus its descriptive fields."""

    def __init__(
        self,
        id: ChamberId = DEFAULT_CHAMBER_ID,
        name: str = DEFAULT_CHAMBER_NAME,
        notes: str = "",
        hidden: bool = False,
        color: Rgb = DEFAULT_CHAMBER_COLOR,
    ):
        self.id = id
        self.name = name
        self.notes = notes
        self.hidden = hidden
        self.color = color
        self._walls: list[Wall] = []
        self._first_vert: Optional[Coord] = None

    def __repr__(self) -> str:
        return f"Chamber(id={self.id}, name={self.name!r}, walls={len(self._walls)})"

    def __len__(self) -> int:
        return len(self._walls)

    # ============================================================
    # Read access
    # ============================================================
    def walls(self) -> tuple[Wall, ...]:
        """Snapshot of the outline in loop order."""
        return tuple(self._walls)

    def wall(self, wall_id: WallId) -> Optional[Wall]:
        """Wall with the given id, or None if it is not part of this chamber."""
        for w in self._walls:
            if w.id == wall_id:
                return w
        return None

    @property
    def first_vertex(self) -> Optional[Coord]:
        return self._first_vert

    def vertices(self) -> list[Coord]:
        """Placed vertices in placement order, starting at the first vertex."""
        if not self._walls:
            return [] if self._first_vert is None else [self._first_vert]
        return [w.p1 for w in self._walls]

    def _index_of(self, wall_id: WallId) -> int:
        for i, w in enumerate(self._walls):
            if w.id == wall_id:
                return i
        raise WallNotFoundError(wall_id, self.id)

    def _next_wall_id(self) -> WallId:
        return max((w.id for w in self._walls), default=FIRST_WALL_ID - 1) + 1

    # ============================================================
    # Construction and structural edits
    # ============================================================
    def append(self, vert: Coord) -> None:
        """Place the next vertex, closing the loop back to the first vertex.

        Raises GeometryError (leaving the chamber unchanged) if vert repeats
        the previous or the first vertex, which would create a zero-length wall.
        """
        vert = Coord(*vert)
        if self._first_vert is None:
            self._first_vert = vert
            logger.debug("chamber %s: first vertex %s", self.id, vert)
            return
        if not self._walls:
            if vert == self._first_vert:
                raise GeometryError(f"Vertex {tuple(vert)} repeats the first vertex")
            first_id = self._next_wall_id()
            self._walls.append(Wall(first_id, self.id, self._first_vert, vert))
            self._walls.append(Wall(first_id + 1, self.id, vert, self._first_vert))
            logger.debug("chamber %s: closed two-wall loop via %s", self.id, vert)
            return

        closing = self._walls[-1]
        if vert == closing.p1 or vert == closing.p2:
            raise GeometryError(
                f"Vertex {tuple(vert)} would create a zero-length wall next to wall {closing.id}")
        w1, w2 = closing.split(vert, self._next_wall_id())
        self._walls[-1] = w1
        self._walls.append(w2)
        logger.debug("chamber %s: appended %s, new closing wall %s", self.id, vert, w2.id)

    def split(self, wall_id: WallId, pos: Coord) -> WallId:
        """Insert vertex pos into wall *wall_id*; returns the id of the new second half."""
        idx = self._index_of(wall_id)
        pos = Coord(*pos)
        wall = self._walls[idx]
        if pos == wall.p1 or pos == wall.p2:
            raise GeometryError(f"Split point {tuple(pos)} is an endpoint of wall {wall_id}")
        w1, w2 = wall.split(pos, self._next_wall_id())
        self._walls[idx] = w1
        self._walls.insert(idx + 1, w2)
        logger.debug("chamber %s: split wall %s at %s into %s", self.id, wall_id, pos, w2.id)
        return w2.id

    def collapse(self, wall_id: WallId) -> WallId:
        """Remove the corner at the end of wall *wall_id* by merging it with its successor.

        Returns the id of the removed successor so owners of references to
        it (e.g. doors) can react. Collapsing a two-wall loop returns the
        chamber to its single-vertex state, keeping wall.p1 as first vertex.
        """
        idx = self._index_of(wall_id)
        next_idx = (idx + 1) % len(self._walls)
        succ = self._walls[next_idx]

        if len(self._walls) == 2:
            self._first_vert = self._walls[idx].p1
            self._walls.clear()
            logger.debug("chamber %s: collapsed back to first vertex %s", self.id, self._first_vert)
            return succ.id

        self._walls[idx] = self._walls[idx]._replace(p2=succ.p2)
        del self._walls[next_idx]
        self._first_vert = self._walls[0].p1
        logger.debug("chamber %s: collapsed wall %s, removed %s", self.id, wall_id, succ.id)
        return succ.id

    # ============================================================
    # Spatial queries
    # ============================================================
    def contains_point(self, pos: Vec) -> bool:
        """Ray-casting parity test: count walls crossed left of pos at height pos.y.

        The y-bracket is closed at both ends, so a vertex lying exactly on
        the ray is counted once for each adjacent non-horizontal wall.
        Horizontal walls never count.
        """
        px, py = float(pos[0]), float(pos[1])
        crossings = 0
        for w in self._walls:
            ay, by = w.p1.y, w.p2.y
            if ay == by:
                continue
            if min(ay, by) > py:
                continue
            if max(ay, by) < py:
                continue
            f = (py - ay) / (by - ay)
            cx = w.p1.x + f * (w.p2.x - w.p1.x)
            if cx < px:
                crossings += 1
        return crossings % 2 == 1

    def nearest_wall(self, pos: Vec) -> Optional[Wall]:
        """Wall closest to pos (first one on ties), or None for an empty chamber."""
        best = None
        min_d = float("inf")
        for w in self._walls:
            d = w.distance(pos)
            if d < min_d:
                best, min_d = w, d
        return best

    def nearest_corner(self, pos: Vec) -> Optional[tuple[Wall, Wall]]:
        """Pair of neighbouring walls meeting at the corner nearest to pos.

        The corner is always w1.p2 == w2.p1. None for an empty chamber.
        """
        if not self._walls:
            return None
        idx = min(range(len(self._walls)),
                  key=lambda i: sqr_len(vsub(self._walls[i].p2, pos)))
        return self._walls[idx], self._walls[(idx + 1) % len(self._walls)]

    def bounding_box(self) -> BBox:
        """Box over all vertices; the (invalid) empty box when there are no walls."""
        if not self._walls:
            return bbox_empty()
        return bbox_of(w.p1 for w in self._walls)

    def label_anchor(self, grid: float = LABEL_CELL_SIZE) -> Optional[Point]:
        """Interior point for the chamber label, or None if no grid sample is inside."""
        return find_label_anchor(self, grid)

    def preview_projection(
        self, pending: Coord, split_wall_id: Optional[WallId] = None,
    ) -> Preview:
        """Outline as it would look with *pending* committed; the chamber is untouched."""
        return preview_projection(self, pending, split_wall_id)
