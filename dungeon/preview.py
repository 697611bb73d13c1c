"""Preview projection: the outline as it would look with a pending vertex committed."""
from typing import TYPE_CHECKING, Literal, NamedTuple, Optional

from shared.types import Point, Coord, WallId
from shared.geometry import WallNotFoundError

if TYPE_CHECKING:
    from dungeon.chamber import Chamber


class Preview(NamedTuple):
    """Transient shape for the renderer.

    kind is "point" for the very first vertex marker, "line" for the open
    segment from the first vertex, and "polygon" for a closed outline.
    """
    kind: Literal["point", "line", "polygon"]
    points: list[Point]


def preview_projection(
    chamber: "Chamber", pending: Coord, split_wall_id: Optional[WallId] = None,
) -> Preview:
    """Project *pending* into a copy of the chamber outline.

    Without split_wall_id the vertex is appended (the closing wall is split),
    mirroring Chamber.append; with it, that wall is split as in Chamber.split.
    """
    pending = Coord(*pending)
    walls = list(chamber.walls())

    if split_wall_id is None and not walls:
        if chamber.first_vertex is None:
            return Preview("point", [pending.to_point()])
        return Preview("line", [chamber.first_vertex.to_point(), pending.to_point()])

    if split_wall_id is None:
        idx = len(walls) - 1
    else:
        idx = next((i for i, w in enumerate(walls) if w.id == split_wall_id), None)
        if idx is None:
            raise WallNotFoundError(split_wall_id, chamber.id)
    w1, w2 = walls[idx].split(pending)
    walls[idx:idx+1] = [w1, w2]
    return Preview("polygon", [w.p1.to_point() for w in walls])
