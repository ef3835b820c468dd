# game_logic/geometry.py
"""
Pure coordinate predicates used by the rule engine. Nothing here knows about
lines, owners or cards; points are anything with integer ``x`` and ``y``.
"""
from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .station import Station
    from .station_index import StationIndex


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_straight_or_diagonal(a: 'Station', b: 'Station') -> bool:
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    return dx == 0 or dy == 0 or dx == dy


def path_passes_through_station(a: 'Station', b: 'Station', index: 'StationIndex') -> bool:
    """
    Walks unit steps from A toward B and reports whether any cell strictly
    between them holds a station. Only meaningful for aligned pairs.
    """
    dx = _sign(b.x - a.x)
    dy = _sign(b.y - a.y)
    x, y = a.x + dx, a.y + dy
    while (x, y) != (b.x, b.y):
        if index.get_station_at(x, y) is not None:
            return True
        x += dx
        y += dy
    return False


def _cross(p, q, r) -> int:
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def _on_segment(p, q, r) -> bool:
    """True if q lies inside the bounding box of p-r (q is known to be collinear)."""
    return (min(p.x, r.x) <= q.x <= max(p.x, r.x) and
            min(p.y, r.y) <= q.y <= max(p.y, r.y))


def segments_intersect(a1, a2, b1, b2) -> bool:
    """
    Orientation test for segments a1-a2 and b1-b2. Proper crossings,
    collinear overlaps and a point of one segment touching the other all count
    as an intersection. Two segments that only meet at a common endpoint do not.
    """
    d1 = _cross(a1, a2, b1)
    d2 = _cross(a1, a2, b2)
    d3 = _cross(b1, b2, a1)
    d4 = _cross(b1, b2, a2)

    shared = {(a1.x, a1.y), (a2.x, a2.y)} & {(b1.x, b1.y), (b2.x, b2.y)}
    if shared:
        if d1 != 0 or d2 != 0:
            return False
        # Collinear with a common endpoint: only an overlap beyond that point counts
        return any(_on_segment(a1, q, a2) and (q.x, q.y) not in shared for q in (b1, b2)) or \
            any(_on_segment(b1, q, b2) and (q.x, q.y) not in shared for q in (a1, a2)) or \
            len(shared) == 2

    if ((d1 > 0 > d2) or (d1 < 0 < d2)) and ((d3 > 0 > d4) or (d3 < 0 < d4)):
        return True

    if d1 == 0 and _on_segment(a1, b1, a2): return True
    if d2 == 0 and _on_segment(a1, b2, a2): return True
    if d3 == 0 and _on_segment(b1, a1, b2): return True
    if d4 == 0 and _on_segment(b1, a2, b2): return True
    return False
