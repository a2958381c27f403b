"""Minimum spanning forest ("barely connected map") via Kruskal's algorithm."""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from roadnet.algorithms.union_find import DisjointSet
from roadnet.logging import get_logger
from roadnet.model.road import Road, sorted_roads, total_distance
from roadnet.types.base import PointID

logger = get_logger(__name__)


def barely_connected_map(
    roads: Iterable[Road],
    points: Iterable[PointID],
) -> Tuple[Road, ...]:
    """Return the roads of a minimum spanning forest in acceptance order.

    Roads are scanned in ``(distance, id)`` order and kept when they join two
    different connectivity classes. Every road is scanned, so a disconnected
    input yields one tree per connected component.

    Args:
        roads: Roads of the full map.
        points: Point universe; must contain every road endpoint.

    Returns:
        Tuple of accepted roads, ordered by ``(distance, id)``.

    Raises:
        KeyError: If a road endpoint is not in ``points``.
    """
    index: Dict[PointID, int] = {p: i for i, p in enumerate(sorted(set(points)))}
    forest = DisjointSet(len(index))

    accepted: List[Road] = []
    for road in sorted_roads(roads):
        try:
            p, q = index[road.point1], index[road.point2]
        except KeyError as exc:
            raise KeyError(
                f"Road {road.id} endpoint {exc.args[0]!r} is not in the point set."
            ) from None
        if forest.union(p, q):
            accepted.append(road)

    logger.debug(
        f"Spanning forest: {len(accepted)} roads over {len(index)} points, "
        f"{forest.component_count} component(s), distance {total_distance(accepted)}"
    )
    return tuple(accepted)
