"""Shortest-path-first (SPF) search over undirected roads.

Implements Dijkstra with lazy deletion: heap entries carry the distance at
insertion time and are skipped when stale. Results are fully deterministic:

    - Incident roads are relaxed in ``(distance, id)`` order.
    - A neighbor's predecessor road is replaced only on a strictly shorter
      distance, so the first road reaching the best distance wins.
    - Heap entries with equal distance pop in insertion order.

The search stops as soon as the end point is popped; with non-negative
distances its distance is final at that moment.
"""

from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterable, List, Optional, Set, Tuple

from roadnet.logging import get_logger
from roadnet.model.road import Road
from roadnet.model.route import Route
from roadnet.types.base import Cost, PointID

logger = get_logger(__name__)


def build_adjacency(roads: Iterable[Road]) -> Dict[PointID, List[Road]]:
    """Map each point to its incident roads sorted by ``(distance, id)``.

    A self-loop appears once in its point's list.
    """
    adjacency: Dict[PointID, List[Road]] = {}
    for road in roads:
        adjacency.setdefault(road.point1, []).append(road)
        if road.point2 != road.point1:
            adjacency.setdefault(road.point2, []).append(road)
    for incident in adjacency.values():
        incident.sort(key=lambda road: road.sort_key)
    return adjacency


def spf(
    adjacency: Dict[PointID, List[Road]],
    src: PointID,
    dst: Optional[PointID] = None,
) -> Tuple[Dict[PointID, Cost], Dict[PointID, Road]]:
    """Compute shortest distances from ``src``.

    Args:
        adjacency: Incident roads per point, as built by ``build_adjacency``.
        src: Start point.
        dst: Optional end point. When given, the search stops once ``dst`` is
            popped from the heap and ``dst`` itself is not expanded.

    Returns:
        A tuple of (costs, pred):
          - costs: Minimal distance from ``src`` for each settled or
            discovered point.
          - pred: For each reached point other than ``src``, the road through
            which its best distance was first found.
    """
    costs: Dict[PointID, Cost] = {src: 0}
    pred: Dict[PointID, Road] = {}
    settled: Set[PointID] = set()
    seq = count()
    min_pq: List[Tuple[Cost, int, PointID]] = [(0, next(seq), src)]

    while min_pq:
        current_cost, _, point = heappop(min_pq)
        if current_cost > costs[point] or point in settled:
            continue
        settled.add(point)

        if point == dst:
            break

        for road in adjacency.get(point, ()):
            neighbor = road.other(point)
            new_cost = current_cost + road.distance
            if neighbor not in costs or new_cost < costs[neighbor]:
                costs[neighbor] = new_cost
                pred[neighbor] = road
                heappush(min_pq, (new_cost, next(seq), neighbor))

    return costs, pred


def resolve_route(
    src: PointID, dst: PointID, pred: Dict[PointID, Road]
) -> Route:
    """Walk predecessor roads back from ``dst`` to ``src``.

    Returns:
        The route from ``src`` to ``dst``, or an empty route when ``dst`` was
        never reached or equals ``src``.
    """
    roads: List[Road] = []
    at = dst
    while at != src and at in pred:
        road = pred[at]
        roads.append(road)
        at = road.other(at)
    if at != src:
        return Route(src, dst)
    roads.reverse()
    return Route(src, dst, tuple(roads))


def fastest_route(
    roads: Iterable[Road],
    points: Iterable[PointID],
    start: PointID,
    end: PointID,
) -> Route:
    """Return the minimum-distance route from ``start`` to ``end``.

    Args:
        roads: Roads the route may use.
        points: Point universe the query is validated against.
        start: Start point.
        end: End point.

    Returns:
        The fastest route. Empty when ``end`` is unreachable over ``roads``
        or when ``start == end``.

    Raises:
        KeyError: If ``start`` or ``end`` is not in ``points``.
    """
    universe = points if isinstance(points, (set, frozenset)) else set(points)
    for label, point in (("Start", start), ("End", end)):
        if point not in universe:
            raise KeyError(f"{label} point '{point}' is not in the point set.")

    adjacency = build_adjacency(roads)
    _, pred = spf(adjacency, start, dst=end)
    route = resolve_route(start, end, pred)

    if route.is_empty and start != end:
        logger.debug(f"No route from {start} to {end}")
    else:
        logger.debug(
            f"Route {start} -> {end}: {len(route)} roads, distance {route.distance}"
        )
    return route
