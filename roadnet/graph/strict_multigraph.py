"""Strict undirected multigraph used to expose road maps to networkx.

`StrictMultiGraph` extends `networkx.MultiGraph` so that nodes must be added
explicitly and every edge carries a caller-supplied key that is unique across
the whole graph. ``RoadMap.to_graph`` keys edges by road id, so networkx
utilities (connected components, path lengths) see the same identities the
analysis uses.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Set

import networkx as nx

NodeID = Hashable
EdgeID = Hashable


class StrictMultiGraph(nx.MultiGraph):
    """An undirected multigraph with explicit nodes and graph-wide edge keys.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - Every edge has an explicit key, unique across all node pairs.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._edge_keys: Set[EdgeID] = set()

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an undirected edge between existing nodes under ``key``.

        Returns:
            EdgeID: The key of the new edge.

        Raises:
            ValueError: If either node does not exist, the key is missing, or
                the key is already in use anywhere in the graph.
        """
        if u_for_edge not in self:
            raise ValueError(f"Node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Node '{v_for_edge}' does not exist.")
        if key is None:
            raise ValueError("Edge key is required.")
        if key in self._edge_keys:
            raise ValueError(f"Edge with id '{key}' already exists.")

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edge_keys.add(key)
        return key
