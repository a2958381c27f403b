"""Disjoint-set (union-find) over a fixed universe of integer indices.

Supports:
- ``find`` with full path compression, implemented iteratively so deep
  chains never hit the recursion limit.
- ``union`` by rank; on equal ranks the root of the first argument becomes
  the parent and its rank grows by one.

Time complexity per operation is O(alpha(n)) amortized.
"""

from __future__ import annotations

from typing import List


class DisjointSet:
    """Union-find over elements ``0..size-1``.

    Attributes:
        parent: Parent index of each element; roots are their own parent.
        rank: Upper bound on tree height, meaningful only for roots.
    """

    __slots__ = ("parent", "rank", "_components")

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"DisjointSet size must be non-negative, got {size}")
        self.parent: List[int] = list(range(size))
        self.rank: List[int] = [0] * size
        self._components = size

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def component_count(self) -> int:
        """Number of disjoint classes currently tracked."""
        return self._components

    def _check(self, p: int) -> None:
        # Negative indices would silently wrap around in a Python list
        size = len(self.parent)
        if isinstance(p, bool) or not isinstance(p, int) or not 0 <= p < size:
            raise IndexError(f"Index {p!r} out of range for DisjointSet of size {size}")

    def find(self, p: int) -> int:
        """Return the representative of ``p``'s class, compressing the path.

        Raises:
            IndexError: If ``p`` is outside ``0..size-1``.
        """
        self._check(p)
        parent = self.parent

        root = p
        while parent[root] != root:
            root = parent[root]

        while parent[p] != root:
            parent[p], p = root, parent[p]

        return root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def union(self, p: int, q: int) -> bool:
        """Merge the classes of ``p`` and ``q``.

        Returns:
            True if two distinct classes were merged, False if ``p`` and ``q``
            were already in the same class (nothing is changed).

        Raises:
            IndexError: If either index is out of range.
        """
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return False

        if self.rank[root_p] > self.rank[root_q]:
            self.parent[root_q] = root_p
        elif self.rank[root_p] < self.rank[root_q]:
            self.parent[root_p] = root_q
        else:
            self.parent[root_q] = root_p
            self.rank[root_p] += 1

        self._components -= 1
        return True
