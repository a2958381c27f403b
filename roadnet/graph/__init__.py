"""Graph primitives.

This package provides the strict undirected multigraph type `StrictMultiGraph`
used to expose a road map to networkx utilities.
"""
