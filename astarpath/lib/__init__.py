"""Library utilities for astarpath.

This package contains integration modules for external libraries.
"""

from astarpath.lib.nx import NxGraph, edge_cost

__all__ = [
    "NxGraph",
    "edge_cost",
]
