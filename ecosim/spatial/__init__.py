"""Spatial structures for the simulation grid."""

from ecosim.spatial.grid import NEIGHBOR_OFFSETS, Grid, chebyshev_distance, squared_distance

__all__ = ["Grid", "NEIGHBOR_OFFSETS", "chebyshev_distance", "squared_distance"]
