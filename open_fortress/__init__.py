"""Simulation core of a colony-building game: world map, digging, pathfinding, work and plants."""

__version__ = "0.1.0"