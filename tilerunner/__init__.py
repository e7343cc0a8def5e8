"""Tile maps, collision boxes, entities and stage set-ups for a side-scrolling platformer."""

__version__ = "0.1.0"