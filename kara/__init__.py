"""A tile-based dungeon adventure game: scenes, entities, map, fog of war and the main loop."""

__version__ = "0.1.0"