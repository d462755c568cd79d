"""World map dimensions for camera clamping."""

from tilecam.systems.map.bounds import MapBounds, TileMapBounds, WorldMap

__all__ = ["MapBounds", "TileMapBounds", "WorldMap"]
