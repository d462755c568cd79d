"""World map dimensions consumed by the camera.

The camera only needs to know how large the scrollable world is in pixels.
This module defines that contract (WorldMap) and two implementations: a fixed
size (MapBounds) and an adapter over a loaded Tiled map (TileMapBounds).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    import arcade


@runtime_checkable
class WorldMap(Protocol):
    """Total pixel size of the scrollable world."""

    def width_in_pixels(self) -> int: ...

    def height_in_pixels(self) -> int: ...


@dataclass(frozen=True)
class MapBounds:
    """Fixed world dimensions in pixels.

    Attributes:
        width: World width in pixels.
        height: World height in pixels.
    """

    width: int
    height: int

    @classmethod
    def from_tiles(cls, columns: int, rows: int, tile_width: int, tile_height: int) -> MapBounds:
        """Build bounds for a grid of columns x rows tiles."""
        return cls(width=columns * tile_width, height=rows * tile_height)

    def width_in_pixels(self) -> int:
        """Return the world width in pixels."""
        return self.width

    def height_in_pixels(self) -> int:
        """Return the world height in pixels."""
        return self.height


class TileMapBounds:
    """Reads world dimensions from a loaded arcade.TileMap.

    The map is read on every call, so a reloaded or rescaled map is picked up
    without rebuilding the adapter.

    Example:
        tile_map = arcade.load_tilemap(map_path, scaling=1.0)
        camera.update(window.width, window.height, TileMapBounds(tile_map))
    """

    def __init__(self, tile_map: arcade.TileMap) -> None:
        """Wrap a loaded tile map."""
        self.tile_map = tile_map

    def width_in_pixels(self) -> int:
        """Return columns x scaled tile width."""
        return int(self.tile_map.width * self.tile_map.tile_width * self.tile_map.scaling)

    def height_in_pixels(self) -> int:
        """Return rows x scaled tile height."""
        return int(self.tile_map.height * self.tile_map.tile_height * self.tile_map.scaling)
