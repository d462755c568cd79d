"""tilecam - A scrolling camera for Arcade tile-map games.

This package provides a viewport camera with:
- Keyboard panning at a configurable speed
- Following a cursor or a unit
- Clamping to the map bounds

Quick start:
    from tilecam import Camera, KeyboardInput, TileMapBounds

    keyboard = KeyboardInput()
    camera = Camera(keyboard)

    # Every tick
    camera.update(window.width, window.height, TileMapBounds(tile_map))

Settings:
    # Override defaults in your project's settings.py:
    # CAMERA_SPEED = 8.0
    # TILE_WIDTH = 16

    from tilecam.conf import settings

    settings.configure(CAMERA_SPEED=8.0)
"""

__version__ = "0.1.0"

from tilecam.conf import settings
from tilecam.helpers import setup_logging
from tilecam.systems import (
    Camera,
    CameraBase,
    InputBase,
    KeyboardInput,
    MapBounds,
    TileMapBounds,
    WorldMap,
)
from tilecam.types import CursorTarget, Direction, FocusMode, UnitTarget

__all__ = [
    "Camera",
    "CameraBase",
    "CursorTarget",
    "Direction",
    "FocusMode",
    "InputBase",
    "KeyboardInput",
    "MapBounds",
    "TileMapBounds",
    "UnitTarget",
    "WorldMap",
    "__version__",
    "settings",
    "setup_logging",
]
