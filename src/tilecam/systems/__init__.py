"""Camera, input and map systems."""

from tilecam.systems.camera import Camera, CameraBase
from tilecam.systems.input import InputBase, KeyboardInput
from tilecam.systems.map import MapBounds, TileMapBounds, WorldMap

__all__ = [
    "Camera",
    "CameraBase",
    "InputBase",
    "KeyboardInput",
    "MapBounds",
    "TileMapBounds",
    "WorldMap",
]
