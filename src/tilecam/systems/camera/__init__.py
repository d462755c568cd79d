"""Camera system for scrolling tile maps.

This package provides:
- Camera: Keyboard panning, cursor/unit following and map clamping
- CameraBase: Abstract interface implemented by Camera
"""

from tilecam.systems.camera.base import CameraBase
from tilecam.systems.camera.manager import Camera

__all__ = ["Camera", "CameraBase"]
