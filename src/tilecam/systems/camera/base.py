"""Base class for Camera."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pyglet.math import Mat4

    from tilecam.systems.map import WorldMap
    from tilecam.types import CursorTarget, UnitTarget


class CameraBase(ABC):
    """Base class for Camera."""

    @property
    @abstractmethod
    def transform(self) -> Mat4:
        """Translation that moves the camera position to the viewport origin."""
        ...

    @property
    @abstractmethod
    def is_focused(self) -> bool:
        """Whether the camera is following a target."""
        ...

    @abstractmethod
    def set_focus(self, target: CursorTarget | UnitTarget) -> None:
        """Follow a cursor or a unit."""
        ...

    @abstractmethod
    def toggle_focus(self) -> None:
        """Flip between the stored focus targets and free movement."""
        ...

    @abstractmethod
    def unset_focus(self) -> None:
        """Forget all focus targets and return to keyboard control."""
        ...

    @abstractmethod
    def update(self, viewport_width: int, viewport_height: int, world_map: WorldMap) -> None:
        """Move the camera for one tick and clamp it to the map."""
        ...
