"""Custom types, enumerations and collaborator protocols."""

from enum import Enum, auto
from typing import Protocol, runtime_checkable


class Direction(Enum):
    """Directional keys that pan the camera."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class FocusMode(Enum):
    """What currently drives the camera position."""

    FREE = auto()
    CURSOR = auto()
    UNIT = auto()


class Point(Protocol):
    """Anything with x and y coordinates (pyglet Vec2, arcade Vec2, ...)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


@runtime_checkable
class CursorTarget(Protocol):
    """A pointer entity the camera can center on.

    Attributes:
        position: Top-left corner of the cursor in world pixels.
        frame_size: Width and height of the cursor's current animation frame.
    """

    position: Point
    frame_size: tuple[int, int]


@runtime_checkable
class UnitTarget(Protocol):
    """A game unit the camera can center on.

    Only the sprite position is read; the unit is centered using the
    configured tile dimensions rather than its own frame size.
    """

    sprite_position: Point
