"""Scrolling camera for tile-based maps.

This module provides the Camera class, which decides which part of the world
is visible through the viewport. The camera position is the world pixel shown
at the viewport's top-left corner.

Key Features:
    - Free panning from the directional keys at a constant speed
    - Following a cursor (centered on its current animation frame)
    - Following a unit (centered on one map tile)
    - Clamping to the map so the viewport never leaves the world

Camera Behavior:
    While unfocused the camera reads the held directional keys every update and
    moves `speed` pixels in the resulting direction. Diagonal movement is
    normalized, so holding two keys is not faster than holding one.

    While focused the position is recomputed from the target every update, and
    keyboard input is ignored. Cursor focus wins over unit focus.

Boundary System:
    After every update each axis is limited to [0, map size - viewport size].
    The upper limit is applied first and zero second, so when the viewport is
    larger than the map the camera rests at 0 on that axis.

Usage Example:
    camera = Camera(KeyboardInput())
    world_map = TileMapBounds(tile_map)

    # Each tick
    camera.update(window.width, window.height, world_map)

    # Follow the selected unit, then go back to the cursor
    camera.set_focus(selected_unit)
    camera.toggle_focus()
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from pyglet.math import Mat4, Vec2, Vec3

from tilecam.conf import settings
from tilecam.systems.camera.base import CameraBase
from tilecam.types import CursorTarget, Direction, FocusMode, UnitTarget

if TYPE_CHECKING:
    from tilecam.systems.input import InputBase
    from tilecam.systems.map import WorldMap

logger = logging.getLogger(__name__)

MIN_SPEED = 1.0
"""Lowest panning speed in pixels per update; smaller assignments are raised to it."""


def _half(value: float) -> float:
    """Halve a dimension, truncating toward zero when it is an integer."""
    if isinstance(value, int):
        return int(value / 2)
    return value / 2


class Camera(CameraBase):
    """Keyboard-driven or target-following camera clamped to the map.

    The camera keeps non-owning references to at most one cursor and one unit.
    Only one of them drives the position at a time; the other stays stored so
    toggle_focus() can switch back to it.

    Attributes:
        position: World pixel at the viewport's top-left corner.
        input_source: Directional key state polled while unfocused.
        tile_width: Tile width in pixels, used to center on units.
        tile_height: Tile height in pixels, used to center on units.
    """

    def __init__(
        self,
        input_source: InputBase,
        *,
        speed: float | None = None,
        tile_width: int | None = None,
        tile_height: int | None = None,
    ) -> None:
        """Initialize the camera at the world origin.

        Args:
            input_source: Directional key state used for free panning.
            speed: Pixels moved per update while panning. Defaults to the
                CAMERA_SPEED setting.
            tile_width: Tile width in pixels. Defaults to TILE_WIDTH.
            tile_height: Tile height in pixels. Defaults to TILE_HEIGHT.
        """
        self.input_source = input_source
        self.position = Vec2(0.0, 0.0)
        self._speed: float = MIN_SPEED
        self.speed = settings.CAMERA_SPEED if speed is None else speed
        self.tile_width: int = settings.TILE_WIDTH if tile_width is None else tile_width
        self.tile_height: int = settings.TILE_HEIGHT if tile_height is None else tile_height

        self._cursor_focus: CursorTarget | None = None
        self._unit_focus: UnitTarget | None = None
        self._focus_mode = FocusMode.FREE

    @property
    def speed(self) -> float:
        """Pixels moved per update while panning."""
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if value < MIN_SPEED:
            logger.debug("Camera speed %s raised to minimum %s", value, MIN_SPEED)
        self._speed = float(max(value, MIN_SPEED))

    @property
    def transform(self) -> Mat4:
        """Translation that shifts the world so `position` is drawn at the origin."""
        return Mat4.from_translation(Vec3(-self.position.x, -self.position.y, 0.0))

    @property
    def focus_mode(self) -> FocusMode:
        """What currently drives the camera position."""
        return self._focus_mode

    @property
    def is_focused(self) -> bool:
        """Whether a cursor or unit currently drives the camera."""
        return self._focus_mode is not FocusMode.FREE

    @property
    def cursor_active(self) -> bool:
        """Whether the stored cursor drives the camera."""
        return self._focus_mode is FocusMode.CURSOR

    @property
    def unit_active(self) -> bool:
        """Whether the stored unit drives the camera."""
        return self._focus_mode is FocusMode.UNIT

    @property
    def cursor_target(self) -> CursorTarget | None:
        """Stored cursor, whether or not it is being followed."""
        return self._cursor_focus

    @property
    def unit_target(self) -> UnitTarget | None:
        """Stored unit, whether or not it is being followed."""
        return self._unit_focus

    def set_focus(self, target: CursorTarget | UnitTarget) -> None:
        """Follow a cursor or a unit.

        Targets exposing `position` and `frame_size` are followed as cursors,
        even if they also expose `sprite_position`; use set_focus_unit() to
        follow such an object as a unit. Targets of neither shape (including
        None) are logged and ignored, leaving the focus unchanged.
        """
        if isinstance(target, CursorTarget):
            self.set_focus_cursor(target)
        elif isinstance(target, UnitTarget):
            self.set_focus_unit(target)
        else:
            logger.warning("Cannot focus camera on %r: not a cursor or unit", target)

    def set_focus_cursor(self, cursor: CursorTarget) -> None:
        """Follow a cursor. A stored unit is kept but no longer followed."""
        self._cursor_focus = cursor
        self._focus_mode = FocusMode.CURSOR
        logger.debug("Camera following cursor")

    def set_focus_unit(self, unit: UnitTarget) -> None:
        """Follow a unit. A stored cursor is kept but no longer followed."""
        self._unit_focus = unit
        self._focus_mode = FocusMode.UNIT
        logger.debug("Camera following unit")

    def toggle_focus(self) -> None:
        """Flip the active state of each stored target.

        Each stored target flips independently. With both stored, this swaps
        between them; with one stored, it switches between that target and
        free panning. With none stored it does nothing.
        """
        cursor_active = self.cursor_active
        unit_active = self.unit_active
        if self._cursor_focus is not None:
            cursor_active = not cursor_active
        if self._unit_focus is not None:
            unit_active = not unit_active

        if cursor_active:
            self._focus_mode = FocusMode.CURSOR
        elif unit_active:
            self._focus_mode = FocusMode.UNIT
        else:
            self._focus_mode = FocusMode.FREE
        logger.debug("Camera focus toggled to %s", self._focus_mode.name)

    def unset_focus(self) -> None:
        """Forget both targets; the camera returns to keyboard control."""
        self._cursor_focus = None
        self._unit_focus = None
        self._focus_mode = FocusMode.FREE
        logger.debug("Camera focus cleared")

    def update(self, viewport_width: int, viewport_height: int, world_map: WorldMap) -> None:
        """Move the camera for one tick and clamp it to the map.

        Args:
            viewport_width: Width of the viewport in pixels.
            viewport_height: Height of the viewport in pixels.
            world_map: Map whose pixel size bounds the camera.
        """
        if self._focus_mode is FocusMode.FREE:
            self._pan(self.input_source)
        elif self._focus_mode is FocusMode.CURSOR and self._cursor_focus is not None:
            frame_width, frame_height = self._cursor_focus.frame_size
            self.position = Vec2(
                self._cursor_focus.position.x + _half(frame_width) - _half(viewport_width),
                self._cursor_focus.position.y + _half(frame_height) - _half(viewport_height),
            )
        elif self._focus_mode is FocusMode.UNIT and self._unit_focus is not None:
            self.position = Vec2(
                self._unit_focus.sprite_position.x + _half(self.tile_width) - _half(viewport_width),
                self._unit_focus.sprite_position.y + _half(self.tile_height) - _half(viewport_height),
            )

        self._clamp_to_area(
            world_map.width_in_pixels() - viewport_width,
            world_map.height_in_pixels() - viewport_height,
        )

    def _pan(self, input_source: InputBase) -> None:
        """Move `speed` pixels in the direction of the held keys."""
        dx = dy = 0
        if input_source.is_pressed(Direction.UP):
            dy -= 1
        if input_source.is_pressed(Direction.DOWN):
            dy += 1
        if input_source.is_pressed(Direction.LEFT):
            dx -= 1
        if input_source.is_pressed(Direction.RIGHT):
            dx += 1

        if dx == 0 and dy == 0:
            return
        scale = self._speed / math.hypot(dx, dy)
        self.position = Vec2(self.position.x + dx * scale, self.position.y + dy * scale)

    def _clamp_to_area(self, width: float, height: float) -> None:
        """Limit the position to [0, width] x [0, height].

        The upper limit is checked before zero, so a negative limit ends at 0.
        """
        x, y = self.position.x, self.position.y
        if x > width:
            x = width
        if y > height:
            y = height

        if x < 0:
            x = 0
        if y < 0:
            y = 0

        self.position = Vec2(float(x), float(y))
