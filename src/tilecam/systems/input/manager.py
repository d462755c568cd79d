"""Keyboard input for camera panning.

This module provides KeyboardInput, an input source fed by Arcade key events.
The host window forwards its on_key_press and on_key_release callbacks, and
the camera polls the held state once per update while it is not following a
target.

Key Bindings:
    Bindings map each Direction to one or more arcade.key constants. By default
    they are read from the CAMERA_KEYS setting, which names keys as strings:

        CAMERA_KEYS = {
            "up": ["UP", "W"],
            "down": ["DOWN", "S"],
            "left": ["LEFT", "A"],
            "right": ["RIGHT", "D"],
        }

Usage Example:
    keyboard = KeyboardInput()
    camera = Camera(keyboard)

    class GameWindow(arcade.Window):
        def on_key_press(self, symbol, modifiers):
            keyboard.on_key_press(symbol, modifiers)

        def on_key_release(self, symbol, modifiers):
            keyboard.on_key_release(symbol, modifiers)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import arcade

from tilecam.conf import settings
from tilecam.systems.input.base import InputBase
from tilecam.types import Direction

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

logger = logging.getLogger(__name__)


def resolve_key_bindings(key_names: Mapping[str, Iterable[str]]) -> dict[int, Direction]:
    """Translate configured key names into a symbol-to-direction lookup.

    Args:
        key_names: Direction name ("up", "down", "left", "right") to a list of
            arcade.key constant names, as stored in CAMERA_KEYS.

    Returns:
        Dictionary mapping arcade key symbols to the direction they pan.
        Unknown directions and key names are logged and skipped.
    """
    bindings: dict[int, Direction] = {}
    for direction_name, names in key_names.items():
        try:
            direction = Direction(direction_name.lower())
        except ValueError:
            logger.warning("Unknown camera direction in CAMERA_KEYS: '%s'", direction_name)
            continue
        for name in names:
            symbol = getattr(arcade.key, name.upper(), None)
            if not isinstance(symbol, int):
                logger.warning("Unknown key name '%s' for camera direction '%s'", name, direction.value)
                continue
            bindings[symbol] = direction
    logger.debug("Resolved %d camera key bindings", len(bindings))
    return bindings


class KeyboardInput(InputBase):
    """Tracks held camera keys from Arcade key events.

    Several keys may be bound to the same direction; the direction counts as
    pressed while any of them is held.

    Attributes:
        bindings: Arcade key symbol to Direction lookup.
        keys_pressed: Symbols of bound keys currently held.
    """

    def __init__(self, bindings: Mapping[int, Direction] | None = None) -> None:
        """Initialize the keyboard input.

        Args:
            bindings: Symbol to direction mapping. Defaults to the keys named in
                the CAMERA_KEYS setting.
        """
        if bindings is None:
            bindings = resolve_key_bindings(settings.CAMERA_KEYS)
        self.bindings: dict[int, Direction] = dict(bindings)
        self.keys_pressed: set[int] = set()

    def on_key_press(self, symbol: int, modifiers: int) -> bool:
        """Record a key press.

        Returns:
            True if the key is bound to a camera direction, False otherwise.
        """
        if symbol not in self.bindings:
            return False
        self.keys_pressed.add(symbol)
        return True

    def on_key_release(self, symbol: int, modifiers: int) -> bool:
        """Record a key release.

        Returns:
            True if the key is bound to a camera direction, False otherwise.
        """
        if symbol not in self.bindings:
            return False
        self.keys_pressed.discard(symbol)
        return True

    def is_pressed(self, direction: Direction) -> bool:
        """Return whether any key bound to the direction is held."""
        return any(self.bindings[symbol] is direction for symbol in self.keys_pressed)

    def clear(self) -> None:
        """Release all held keys (e.g. when the window loses focus)."""
        self.keys_pressed.clear()
