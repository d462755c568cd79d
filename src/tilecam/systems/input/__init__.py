"""Input sources for camera panning."""

from tilecam.systems.input.base import InputBase
from tilecam.systems.input.manager import KeyboardInput, resolve_key_bindings

__all__ = ["InputBase", "KeyboardInput", "resolve_key_bindings"]
