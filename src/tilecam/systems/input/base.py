"""Base class for camera input sources."""

from abc import ABC, abstractmethod

from tilecam.types import Direction


class InputBase(ABC):
    """Queryable pressed state of the four camera directions."""

    @abstractmethod
    def is_pressed(self, direction: Direction) -> bool:
        """Return whether a key bound to the direction is currently held."""
        ...
