"""Lazily loaded settings for tilecam.

Defaults come from tilecam.conf.global_settings. Uppercase names in the module
named by TILECAM_SETTINGS_MODULE (default: "settings") override them, and
tests can override values with settings.configure().

    from tilecam.conf import settings

    camera_speed = settings.CAMERA_SPEED
"""

from __future__ import annotations

import copy
import importlib
import os
from typing import Any

from tilecam.conf import global_settings


class LazySettings:
    """Settings proxy that loads defaults and user overrides on first access."""

    def __init__(self) -> None:
        """Initialize the proxy with nothing loaded."""
        self._wrapped: Settings | None = None

    def _setup(self) -> Settings:
        """Load global defaults, then the user's settings module if it exists."""
        wrapped = Settings()
        try:
            mod = importlib.import_module(os.environ.get("TILECAM_SETTINGS_MODULE", "settings"))
        except ImportError:
            # No user settings module found, use defaults only
            mod = None
        if mod is not None:
            for name in dir(mod):
                if name.isupper():
                    setattr(wrapped, name, getattr(mod, name))
        self._wrapped = wrapped
        return wrapped

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Return a setting, loading settings on first access."""
        wrapped = self._wrapped if self._wrapped is not None else self._setup()
        return getattr(wrapped, name)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Override settings without a settings module (useful for testing).

        Example:
            settings.configure(CAMERA_SPEED=3.0, TILE_WIDTH=16)
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)


class Settings:
    """Attribute container holding a private copy of every default."""

    def __init__(self) -> None:
        """Copy the uppercase defaults from global_settings."""
        for name in dir(global_settings):
            if name.isupper():
                setattr(self, name, copy.deepcopy(getattr(global_settings, name)))


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
