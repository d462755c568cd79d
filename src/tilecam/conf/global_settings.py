"""Default settings for tilecam.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from tilecam.conf import global_settings

    CAMERA_SPEED = 8.0
    CAMERA_KEYS = {
        **global_settings.CAMERA_KEYS,
        "up": ["UP", "W"],
    }
"""

# Camera settings
CAMERA_SPEED = 5.0
"""Camera panning speed in pixels per update when not following a target."""

# Tile settings
TILE_WIDTH = 32
"""Width of a map tile in pixels (used to center the camera on units)."""

TILE_HEIGHT = 32
"""Height of a map tile in pixels (used to center the camera on units)."""

# Input settings
CAMERA_KEYS = {
    "up": ["UP"],
    "down": ["DOWN"],
    "left": ["LEFT"],
    "right": ["RIGHT"],
}
"""Keys that pan the camera, as arcade.key constant names per direction."""
