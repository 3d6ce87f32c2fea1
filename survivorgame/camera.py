"""A camera that follows the player inside the map bounds."""

from __future__ import annotations


class Camera:
    """Tracks a view offset centred on the player and clamped to the map."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.bound_width = 0.0
        self.bound_height = 0.0

    def update(self, player_x: float, player_y: float) -> None:
        """Centre the view on the player, then keep it inside the bounds."""
        self.offset_x = player_x - self.width / 2
        self.offset_y = player_y - self.height / 2

        self.offset_x = max(self.offset_x, 0.0)
        self.offset_y = max(self.offset_y, 0.0)
        self.offset_x = min(self.offset_x, self.bound_width - self.width)
        self.offset_y = min(self.offset_y, self.bound_height - self.height)

    def set_bounds(self, width: float, height: float) -> None:
        """Set the size of the area the camera may show."""
        self.bound_width = width
        self.bound_height = height