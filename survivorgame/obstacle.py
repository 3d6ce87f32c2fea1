"""Static obstacles that block movement on the map."""

from __future__ import annotations

from dataclasses import dataclass

OBSTACLE_IMAGES = (
    "./resources/background/T_TempleTallColumn.png",
    "./resources/background/Tree_0.png",
    "./resources/background/Tree_1.png",
    "./resources/background/Tree_2.png",
    "./resources/background/Tree_3.png",
)


@dataclass
class Obstacle:
    """A rectangular obstacle placed at a map position."""

    x: float
    y: float
    width: float
    height: float
    image_path: str = OBSTACLE_IMAGES[0]

    def intersects(self, x: float, y: float, width: float, height: float) -> bool:
        """Return True if the given box overlaps this obstacle (edges touching do not count)."""
        return (
            x < self.x + self.width
            and x + width > self.x
            and y < self.y + self.height
            and y + height > self.y
        )