"""Experience items dropped by defeated enemies."""

from __future__ import annotations

ITEM_IMAGES = (
    "./resources/item/T_ChargeUp_0.png",
    "./resources/item/T_ChargeUp_1.png",
)


class Item:
    """An animated pickup lying on the map."""

    switch_time = 0.25

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self.animation_time = 0.0
        self.current_frame = 0
        self.collected = False

    def update(self, frame_time: float) -> None:
        """Advance the two-frame animation."""
        self.animation_time += frame_time
        if self.animation_time >= self.switch_time:
            self.animation_time = 0.0
            self.current_frame = (self.current_frame + 1) % len(ITEM_IMAGES)

    def collect(self) -> None:
        """Mark the item as picked up."""
        self.collected = True