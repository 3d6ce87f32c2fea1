"""Game events exchanged between game logic components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class EventType(IntEnum):
    """Kinds of game event."""

    PLAYER_MOVE = 0
    FIRE_BULLET = 1
    COLLECT_ITEM = 2
    ENEMY_SPAWN = 3
    COLLISION = 4


@dataclass
class Event:
    """A single game event concerning one entity."""

    type: EventType
    entity_id: int
    pos_x: float = 0.0
    pos_y: float = 0.0
    damage: int = 0