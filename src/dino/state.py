# src/dino/state.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import List, TYPE_CHECKING

from .config import DINO_GROUND_Y

if TYPE_CHECKING:
    from .obstacles import Obstacle


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"     # collided, waiting for a restart


@dataclass
class SimState:
    """
    Everything the frame loop and the jump timer share.
    Owned by GameLoop, handed by reference to the other components.
    """
    dino_y: float = float(DINO_GROUND_Y)
    obstacles: List["Obstacle"] = field(default_factory=list)
    running: bool = False
    jumping: bool = False
    phase: Phase = Phase.IDLE
