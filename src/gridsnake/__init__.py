"""Snake on a square grid: tick-driven state machine with a pygame front end."""

from .config import Config, CFG
from .direction import Direction, request_direction_change
from .grid import Cell, Grid
from .machine import GameMachine
from .movement import Collision, Moved, advance
from .food import place_food
from .scheduler import ManualScheduler, PygameScheduler, Scheduler
from .state import GameState, Status

__all__ = [
    "Config", "CFG",
    "Direction", "request_direction_change",
    "Cell", "Grid",
    "GameMachine",
    "Collision", "Moved", "advance",
    "place_food",
    "ManualScheduler", "PygameScheduler", "Scheduler",
    "GameState", "Status",
]
