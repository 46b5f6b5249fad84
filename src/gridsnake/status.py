from enum import Enum


class Status(Enum):
    INIT = "init"
    PLAYING = "playing"
    SUSPENDED = "suspended"
    GAMEOVER = "gameover"
