# app/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class GameSettings:
    tick_ms: int = 200
    race_seconds: int = 60
    countdown_seconds: int = 3
    queue_size: int = 100
    words_per_line: int = 10
    channel_capacity: int = 64
    log_file: str = "typerace.log"


@dataclass(frozen=True)
class Theme:
    name: str
    primary: str
    accent: str
    title: str
    gauge: str
    gauge_background: str


# -------- Built-in values --------
SETTINGS = GameSettings()

THEME = Theme(
    name="Terminal",
    primary="white",
    accent="yellow",
    title="bright_blue",
    gauge="white",
    gauge_background="black",
)

MENU_TITLES: Tuple[str, ...] = ("Start", "Quit")
