# ui/view.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from app.config import MENU_TITLES, SETTINGS, GameSettings
from app.state import Screen, SessionState
from services.controller import remaining_percent

WELCOME_LINES: Tuple[str, ...] = ("", "Welcome", "", "to", "", "Typing Game", "")
TITLE_LINE = "Typing Game"


@dataclass(frozen=True)
class MenuTabs:
    titles: Tuple[str, ...]
    title: str = "Menu"


@dataclass(frozen=True)
class InputEcho:
    text: str
    title: str = "Input"


@dataclass(frozen=True)
class Banner:
    text: str


@dataclass(frozen=True)
class Welcome:
    lines: Tuple[str, ...]
    title: str = "Home"


@dataclass(frozen=True)
class WordLines:
    lines: Tuple[str, ...]


@dataclass(frozen=True)
class Gauge:
    title: str
    percent: int


@dataclass(frozen=True)
class ViewModel:
    screen: Screen
    top: Union[MenuTabs, InputEcho, Banner]
    middle: Optional[Union[Welcome, WordLines]] = None
    bottom: Optional[Gauge] = None


def wrap_words(words: Sequence[str], per_line: int = 10) -> List[str]:
    """Each word followed by a space, per_line words to a line."""
    words = list(words)
    return [
        "".join(w + " " for w in words[i:i + per_line])
        for i in range(0, len(words), per_line)
    ]


def game_over_text(score: int) -> str:
    return f"Game Over | Press 'r' to restart race | Score: {score}"


def project(state: SessionState, clock, settings: GameSettings = SETTINGS) -> ViewModel:
    """Describe what the screen should show. Reads the state, never writes it."""
    if state.screen is Screen.HOME:
        lines = WELCOME_LINES
        if state.started and state.countdown > 0:
            lines = lines + (f"Starting race in {state.countdown}",)
        return ViewModel(Screen.HOME, MenuTabs(MENU_TITLES), Welcome(lines))

    if state.screen is Screen.GAME:
        elapsed = int(clock.since(state.game_start)) if state.game_start is not None else 0
        remaining = max(0, settings.race_seconds - elapsed)
        gauge = Gauge(
            title=f"Time Remaining: {remaining}",
            percent=remaining_percent(elapsed, settings.race_seconds),
        )
        words = WordLines(tuple(wrap_words(state.words, settings.words_per_line)))
        return ViewModel(Screen.GAME, InputEcho(state.input), words, gauge)

    return ViewModel(Screen.GAME_OVER, Banner(game_over_text(state.score)))
