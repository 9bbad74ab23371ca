from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Iterable, Optional


class Screen(Enum):
    HOME = "home"
    GAME = "game"
    GAME_OVER = "game_over"


@dataclass
class SessionState:
    screen: Screen = Screen.HOME
    started: bool = False
    countdown: int = 3
    game_start: Optional[int] = None
    countdown_started_at: Optional[int] = None
    input: str = ""
    words: Deque[str] = field(default_factory=deque)
    score: int = 0

    @classmethod
    def initial(cls, words: Iterable[str], countdown: int = 3) -> "SessionState":
        return cls(countdown=countdown, words=deque(words))

    @property
    def current_word(self) -> Optional[str]:
        return self.words[0] if self.words else None

    @property
    def is_counting_down(self) -> bool:
        return self.screen is Screen.HOME and self.started

    def request_race(self, now: int, countdown: int = 3):
        self.started = True
        self.countdown = countdown
        self.countdown_started_at = now
        self.score = 0
        self.input = ""

    def begin_race(self, now: int):
        self.screen = Screen.GAME
        self.game_start = now
        self.countdown = 0
        self.countdown_started_at = None
        self.input = ""

    def end_race(self):
        self.screen = Screen.GAME_OVER
        self.started = False

    def reset_for_race(self, words: Iterable[str]):
        """Back to Home with a fresh queue; score stays until the countdown starts over."""
        self.screen = Screen.HOME
        self.game_start = None
        self.input = ""
        self.words.clear()
        self.words.extend(words)

    def complete_word(self, replacement: str) -> str:
        done = self.words.popleft()
        self.words.append(replacement)
        self.input = ""
        self.score += 1
        return done
