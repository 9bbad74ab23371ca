# services/controller.py
from __future__ import annotations
import logging

from app.config import SETTINGS, GameSettings
from app.state import Screen, SessionState
from core.events import Event, Key, KeyCode, KeyInput, Modifiers


def remaining_percent(elapsed: int, race_seconds: int = 60) -> int:
    return max(0, 100 - (100 * elapsed) // race_seconds)


class SessionController:
    """Owns the session state and is the only thing that changes it.

    advance() runs once before every render and applies everything that
    depends on time or on the whole input buffer: the countdown, word
    matching, the race timeout and the GameOver restart. handle() applies
    one event from the event source.
    """

    def __init__(self, state: SessionState, clock, supplier, settings: GameSettings = SETTINGS):
        self.state = state
        self.clock = clock
        self.supplier = supplier
        self.settings = settings

    @classmethod
    def create(cls, clock, supplier, settings: GameSettings = SETTINGS) -> "SessionController":
        state = SessionState.initial(
            supplier.next_words(settings.queue_size),
            countdown=settings.countdown_seconds,
        )
        return cls(state, clock, supplier, settings)

    # ---------------- per-render update ----------------
    def advance(self):
        s = self.state
        if s.screen is Screen.HOME:
            if s.started:
                self._advance_countdown()
        elif s.screen is Screen.GAME:
            self._check_word()
            self._check_timeout()
        elif s.screen is Screen.GAME_OVER:
            if s.started:
                s.reset_for_race(self.supplier.next_words(self.settings.queue_size))
                logging.info("Race restarted")

    def _advance_countdown(self):
        s = self.state
        if s.countdown_started_at is None:
            s.countdown_started_at = self.clock.now()
        waited = int(self.clock.since(s.countdown_started_at))
        s.countdown = max(0, self.settings.countdown_seconds - waited)
        if s.countdown == 0:
            s.begin_race(self.clock.now())
            logging.info("Race started with %d words queued", len(s.words))

    def _check_word(self):
        s = self.state
        if s.words and s.input.strip() == s.words[0]:
            done = s.complete_word(self.supplier.next_word())
            logging.debug("Completed %r, score %d", done, s.score)

    def elapsed_seconds(self) -> int:
        if self.state.game_start is None:
            return 0
        return int(self.clock.since(self.state.game_start))

    def percent_remaining(self) -> int:
        return remaining_percent(self.elapsed_seconds(), self.settings.race_seconds)

    def _check_timeout(self):
        if self.percent_remaining() <= 0:
            self.state.end_race()
            logging.info("Race over, score %d", self.state.score)

    # ---------------- events ----------------
    def handle(self, event: Event) -> bool:
        """Apply one event. Returns False when the player asked to quit."""
        if not isinstance(event, KeyInput):
            return True
        s = self.state
        if not s.started:
            return self._handle_idle_key(event.key)
        if s.screen is Screen.GAME:
            self._handle_typing_key(event.key)
        return True

    def _handle_idle_key(self, key: Key) -> bool:
        if key.code is not KeyCode.CHAR:
            return True
        if key.char == "q":
            logging.info("Quit requested")
            return False
        if key.char in ("s", "r"):
            self.state.request_race(self.clock.now(), self.settings.countdown_seconds)
            logging.info("Race requested from %s", self.state.screen.value)
        return True

    def _handle_typing_key(self, key: Key):
        s = self.state
        if key.modifiers == Modifiers.NONE:
            if key.code is KeyCode.BACKSPACE:
                s.input = s.input[:-1]
            elif key.code is KeyCode.CHAR:
                s.input += key.char
        elif key.modifiers == Modifiers.CONTROL:
            if key.is_char("a"):
                s.input = ""
