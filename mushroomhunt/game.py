"""Game state of a single round: the player, the mushrooms and the clocks."""

from __future__ import annotations

import enum
import itertools
import random
from dataclasses import dataclass, field
from typing import Callable

import pygame

from mushroomhunt.mushroom import MUSHROOM_SIZE, Mushroom, MushroomType
from mushroomhunt.records import RecordsManager

FIELD_WIDTH = 1080
FIELD_HEIGHT = 720
PLAYER_SIZE = 128
PLAYER_SPEED = 15
DIAGONAL_FACTOR = 0.7071
GAME_SECONDS = 90
MAX_BAD_MUSHROOMS = 3
DEFAULT_PLAYER_NAME = "Игрок"

FRAME_INTERVAL_MS = 16
CLOCK_INTERVAL_MS = 1000
SPAWN_INTERVAL_MS = 1500
GAME_DURATION_MS = 90000
MUSHROOM_LIFETIME_MS = 5000

GAME_OVER_TEXT = "Время закончилось!\nВаш результат: {score}"


class Control(enum.Enum):
    """Player inputs understood by the game."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"
    MENU = "menu"


_MOVES = {Control.UP, Control.DOWN, Control.LEFT, Control.RIGHT}


@dataclass(eq=False)
class _Timer:
    interval: int
    action: Callable[[], None]
    order: int
    single_shot: bool = False
    due: int | None = field(default=None)

    def start(self, now: int) -> None:
        self.due = now + self.interval

    def stop(self) -> None:
        self.due = None


class Game:
    """One round of mushroom picking, driven by elapsed time and controls."""

    def __init__(
        self,
        player_name: str = "",
        records: RecordsManager | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.player_name = player_name
        self.records = records if records is not None else RecordsManager()
        self.rng = rng if rng is not None else random.Random()

        self.width = FIELD_WIDTH
        self.height = FIELD_HEIGHT
        self.mushrooms: list[Mushroom] = []
        self._expiry: dict[Mushroom, int] = {}

        self.active = True
        self.paused = False
        self._resume_active = True
        self.final_message: str | None = None

        self.time_left = GAME_SECONDS
        self.score = 0
        self.bad_mushrooms = 0
        self.player_x = (self.width - PLAYER_SIZE) // 2
        self.player_y = (self.height - PLAYER_SIZE) // 2
        self._held: set[Control] = set()

        self.now = 0
        self._order = itertools.count()
        self._timers: list[_Timer] = []
        self._frame_timer = self._make_timer(FRAME_INTERVAL_MS, self.update)
        self._clock_timer = self._make_timer(CLOCK_INTERVAL_MS, self.tick_clock)
        self._spawn_timer = self._make_timer(SPAWN_INTERVAL_MS, self.spawn_mushroom)
        self._game_timer = self._make_timer(GAME_DURATION_MS, self._on_game_time_up)

        # The clock display is refreshed once on setup, which already uses a second.
        self.tick_clock()

        for timer in (self._frame_timer, self._clock_timer, self._spawn_timer, self._game_timer):
            timer.start(self.now)

    def _make_timer(
        self, interval: int, action: Callable[[], None], single_shot: bool = False
    ) -> _Timer:
        timer = _Timer(interval, action, next(self._order), single_shot)
        self._timers.append(timer)
        return timer

    def _stop_round_timers(self) -> None:
        self._clock_timer.stop()
        self._spawn_timer.stop()
        self._frame_timer.stop()

    def _on_game_time_up(self) -> None:
        if self.active:
            self.active = False
            self._clock_timer.stop()
            self._spawn_timer.stop()
            self.tick_clock()

    def player_rect(self) -> pygame.Rect:
        """The area the player's figure covers."""
        return pygame.Rect(self.player_x, self.player_y, PLAYER_SIZE, PLAYER_SIZE)

    def press(self, control: Control) -> bool:
        """Handle a pressed control; return True when the pause menu should open."""
        if not self.active and control is not Control.MENU:
            return False
        if control in _MOVES:
            self._held.add(control)
            return False
        self.pause()
        return True

    def release(self, control: Control) -> None:
        """Handle a released control."""
        self._held.discard(control)

    def advance(self, elapsed_ms: int) -> None:
        """Let time pass, firing every timer that falls due in order."""
        if elapsed_ms < 0:
            raise ValueError("elapsed time cannot be negative")
        target = self.now + elapsed_ms
        while True:
            pending = [t for t in self._timers if t.due is not None and t.due <= target]
            if not pending:
                break
            timer = min(pending, key=lambda t: (t.due, t.order))
            self.now = timer.due
            if timer.single_shot:
                timer.stop()
                self._timers.remove(timer)
            else:
                timer.due += timer.interval
            timer.action()
        self.now = target

    def update(self) -> None:
        """One frame: move the player according to the held controls."""
        if not self.active:
            return
        dx = dy = 0
        if Control.UP in self._held:
            dy -= PLAYER_SPEED
        if Control.DOWN in self._held:
            dy += PLAYER_SPEED
        if Control.LEFT in self._held:
            dx -= PLAYER_SPEED
        if Control.RIGHT in self._held:
            dx += PLAYER_SPEED
        if dx and dy:
            dx = int(dx * DIAGONAL_FACTOR)
            dy = int(dy * DIAGONAL_FACTOR)
        if dx or dy:
            self.move_player(dx, dy)

    def move_player(self, dx: int, dy: int) -> None:
        """Shift the player, keeping it inside the field, and pick up mushrooms."""
        if not self.active:
            return
        new_x = min(max(self.player_x + dx, 0), self.width - PLAYER_SIZE)
        new_y = min(max(self.player_y + dy, 0), self.height - PLAYER_SIZE)
        if (new_x, new_y) != (self.player_x, self.player_y):
            self.player_x, self.player_y = new_x, new_y
            self.check_collisions()

    def spawn_mushroom(self) -> Mushroom:
        """Place a random mushroom at a random spot; it rots after a while."""
        kind = MushroomType(self.rng.randrange(len(MushroomType)))
        x = self.rng.randrange(self.width - MUSHROOM_SIZE)
        y = self.rng.randrange(self.height - MUSHROOM_SIZE)
        mushroom = Mushroom(kind, x, y)
        self.mushrooms.append(mushroom)
        self._expiry[mushroom] = self.now + MUSHROOM_LIFETIME_MS
        self._make_timer(MUSHROOM_LIFETIME_MS, self.expire_mushrooms, single_shot=True).start(
            self.now
        )
        return mushroom

    def expire_mushrooms(self) -> list[Mushroom]:
        """Remove the mushrooms whose lifetime is over and return them."""
        expired = [m for m, due in self._expiry.items() if due <= self.now]
        for mushroom in expired:
            del self._expiry[mushroom]
            if mushroom in self.mushrooms:
                self.mushrooms.remove(mushroom)
        return expired

    def check_collisions(self) -> None:
        """Collect every mushroom the player touches."""
        player = self.player_rect()
        for mushroom in list(self.mushrooms):
            if not player.colliderect(mushroom.rect()):
                continue
            self.mushrooms.remove(mushroom)
            self._expiry.pop(mushroom, None)
            self.score += mushroom.value()
            if mushroom.value() < 0:
                self.bad_mushrooms += 1
                if self.bad_mushrooms >= MAX_BAD_MUSHROOMS:
                    self.game_over(GAME_OVER_TEXT.format(score=self.score))
                    return

    def tick_clock(self) -> None:
        """Count one second down and end the round when time runs out."""
        if not self.active:
            return
        if self.time_left > 0:
            self.time_left -= 1
        if self.time_left <= 0 and self.active:
            self.active = False
            self.game_over(GAME_OVER_TEXT.format(score=self.score))

    def pause(self) -> None:
        """Freeze the round, remembering whether it was running."""
        self._resume_active = self.active
        self.active = False
        self.paused = True
        self._stop_round_timers()

    def resume(self) -> None:
        """Continue the round if it was running when paused."""
        self.paused = False
        self.active = self._resume_active
        if self.active:
            for timer in (self._clock_timer, self._spawn_timer, self._frame_timer):
                timer.start(self.now)

    def game_over(self, message: str) -> None:
        """End the round, save the score and keep the closing message."""
        self.active = False
        self._stop_round_timers()
        self.save_record()
        self.final_message = message

    def save_record(self) -> None:
        """Store a positive score under the player's name."""
        if self.score > 0:
            self.records.save_record(self.player_name or DEFAULT_PLAYER_NAME, self.score)

    def lives(self) -> int:
        """How many more poisonous mushrooms the player can survive, plus one."""
        return MAX_BAD_MUSHROOMS - self.bad_mushrooms

    def time_text(self) -> str:
        """Remaining time as shown on screen."""
        minutes, seconds = divmod(self.time_left, 60)
        return f"Время: {minutes:02d}:{seconds:02d}"

    def score_text(self) -> str:
        """Current score as shown on screen."""
        return f"Очки: {self.score}"

    def lives_text(self) -> str:
        """Remaining lives as shown on screen."""
        return f"Жизни: {self.lives()}/{MAX_BAD_MUSHROOMS}"

    def lives_color(self) -> str:
        """Colour of the lives display: red on the last life."""
        return "red" if self.lives() == 1 else "white"