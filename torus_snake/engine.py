"""
engine.py — The authoritative game loop.

Owns all mutable game state: the current snapshot, the pending direction
and the target length. Everything that reads or writes them runs under a
single lock, so one tick reads the direction once, computes the next state
and publishes it without a direction change or reset slipping in between.

The periodic tick runs on a background thread; request_direction() and
reset() may be called from any other thread.
"""

import logging
import random
import threading
import time

from .channel import SnapshotChannel, Subscription
from .config import GameSettings
from .geometry import random_cell, step
from .model import Direction, GameState

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Single-board, single-player Snake engine.

    The controller calls request_direction() and reset(); renderers call
    subscribe() or read `state`. tick() is driven by the thread that
    start() launches, and can also be called directly.
    """

    def __init__(self, settings: GameSettings | None = None,
                 rng: random.Random | None = None):
        self.settings = settings or GameSettings()
        self._rng = rng or random.Random()
        self._lock = threading.Lock()
        self._initial_direction = Direction.of(self.settings.initial_direction)

        self._direction: Direction = self._initial_direction
        self._target_length: int = self.settings.initial_target_length
        self._state: GameState = self._initial_state()
        self._channel = SnapshotChannel(self._state)

        self._thread: threading.Thread | None = None
        self._stop_requested = threading.Event()

    # ── Accessors ────────────────────────────────────────────────
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def direction(self) -> Direction:
        """The heading the next tick will use."""
        return self._direction

    @property
    def target_length(self) -> int:
        return self._target_length

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # ── Commands ─────────────────────────────────────────────────
    def request_direction(self, new_dir) -> bool:
        """
        Queue a heading for the next tick.

        Raises InvalidDirectionError for anything but the four unit vectors.
        Returns False (and changes nothing) if `new_dir` would reverse the
        snake, True otherwise.
        """
        new_dir = Direction.of(new_dir)
        with self._lock:
            if new_dir.is_opposite(self._direction):
                logger.debug("Ignoring reversal %r while heading %r", new_dir, self._direction)
                return False
            self._direction = new_dir
            return True

    def tick(self) -> GameState:
        """Advance one cell. Returns the snapshot current after the tick."""
        s = self.settings
        with self._lock:
            state = self._state
            if state.is_game_over:
                return state

            new_head = step(state.head, self._direction, s.board_size)

            if new_head in state.snake:
                state = state.game_over()
                logger.info("Game over: score=%d length=%d", state.score, state.length)
                self._publish(state)
                return state

            food, score = state.food, state.score
            if new_head == food:
                self._target_length += 1
                score += s.food_reward
                food = self._spawn_food(state.snake, new_head)
                logger.debug("Food eaten at %s, score=%d, next food at %s",
                             new_head, score, food)

            snake = (new_head,) + state.snake[:self._target_length - 1]
            state = GameState(food=food, snake=snake, score=score)
            self._publish(state)
            return state

    def reset(self) -> GameState:
        """Return to the construction-time state, whatever happened before."""
        with self._lock:
            self._direction = self._initial_direction
            self._target_length = self.settings.initial_target_length
            state = self._initial_state()
            self._publish(state)
        logger.info("Game reset")
        return state

    def subscribe(self) -> Subscription:
        """Ordered stream of snapshots; drain or close it to bound memory."""
        return self._channel.subscribe()

    # ── Tick thread ──────────────────────────────────────────────
    def start(self) -> None:
        """Start ticking every `tick_interval` seconds on a daemon thread."""
        if self.running:
            return
        self._stop_requested.clear()
        self._thread = threading.Thread(target=self._run_loop, name="snake-tick", daemon=True)
        self._thread.start()
        logger.info("Tick loop started (interval=%.3fs)", self.settings.tick_interval)

    def stop(self, timeout: float | None = None) -> None:
        thread = self._thread
        if thread is None:
            return
        self._stop_requested.set()
        thread.join(timeout)
        if thread.is_alive():
            logger.warning("Tick loop still running after %ss; not detached", timeout)
            return
        self._thread = None
        logger.info("Tick loop stopped")

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()

    # ── Private helpers ──────────────────────────────────────────
    def _run_loop(self) -> None:
        interval = self.settings.tick_interval
        next_at = time.monotonic() + interval
        while not self._stop_requested.wait(max(0.0, next_at - time.monotonic())):
            self.tick()
            next_at += interval
            # Skip missed deadlines rather than bursting to catch up.
            now = time.monotonic()
            if next_at < now:
                next_at = now + interval

    def _initial_state(self) -> GameState:
        s = self.settings
        return GameState(food=s.initial_food, snake=s.initial_snake)

    def _spawn_food(self, snake, new_head):
        size = self.settings.board_size
        if not self.settings.food_clear_of_snake:
            return random_cell(self._rng, size)
        occupied = {new_head, *snake[:self._target_length - 1]}
        if len(occupied) >= size * size:
            # Board full: nowhere else to go.
            return new_head
        return random_cell(self._rng, size, exclude=occupied)

    def _publish(self, state: GameState) -> None:
        # Caller holds self._lock.
        self._state = state
        self._channel.publish(state)
