"""
controller.py — Controller layer.

Responsibilities:
  - Own the pygame event loop.
  - Translate keyboard and mouse events into engine commands
    (request_direction / reset).
  - Start the engine's tick thread and render the latest snapshot each frame.
  - Know nothing about rendering details (that's the View's job).
  - Know nothing about game rules (that's the Engine's job).

The controller is the only layer that imports pygame directly for events.
"""

import logging

import pygame

from .config import WIDTH, HEIGHT, FPS
from .engine import GameEngine
from .model import Direction
from .view import CONTINUE, GameView

logger = logging.getLogger(__name__)

DIRECTION_KEYS = {
    pygame.K_LEFT:  Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_UP:    Direction.UP,
    pygame.K_DOWN:  Direction.DOWN,
    pygame.K_a:     Direction.LEFT,
    pygame.K_d:     Direction.RIGHT,
    pygame.K_w:     Direction.UP,
    pygame.K_s:     Direction.DOWN,
}
RESET_KEYS = (pygame.K_r, pygame.K_RETURN, pygame.K_SPACE)
QUIT_KEYS = (pygame.K_q, pygame.K_ESCAPE)


class GameController:
    """
    Owns the main loop.
    Glues Engine <-> View without them knowing about each other.
    """

    def __init__(self, engine: GameEngine | None = None):
        pygame.init()
        self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("SNAKE — torus")
        self.clock = pygame.time.Clock()
        self.engine = engine or GameEngine()
        self.view = GameView(self.screen)
        # Opened on the first frame so nothing queues up before run().
        self._subscription = None
        self._latest = self.engine.state
        self._running = False

    # ── Public entry point ────────────────────────────────────────
    def run(self) -> None:
        """Start the tick loop and render until the player quits."""
        self._running = True
        self.engine.start()
        try:
            while self._running:
                self.clock.tick(FPS)
                self._handle_events()
                self._pull_snapshots()
                self.view.render(self._latest)
                pygame.display.flip()
        finally:
            if self._subscription is not None:
                self._subscription.close()
                self._subscription = None
            self.engine.stop()
            pygame.quit()

    # ── Snapshot intake ───────────────────────────────────────────
    def _pull_snapshots(self) -> None:
        if self._subscription is None:
            self._subscription = self.engine.subscribe()
        pending = self._subscription.drain()
        if pending:
            self._latest = pending[-1]

    # ── Event dispatch ────────────────────────────────────────────
    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._quit()
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos)

    def _handle_keydown(self, key: int) -> None:
        if key in QUIT_KEYS:
            self._quit()
        elif key in DIRECTION_KEYS:
            self.engine.request_direction(DIRECTION_KEYS[key])
        elif key in RESET_KEYS and self._latest.is_game_over:
            self.engine.reset()

    def _handle_click(self, pos) -> None:
        target = self.view.hit_test(pos)
        if target == CONTINUE:
            self.engine.reset()
        elif target is not None:
            self.engine.request_direction(target)

    # ── Utilities ─────────────────────────────────────────────────
    def _quit(self) -> None:
        logger.info("Quit requested")
        self._running = False
