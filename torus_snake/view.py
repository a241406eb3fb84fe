"""
view.py — View layer.

Draws one GameState snapshot per frame: grid, food, snake, score panel,
the on-screen direction pad and, once the game is over, an overlay with a
"Continue" button. Never touches the engine; the controller asks
`hit_test()` which control a click landed on.

Public API:
    GameView(screen)      — bind to a pygame surface
    view.render(state)    — draw the current frame (caller flips)
    view.hit_test(pos)    — Direction, CONTINUE or None
"""

import logging
import math

import pygame

from .config import (
    WIDTH, HEIGHT, PANEL_H, GAME_W, GAME_H,
    OFFSET_X, OFFSET_Y, CELL, BOARD_SIZE,
    BUTTON, BUTTON_GAP,
    BG, GRID_COL, FOOD_COL, UI_COL, BLACK, OVER_COL,
    PANEL_BG, BORDER_COL, SNAKE_COL, SNAKE_DIM,
)
from .geometry import step
from .model import ALL_DIRS, Direction, GameState

logger = logging.getLogger(__name__)

CONTINUE = "continue"


# ─────────────────────── colour helpers ──────────────────────────
def _lerp_color(c1: tuple, c2: tuple, t: float) -> tuple:
    t = max(0.0, min(1.0, t))
    return tuple(int(c1[i] + (c2[i] - c1[i]) * t) for i in range(3))


def _with_alpha(color: tuple, alpha: int) -> tuple:
    return (*color[:3], max(0, min(255, alpha)))


def _brighten(color: tuple, factor: float) -> tuple:
    return tuple(min(255, int(c * factor)) for c in color[:3])


# ─────────────────────── layout helpers ──────────────────────────
def cell_rect(x: int, y: int) -> pygame.Rect:
    """Screen rectangle of board cell (x, y)."""
    return pygame.Rect(OFFSET_X + x * CELL, OFFSET_Y + y * CELL, CELL, CELL)


def pad_buttons() -> dict[Direction, pygame.Rect]:
    """Cross-shaped direction pad centred under the board."""
    cx = WIDTH // 2
    cy = OFFSET_Y + GAME_H + 10 + (HEIGHT - OFFSET_Y - GAME_H - 10) // 2
    span = BUTTON + BUTTON_GAP
    rects = {}
    for d in ALL_DIRS:
        rect = pygame.Rect(0, 0, BUTTON, BUTTON)
        rect.center = (cx + d.x * span, cy + d.y * span)
        rects[d] = rect
    return rects


def continue_button() -> pygame.Rect:
    rect = pygame.Rect(0, 0, 220, 38)
    rect.center = (WIDTH // 2, OFFSET_Y + GAME_H // 2 + 60)
    return rect


def heading_of(snake, size: int = BOARD_SIZE) -> Direction | None:
    """Direction from the neck to the head, or None for a one-cell snake."""
    if len(snake) < 2:
        return None
    for d in ALL_DIRS:
        if step(snake[1], d, size) == snake[0]:
            return d
    return None


# ─────────────────────────── GameView ────────────────────────────
class GameView:
    """Renders the complete game frame from a GameState snapshot."""

    # ── Construction ─────────────────────────────────────────────
    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._init_fonts()
        self._build_static_surfaces()
        self._pad = pad_buttons()
        self._continue = continue_button()

        # Score rack-up animation state
        self._disp_score: float = 0.0
        self._high_score: int = 0
        self._anim_tick: int = 0
        self._showing_over = False

    # ── Main entry ───────────────────────────────────────────────
    def render(self, state: GameState) -> None:
        self._anim_tick += 1
        self._showing_over = state.is_game_over

        if state.score < self._disp_score:
            self._disp_score = float(state.score)  # after a reset
        self._disp_score += (state.score - self._disp_score) * 0.25
        if state.score > self._high_score:
            self._high_score = state.score

        self.screen.fill(BG)
        self.screen.blit(self._grid_surf, (OFFSET_X, OFFSET_Y))

        self._draw_food(state.food)
        self._draw_snake(state)

        self.screen.blit(self._scanline_surf, (0, 0))

        self._draw_border()
        self._draw_panel(state)
        self._draw_pad()

        if state.is_game_over:
            self._draw_game_over_overlay(state)

    def hit_test(self, pos):
        """Which control is under `pos`: CONTINUE, a Direction, or None."""
        if self._showing_over and self._continue.collidepoint(pos):
            return CONTINUE
        for d, rect in self._pad.items():
            if rect.collidepoint(pos):
                return d
        return None

    # ── Static surface pre-builds ─────────────────────────────────
    def _build_static_surfaces(self) -> None:
        self._grid_surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        for i in range(BOARD_SIZE + 1):
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (i * CELL, 0), (i * CELL, GAME_H))
            pygame.draw.line(self._grid_surf, (*GRID_COL, 160),
                             (0, i * CELL), (GAME_W, i * CELL))

        # CRT scanlines, every other row
        self._scanline_surf = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
        for y in range(0, HEIGHT, 2):
            pygame.draw.line(self._scanline_surf, (0, 0, 0, 18), (0, y), (WIDTH, y))

        edge = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        for i in range(28):
            a = int(55 * (1 - i / 28) ** 1.8)
            pygame.draw.rect(edge, (0, 0, 0, a),
                             (i, i, GAME_W - 2 * i, GAME_H - 2 * i), 1)
        self._edge_surf = edge

    # ── Food ─────────────────────────────────────────────────────
    def _draw_food(self, food) -> None:
        pulse = 0.70 + 0.30 * math.sin(self._anim_tick * 0.10)
        r = max(2, int((CELL / 2 - 2) * pulse))
        x, y = cell_rect(*food).center

        glow_r = r + 10
        glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
        for gr in range(glow_r, r, -1):
            a = int(90 * (1 - (gr - r) / (glow_r - r)) * pulse)
            pygame.draw.circle(glow, _with_alpha(FOOD_COL, a), (glow_r, glow_r), gr)
        self.screen.blit(glow, (x - glow_r, y - glow_r))

        pygame.draw.circle(self.screen, FOOD_COL, (x, y), r)
        pygame.draw.circle(self.screen, (255, 255, 220),
                           (x - max(1, r // 3), y - max(1, r // 3)),
                           max(1, r // 3))

    # ── Snake ────────────────────────────────────────────────────
    def _draw_snake(self, state: GameState) -> None:
        length = state.length
        dim = SNAKE_DIM
        bright = OVER_COL if state.is_game_over else SNAKE_COL

        for i, (sx, sy) in enumerate(state.snake):
            # Colour fades from bright head to dim tail
            t = 1.0 - (i / max(length - 1, 1)) * 0.72
            color = _lerp_color(dim, bright, t)

            shrink = 1 if i == 0 else min(5, 2 + i // max(1, length // 4))
            rect = cell_rect(sx, sy).inflate(-shrink * 2, -shrink * 2)
            radius = rect.width // 2 - 1 if i == 0 else max(1, rect.width // 4)
            pygame.draw.rect(self.screen, color, rect, border_radius=radius)

            if i == 0:
                hi = pygame.Rect(rect.x + 3, rect.y + 3, max(1, rect.w - 6), max(2, rect.h // 3))
                pygame.draw.rect(self.screen, _brighten(color, 1.6), hi, border_radius=2)

        heading = heading_of(state.snake)
        if heading is not None:
            self._draw_eyes(state.head, heading)

    def _draw_eyes(self, head, heading: Direction) -> None:
        cx, cy = cell_rect(*head).center
        dx, dy = heading.x, heading.y
        px, py = -dy, dx  # perpendicular

        for sign in (+1, -1):
            ex = int(cx + dx * 6 + sign * px * 5)
            ey = int(cy + dy * 6 + sign * py * 5)
            pygame.draw.rect(self.screen, (220, 220, 220), (ex - 2, ey - 2, 5, 5))
            pygame.draw.rect(self.screen, BLACK,           (ex - 1, ey - 1, 2, 2))

    # ── Border ───────────────────────────────────────────────────
    def _draw_border(self) -> None:
        self.screen.blit(self._edge_surf, (OFFSET_X, OFFSET_Y))
        pygame.draw.rect(self.screen, BORDER_COL,
                         (OFFSET_X - 1, OFFSET_Y - 1, GAME_W + 2, GAME_H + 2), 1)

    # ── HUD Panel ─────────────────────────────────────────────────
    def _draw_panel(self, state: GameState) -> None:
        pygame.draw.rect(self.screen, PANEL_BG, (0, 0, WIDTH, PANEL_H))
        pygame.draw.line(self.screen, BORDER_COL,
                         (0, PANEL_H - 1), (WIDTH, PANEL_H - 1), 1)

        self.screen.blit(self.font_small.render("SCORE", True, SNAKE_COL), (16, 6))
        self.screen.blit(
            self.font_big.render(str(int(round(self._disp_score))), True, SNAKE_COL),
            (16, 24),
        )

        if self._high_score > 0:
            hs = self.font_tiny.render(f"BEST {self._high_score}",
                                       True, _lerp_color(UI_COL, FOOD_COL, 0.35))
            self.screen.blit(hs, hs.get_rect(topright=(WIDTH - 16, 10)))

        length = self.font_tiny.render(f"LENGTH {state.length}", True, UI_COL)
        self.screen.blit(length, length.get_rect(bottomright=(WIDTH - 16, PANEL_H - 8)))

    # ── Direction pad ────────────────────────────────────────────
    def _draw_pad(self) -> None:
        for d, rect in self._pad.items():
            bg = pygame.Surface(rect.size, pygame.SRCALPHA)
            bg.fill(_with_alpha(UI_COL, 30))
            self.screen.blit(bg, rect.topleft)
            pygame.draw.rect(self.screen, UI_COL, rect, 2, border_radius=6)
            # Arrow triangle pointing along d
            cx, cy = rect.center
            tip = (cx + d.x * 10, cy + d.y * 10)
            base = [(cx - d.x * 6 + d.y * 9, cy - d.y * 6 + d.x * 9),
                    (cx - d.x * 6 - d.y * 9, cy - d.y * 6 - d.x * 9)]
            pygame.draw.polygon(self.screen, SNAKE_COL, [tip, *base])

    # ── Game-over overlay ────────────────────────────────────────
    def _draw_game_over_overlay(self, state: GameState) -> None:
        surf = pygame.Surface((GAME_W, GAME_H), pygame.SRCALPHA)
        surf.fill((5, 5, 12, 215))
        self.screen.blit(surf, (OFFSET_X, OFFSET_Y))

        cy = OFFSET_Y + GAME_H // 2 - 80
        pulse = 0.82 + 0.18 * math.sin(self._anim_tick * 0.05)
        title = self.font_title.render("GAME OVER", True, _brighten(OVER_COL, pulse))
        self.screen.blit(title, title.get_rect(center=(WIDTH // 2, cy)))

        cy += title.get_height() + 6
        score = self.font_med.render(f"SCORE  {state.score}", True, UI_COL)
        self.screen.blit(score, score.get_rect(center=(WIDTH // 2, cy)))

        if state.score > 0 and state.score >= self._high_score:
            cy += score.get_height() + 6
            best = self.font_small.render("★  NEW HIGH SCORE  ★", True, FOOD_COL)
            self.screen.blit(best, best.get_rect(center=(WIDTH // 2, cy)))

        btn = self._continue
        bg = pygame.Surface(btn.size, pygame.SRCALPHA)
        bg.fill(_with_alpha(SNAKE_COL, 22))
        self.screen.blit(bg, btn.topleft)
        pygame.draw.rect(self.screen, SNAKE_COL, btn, 2, border_radius=4)
        txt = self.font_small.render("CONTINUE", True, SNAKE_COL)
        self.screen.blit(txt, txt.get_rect(center=btn.center))

    # ── Font init ─────────────────────────────────────────────────
    def _init_fonts(self) -> None:
        specs = [
            ("font_title", "courier", 42, True),
            ("font_big",   "courier", 26, True),
            ("font_med",   "courier", 17, False),
            ("font_small", "courier", 13, True),
            ("font_tiny",  "courier", 11, False),
        ]
        for attr, name, size, bold in specs:
            try:
                setattr(self, attr, pygame.font.SysFont(name, size, bold=bold))
            except Exception as exc:
                logger.warning("Font %r unavailable (%s), using default", name, exc)
                setattr(self, attr, pygame.font.SysFont(None, size))
