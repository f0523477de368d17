from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, Optional, Sequence

import pygame

from best_score import BestScore
from crash_log import install_excepthook
from path_utils import get_data_dir
from settings import GameSettings, SettingsError, parse_args
from snake_logic import DOWN, LEFT, REASON_CLEARED, REASON_SELF, REASON_WALL, RIGHT, UP, Direction, Point, SnakeBoard
from ui_common import draw_game_over_ui, draw_overlay, draw_press_key_msg, draw_text_at, draw_text_center

logger = logging.getLogger(__name__)

BLACK = (0, 0, 0)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
DARKGREEN = (0, 155, 0)
DARKGRAY = (40, 40, 40)
BG_COLOR = BLACK

SNAKE_INSET = 4
TITLE_FONT_SIZE = 72
GAME_OVER_INPUT_DELAY_MS = 500

KEY_TO_DIRECTION: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

REASON_TEXT = {
    REASON_WALL: "You hit the wall.",
    REASON_SELF: "You ran into yourself.",
    REASON_CLEARED: "Board cleared!",
}


def get_font(size: int, path: Optional[str] = None) -> pygame.font.Font:
    """Load the configured font file, falling back to pygame's default (freesansbold)."""
    if path:
        try:
            return pygame.font.Font(Path(path).as_posix(), size)
        except (OSError, pygame.error) as e:
            logger.warning("Font %s unavailable (%s), using the default font", path, e)
    return pygame.font.Font(None, size)


class SnakeGame:
    def __init__(self, settings: Optional[GameSettings] = None) -> None:
        self.settings = (settings or GameSettings()).validate()
        pygame.init()
        pygame.display.set_caption("Snake")
        self.screen = pygame.display.set_mode((self.settings.window_width, self.settings.window_height))
        self.clock = pygame.time.Clock()

        self.font = get_font(self.settings.font_size, self.settings.font_path)
        self.font_title = get_font(TITLE_FONT_SIZE, self.settings.font_path)

        self.board = SnakeBoard.new(self.settings.cell_width, self.settings.cell_height)
        self.best = BestScore(get_data_dir(self.settings.data_dir))

        self.state: str = "title"  # title | play | gameover
        self.running = True
        self.paused = False
        self.game_over_at = 0
        logger.debug("Grid %dx%d at %d fps", self.board.width, self.board.height, self.settings.fps)

    # -------------------------
    # State
    # -------------------------
    def start_play(self) -> None:
        self.board.reset()
        self.paused = False
        self.state = "play"

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type != pygame.KEYDOWN:
            return
        if event.key == pygame.K_ESCAPE:
            self.running = False
            return

        if self.state == "title":
            self.start_play()
        elif self.state == "play":
            if event.key == pygame.K_p:
                self.paused = not self.paused
            elif not self.paused and event.key in KEY_TO_DIRECTION:
                self.board.queue_direction(KEY_TO_DIRECTION[event.key])
        elif self.state == "gameover":
            # Keys still held from the crash should not skip the screen.
            if pygame.time.get_ticks() - self.game_over_at >= GAME_OVER_INPUT_DELAY_MS:
                self.start_play()

    def update(self) -> None:
        if self.state != "play" or self.paused:
            return
        if self.board.tick():
            return
        score = self.board.score
        logger.info("Game over (%s), score %d", self.board.reason, score)
        self.best.record(score)
        self.game_over_at = pygame.time.get_ticks()
        self.state = "gameover"

    # -------------------------
    # Drawing
    # -------------------------
    def cell_rect(self, point: Point) -> pygame.Rect:
        size = self.settings.cell_size
        return pygame.Rect(point[0] * size, point[1] * size, size, size)

    def draw_grid(self) -> None:
        width, height = self.settings.window_width, self.settings.window_height
        for x in range(0, width, self.settings.cell_size):
            pygame.draw.line(self.screen, DARKGRAY, (x, 0), (x, height))
        for y in range(0, height, self.settings.cell_size):
            pygame.draw.line(self.screen, DARKGRAY, (0, y), (width, y))

    def draw_snake(self) -> None:
        for segment in self.board.snake:
            rect = self.cell_rect(segment)
            pygame.draw.rect(self.screen, DARKGREEN, rect)
            pygame.draw.rect(self.screen, GREEN, rect.inflate(-SNAKE_INSET * 2, -SNAKE_INSET * 2))

    def draw_food(self) -> None:
        if self.board.food is not None:
            pygame.draw.rect(self.screen, RED, self.cell_rect(self.board.food))

    def draw_score(self) -> None:
        draw_text_at(self.screen, self.font, f"Score: {self.board.score}", (self.settings.window_width - 100, 10))

    def draw_play(self) -> None:
        self.screen.fill(BG_COLOR)
        self.draw_grid()
        self.draw_snake()
        self.draw_food()
        self.draw_score()
        if self.paused:
            draw_overlay(self.screen, alpha=120)
            draw_text_center(self.screen, self.font_title, "Paused", self.settings.window_height // 2)
            draw_text_center(self.screen, self.font, "Press P to resume", self.settings.window_height // 2 + 50)

    def draw_title(self) -> None:
        self.screen.fill(BG_COLOR)
        h = self.settings.window_height
        draw_text_center(self.screen, self.font_title, "Snake!", h // 2 - 40, color=GREEN)
        draw_text_center(self.screen, self.font, "Arrows / WASD to steer   P to pause   ESC to quit", h // 2 + 20)
        if self.best.value:
            draw_text_center(self.screen, self.font, f"Best: {self.best.value}", h // 2 + 50)
        draw_press_key_msg(self.screen, self.font)

    def draw_gameover(self) -> None:
        self.draw_play()
        draw_game_over_ui(
            self.screen,
            font_title=self.font_title,
            font=self.font,
            reason=REASON_TEXT.get(self.board.reason, ""),
            score=self.board.score,
            best=self.best.value,
        )
        draw_press_key_msg(self.screen, self.font)

    def draw(self) -> None:
        if self.state == "title":
            self.draw_title()
        elif self.state == "play":
            self.draw_play()
        elif self.state == "gameover":
            self.draw_gameover()

    # -------------------------
    # Main loop
    # -------------------------
    def run(self) -> None:
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.update()
                self.draw()
                pygame.display.flip()
                self.clock.tick(self.settings.fps)
        finally:
            pygame.quit()


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = parse_args(argv).validate()
    except SettingsError as e:
        print(f"snake: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.log_level)
    try:
        data_dir = get_data_dir(settings.data_dir)
    except OSError as e:
        print(f"snake: cannot use data directory: {e}", file=sys.stderr)
        return 1
    install_excepthook(data_dir)
    settings = replace(settings, data_dir=str(data_dir))

    try:
        SnakeGame(settings).run()
    except pygame.error as e:
        logger.error("pygame failed: %s", e)
        print(f"snake: {e}", file=sys.stderr)
        pygame.quit()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
