from __future__ import annotations

from typing import Tuple

import pygame

Color = Tuple[int, int, int]

WHITE: Color = (255, 255, 255)
DARKGRAY: Color = (40, 40, 40)
LIGHTGRAY: Color = (160, 160, 160)
GAME_OVER_RED: Color = (255, 60, 60)

PRESS_KEY_TEXT = "Press a key to play"


def draw_overlay(surface: pygame.Surface, *, alpha: int = 120) -> None:
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, max(0, min(255, alpha))))
    surface.blit(overlay, (0, 0))


def draw_text_center(surface: pygame.Surface, font: pygame.font.Font, text: str, y: int, *, color: Color = WHITE) -> pygame.Rect:
    rendered = font.render(text, True, color)
    rect = rendered.get_rect(center=(surface.get_width() // 2, y))
    surface.blit(rendered, rect)
    return rect


def draw_text_at(surface: pygame.Surface, font: pygame.font.Font, text: str, topleft: Tuple[int, int], *, color: Color = WHITE) -> pygame.Rect:
    rendered = font.render(text, True, color)
    return surface.blit(rendered, topleft)


def draw_press_key_msg(surface: pygame.Surface, font: pygame.font.Font) -> pygame.Rect:
    """Bottom-right hint shown on the start and game-over screens."""
    w, h = surface.get_size()
    return draw_text_at(surface, font, PRESS_KEY_TEXT, (w - 200, h - 200), color=DARKGRAY)


def draw_game_over_ui(
    surface: pygame.Surface,
    *,
    font_title: pygame.font.Font,
    font: pygame.font.Font,
    reason: str,
    score: int,
    best: int,
) -> None:
    """Dimmed play field with the "Game Over" title, final score and best score."""
    draw_overlay(surface, alpha=150)

    h = surface.get_height()
    draw_text_center(surface, font_title, "Game", h // 2 - 90, color=GAME_OVER_RED)
    draw_text_center(surface, font_title, "Over", h // 2 - 30, color=GAME_OVER_RED)
    draw_text_center(surface, font, reason, h // 2 + 30, color=LIGHTGRAY)
    draw_text_center(surface, font, f"Score: {score}   Best: {best}", h // 2 + 60)
