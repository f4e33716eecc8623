"""Playfield drawing, HUD and Game Over screen"""

import pygame

from blockdodge.constants import (
    BG_COLOR, HUD_PADDING, TEXT_COLOR, HITBOX_COLOR,
    FONT_NAME, FONT_SIZE_SMALL
)
from blockdodge.models import RenderInfo


def world_to_screen(pos: tuple[float, float], surf: pygame.Surface) -> tuple[float, float]:
    """World space has its origin at the screen centre with y up; pygame has y down."""
    return (pos[0] + surf.get_width() / 2, surf.get_height() / 2 - pos[1])


def entity_rect(info: RenderInfo, surf: pygame.Surface) -> pygame.Rect:
    w, h = info.size
    rect = pygame.Rect(0, 0, round(w), round(h))
    rect.center = tuple(round(v) for v in world_to_screen(info.position, surf))
    return rect


def draw_entities(surf: pygame.Surface, renderables, show_hitboxes: bool = False) -> None:
    """
    Clear the playfield and draw every live entity as a filled rectangle.

    Parameters
    ----------
    surf : pygame.Surface
        Target surface, same size as the configured playfield.
    renderables : Iterable[RenderInfo]
        Entities in draw order.
    show_hitboxes : bool
        Outline each collision box.
    """
    surf.fill(BG_COLOR)
    for info in renderables:
        rect = entity_rect(info, surf)
        pygame.draw.rect(surf, info.color, rect)
        if show_hitboxes:
            pygame.draw.rect(surf, HITBOX_COLOR, rect, 1)


class HUD:
    """Heads-Up Display: field stats on the left, indicators on the right."""

    def __init__(self, font: pygame.font.Font) -> None:
        self.font = font
        self.small_font = pygame.font.Font(FONT_NAME, FONT_SIZE_SMALL)

    def draw(self, surf: pygame.Surface, survived: float, blocks: int,
             show_fps: bool = False, fps: float = 0.0, paused: bool = False) -> None:
        current_width = surf.get_width()
        current_height = surf.get_height()

        left_x = HUD_PADDING
        left_y = HUD_PADDING

        time_text = self.font.render(f"Time: {survived:.1f}s", True, TEXT_COLOR)
        surf.blit(time_text, (left_x, left_y))
        left_y += time_text.get_height() + 4

        blocks_text = self.small_font.render(f"Blocks: {blocks}", True, TEXT_COLOR)
        surf.blit(blocks_text, (left_x, left_y))

        if show_fps:
            fps_color = (0, 255, 0) if fps >= 55 else (255, 255, 0) if fps >= 30 else (255, 0, 0)
            fps_text = self.small_font.render(f"FPS: {fps:.1f}", True, fps_color)
            surf.blit(fps_text, (current_width - fps_text.get_width() - HUD_PADDING, HUD_PADDING))

        if paused:
            pause_text = self.font.render("PAUSED", True, (255, 255, 100))
            pause_y = max(80, int(current_height * 0.15))  # 15% from top, minimum 80px
            text_rect = pause_text.get_rect(center=(current_width // 2, pause_y))
            # Semi-transparent background
            bg_rect = text_rect.inflate(20, 10)
            bg_surf = pygame.Surface(bg_rect.size, pygame.SRCALPHA)
            bg_surf.fill((0, 0, 0, 128))
            surf.blit(bg_surf, bg_rect)
            surf.blit(pause_text, text_rect)


class GameOverScreen:
    """Game over overlay with survival stats."""
    def __init__(self, font_big: pygame.font.Font, font_small: pygame.font.Font):
        self.font_big = font_big
        self.font_small = font_small

    def draw(self, surf: pygame.Surface, survived: float, blocks: int, teleports: int) -> None:
        """
        Draw game over screen.
        """
        current_width = surf.get_width()
        current_height = surf.get_height()

        # Semi-transparent overlay
        overlay = pygame.Surface((current_width, current_height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 180))
        surf.blit(overlay, (0, 0))

        game_over_text = self.font_big.render("GAME OVER", True, (255, 100, 100))
        title_y = max(80, int(current_height * 0.25))  # 25% from top, minimum 80px
        game_over_rect = game_over_text.get_rect(center=(current_width // 2, title_y))
        surf.blit(game_over_text, game_over_rect)

        stats_lines = [
            f"Survived: {survived:.1f}s",
            f"Blocks on field: {blocks}",
            f"Teleports: {teleports}",
        ]

        y_offset = max(title_y + 80, int(current_height * 0.4))  # 40% from top or below title
        for line in stats_lines:
            text_surf = self.font_small.render(line, True, TEXT_COLOR)
            text_rect = text_surf.get_rect(center=(current_width // 2, y_offset))
            surf.blit(text_surf, text_rect)
            y_offset += 30

        inst_text = self.font_small.render("Press ESC to quit", True, (150, 150, 150))
        inst_rect = inst_text.get_rect(center=(current_width // 2, y_offset + 30))
        surf.blit(inst_text, inst_rect)
