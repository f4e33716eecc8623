"""Game entry point"""

from __future__ import annotations

import os
import pygame

from blockdodge.config import GameConfig
from blockdodge.constants import (
    FONT_NAME, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE, HUD_PADDING,
    LOG_FILE, CONFIG_FILE
)
from blockdodge.logger import GameLogger
from blockdodge.models import InputState
from blockdodge.session import DodgeSession
from ui import HUD, GameOverScreen, draw_entities

# Any key in a tuple counts as holding that direction
KEY_BINDINGS = {
    "up": (pygame.K_w, pygame.K_UP),
    "down": (pygame.K_s, pygame.K_DOWN),
    "left": (pygame.K_a, pygame.K_LEFT),
    "right": (pygame.K_d, pygame.K_RIGHT),
}
TELEPORT_KEY = pygame.K_SPACE


def load_config() -> GameConfig:
    """Use ``dodge.toml`` next to the game when present, defaults otherwise."""
    if os.path.exists(CONFIG_FILE):
        print(f"Loading config from {CONFIG_FILE}")
        return GameConfig.from_toml(CONFIG_FILE)
    return GameConfig()


class Game:
    """
    Main game controller: initializes pygame, runs the loop, samples input,
    ticks the simulation, and draws the frame.
    """

    def __init__(self, config: GameConfig) -> None:
        """Initialize subsystems and start a fresh session."""
        pygame.init()
        pygame.display.set_caption("Block Dodge")

        self.config = config
        self.screen = pygame.display.set_mode((config.width, config.height))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.logger = GameLogger(LOG_FILE)

        self.paused = False
        self.show_fps = False
        self.show_hitboxes = False      # Toggle for outlining collision boxes
        self.fps_samples = []

        # Pause-aware timing
        self.total_pause_time = 0       # Cumulative time spent paused (in ms)
        self.pause_start_time = None    # When current pause started (None if not paused)

        self.hud = HUD(self.font_small)
        self.game_over_screen = GameOverScreen(self.font_big, self.font_small)

        self.session = DodgeSession(config, clock=self.get_game_time, logger=self.logger)
        self.session.start()

    def get_game_time(self) -> float:
        """
        Get the current game time in seconds, excluding time spent paused.

        Returns
        -------
        float
            Wall time minus total pause time, in seconds
        """
        wall_time = pygame.time.get_ticks()

        # If currently paused, don't count the current pause session yet
        # (it will be added to total_pause_time when unpaused)
        if self.paused and self.pause_start_time is not None:
            current_pause_duration = wall_time - self.pause_start_time
            return (wall_time - self.total_pause_time - current_pause_duration) / 1000.0
        return (wall_time - self.total_pause_time) / 1000.0

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main game loop: process events, update, render; exits on quit request."""
        running = True
        while running:
            # Cap frame rate; tick() reports the ms elapsed since the previous frame
            delta_seconds = self.clock.tick(self.config.fps) / 1000.0

            self.fps_samples.append(self.clock.get_fps())
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            teleport_pressed = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_p:
                        self.toggle_pause()
                    elif event.key == pygame.K_f:
                        self.show_fps = not self.show_fps
                    elif event.key == pygame.K_b:
                        self.show_hitboxes = not self.show_hitboxes
                    elif event.key == TELEPORT_KEY:
                        teleport_pressed = True

            if not self.paused:
                self.session.tick(self.read_input(teleport_pressed), delta_seconds)

            self.draw(avg_fps)

        pygame.quit()

    # --------------------------------- Input ----------------------------------------

    def read_input(self, teleport_pressed: bool) -> InputState:
        """Collapse the keyboard into the abstract per-frame input."""
        keys = pygame.key.get_pressed()
        held = {name: any(keys[k] for k in bound) for name, bound in KEY_BINDINGS.items()}
        return InputState(teleport=teleport_pressed, **held)

    def toggle_pause(self) -> None:
        if self.session.game_over:
            return
        if self.paused:
            # Unpausing: add elapsed pause time to total
            if self.pause_start_time is not None:
                current_pause_duration = pygame.time.get_ticks() - self.pause_start_time
                self.total_pause_time += current_pause_duration
                self.pause_start_time = None
            self.paused = False
        else:
            # Pausing: record when pause started
            self.pause_start_time = pygame.time.get_ticks()
            self.paused = True

    # --------------------------------- Rendering ------------------------------------

    def draw(self, fps: float) -> None:
        """
        Compose the frame: entities → HUD → game over overlay.
        """
        session = self.session
        draw_entities(self.screen, session.renderables(), self.show_hitboxes)

        if session.game_over:
            self.game_over_screen.draw(self.screen, session.elapsed_seconds, len(session.blocks), session.teleports)
        else:
            self.hud.draw(self.screen, session.elapsed_seconds, len(session.blocks),
                          self.show_fps, fps, self.paused)

            hint = self.font_small.render("[WASD] move | [SPACE] teleport | [P] pause | [ESC] quit", True, (200, 200, 200))
            hint_rect = hint.get_rect(center=(self.screen.get_width() // 2, self.screen.get_height() - HUD_PADDING - hint.get_height() // 2))
            self.screen.blit(hint, hint_rect)

        pygame.display.flip()


if __name__ == "__main__":
    Game(load_config()).run()
