"""
client.py

pygame window, input forwarding and rendering of the simulation snapshot.
The client never mutates the simulation; it reads snapshots and queues actions.
"""

import logging
from typing import Optional

import pygame

from .config import GameConfig
from .constants import RENDER_FPS
from .data_models import GameEvent, GameSnapshot, GameState
from .game_loop import FrameQueue, GameLoop
from .game_state import GameStateMachine, Intent
from .input_map import Action, intent_for, normalize_event
from .score_store import ScoreStore

logger = logging.getLogger(__name__)

SKY = (0, 191, 255)
GROUND = (153, 102, 51)
OBSTACLE = (78, 201, 78)
OBSTACLE_CAP = (46, 145, 46)
ACTOR = (255, 215, 0)
ACTOR_DEAD = (100, 100, 100)
WHITE = (255, 255, 255)
ACCENT = (255, 140, 0)
OVERLAY = (0, 0, 0, 170)

CAP_HEIGHT = 25


class PygameFrameScheduler(FrameQueue):
    """Paces frames with pygame's clock until nothing is left scheduled."""

    def __init__(self, fps: int = RENDER_FPS):
        super().__init__()
        self.fps = fps
        self.clock = pygame.time.Clock()

    def run(self):
        while self.pending:
            self.clock.tick(self.fps)
            self.fire(pygame.time.get_ticks())


class GameClient:
    def __init__(self, config: GameConfig, store: Optional[ScoreStore] = None):
        pygame.init()
        self.config = config
        self.width = int(config.playfield_width)
        self.height = int(config.playfield_height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("gapflyer")

        self.large_font = pygame.font.Font(None, 40)
        self.font = pygame.font.Font(None, 24)
        self.menu_button = pygame.Rect(self.width - 90, 8, 82, 32)
        self._overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)

        # --- Game Logic ---
        self.machine = GameStateMachine(config, store)
        self.machine.add_listener(self._on_event)
        self.scheduler = PygameFrameScheduler()
        self.loop = GameLoop(self.machine, self.scheduler,
                             before_frame=self._handle_events,
                             after_frame=self._draw_game)
        self._menu_open = False

    def run(self):
        """The main client execution loop."""
        self.loop.start()
        try:
            self.scheduler.run()
        finally:
            self.loop.stop()
            pygame.quit()

    def _on_event(self, event: GameEvent, snapshot: GameSnapshot):
        # Sound and particle hooks would attach here
        logger.debug("%s (score %d)", event.value, snapshot.score)

    def _handle_events(self):
        """Turns pygame events into queued intents; never touches entities."""
        for event in pygame.event.get():
            action = normalize_event(event, menu_button=self.menu_button)
            if action is Action.QUIT:
                self.loop.stop()
                return
            intent = intent_for(action, self._menu_open)
            if intent is None:
                continue
            self.machine.request(intent)
            if intent is not Intent.PRIMARY:
                self._menu_open = intent is Intent.OPEN_MENU

    def _draw_game(self, snapshot: GameSnapshot):
        """Renders the snapshot using pygame."""
        self._menu_open = snapshot.menu_open
        screen = self.screen
        screen.fill(SKY)
        floor_y = self.config.floor_y

        # Obstacles
        for obstacle in snapshot.obstacles:
            gap_bottom = obstacle.gap_top + obstacle.gap_height
            pygame.draw.rect(screen, OBSTACLE, (obstacle.x, 0, obstacle.width, obstacle.gap_top))
            pygame.draw.rect(screen, OBSTACLE,
                             (obstacle.x, gap_bottom, obstacle.width, floor_y - gap_bottom))
            pygame.draw.rect(screen, OBSTACLE_CAP,
                             (obstacle.x - 5, obstacle.gap_top - CAP_HEIGHT,
                              obstacle.width + 10, CAP_HEIGHT))
            pygame.draw.rect(screen, OBSTACLE_CAP,
                             (obstacle.x - 5, gap_bottom, obstacle.width + 10, CAP_HEIGHT))

        # Ground
        pygame.draw.rect(screen, GROUND, (0, floor_y, self.width, self.config.ground_height))

        # Actor
        actor = snapshot.actor
        color = ACTOR_DEAD if snapshot.state is GameState.GAME_OVER else ACTOR
        pygame.draw.rect(screen, color, (actor.x, actor.y, actor.width, actor.height),
                         border_radius=8)

        # HUD
        if snapshot.state is not GameState.IDLE:
            self._blit_centered(self.large_font.render(str(snapshot.score), True, WHITE), 50)

        pygame.draw.rect(screen, (0, 0, 0), self.menu_button, border_radius=16)
        pygame.draw.rect(screen, ACCENT, self.menu_button, width=2, border_radius=16)
        label = self.font.render("Menu", True, WHITE)
        screen.blit(label, label.get_rect(center=self.menu_button.center))

        if snapshot.menu_open:
            self._draw_panel("Paused", [f"High Score: {snapshot.high_score}",
                                        "Press M or Esc to resume"])
        elif snapshot.state is GameState.IDLE:
            self._draw_panel("gapflyer", [f"High Score: {snapshot.high_score}",
                                          "Click or press space to start"])
        elif snapshot.state is GameState.GAME_OVER:
            self._draw_panel("Game Over", [f"Score: {snapshot.score}",
                                           f"High Score: {snapshot.high_score}",
                                           "Click or press space to start"])

        pygame.display.flip()

    def _draw_panel(self, title: str, lines):
        self._overlay.fill(OVERLAY)
        self.screen.blit(self._overlay, (0, 0))
        y = self.height // 2 - 20 * (len(lines) + 1)
        self._blit_centered(self.large_font.render(title, True, ACCENT), y)
        for line in lines:
            y += 34
            self._blit_centered(self.font.render(line, True, WHITE), y)

    def _blit_centered(self, surface: pygame.Surface, y: int):
        self.screen.blit(surface, (self.width // 2 - surface.get_width() // 2, y))
