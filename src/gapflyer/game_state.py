"""
game_state.py: The idle / playing / game-over state machine that drives each tick.

Input handlers never touch the actor or obstacles. They queue intents, and the
queue is drained in arrival order at the start of the next tick.
"""

import logging
import random
from collections import deque
from enum import Enum
from typing import Callable, Deque, List, Optional

from .clock import FrameClock
from .config import GameConfig
from .data_models import Actor, GameEvent, GameSnapshot, GameState
from .difficulty import DifficultyController
from .physics_core import Outcome, PhysicsCore
from .score_store import MemoryScoreStore, ScoreStore, ScoreStoreError
from .spawner import ObstacleSpawner

logger = logging.getLogger(__name__)

Listener = Callable[[GameEvent, GameSnapshot], None]


class Intent(Enum):
    PRIMARY = "primary-action"
    OPEN_MENU = "open-menu"
    CLOSE_MENU = "close-menu"


class GameStateMachine:
    """
    Exclusive owner of the actor, the obstacle collection, the score and the clock.
    """

    def __init__(self, config: GameConfig, store: Optional[ScoreStore] = None,
                 rng: Optional[random.Random] = None):
        self.config = config
        self.store = store if store is not None else MemoryScoreStore()

        self.clock = FrameClock()
        self.spawner = ObstacleSpawner(config, rng)
        self.physics = PhysicsCore(config)
        self.difficulty = DifficultyController(config)
        self.actor = Actor.from_config(config)

        self.state = GameState.IDLE
        self.menu_open = False
        self.score = 0
        self.high_score = self._load_high_score()

        self._intents: Deque[Intent] = deque()
        self._pending_events: List[GameEvent] = []
        self._listeners: List[Listener] = []
        self._ticking = False

    # -------- Input surface --------

    def request(self, intent: Intent):
        """Queues an intent for the next tick boundary."""
        self._intents.append(intent)

    def primary_action(self):
        self.request(Intent.PRIMARY)

    def open_menu(self):
        self.request(Intent.OPEN_MENU)

    def close_menu(self):
        self.request(Intent.CLOSE_MENU)

    # -------- Observers --------

    def add_listener(self, listener: Listener):
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        self._listeners.remove(listener)

    # -------- Ticking --------

    def frame(self, timestamp_ms: float) -> GameSnapshot:
        """Runs one tick for an animation-callback timestamp in milliseconds."""
        return self._run_tick(lambda: self.clock.delta(timestamp_ms))

    def tick(self, dt: float) -> GameSnapshot:
        """Runs one tick with an explicit step of dt seconds."""
        return self._run_tick(lambda: dt)

    def _run_tick(self, next_dt: Callable[[], float]) -> GameSnapshot:
        if self._ticking:
            raise RuntimeError("tick started while another tick is in progress")
        self._ticking = True
        try:
            self._consume_intents()
            # Read after the intents, a (re)start resets the clock
            dt = next_dt()
            self._step(dt)
        finally:
            self._ticking = False
            # Events already applied to state go out even if the tick raised
            snapshot = self.snapshot()
            self._flush_events(snapshot)
        return snapshot

    def _consume_intents(self):
        while self._intents:
            intent = self._intents.popleft()

            if intent is Intent.OPEN_MENU:
                if not self.menu_open:
                    self.menu_open = True
                    self._emit(GameEvent.MENU_OPENED)
            elif intent is Intent.CLOSE_MENU:
                if self.menu_open:
                    self.menu_open = False
                    self._emit(GameEvent.MENU_CLOSED)
            elif self.menu_open:
                logger.debug("Primary action ignored while the menu is open")
            elif self.state is GameState.PLAYING:
                self.actor.flap()
                self._emit(GameEvent.FLAPPED)
            else:
                self._start()

    def _start(self):
        """Shared reset path for idle -> playing and game-over -> playing."""
        self.actor = Actor.from_config(self.config)
        self.spawner.clear()
        self.score = 0
        self.difficulty.reset()
        self.clock.reset()

        # The playfield is never empty on entry
        self.spawner.spawn(self.difficulty.current_speed())

        self.state = GameState.PLAYING
        logger.info("Game started (high score %d)", self.high_score)
        self._emit(GameEvent.STARTED)

    def _step(self, dt: float):
        if self.state is not GameState.PLAYING or self.menu_open:
            return

        # 1. Actor physics
        self.actor.integrate(dt)

        # 2. Spawn and move obstacles
        self.spawner.maybe_spawn(self.difficulty.current_speed())
        self.spawner.advance(dt)

        # 3. Score, collisions and bounds
        outcome = self.physics.evaluate(self.actor, self.spawner.obstacles)
        for _ in range(outcome.points):
            self.score += 1
            self._emit(GameEvent.SCORED)

        self.spawner.retire()

        if outcome.game_over:
            self._end_game(outcome)

        # 4. Difficulty for the next spawns
        self.difficulty.update(self.score)

    def _end_game(self, outcome: Outcome):
        if self.state is not GameState.PLAYING:
            return

        self.state = GameState.GAME_OVER
        cause = "collision" if outcome.collided else "out of bounds"
        logger.info("Game over (%s) with score %d", cause, self.score)
        logger.debug("Final state: %s", self.snapshot().to_dict())
        self._emit(GameEvent.GAME_OVER)
        self._commit_high_score()

    # -------- High score --------

    def _load_high_score(self) -> int:
        try:
            return self.store.get_high_score()
        except ScoreStoreError as e:
            logger.warning("High score unavailable, starting from 0: %s", e)
            return 0

    def _commit_high_score(self):
        if self.score <= self.high_score:
            return

        self.high_score = self.score
        self._emit(GameEvent.NEW_HIGH_SCORE)
        try:
            self.store.set_high_score(self.score)
        except ScoreStoreError as e:
            logger.warning("High score %d not saved: %s", self.score, e)
        else:
            logger.info("New high score: %d", self.score)

    # -------- Output surface --------

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot(
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            menu_open=self.menu_open,
            difficulty_level=self.difficulty.level,
            actor=self.actor.to_view(),
            obstacles=tuple(o.to_view() for o in self.spawner.obstacles),
        )

    def _emit(self, event: GameEvent):
        self._pending_events.append(event)

    def _flush_events(self, snapshot: GameSnapshot):
        events, self._pending_events = self._pending_events, []
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event, snapshot)
                except Exception:
                    logger.exception("Listener failed while handling %s", event.value)
