import random
from typing import Optional

import pygame

from settings import COLOR_BG
from engine.audio import SoundBank
from engine.battle import BattleMode
from engine.config import GameConfig, get_config
from engine.utils.high_scores import HighScoreStore
from ..controllers.input import create_default_input_manager
from ..scenes.main_menu import MainMenuScene
from ..scenes.battle_scene import BattleScene
from ..scenes.outcome_screen import OutcomeScene
from telemetry.logger import telemetry


class GameMode:
    MENU = "menu"
    BATTLE = "battle"
    OUTCOME = "outcome"


class Game:
    """
    Screen-navigation shell.

    Modes:
    - "menu": start screen (battle / practice / quit, high score)
    - "battle": the typing battle, owned by BattleScene
    - "outcome": game-over screen (restart or back to menu)
    """

    def __init__(
        self,
        screen: pygame.Surface,
        config: Optional[GameConfig] = None,
        high_scores: Optional[HighScoreStore] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.screen = screen
        self.config = config or get_config()
        self.high_scores = high_scores or HighScoreStore()
        self.rng = rng or random.Random(self.config.rng_seed)
        self.sounds = SoundBank(enabled=self.config.sound_enabled)
        self.input_manager = create_default_input_manager()
        self.running = True

        self.menu = MainMenuScene(self)
        self.battle = BattleScene(self)
        self.outcome = OutcomeScene(self)

        self.mode: Optional[str] = None
        self.battle_mode: BattleMode = BattleMode.BATTLE
        self._enter(GameMode.MENU)

    # ------------------------------------------------------------------
    # Session lifecycle commands
    # ------------------------------------------------------------------

    def start_battle(self) -> None:
        self._begin(BattleMode.BATTLE)

    def start_practice(self) -> None:
        self._begin(BattleMode.PRACTICE)

    def restart(self, same_mode: bool = True) -> None:
        """Start over; in the previous session's mode unless same_mode is False."""
        self._begin(self.battle_mode if same_mode else BattleMode.BATTLE)

    def return_to_menu(self) -> None:
        self.battle.stop()
        self._enter(GameMode.MENU)

    def show_outcome(self, label: str, final_score: int) -> None:
        self.outcome.show(label, final_score)
        self._enter(GameMode.OUTCOME)

    def quit(self) -> None:
        self.battle.stop()
        self.running = False

    def _begin(self, mode: BattleMode) -> None:
        self.battle_mode = mode
        self._enter(GameMode.BATTLE)
        self.battle.begin(mode)

    # ------------------------------------------------------------------
    # Mode helpers
    # ------------------------------------------------------------------

    @property
    def active_handler(self):
        return {
            GameMode.MENU: self.menu,
            GameMode.BATTLE: self.battle,
            GameMode.OUTCOME: self.outcome,
        }[self.mode]

    def _enter(self, mode: str) -> None:
        prev = self.mode
        self.mode = mode
        self.active_handler.enter()
        telemetry.log("mode_change", frm=prev, to=mode)

    # ------------------------------------------------------------------
    # Main loop hooks
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        self.active_handler.handle_event(event)

    def update(self, dt: float) -> None:
        self.active_handler.update(dt)

    def draw(self) -> None:
        self.screen.fill(COLOR_BG)
        self.active_handler.draw()
