import sys
from pathlib import Path

import pygame

from settings import TITLE, FPS
from engine.config import load_config
from engine.core.game import Game
from engine.error_handler import setup_logging, logger
from telemetry.logger import telemetry


TELEMETRY_FILE = Path(__file__).resolve().parent / "logs" / "telemetry.jsonl"


def main() -> None:
    setup_logging()
    config = load_config()
    telemetry.init(TELEMETRY_FILE, enabled=config.telemetry_enabled)

    pygame.init()
    pygame.display.set_caption(TITLE)

    flags = pygame.FULLSCREEN if config.fullscreen else 0
    screen = pygame.display.set_mode(config.get_resolution(), flags)
    clock = pygame.time.Clock()

    game = Game(screen, config=config)
    logger.info("Code Knight started (%dx%d)", *screen.get_size())

    # --- Main loop ---
    while game.running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                game.quit()
                break
            game.handle_event(event)

        game.update(dt)
        game.draw()
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
