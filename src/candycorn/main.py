"""
Main entry point for CANDYCORN.

Loads settings, opens the game window and runs the game until the window
is closed.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from candycorn.config.settings import Settings, get_settings
from candycorn.core.clock import SystemClock
from candycorn.core.events import EventBus


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_game(settings: Settings) -> None:
    """Run the game in a pygame window."""
    from candycorn.game import CandyCornGame
    from candycorn.graphics.renderer import Container
    from candycorn.window import GameWindow

    event_bus = EventBus()
    container = Container()

    window = GameWindow(container, event_bus, config=settings.display)
    game = CandyCornGame(
        settings, SystemClock(), window, event_bus=event_bus, container=container
    )

    game.start()
    try:
        await window.run()
    finally:
        game.close()


def main() -> None:
    """Main entry point."""
    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("CANDYCORN starting...")
    logger.info(f"Assets: {settings.assets_path}")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("CANDYCORN stopped")


if __name__ == "__main__":
    main()
