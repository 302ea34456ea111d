"""
Main entry point for Gemroll.

Loads .env, configures logging and runs the desktop simulator.
"""

import asyncio
import logging
import sys
from pathlib import Path


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure console logging and, optionally, a per-run log file."""
    level = logging.DEBUG if debug else logging.INFO

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        # Truncate on each run for fresh logs
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logging.info(f"Logging to file: {log_file}")


async def run() -> None:
    """Build and run the simulator."""
    from gemroll.simulator.main import GemrollSimulator

    simulator = GemrollSimulator()
    await simulator.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv
    from gemroll.config.settings import get_settings

    load_dotenv()
    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("Gemroll starting...")
    logger.info("Controls: LEFT/RIGHT roll, UP jump, SPACE start, D debug, Q quit")

    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Gemroll stopped")


if __name__ == "__main__":
    main()
