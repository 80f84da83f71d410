"""
Main entry point for the agenda.

Interactive menu for adding, listing and deleting contacts kept in memory.

File: main.py
Created: 2026-10-19
Last Modified: 2026-10-19
"""

import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

from agenda import AgendaApp, AgendaConfig, ConsoleInterface, ContactStore, get_messages, load_config


def setup_logging(config: AgendaConfig):
    """Log to a daily file only, so log lines never land inside the menu."""
    config.log_dir.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=config.log_level_value,
        format='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        handlers=[
            logging.FileHandler(config.log_dir / f"agenda_{datetime.now().strftime('%Y-%m-%d')}.log"),
        ],
    )


def main() -> int:
    """Main entry point with interactive menu."""
    load_dotenv()
    config = load_config()
    setup_logging(config)

    ui = ConsoleInterface(get_messages(config.language))
    app = AgendaApp(ContactStore(), ui)
    return app.run()


if __name__ == "__main__":
    sys.exit(main())
