"""
Application Initialization
==========================
This module wires the game together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Loads the starting puzzle (command-line path or the bundled default).
3. Instantiates the Store (owner of the puzzle) and the Main Window.
4. Prevents circular import errors by being the orchestrator.

Usage:
    $ python -m nonogram [puzzle.xml]
"""
import logging
import sys
from typing import Optional, Sequence

from nonogram.config import DEFAULT_PUZZLE_PATH
from nonogram.logging_config import setup_logging
from nonogram.model.errors import PuzzleError
from nonogram.model.parser import parse_puzzle_file

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    argv = list(sys.argv if argv is None else argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.INFO)

    # 2. Load the starting puzzle before any window exists
    puzzle_path = argv[1] if len(argv) > 1 else DEFAULT_PUZZLE_PATH
    try:
        puzzle = parse_puzzle_file(puzzle_path)
    except (PuzzleError, OSError):
        logger.exception(f"Cannot start: failed to load puzzle '{puzzle_path}'")
        return 1

    # Qt is only imported once there is something to show
    from nonogram.app.application import create_app
    from nonogram.app.state import Store
    from nonogram.app.ui.main_window import MainWindow

    # 3. Create the Qt Application
    app = create_app(argv)

    # 4. Initialize the Store, passing the puzzle
    store = Store(puzzle)

    # 5. Initialize the Main Window, passing the store
    window = MainWindow(store, filepath=puzzle_path)
    window.show()

    # 6. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
