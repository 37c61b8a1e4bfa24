"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (paddings,
   line widths, highlight colors) scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (bundled puzzles) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    PUZZLES_PATH (str): Absolute path to the bundled puzzle descriptions.
    DEFAULT_PUZZLE_PATH (str): Puzzle loaded when none is given on start.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/nonogram/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
PUZZLES_PATH: str = os.path.join(ASSETS_PATH, "puzzles")
DEFAULT_PUZZLE_PATH: str = os.path.join(PUZZLES_PATH, "heart.xml")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

# Puzzle description
DEFAULT_CLUE_COLOR: str = "black"

# Layout (pixels)
PADDING: float = 5.0
SEPARATOR_INTERVAL: int = 5

# Rendering
CANVAS_BACKGROUND: str = "white"
EMPTY_CELL_FILL: str = "white"
CELL_OUTLINE_COLOR: str = "black"
CELL_OUTLINE_WIDTH: float = 1.0
SEPARATOR_COLOR: str = "black"
SEPARATOR_WIDTH: float = 3.0
HOVER_BAND_COLOR: str = "lightgrey"
HOVER_OUTLINE_COLOR: str = "blue"
HOVER_OUTLINE_WIDTH: float = 4.0
CLUE_FONT_FAMILY: str = "sans-serif"

# Color picker
COLOR_TILE_SIZE: int = 40
