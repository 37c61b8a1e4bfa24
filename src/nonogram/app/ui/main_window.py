"""
Main Application Window
=======================
The primary GUI container: menu bar, the puzzle grid and the color picker.

Why is this file needed?
------------------------
1. Layout: It stacks the grid canvas (stretching) above the color picker.
2. Routing: It connects the File menu and the picker to the Store, and
   refreshes the picker whenever a different puzzle is loaded.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from PySide6.QtCore import QByteArray, QSettings
from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import QFileDialog, QMainWindow, QMessageBox, QVBoxLayout, QWidget

from nonogram.app.application import VISIBLE_APP_NAME
from nonogram.app.state import Store
from nonogram.app.ui.color_picker import ColorPicker
from nonogram.app.ui.grid_widget import GridWidget
from nonogram.config import PUZZLES_PATH
from nonogram.model.errors import PuzzleError
from nonogram.model.parser import parse_puzzle_file
from nonogram.model.puzzle import PuzzleView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: Store, filepath: Optional[str] = None) -> None:
        super().__init__()
        self.store = store
        self.filepath = filepath

        self.update_window_title()
        self.resize(720, 820)

        # --- MAIN CONTAINER ---
        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(8, 8, 8, 8)

        self.grid = GridWidget(self.store, central)
        layout.addWidget(self.grid, 1)

        self.color_picker = ColorPicker(central)
        layout.addWidget(self.color_picker, 0)

        self.setCentralWidget(central)

        # --- SIGNAL CONNECTIONS ---
        self.color_picker.color_selected.connect(self.store.set_selected_color)
        self.store.selected_color_changed.connect(self.color_picker.set_selected)
        self.store.puzzle_changed.connect(self.on_puzzle_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        self.on_puzzle_changed(self.store.puzzle)
        self._restore_window_state()

    def _create_actions(self) -> None:
        self.act_open = QAction(self.tr("Open Puzzle..."), self)
        self.act_open.setShortcut("Ctrl+O")
        self.act_open.triggered.connect(self.on_file_open)

        self.act_clear = QAction(self.tr("Clear Grid"), self)
        self.act_clear.setShortcut("Ctrl+Shift+Backspace")
        self.act_clear.triggered.connect(self.store.clear_grid)

        self.act_exit = QAction(self.tr("Exit"), self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu(self.tr("&File"))
        file_menu.addAction(self.act_open)
        file_menu.addAction(self.act_clear)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---

    def update_window_title(self) -> None:
        """Shows the puzzle file name next to the application name."""
        if self.filepath:
            self.setWindowTitle(f"{VISIBLE_APP_NAME} - [{os.path.basename(self.filepath)}]")
        else:
            self.setWindowTitle(VISIBLE_APP_NAME)

    def on_puzzle_changed(self, view: PuzzleView) -> None:
        """New puzzle: rebuild the swatches and keep the chosen color if it still exists."""
        palette = view.palette()
        self.color_picker.set_colors(palette)
        if self.store.selected_color not in palette:
            self.store.set_selected_color(None)
        self.color_picker.set_selected(self.store.selected_color)

    # --- FILE SLOTS ---

    def on_file_open(self) -> None:
        start_dir = os.path.dirname(self.filepath) if self.filepath else PUZZLES_PATH
        fname, _ = QFileDialog.getOpenFileName(
            self, self.tr("Open Puzzle"), start_dir, self.tr("Puzzle Files (*.xml);;All Files (*)")
        )
        if fname:
            self.load_puzzle(fname)

    def load_puzzle(self, fname: str) -> bool:
        try:
            puzzle = parse_puzzle_file(fname)
        except (PuzzleError, OSError) as e:
            logger.exception(f"Failed to open puzzle '{fname}'")
            QMessageBox.critical(self, self.tr("Error"), self.tr("Could not open puzzle:\n{err}").format(err=e))
            return False

        self.filepath = fname
        self.store.set_puzzle(puzzle)
        self.update_window_title()
        return True

    # --- WINDOW STATE ---

    def _restore_window_state(self) -> None:
        geometry = QSettings().value("win/geo")
        if isinstance(geometry, QByteArray):
            self.restoreGeometry(geometry)

    def closeEvent(self, event: QCloseEvent, /) -> None:
        QSettings().setValue("win/geo", self.saveGeometry())
        event.accept()
