"""Qt widgets: grid canvas, color picker and the main window."""
