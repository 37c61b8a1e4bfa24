"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with the puzzle itself, its geometry on screen, pointer
interaction and the abstract draw sequence.
"""
