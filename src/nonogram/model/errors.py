"""Exception hierarchy for reading puzzle descriptions."""


class PuzzleError(Exception):
    """Base exception for puzzle loading failures."""


class StructureError(PuzzleError):
    """Raised when the description lacks the puzzle root or a clue block, or is not well-formed."""


class ClueValueError(PuzzleError, ValueError):
    """Raised when a clue count is not a non-negative base-10 integer."""
