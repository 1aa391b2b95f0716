"""Custom exception hierarchy for the crossword player.

The solving core never raises; these are used by the loaders and the CLI.
"""


class CrosswordError(Exception):
    """Base exception for crossword player failures."""


class PuzzleLoadError(CrosswordError):
    """Raised when puzzle data is malformed or internally inconsistent."""


class PuzzleFetchError(PuzzleLoadError):
    """Raised when a remote puzzle cannot be retrieved."""
