class ScoreError(Exception):
    """Base class for score keeping errors."""


class EmptyRingError(ScoreError, IndexError):
    """Raised when a token ring is rotated without any players."""


class TokenRingReentryError(ScoreError, RuntimeError):
    """Raised when a ring is rotated from inside its own token notification."""


class GameOptionsError(ScoreError, ValueError):
    """Raised for unknown or out of range game options."""
