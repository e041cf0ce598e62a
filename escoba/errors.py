"""Exceptions raised by the match engine."""


class EscobaError(Exception):
    """Base class for engine errors."""


class InvalidArgumentError(EscobaError, ValueError):
    """Caller supplied a structurally wrong input.

    Raised before any mutation, so the engine state is unchanged.
    """


class CardNotFoundError(InvalidArgumentError):
    """Requested card is not where the operation expects it."""


class InvalidOperationError(EscobaError, RuntimeError):
    """Operation is not legal in the current match state."""


class DeckEmptyError(InvalidOperationError):
    """Draw attempted on an empty deck."""
