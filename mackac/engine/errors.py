"""
Mačkáč - Engine Errors

Failures that cross the engine boundary. Input errors are recoverable by
re-prompting; an entropy failure is fatal because the game cannot proceed
without dice.
"""


class MackacError(Exception):
    """Base class for all engine errors."""


class InvalidDeclaration(MackacError, ValueError):
    """A declared throw is not two faces between 1 and 6."""


class MalformedDecision(MackacError, ValueError):
    """A trust/challenge token was not recognised."""


class RandomSourceFailure(MackacError, RuntimeError):
    """The random source could not produce a die face."""


class InvalidPhase(MackacError, RuntimeError):
    """An engine operation was called in the wrong phase."""
