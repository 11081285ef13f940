"""
Mačkáč - Input Validation Utilities

Parsing for the text a front end reads from a player. Every parser either
returns validated data or raises a descriptive error the caller can show
before asking again.
"""

from mackac.engine.base import Decision
from mackac.engine.dice import DIE_MAX, DIE_MIN
from mackac.engine.errors import InvalidDeclaration, MalformedDecision
from mackac.engine.throws import Throw


_SEPARATORS = " -,/"
_ASCII_DIGITS = "0123456789"

_DECISION_TOKENS: dict[str, Decision] = {
    "t": Decision.TRUST,
    "trust": Decision.TRUST,
    "c": Decision.CHALLENGE,
    "challenge": Decision.CHALLENGE,
    "liar": Decision.CHALLENGE,
}

_TRUTH_TOKENS = frozenset({"", "truth", "true"})


def validate_face(value: int) -> int:
    """
    Validate a single die face.

    Raises:
        InvalidDeclaration: If the face is not between 1 and 6
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidDeclaration(f"Die face must be an integer, got {type(value).__name__}.")
    if not (DIE_MIN <= value <= DIE_MAX):
        raise InvalidDeclaration(
            f"Die face {value} is out of range. Must be between {DIE_MIN} and {DIE_MAX}."
        )
    return value


def validate_declaration(first: int, second: int) -> Throw:
    """Build a declared throw from two faces."""
    return Throw.of(validate_face(first), validate_face(second))


def parse_declaration(text: str) -> Throw:
    """
    Parse a declared throw such as "63", "6 3" or "6-3".

    Args:
        text: Raw player input

    Returns:
        The declared throw

    Raises:
        InvalidDeclaration: If the text is not two faces between 1 and 6
    """
    digits = "".join(ch for ch in text.strip() if ch not in _SEPARATORS)
    if len(digits) != 2 or any(ch not in _ASCII_DIGITS for ch in digits):
        raise InvalidDeclaration(
            f"Declare two dice faces like 63 or 6 3, got {text.strip()!r}."
        )
    return validate_declaration(int(digits[0]), int(digits[1]))


def parse_claim_or_truth(text: str) -> Throw | None:
    """
    Parse a claim-phase answer.

    Returns:
        None to announce the real throw, otherwise the declared throw
    """
    if text.strip().lower() in _TRUTH_TOKENS:
        return None
    return parse_declaration(text)


def parse_decision(text: str) -> Decision:
    """
    Parse a trust/challenge answer.

    Raises:
        MalformedDecision: If the token is not recognised
    """
    token = text.strip().lower()
    try:
        return _DECISION_TOKENS[token]
    except KeyError:
        raise MalformedDecision(
            f"Answer 't' to trust or 'c' to challenge, got {text.strip()!r}."
        ) from None
