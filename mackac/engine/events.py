"""
Mačkáč - Engine Event Definitions

Event types and payloads recorded by the round engine as it moves through
its phases. Front ends read them to narrate the game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from mackac.engine.base import Outcome


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    DICE_ROLLED = auto()
    CLAIM_ANNOUNCED = auto()
    CLAIM_TRUSTED = auto()
    CLAIM_CHALLENGED = auto()
    SUSPICION_DRAWN = auto()
    PARTICIPANT_HIT = auto()
    THRESHOLD_RAISED = auto()
    THRESHOLD_RESET = auto()
    TURN_ADVANCED = auto()
    GAME_WON = auto()


@dataclass
class EventPayload:
    """Wrapper for event data."""

    event: GameEvent
    participant: str | None = None
    data: dict[str, Any] = field(default_factory=dict)


# Outcomes where the claimant, not the challenger, pays
_CLAIMANT_PAYS: frozenset[Outcome] = frozenset({
    Outcome.LIE_CAUGHT,
    Outcome.OUT_OF_ORDER,
    Outcome.SUSPICION_CAUGHT_LIE,
})


def claimant_pays(outcome: Outcome) -> bool:
    """True if the outcome costs the claimant a life."""
    return outcome in _CLAIMANT_PAYS


def describe_outcome(outcome: Outcome) -> str:
    """Short human-readable explanation of an outcome."""
    return {
        Outcome.TRUSTED: "The claim stands.",
        Outcome.TRUTH_UPHELD: "The claim was true; the challenger pays.",
        Outcome.LIE_CAUGHT: "Caught lying!",
        Outcome.OUT_OF_ORDER: "The claim is below the threshold.",
        Outcome.SUSPICION_CAUGHT_LIE: "Suspicion was right, it was a lie.",
        Outcome.SUSPICION_WRONGED: "Suspicion was wrong, the claim was true.",
    }[outcome]
