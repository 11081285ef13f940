"""
Mačkáč - Game Engine Base Classes

This module defines the enums and immutable records shared by the engine and
its front ends. Records are frozen dataclasses so a resolution can be handed
to a reporter without the engine's later moves changing it.
"""

from dataclasses import dataclass
from enum import Enum

from mackac.engine.throws import Throw


DEFAULT_STARTING_HEALTH = 4


class Seat(Enum):
    """The two chairs at the table."""
    A = 0
    B = 1

    @property
    def other(self) -> "Seat":
        """The opposite seat."""
        return Seat.B if self is Seat.A else Seat.A


class Decision(Enum):
    """What the non-active participant does with a claim."""
    TRUST = "trust"
    CHALLENGE = "challenge"


class Phase(Enum):
    """States of the round state machine."""
    AWAITING_CLAIM = "awaiting_claim"
    AWAITING_CHALLENGE_DECISION = "awaiting_challenge_decision"
    AWAITING_COUNTER_CLAIM = "awaiting_counter_claim"
    RESOLVED = "resolved"
    GAME_OVER = "game_over"

    @property
    def is_claim_phase(self) -> bool:
        """True while the active participant still has to roll and announce."""
        return self in (Phase.AWAITING_CLAIM, Phase.AWAITING_COUNTER_CLAIM)


class Outcome(Enum):
    """How a claim was resolved."""
    TRUSTED = "trusted"                       # no damage, threshold raised
    TRUTH_UPHELD = "truth_upheld"             # challenged, claim was true
    LIE_CAUGHT = "lie_caught"                 # challenged, claim was false
    OUT_OF_ORDER = "out_of_order"             # trusted but below threshold
    SUSPICION_CAUGHT_LIE = "suspicion_caught_lie"
    SUSPICION_WRONGED = "suspicion_wronged"

    @property
    def deals_damage(self) -> bool:
        """Whether someone lost health."""
        return self is not Outcome.TRUSTED


@dataclass(frozen=True)
class Resolution:
    """
    Result of a trust/challenge decision.

    Attributes:
        outcome: How the claim was resolved
        claimant: Name of the participant who announced the claim
        challenger: Name of the participant who trusted or challenged
        decision: The challenger's decision
        claim: The announced throw
        actual: The claimant's real throw
        damaged: Name of the participant who lost health, if any
        suspicion_draw: The random draw used for the suspicion check, if any
        threshold_after: Threshold in force for the next claim
    """
    outcome: Outcome
    claimant: str
    challenger: str
    decision: Decision
    claim: Throw
    actual: Throw
    damaged: str | None
    suspicion_draw: int | None
    threshold_after: Throw

    @property
    def was_fabricated(self) -> bool:
        """True if the claim differed from the real throw."""
        return self.claim != self.actual

    def __str__(self) -> str:
        if self.damaged is None:
            return f"{self.challenger} trusted {self.claimant}'s {self.claim}."
        return f"{self.damaged} loses a life."


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        player_names: Names of the two participants, seat A first
        starting_health: Lives each participant starts with
        starting_seat: Seat that makes the first claim
    """
    player_names: tuple[str, str] = ("Player", "Computer")
    starting_health: int = DEFAULT_STARTING_HEALTH
    starting_seat: Seat = Seat.A

    def __post_init__(self) -> None:
        """Validate configuration."""
        if len(self.player_names) != 2:
            raise ValueError("Mačkáč requires exactly 2 players.")
        first, second = self.player_names
        if not first.strip() or not second.strip():
            raise ValueError("Player names must not be blank.")
        if first.strip() == second.strip():
            raise ValueError(f"Player names must differ, got {first!r} twice.")
        if self.starting_health < 1:
            raise ValueError(
                f"Starting health must be at least 1, got {self.starting_health}."
            )
