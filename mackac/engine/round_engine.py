"""
Mačkáč - Round Engine

Turn-based state machine for a two-player game.

Phases:
    AWAITING_CLAIM / AWAITING_COUNTER_CLAIM
        The active participant rolls, then announces the truth or a
        declared throw. A counter-claim is a claim made while a trusted
        claim's threshold is in force.
    AWAITING_CHALLENGE_DECISION
        The other participant trusts or challenges the announced claim.
    RESOLVED
        Damage has been applied; advance() hands the claim to the other
        participant or ends the game.
    GAME_OVER
        A participant has no lives left.

Each operation is valid in exactly one phase and raises InvalidPhase
otherwise. The only randomness is the participant's roll and the
suspicion draw on a trusted claim.
"""

import logging
from typing import Any

from mackac.engine.base import (
    Decision,
    GameConfig,
    Outcome,
    Phase,
    Resolution,
    Seat,
)
from mackac.engine.catalog import CATALOG_SIZE, lowest_throw, rank_index
from mackac.engine.dice import RandomSource
from mackac.engine.errors import InvalidPhase
from mackac.engine.events import EventPayload, GameEvent, claimant_pays
from mackac.engine.participant import Participant
from mackac.engine.throws import Throw


logger = logging.getLogger(__name__)


class RoundEngine:
    """
    Coordinates two participants through claims and challenges.

    Attributes:
        config: Game configuration
        source: Random source for rolls and suspicion draws
        events: Every event recorded so far, oldest first
    """

    def __init__(self, config: GameConfig, source: RandomSource) -> None:
        self.config = config
        self.source = source
        self.events: list[EventPayload] = []

        first, second = config.player_names
        self._participants = {
            Seat.A: Participant(first, config.starting_health),
            Seat.B: Participant(second, config.starting_health),
        }
        self._phase: Phase | None = None
        self._active_seat = config.starting_seat
        self._threshold = lowest_throw()
        self._pending_claim: Throw | None = None
        self._actual: Throw | None = None
        self._is_fabricated = False
        self._last_resolution: Resolution | None = None
        self._winner: Participant | None = None

    # -- read-only state -----------------------------------------------------

    @property
    def phase(self) -> Phase | None:
        """Current phase, None before start()."""
        return self._phase

    @property
    def active_seat(self) -> Seat:
        return self._active_seat

    @property
    def active(self) -> Participant:
        """The participant making the current claim."""
        return self._participants[self._active_seat]

    @property
    def opponent(self) -> Participant:
        """The participant who will trust or challenge."""
        return self._participants[self._active_seat.other]

    @property
    def participants(self) -> tuple[Participant, Participant]:
        return (self._participants[Seat.A], self._participants[Seat.B])

    def participant(self, seat: Seat) -> Participant:
        return self._participants[seat]

    @property
    def threshold(self) -> Throw:
        """The throw the next claim is measured against."""
        return self._threshold.snapshot()

    @property
    def has_rolled(self) -> bool:
        """True once the active participant has rolled for this claim."""
        return self._actual is not None

    @property
    def pending_claim(self) -> Throw | None:
        return self._pending_claim.snapshot() if self._pending_claim else None

    @property
    def is_fabricated(self) -> bool:
        return self._is_fabricated

    @property
    def last_resolution(self) -> Resolution | None:
        return self._last_resolution

    @property
    def winner(self) -> Participant | None:
        return self._winner

    @property
    def is_over(self) -> bool:
        return self._phase is Phase.GAME_OVER

    @property
    def claims_made(self) -> int:
        """Number of claims announced so far."""
        return sum(1 for e in self.events if e.event is GameEvent.CLAIM_ANNOUNCED)

    # -- transitions ---------------------------------------------------------

    def start(self) -> Phase:
        """Give both participants an opening roll and open the first claim."""
        if self._phase is not None:
            raise InvalidPhase("Game has already started.")
        for participant in self.participants:
            participant.roll(self.source)
        self._phase = Phase.AWAITING_CLAIM
        self._emit(
            GameEvent.GAME_STARTED,
            self.active.name,
            health=self.config.starting_health,
        )
        logger.info(
            "Game started: %s vs %s, %s claims first",
            self.participants[0].name,
            self.participants[1].name,
            self.active.name,
        )
        return self._phase

    def roll(self) -> Throw:
        """
        Roll for the active participant's claim.

        Returns:
            The actual throw, visible only to the claimant

        Raises:
            InvalidPhase: Outside a claim phase, after rolling already, or
                once a participant is defeated
        """
        if self._check_game_over():
            raise InvalidPhase("Game is over.")
        self._require_claim_phase()
        if self.has_rolled:
            raise InvalidPhase(f"{self.active.name} has already rolled this turn.")

        self._actual = self.active.roll(self.source)
        self._pending_claim = self._actual.snapshot()
        self._is_fabricated = False
        self._emit(GameEvent.DICE_ROLLED, self.active.name)
        return self._actual.snapshot()

    def announce(self, declared: Throw | None = None) -> Throw:
        """
        Announce the claim.

        Args:
            declared: A throw to claim instead of the real one, or None to
                tell the truth. It is not checked against the threshold.

        Returns:
            The announced claim
        """
        self._require_claim_phase()
        if not self.has_rolled:
            raise InvalidPhase(f"{self.active.name} must roll before announcing.")

        if declared is not None:
            if not declared.is_rolled:
                raise ValueError("Declared throw must have both faces set.")
            self._pending_claim = declared.snapshot()
            self._is_fabricated = declared != self._actual

        self._phase = Phase.AWAITING_CHALLENGE_DECISION
        self._emit(
            GameEvent.CLAIM_ANNOUNCED,
            self.active.name,
            claim=self._pending_claim.code,
            threshold=self._threshold.code,
        )
        logger.debug(
            "%s claims %s (fabricated=%s)",
            self.active.name,
            self._pending_claim,
            self._is_fabricated,
        )
        return self._pending_claim.snapshot()

    def decide(self, decision: Decision) -> Resolution:
        """
        Resolve the pending claim with the opponent's decision.

        Challenge: the truth is revealed and whoever was wrong pays.
        Trust: a claim below the threshold always costs the claimant.
        Otherwise a draw over [0, CATALOG_SIZE] below the claim's rank index
        means the opponent grew suspicious anyway, and whoever was wrong
        pays. With no suspicion the claim becomes the new threshold.
        """
        if self._phase is not Phase.AWAITING_CHALLENGE_DECISION:
            raise InvalidPhase(f"Cannot decide during {self._phase}.")

        claimant, challenger = self.active, self.opponent
        claim, actual = self._pending_claim, self._actual
        draw: int | None = None

        if decision is Decision.CHALLENGE:
            self._emit(GameEvent.CLAIM_CHALLENGED, challenger.name)
            outcome = Outcome.LIE_CAUGHT if self._is_fabricated else Outcome.TRUTH_UPHELD
        elif claim < self._threshold:
            self._emit(GameEvent.CLAIM_TRUSTED, challenger.name)
            outcome = Outcome.OUT_OF_ORDER
        else:
            self._emit(GameEvent.CLAIM_TRUSTED, challenger.name)
            draw = self.source.randint(0, CATALOG_SIZE)
            suspicious = draw < rank_index(claim)
            self._emit(
                GameEvent.SUSPICION_DRAWN,
                challenger.name,
                draw=draw,
                rank=rank_index(claim),
                suspicious=suspicious,
            )
            if not suspicious:
                outcome = Outcome.TRUSTED
            elif self._is_fabricated:
                outcome = Outcome.SUSPICION_CAUGHT_LIE
            else:
                outcome = Outcome.SUSPICION_WRONGED

        damaged: Participant | None = None
        if outcome.deals_damage:
            damaged = claimant if claimant_pays(outcome) else challenger
            damaged.take_hit()
            self._emit(GameEvent.PARTICIPANT_HIT, damaged.name, health=damaged.health)
            self._threshold = lowest_throw()
            self._emit(GameEvent.THRESHOLD_RESET, threshold=self._threshold.code)
        else:
            self._threshold = claim.snapshot()
            self._emit(GameEvent.THRESHOLD_RAISED, threshold=self._threshold.code)

        self._last_resolution = Resolution(
            outcome=outcome,
            claimant=claimant.name,
            challenger=challenger.name,
            decision=decision,
            claim=claim.snapshot(),
            actual=actual.snapshot(),
            damaged=damaged.name if damaged else None,
            suspicion_draw=draw,
            threshold_after=self._threshold.snapshot(),
        )
        self._phase = Phase.RESOLVED
        logger.info("Resolved %s's claim %s: %s", claimant.name, claim, outcome.value)
        return self._last_resolution

    def advance(self) -> Phase:
        """Pass the claim to the other participant, or end the game."""
        if self._phase is not Phase.RESOLVED:
            raise InvalidPhase(f"Cannot advance during {self._phase}.")

        self._active_seat = self._active_seat.other
        self._pending_claim = None
        self._actual = None
        self._is_fabricated = False

        if self._check_game_over():
            return self._phase

        if self._last_resolution.outcome is Outcome.TRUSTED:
            self._phase = Phase.AWAITING_COUNTER_CLAIM
        else:
            self._phase = Phase.AWAITING_CLAIM
        self._emit(GameEvent.TURN_ADVANCED, self.active.name, phase=self._phase.value)
        return self._phase

    # -- helpers -------------------------------------------------------------

    def _require_claim_phase(self) -> None:
        if self._phase is None or not self._phase.is_claim_phase:
            raise InvalidPhase(f"Cannot claim during {self._phase}.")

    def _check_game_over(self) -> bool:
        """Move to GAME_OVER if a participant is defeated."""
        if self._phase is Phase.GAME_OVER:
            return True
        for seat, participant in self._participants.items():
            if participant.is_defeated:
                self._winner = self._participants[seat.other]
                self._phase = Phase.GAME_OVER
                self._emit(GameEvent.GAME_WON, self._winner.name)
                logger.info("%s wins the game", self._winner.name)
                return True
        return False

    def _emit(self, event: GameEvent, participant: str | None = None, **data: Any) -> None:
        self.events.append(EventPayload(event=event, participant=participant, data=data))
        logger.debug("Event %s (%s) %s", event.name, participant, data)
