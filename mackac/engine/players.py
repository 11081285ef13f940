"""
Mačkáč - Controllers and Game Driver

A controller makes a participant's choices: what to announce after rolling
and whether to trust an opponent's claim. play_game() runs the round engine
with one controller per seat, blocking on each choice in turn.
"""

import logging
from typing import Mapping, Protocol

from mackac.engine.base import Decision, Resolution, Seat
from mackac.engine.catalog import CATALOG_SIZE, rank_index, throw_at
from mackac.engine.dice import RandomSource
from mackac.engine.participant import Participant
from mackac.engine.round_engine import RoundEngine
from mackac.engine.throws import Throw


logger = logging.getLogger(__name__)


class Controller(Protocol):
    """Makes the choices for one seat."""

    def choose_claim(self, actual: Throw, threshold: Throw) -> Throw | None:
        """Return None to announce the real throw, or a throw to declare."""
        ...

    def choose_decision(self, claim: Throw, threshold: Throw) -> Decision:
        ...


class Reporter(Protocol):
    """Receives what happens at the table."""

    def report_claim(self, claimant: Participant, claim: Throw) -> None:
        ...

    def report_resolution(self, resolution: Resolution) -> None:
        ...

    def report_game_over(self, winner: Participant) -> None:
        ...


class ComputerController:
    """
    A simple computer opponent.

    Claims:
        - Roll at or above the threshold: usually the truth, but
          ``bluff_percent`` of the time it declares one rank higher.
        - Roll below the threshold: declares the cheapest throw that still
          meets the threshold.

    Decisions:
        Challenges with a chance that grows with the claim's rank, since
        high claims are the likeliest lies.
    """

    def __init__(self, source: RandomSource, bluff_percent: int = 25) -> None:
        if not (0 <= bluff_percent <= 100):
            raise ValueError(f"Bluff percent must be 0-100, got {bluff_percent}.")
        self.source = source
        self.bluff_percent = bluff_percent

    def choose_claim(self, actual: Throw, threshold: Throw) -> Throw | None:
        if actual >= threshold:
            top = CATALOG_SIZE - 1
            if rank_index(actual) < top and self.source.randint(1, 100) <= self.bluff_percent:
                return throw_at(rank_index(actual) + 1)
            return None
        return throw_at(rank_index(threshold))

    def choose_decision(self, claim: Throw, threshold: Throw) -> Decision:
        # Rank 0 is never challenged, Mačkáč is challenged two times in three.
        odds = rank_index(claim) * 2
        if self.source.randint(1, 3 * (CATALOG_SIZE - 1)) <= odds:
            return Decision.CHALLENGE
        return Decision.TRUST


def play_game(
    engine: RoundEngine,
    controllers: Mapping[Seat, Controller],
    reporter: Reporter,
) -> Participant:
    """
    Play a full game to the end.

    Args:
        engine: A round engine that has not been started
        controllers: The controller for each seat
        reporter: Receives claims, resolutions and the result

    Returns:
        The winning participant

    Raises:
        RandomSourceFailure: If the engine's random source fails
    """
    engine.start()
    while not engine.is_over:
        claimant_seat = engine.active_seat
        actual = engine.roll()
        declared = controllers[claimant_seat].choose_claim(actual, engine.threshold)
        claim = engine.announce(declared)
        reporter.report_claim(engine.active, claim)

        decision = controllers[claimant_seat.other].choose_decision(claim, engine.threshold)
        reporter.report_resolution(engine.decide(decision))
        engine.advance()

    reporter.report_game_over(engine.winner)
    logger.info("Game finished after %d events", len(engine.events))
    return engine.winner
