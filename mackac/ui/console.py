#!/usr/bin/env python3
"""
Terminal front end for Mačkáč.

Run: python -m mackac.ui.console   (or the ``mackac`` console script)
"""

import logging
import sys
from typing import Callable

from mackac.config.settings import Settings, configure_logging, get_settings
from mackac.engine.base import Decision, Resolution, Seat
from mackac.engine.errors import InvalidDeclaration, MalformedDecision, RandomSourceFailure
from mackac.engine.events import describe_outcome
from mackac.engine.participant import Participant
from mackac.engine.players import ComputerController, Controller, play_game
from mackac.engine.round_engine import RoundEngine
from mackac.engine.throws import Throw
from mackac.engine.validators import parse_claim_or_truth, parse_decision


logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class ConsoleController:
    """Asks a human at the terminal, re-prompting until the answer parses."""

    def __init__(self, name: str, input_fn: InputFn = input, output_fn: OutputFn = print):
        self.name = name
        self._input = input_fn
        self._output = output_fn

    def choose_claim(self, actual: Throw, threshold: Throw) -> Throw | None:
        self._output(f"\n{self.name}, you rolled {actual}. To beat: {threshold}.")
        while True:
            answer = self._input("Announce (Enter for the truth, or two faces like 63): ")
            try:
                return parse_claim_or_truth(answer)
            except InvalidDeclaration as exc:
                self._output(f"  {exc}")

    def choose_decision(self, claim: Throw, threshold: Throw) -> Decision:
        while True:
            answer = self._input(f"{self.name}, [t]rust or [c]hallenge {claim}? ")
            try:
                return parse_decision(answer)
            except MalformedDecision as exc:
                self._output(f"  {exc}")


class ConsoleReporter:
    """Prints the game as it happens."""

    def __init__(self, engine: RoundEngine, output_fn: OutputFn = print):
        self.engine = engine
        self._output = output_fn

    def report_claim(self, claimant: Participant, claim: Throw) -> None:
        self._output(f"{claimant.name} claims {claim}.")

    def report_resolution(self, resolution: Resolution) -> None:
        if resolution.decision is Decision.CHALLENGE or resolution.damaged:
            self._output(f"Revealed: {resolution.actual}.")
        self._output(describe_outcome(resolution.outcome))
        self._output(str(resolution))
        self.print_health()

    def report_game_over(self, winner: Participant) -> None:
        self._output("=" * 40)
        self._output(f"  *** GAME OVER - {winner.name.upper()} WINS ***")
        self._output("=" * 40)

    def print_health(self) -> None:
        status = " | ".join(
            f"{p.name}: {'♥' * p.health}{'.' * (self.engine.config.starting_health - p.health)}"
            for p in self.engine.participants
        )
        self._output(f"  {status}")


def build_controllers(
    settings: Settings,
    engine: RoundEngine,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> dict[Seat, Controller]:
    """Seat A is always a human; seat B is the computer or a second human."""
    controllers: dict[Seat, Controller] = {
        Seat.A: ConsoleController(settings.player_name, input_fn, output_fn),
    }
    if settings.opponent == "human":
        controllers[Seat.B] = ConsoleController(settings.opponent_name, input_fn, output_fn)
    else:
        controllers[Seat.B] = ComputerController(engine.source, settings.computer_bluff_percent)
    return controllers


def main(input_fn: InputFn = input, output_fn: OutputFn = print) -> int:
    """Play one game in the terminal. Returns the process exit code."""
    settings = get_settings()
    configure_logging(settings)

    engine = RoundEngine(settings.game_config(), settings.random_source())
    reporter = ConsoleReporter(engine, output_fn)
    controllers = build_controllers(settings, engine, input_fn, output_fn)

    output_fn("=" * 40)
    output_fn("  MAČKÁČ")
    output_fn("=" * 40)
    try:
        play_game(engine, controllers, reporter)
    except RandomSourceFailure:
        logger.exception("Random source failed, the game cannot continue")
        output_fn("The dice are broken. Game aborted.")
        return 1
    except (EOFError, KeyboardInterrupt):
        output_fn("\nGoodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
