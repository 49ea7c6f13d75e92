"""
One full game session: role selection, secret, turns, end messages.

States: SETUP -> SECRET_CHOSEN -> AWAITING_GUESS <-> FEEDBACK_GIVEN -> WON | LOST
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from pydantic import ValidationError

from .console import Console
from .players import Player
from .random_client import Draw, make_draw
from .schemas import RoleChoice
from .store import Game

log = logging.getLogger(__name__)

MENU = (
    "Do you want to be:",
    "1) CodeMaker",
    "2) CodeBreaker",
    "3) Watch the AI play itself",
    "Enter the corresponding number",
)


@dataclass
class Session:
    maker: Player
    breaker: Player
    console: Console
    game: Optional[Game] = None

    def play(self) -> Game:
        """Run the game to the end and return its final state."""
        # SECRET_CHOSEN
        self.game = Game(secret=self.maker.produce_code())
        self.console.show("A SECRET CODE HAS BEEN CHOSEN! GUESS IT! or DIE!")
        log.info("Game started: %s vs %s", self.maker.name, self.breaker.name)

        game = self.game
        while not game.is_over:
            # AWAITING_GUESS
            self.console.show(f"{self.breaker.name}, it's guess #{game.guess_number}!")
            guess = self.breaker.produce_guess(game.last)

            # FEEDBACK_GIVEN
            entry = game.guess(guess)
            self.console.show_pegs(entry.feedback)

        self.report()
        log.info(
            "Game over (%s) after %d guess(es): %s",
            game.status,
            game.attempts_used,
            [e.model_dump() for e in game.history_out()],
        )
        return game

    def report(self) -> None:
        # Both checks run on their own: a win on the last attempt prints both lines
        game = self.game
        if game.is_won:
            self.console.show(
                f"{self.breaker.name} has WON the game in {game.attempts_used} attempt(s)"
            )
        if game.is_exhausted:
            self.console.show(f"{self.breaker.name} has run out of attempts")
            if not game.is_won:
                self.console.show(f"The secret code was: {' '.join(game.secret)}")


def choose_role(console: Console) -> int:
    for line in MENU:
        console.show(line)
    # Re-prompt until we get 1..3
    while True:
        text = console.ask("> ")
        try:
            return RoleChoice(choice=text.strip()).choice
        except ValidationError:
            log.debug("Rejected menu input %r", text)
            console.show("Please enter 1, 2 or 3")


def build_players(choice: int, console: Console, draw: Draw) -> Tuple[Player, Player]:
    """Return (maker, breaker) for a menu choice."""
    if choice == 1:
        maker = Player("Player (CodeMaker)", "human", console, draw)
        breaker = Player("AI (CodeBreaker)", "random", console, draw)
    elif choice == 2:
        maker = Player("AI (CodeMaker)", "random", console, draw)
        breaker = Player("Player (CodeBreaker)", "human", console, draw)
    elif choice == 3:
        maker = Player("AI (CodeMaker)", "random", console, draw)
        breaker = Player("AI (CodeBreaker)", "feedback_assisted", console, draw)
    else:
        raise ValueError(f"Unknown role choice {choice}.")
    return maker, breaker


def setup(console: Console, draw: Optional[Draw] = None) -> Session:
    """SETUP: ask which role the human plays and build both players."""
    choice = choose_role(console)
    maker, breaker = build_players(choice, console, draw or make_draw())
    return Session(maker=maker, breaker=breaker, console=console)


def run(console: Console, draw: Optional[Draw] = None) -> Game:
    return setup(console, draw).play()
