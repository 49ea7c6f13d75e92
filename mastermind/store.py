"""
In-memory game state.
Holds the secret, the attempt budget and the guess history for one game, and
decides when the game is over.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .engine import score, exact_positions, is_win
from .schemas import GuessEntryOut
from .types import Code, Feedback, GameStatus, MAX_ATTEMPTS

log = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: Code
    exact: int
    partial: int
    attempts_left: int
    # which positions matched the secret; only the automated breaker looks at it
    exact_mask: List[bool] = field(default_factory=list)

    @property
    def feedback(self) -> Feedback:
        return (self.exact, self.partial)


@dataclass
class Game:
    secret: Code
    attempts_left: int = MAX_ATTEMPTS
    initial_attempts: int = MAX_ATTEMPTS
    history: List[GuessEntry] = field(default_factory=list)

    @property
    def last(self) -> Optional[GuessEntry]:
        return self.history[-1] if self.history else None

    @property
    def guess_number(self) -> int:
        """Number of the guess about to be made, starting at 1."""
        return self.initial_attempts - self.attempts_left + 1

    @property
    def attempts_used(self) -> int:
        return self.initial_attempts - self.attempts_left

    @property
    def is_won(self) -> bool:
        last = self.last
        return last is not None and is_win(self.secret, last.guess)

    @property
    def is_exhausted(self) -> bool:
        return self.attempts_left <= 0

    @property
    def is_over(self) -> bool:
        # Exit on whichever condition holds; both can be true on the last guess
        return self.is_won or self.is_exhausted

    @property
    def status(self) -> GameStatus:
        if self.is_won:
            return "won"
        if self.is_exhausted:
            return "lost"
        return "in_progress"

    def guess(self, attempt: Code) -> Optional[GuessEntry]:
        """
        Score one guess, record it and spend one attempt.
        Returns the new history entry, or None if the game had already ended.
        """
        if self.is_over:
            # If game already ended, ignore extra guesses
            log.debug("Ignoring guess %s after the game ended", attempt)
            return None

        exact, partial = score(self.secret, attempt)
        self.attempts_left -= 1

        entry = GuessEntry(
            guess=list(attempt),
            exact=exact,
            partial=partial,
            attempts_left=self.attempts_left,
            exact_mask=exact_positions(self.secret, attempt),
        )
        self.history.append(entry)
        log.debug("Guess %d: %s -> %s", len(self.history), attempt, entry.feedback)
        return entry

    def history_out(self) -> List[GuessEntryOut]:
        return [
            GuessEntryOut(
                guess=e.guess,
                exact=e.exact,
                partial=e.partial,
                attempts_left=e.attempts_left,
            )
            for e in self.history
        ]
