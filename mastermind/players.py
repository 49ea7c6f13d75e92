"""
The two roles and who drives them.

A Player is one code-maker or code-breaker. Its `kind` says how it plays:
- human: asks the console for colors
- random: draws colors at random, redrawing until no color repeats
- feedback_assisted: like random, but keeps the colors that were exact
  matches in its own previous guess

The kind is chosen once at setup and never changes during a game.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .console import Console
from .random_client import Draw, make_draw
from .schemas import CodeIn
from .store import GuessEntry
from .types import Code, PlayerKind, CODE_LENGTH

log = logging.getLogger(__name__)

# 4 distinct out of 6 colors: about 28% of draws are accepted
MAX_DRAWS = 1000


class CodeGenerationError(RuntimeError):
    """Random draws kept repeating colors until the retry cap ran out."""


def draw_unique(draw: Draw, fixed: Optional[Code] = None, max_draws: int = MAX_DRAWS) -> Code:
    """
    Draw a full code, resampling every free position until no color repeats.
    `fixed` may hold a color (kept as is) or None (free) for each position.
    """
    template = list(fixed) if fixed else [None] * CODE_LENGTH
    free = [i for i, color in enumerate(template) if color is None]

    for tries in range(1, max_draws + 1):
        code = list(template)
        for i, color in zip(free, draw(len(free))):
            code[i] = color
        if len(set(code)) == len(code):
            log.debug("Unique code after %d draw(s): %s", tries, code)
            return code

    raise CodeGenerationError(f"No code without repeated colors after {max_draws} draws.")


@dataclass
class Player:
    name: str
    kind: PlayerKind
    console: Console
    draw: Draw = field(default_factory=make_draw)

    @property
    def is_human(self) -> bool:
        return self.kind == "human"

    def produce_code(self) -> Code:
        """Pick the secret."""
        if self.is_human:
            code = self.console.read_code("Enter a secret code (enter colors one by one):")
        else:
            code = draw_unique(self.draw)
        return CodeIn(colors=code).colors

    def produce_guess(self, previous: Optional[GuessEntry] = None) -> Code:
        """
        Make the next guess. `previous` is this breaker's own last result and
        is only used by the feedback_assisted kind.
        """
        if self.is_human:
            return CodeIn(colors=self.console.read_code("Enter your guess colors one by one:")).colors

        fixed = None
        if self.kind == "feedback_assisted" and previous is not None and previous.exact:
            fixed = [
                color if hit else None
                for color, hit in zip(previous.guess, previous.exact_mask)
            ]
        guess = draw_unique(self.draw, fixed)
        self.console.show(f"The AI chose: {' '.join(guess)}")
        return CodeIn(colors=guess).colors

