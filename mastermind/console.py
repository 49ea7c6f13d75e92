"""
Console I/O, passed explicitly to the game instead of calling input()/print()
everywhere. Tests build a Console from a list of scripted lines.
"""

import logging
from typing import Callable, Iterable, List, Optional

from .engine import parse_color
from .types import Code, Feedback, COLORS, CODE_LENGTH

log = logging.getLogger(__name__)

EXACT_PEG = "+"
PARTIAL_PEG = "-"
RETRY_MESSAGE = "Invalid or already used color, please try again"


def render_pegs(feedback: Feedback) -> str:
    """One marker per exact match, then one per partial match, e.g. '++-'."""
    exact, partial = feedback
    return EXACT_PEG * exact + PARTIAL_PEG * partial


class Console:
    def __init__(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        self._read = read
        self._write = write

    @classmethod
    def scripted(cls, lines: Iterable[str], output: Optional[List[str]] = None) -> "Console":
        """
        Console that answers prompts from `lines` and appends everything it
        shows to `output`. Running out of lines raises EOFError, like input().
        """
        remaining = iter(lines)
        sink = output if output is not None else []

        def read(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError("no more scripted input") from None

        return cls(read=read, write=sink.append)

    def show(self, message: str) -> None:
        self._write(message)

    def ask(self, prompt: str = "") -> str:
        return self._read(prompt)

    def read_color(self, used: Code) -> str:
        # Re-prompt until we get a known color not used yet in this code
        while True:
            text = self.ask("> ")
            try:
                return parse_color(text, used)
            except ValueError as exc:
                log.debug("Rejected color input %r: %s", text, exc)
                self.show(RETRY_MESSAGE)

    def read_code(self, intro: str) -> Code:
        """Prompt for CODE_LENGTH colors, one per line."""
        self.show(intro)
        self.show(f"Available Colors are {', '.join(COLORS)}")
        code: Code = []
        while len(code) < CODE_LENGTH:
            code.append(self.read_color(code))
        return code

    def show_pegs(self, feedback: Feedback) -> None:
        self.show(render_pegs(feedback))
