"""
- HTTP call with clear fallback
Get random color indices (0..5) either from the local secure generator or from
random.org. random.org is asked for a batch of indices at a time. If it goes wrong
(no internet, timeout, bad response), we switch to the local generator for the
rest of the session so the game still works.

The automated players only ever see the draw function from `make_draw`;
resampling until a code has no repeats happens in players.py.
"""

import logging
from secrets import randbelow
from typing import Callable, List

import requests

from .types import Code, COLORS

log = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"

# indices per random.org request; a code needs about 14 on average
BATCH_SIZE = 64

# draw(count) -> list of colors; each pick independent of the others
Draw = Callable[[int], Code]


def local_indices(count: int) -> List[int]:
    # randbelow(6) gives us a number between 0 and 5
    return [randbelow(len(COLORS)) for _ in range(count)]


def fetch_indices(count: int, timeout_seconds: float = 3.0) -> List[int]:
    """
    One random.org request for `count` color indices.
    Raises requests.RequestException or ValueError when the answer is unusable.
    """
    # Parameters to send to random.org
    params = {
        "num": count,                # how many numbers we want
        "min": 0,                    # smallest allowed number
        "max": len(COLORS) - 1,      # largest allowed number
        "col": 1,                    # one number per line
        "base": 10,                  # normal decimal numbers
        "format": "plain",           # plain text response
        "rnd": "new",                # always generate new numbers
    }

    # Make the HTTP request to random.org
    response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)

    # If the response was not 200 OK, this will raise an error
    response.raise_for_status()

    # The body looks like:
    #   0\n3\n1\n2\n
    values = [int(line) for line in response.text.splitlines() if line.strip()]

    # Check that we got exactly the requested number of values
    if len(values) != count:
        raise ValueError(f"random.org returned {len(values)} values, expected {count}.")

    # Check each number is a valid color index
    for value in values:
        if value < 0 or value >= len(COLORS):
            raise ValueError(f"random.org number {value} out of range 0..{len(COLORS) - 1}.")

    return values


class RandomOrgIndices:
    """
    Hands out random.org indices from a buffer filled BATCH_SIZE at a time.
    After the first failed request it stays on the local generator for the
    rest of the session.
    """

    def __init__(self, timeout_seconds: float = 3.0, batch_size: int = BATCH_SIZE) -> None:
        self.timeout_seconds = timeout_seconds
        self.batch_size = batch_size
        self.offline = False
        self._buffer: List[int] = []

    def __call__(self, count: int) -> List[int]:
        if self.offline:
            return local_indices(count)

        if len(self._buffer) < count:
            try:
                self._buffer.extend(fetch_indices(max(count, self.batch_size), self.timeout_seconds))
            except (requests.RequestException, ValueError) as exc:
                # Fallback: if the request fails, use Python's secure random from now on
                log.warning("random.org unavailable (%s); using local random", exc)
                self.offline = True
                return local_indices(count)

        taken, self._buffer = self._buffer[:count], self._buffer[count:]
        return taken


def make_draw(source: str = "local", timeout_seconds: float = 3.0) -> Draw:
    """Return a draw function for the configured random source."""
    if source == "random.org":
        indices_for = RandomOrgIndices(timeout_seconds)
    else:
        indices_for = local_indices

    def draw(count: int) -> Code:
        colors = [COLORS[i] for i in indices_for(count)]
        log.debug("Drew %s from %s", colors, source)
        return colors

    return draw
