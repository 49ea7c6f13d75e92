"""
- Provide a scripted console (lines in, shown messages collected in a list)
- Provide a fake draw that hands out colors from a fixed sequence, so automated
  players are predictable.
- Keep the developer's .env and environment out of config tests.
"""
import itertools
from typing import Iterable, List

import pytest

from mastermind.console import Console


@pytest.fixture
def output() -> List[str]:
    return []


@pytest.fixture
def make_console(output):
    def _make(lines: Iterable[str]) -> Console:
        return Console.scripted(lines, output)
    return _make


@pytest.fixture
def fixed_draw():
    """
    Returns a factory: fixed_draw(colors) gives a draw function that returns the
    next `count` colors from an endless cycle over `colors`.
    """
    def _make(colors: Iterable[str]):
        stream = itertools.cycle(list(colors))

        def draw(count: int) -> List[str]:
            return [next(stream) for _ in range(count)]
        return draw
    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("MASTERMIND_RANDOM_SOURCE", "MASTERMIND_RANDOM_TIMEOUT", "MASTERMIND_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # load_dotenv() must not pick up a real .env from the working tree
    monkeypatch.setattr("mastermind.config.load_dotenv", lambda: False)
