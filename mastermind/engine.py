"""
Pure game logic (no console, no randomness).
We compute two feedback numbers for each guess:
- exact: how many indices hold the same color in secret and guess
- partial: colors of the secret found anywhere in the guess, minus the exact ones

The overlap is a containment check: each color of the secret counts once if the
guess holds it anywhere, and guess colors are never used up. With unique colors
per code this equals the usual peg count. With repeats in the secret it can
overcount (secret [RED, RED, GREEN, BLUE] vs guess [RED, ...] counts both REDs).
"""

from typing import List, Sequence

from .types import Code, Color, Feedback, COLORS


def score(secret: Code, guess: Code) -> Feedback:
    """
    Example:
      secret = [RED, GREEN, BLUE, YELLOW]
      guess  = [RED, BLUE, GREEN, PINK]
      exact   = 1  (RED at position 0)
      partial = 2  (GREEN and BLUE are present but misplaced)
      Returns a tuple: (exact, partial)
    """

    # 0. Validate lengths match
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")

    # 1. Count exact position matches
    exact = 0
    for i in range(n):
        if secret[i] == guess[i]:
            exact += 1

    # 2. Count secret colors the guess contains anywhere (not consumed)
    overlap = 0
    for color in secret:
        if color in guess:
            overlap += 1

    return (exact, overlap - exact)


def exact_positions(secret: Code, guess: Code) -> List[bool]:
    """Per-position mask of the exact matches, used to help the automated breaker."""
    if len(secret) != len(guess):
        raise ValueError("Secret and guess must be the same length.")
    return [s == g for s, g in zip(secret, guess)]


def is_win(secret: Code, guess: Code) -> bool:
    """Every position holds the same color. Codes of different length never win."""
    return len(secret) == len(guess) > 0 and all(s == g for s, g in zip(secret, guess))


def parse_color(text: str, used: Sequence[Color] = ()) -> Color:
    """
    Normalize one line of console input into a color name.
    Raises ValueError for unknown colors or colors already used in this code.
    """
    color = text.strip().upper()
    if color not in COLORS:
        raise ValueError(f"Unknown color '{text.strip()}'.")
    if color in used:
        raise ValueError(f"Color '{color}' is already used in this code.")
    return color

