"""
Labels for clarity.
"""

from typing import List, Literal, Tuple

Color = str  # one of COLORS
Code = List[Color]  # 4 colors, no repeats
Feedback = Tuple[int, int]  # (exact_matches, partial_matches)
GameStatus = Literal["in_progress", "won", "lost"]
PlayerKind = Literal["human", "random", "feedback_assisted"]

# Fixed board: 6 colors, 4 pegs, 12 guesses
COLORS: Tuple[Color, ...] = ("RED", "GREEN", "BLUE", "YELLOW", "PURPLE", "PINK")
CODE_LENGTH = 4
MAX_ATTEMPTS = 12
