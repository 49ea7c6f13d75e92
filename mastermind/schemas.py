"""
Explicit validation & Pydantic models
- Models are used to validate data coming from the console or the random draws
  before it reaches the game state.
- Also defines how a guess record looks when the finished game is logged.
"""

from typing import List

from pydantic import BaseModel, Field, field_validator

from .types import COLORS, CODE_LENGTH


# 1. Validates a full code (secret or guess)
class CodeIn(BaseModel):
    colors: List[str] = Field(
        ..., description=f"Exactly {CODE_LENGTH} distinct color names from {', '.join(COLORS)}"
    )

    @field_validator("colors")
    @classmethod
    def validate_colors(cls, colors: List[str]) -> List[str]:
        """
        Normalize case, then check length, known colors and no repeats.
        """
        normalized = [c.strip().upper() for c in colors]
        if len(normalized) != CODE_LENGTH:
            raise ValueError(f"A code has exactly {CODE_LENGTH} colors, got {len(normalized)}.")
        for color in normalized:
            if color not in COLORS:
                raise ValueError(f"Unknown color '{color}'. Allowed: {', '.join(COLORS)}.")
        if len(set(normalized)) != len(normalized):
            raise ValueError("A color may only be used once per code.")
        return normalized


# 2. Validates the setup menu choice
class RoleChoice(BaseModel):
    choice: int = Field(..., ge=1, le=3, description="1 = CodeMaker, 2 = CodeBreaker, 3 = watch")


# 3. Describes the feedback for a single guess
class GuessEntryOut(BaseModel):
    guess: List[str] = Field(..., description="The breaker's guess")
    exact: int = Field(..., description="Right color, right position")
    partial: int = Field(..., description="Right color, wrong position")
    attempts_left: int = Field(..., description="Guesses remaining after this one")
