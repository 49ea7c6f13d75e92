"""
Testing the role variants with a fake draw and a scripted console.
"""

import pytest

from mastermind.players import Player, CodeGenerationError, draw_unique
from mastermind.random_client import make_draw
from mastermind.schemas import CodeIn
from mastermind.store import Game
from mastermind.types import COLORS, CODE_LENGTH


def test_draw_unique_resamples_whole_code(fixed_draw):
    # First draw repeats RED, second one is clean
    draw = fixed_draw(["RED", "RED", "BLUE", "PINK", "RED", "GREEN", "BLUE", "PINK"])
    assert draw_unique(draw) == ["RED", "GREEN", "BLUE", "PINK"]


def test_draw_unique_gives_up_after_cap(fixed_draw):
    with pytest.raises(CodeGenerationError):
        draw_unique(fixed_draw(["RED"]), max_draws=5)


def test_draw_unique_keeps_fixed_positions(fixed_draw):
    draw = fixed_draw(["GREEN", "BLUE"])
    code = draw_unique(draw, fixed=["RED", None, None, "PINK"])
    assert code == ["RED", "GREEN", "BLUE", "PINK"]


def test_random_maker_codes_are_always_unique(make_console):
    maker = Player("AI (CodeMaker)", "random", make_console([]), make_draw("local"))
    for _ in range(200):
        code = maker.produce_code()
        assert len(code) == CODE_LENGTH
        assert len(set(code)) == CODE_LENGTH
        assert all(color in COLORS for color in code)


def test_human_maker_reprompts_on_bad_input(make_console, output):
    console = make_console(["red", "orange", "RED", " Green ", "blue", "blue", "pink"])
    maker = Player("Player (CodeMaker)", "human", console)

    assert maker.produce_code() == ["RED", "GREEN", "BLUE", "PINK"]
    assert output.count("Invalid or already used color, please try again") == 3


def test_human_breaker_reads_guess(make_console):
    console = make_console(["yellow", "purple", "pink", "red"])
    breaker = Player("Player (CodeBreaker)", "human", console)
    assert breaker.produce_guess() == ["YELLOW", "PURPLE", "PINK", "RED"]


def test_random_breaker_ignores_previous_feedback(make_console, fixed_draw, output):
    draw = fixed_draw(["PINK", "PURPLE", "YELLOW", "GREEN"])
    breaker = Player("AI (CodeBreaker)", "random", make_console([]), draw)

    game = Game(secret=["PINK", "RED", "BLUE", "YELLOW"])
    previous = game.guess(["PINK", "BLUE", "RED", "GREEN"])

    assert breaker.produce_guess(previous) == ["PINK", "PURPLE", "YELLOW", "GREEN"]
    assert output == ["The AI chose: PINK PURPLE YELLOW GREEN"]


def test_feedback_assisted_breaker_keeps_exact_positions(make_console, fixed_draw):
    secret = ["RED", "GREEN", "BLUE", "YELLOW"]
    game = Game(secret=secret)
    previous = game.guess(["RED", "PINK", "BLUE", "PURPLE"])
    assert previous.exact == 2

    # First redraw would repeat RED, so it is thrown away
    draw = fixed_draw(["RED", "GREEN", "PINK", "GREEN"])
    breaker = Player("AI (CodeBreaker)", "feedback_assisted", make_console([]), draw)

    guess = breaker.produce_guess(previous)
    assert guess[0] == "RED"
    assert guess[2] == "BLUE"
    assert guess == ["RED", "PINK", "BLUE", "GREEN"]


def test_feedback_assisted_breaker_without_hits_draws_fresh(make_console, fixed_draw):
    game = Game(secret=["RED", "GREEN", "BLUE", "YELLOW"])
    previous = game.guess(["PINK", "PURPLE", "RED", "GREEN"])
    assert previous.exact == 0

    draw = fixed_draw(["YELLOW", "BLUE", "GREEN", "RED"])
    breaker = Player("AI (CodeBreaker)", "feedback_assisted", make_console([]), draw)
    assert breaker.produce_guess(previous) == ["YELLOW", "BLUE", "GREEN", "RED"]


def test_code_schema_has_no_api_examples():
    assert "examples" not in CodeIn.model_json_schema()
    assert CodeIn(colors=["red", "Green", " blue", "PINK"]).colors == ["RED", "GREEN", "BLUE", "PINK"]
