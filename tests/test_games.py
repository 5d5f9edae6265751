import pytest

from gonzocasino.games import (
    Game,
    HigherThan13,
    RockPaperScissors,
    Slots,
    TwoColors,
)


class ScriptedRng:
    """Returns preset values from randint, checking they fit the range."""

    def __init__(self, *values):
        self.values = list(values)
        self.ranges = []

    def randint(self, low, high):
        value = self.values.pop(0)
        self.ranges.append((low, high))
        assert low <= value <= high
        return value


def scripted_ask(*answers):
    pending = list(answers)
    return lambda prompt: pending.pop(0)


def test_game_is_abstract():
    with pytest.raises(TypeError):
        Game()


# --- HigherThan13 ---

def test_higher_than_13_payout_win():
    assert HigherThan13().payout(10, 4, 8) == HigherThan13.WIN_FACTOR * 8


@pytest.mark.parametrize("player, casino", [(4, 4), (3, 12)])
def test_higher_than_13_payout_tie_or_lower_loses(player, casino):
    assert HigherThan13().payout(player, casino, 8) == 0


def test_higher_than_13_surrender_returns_half():
    rng = ScriptedRng(7)
    game = HigherThan13(rng)
    result = game.play(10, scripted_ask("1"), lambda text: None)
    assert result == HigherThan13.SURRENDER_FACTOR * 10
    assert rng.ranges == [(1, 13)]


def test_higher_than_13_play_uses_both_numbers():
    rng = ScriptedRng(13, 1)
    said = []
    result = HigherThan13(rng).play(5, scripted_ask("2"), said.append)
    assert result == HigherThan13.WIN_FACTOR * 5
    assert rng.ranges == [(1, 13), (1, 13)]
    assert said[-1] == "Numero casino: 1"


def test_higher_than_13_rejects_non_numeric_option():
    with pytest.raises(ValueError):
        HigherThan13(ScriptedRng(5)).play(5, scripted_ask("x"), lambda text: None)


def test_higher_than_13_name():
    assert HigherThan13().name() == "Mayor de 13"


# --- TwoColors ---

def test_two_colors_payouts():
    game = TwoColors()
    assert game.payout(3, 3, 1, 1, 10) == TwoColors.FULL_MATCH_FACTOR * 10
    assert game.payout(3, 3, 0, 1, 10) == TwoColors.NUMBER_MATCH_FACTOR * 10
    assert game.payout(2, 5, 1, 1, 10) == 10
    assert game.payout(2, 5, 0, 1, 10) == 0


def test_two_colors_play_adjusts_chosen_color():
    rng = ScriptedRng(4, 4, 1)
    said = []
    result = TwoColors(rng).play(6, scripted_ask("2"), said.append)
    assert result == TwoColors.FULL_MATCH_FACTOR * 6
    assert rng.ranges == [(1, 7), (1, 7), (0, 1)]
    assert said[-1] == "Color casino: Negro."


def test_two_colors_play_white_casino_color():
    said = []
    result = TwoColors(ScriptedRng(1, 2, 0)).play(6, scripted_ask("2"), said.append)
    assert result == 0
    assert said[-1] == "Color casino: Blanco."


def test_two_colors_name():
    assert TwoColors().name() == "Dos Colores"


# --- Slots ---

def test_slots_three_equal():
    assert Slots().payout(5, 5, 5, 4) == Slots.THREE_EQUAL_FACTOR * 4


def test_slots_triple_seven_counts_as_three_equal():
    assert Slots().payout(7, 7, 7, 4) == Slots.THREE_EQUAL_FACTOR * 4


def test_slots_descending_straight():
    assert Slots().payout(6, 5, 4, 4) == Slots.STRAIGHT_FACTOR * 4


def test_slots_ascending_run_loses():
    assert Slots().payout(4, 5, 6, 4) == 0


def test_slots_play_draws_three_reels():
    rng = ScriptedRng(3, 2, 1)
    said = []
    result = Slots(rng).play(2, scripted_ask(), said.append)
    assert result == Slots.STRAIGHT_FACTOR * 2
    assert rng.ranges == [(1, 7)] * 3
    assert said[-1] == "Resultado slots: 3 2 1"


# --- RockPaperScissors ---

@pytest.mark.parametrize(
    "player, casino",
    [
        (RockPaperScissors.ROCK, RockPaperScissors.SCISSORS),
        (RockPaperScissors.PAPER, RockPaperScissors.ROCK),
        (RockPaperScissors.SCISSORS, RockPaperScissors.PAPER),
    ],
)
def test_rps_wins_pay_double(player, casino):
    game = RockPaperScissors()
    assert game.payout(player, casino, 9) == RockPaperScissors.WIN_FACTOR * 9
    assert game.payout(casino, player, 9) == 0


@pytest.mark.parametrize("choice", [1, 2, 3])
def test_rps_tie_returns_bet(choice):
    assert RockPaperScissors().payout(choice, choice, 9) == 9


def test_rps_play_shows_both_choices():
    rng = ScriptedRng(2)
    said = []
    result = RockPaperScissors(rng).play(3, scripted_ask("3"), said.append)
    assert result == RockPaperScissors.WIN_FACTOR * 3
    assert rng.ranges == [(1, 3)]
    assert "Tijera" in said[0] and "Papel" in said[0]


@pytest.mark.parametrize("answer", ["0", "4"])
def test_rps_rejects_choice_out_of_range(answer):
    with pytest.raises(ValueError):
        RockPaperScissors(ScriptedRng(1)).play(3, scripted_ask(answer), lambda text: None)


@pytest.mark.parametrize("game_class", [HigherThan13, TwoColors, Slots, RockPaperScissors])
def test_rules_start_with_heading(game_class):
    rules = game_class().rules()
    assert rules.startswith("=== Reglas de")
    assert len(rules.splitlines()) > 3


def test_rps_name():
    assert RockPaperScissors().name() == "Piedra, papel o tijera"