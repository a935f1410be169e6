import pytest

from tintsandtells.abilities import DoublePointsStrategy
from tintsandtells.colors import BLUE, RED, Color
from tintsandtells.players import (
    Guesser,
    PlayerType,
    QGiver,
    create_player,
)
from tintsandtells.tiles import ColorTile


def test_create_guesser():
    player = create_player(PlayerType.GUESSER, "Ada", RED)
    assert isinstance(player, Guesser)
    assert player.name == "Ada"
    assert player.color == RED


def test_create_giver_ignores_color():
    giver = create_player(PlayerType.QGIVER, "Bo", BLUE)
    assert isinstance(giver, QGiver)
    assert giver.name == "Bo"
    assert giver.true_color is None


def test_create_player_rejects_unknown_type():
    with pytest.raises(ValueError):
        create_player("spectator", "Cy")


def test_guesser_defaults():
    player = Guesser("Ada", RED)
    assert (player.ability_1, player.ability_2, player.ability_3) == (True, True, True)
    assert player.active_ability == -1
    assert player.pending_points == 0
    assert player.chosen_tile is None
    assert (player.peg_x, player.peg_y) == (0, 0)


def test_guesser_state_changes():
    player = Guesser("Ada", RED)
    tile = ColorTile(43, row=1, col=2)
    strategy = DoublePointsStrategy()
    player.chosen_tile = tile
    player.ability_strategy = strategy
    player.active_ability = 1
    player.ability_1 = False
    player.peg_y += 3
    assert player.chosen_tile is tile
    assert player.ability_strategy is strategy
    assert player.active_ability == 1
    assert player.ability_1 is False
    assert player.peg_y == 3


def test_assign_true_color():
    giver = QGiver("Bo")
    color = Color.from_hsv(90, 255, 200)
    giver.assign_true_color(color, 4, 7)
    assert giver.true_color == color
    assert (giver.true_row, giver.true_col) == (4, 7)


def test_guessers_are_independent():
    first = create_player(PlayerType.GUESSER, "Ada", RED)
    second = create_player(PlayerType.GUESSER, "Cy", BLUE)
    first.ability_2 = False
    assert second.ability_2 is True
    assert first.color != second.color