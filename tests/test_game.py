import pytest

from tintsandtells.colors import BLUE, RED, create_palette
from tintsandtells.game import (
    COLS,
    ROWS,
    SPACING,
    TILE_SIZE,
    TOTAL_POINTS,
    TURN_SECONDS,
    Game,
    calculate_points,
    peg_path,
)
from tintsandtells.players import Guesser, QGiver
from tintsandtells.tiles import ColorTile


class FixedRng:
    def __init__(self, *values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def make_game(row=5, col=7):
    giver = QGiver("Giver")
    p1 = Guesser("Ann", RED)
    p2 = Guesser("Bob", BLUE)
    return Game(giver, p1, p2, FixedRng(row, col, row, col, row, col))


def started(row=5, col=7):
    game = make_game(row, col)
    game.start_round()
    game.begin()
    return game


def tile(r, c):
    t = ColorTile(TILE_SIZE)
    t.row, t.col = r, c
    return t


def test_calculate_points_exact():
    assert calculate_points(tile(3, 4), tile(3, 4)) == 3


def test_calculate_points_adjacent():
    assert calculate_points(tile(2, 5), tile(3, 4)) == 1


def test_calculate_points_far():
    assert calculate_points(tile(0, 0), tile(3, 4)) == 0


def test_calculate_points_missing_choice():
    assert calculate_points(None, tile(3, 4)) == 0


def test_peg_path_capped_at_board_end():
    max_x = (TOTAL_POINTS - 1) * (TILE_SIZE + SPACING)
    path = peg_path(0, 20)
    assert path[-1] == max_x


def test_peg_path_at_end_stays():
    max_x = (TOTAL_POINTS - 1) * (TILE_SIZE + SPACING)
    assert peg_path(max_x, 3) == [max_x]


def test_peg_path_negative_raises():
    with pytest.raises(ValueError):
        peg_path(0, -1)


def test_tiles_follow_palette():
    game = make_game()
    palette = create_palette(ROWS, COLS)
    assert game.tiles[3][9].color == palette[3][9]
    assert (game.tiles[3][9].row, game.tiles[3][9].col) == (3, 9)
    assert len(game.progress_tiles) == 2 and len(game.progress_tiles[0]) == TOTAL_POINTS


def test_initial_pegs():
    game = make_game()
    assert (game.player_1.peg_y, game.player_2.peg_y) == (0, 1)


def test_start_round_assigns_giver_color():
    game = make_game(4, 11)
    assert game.start_round() == (4, 11)
    assert game.giver.true_color == game.palette[4][11]
    assert game.start_label == "Begin"


def test_begin_requires_start():
    with pytest.raises(RuntimeError):
        make_game().begin()


def test_full_round_scoring():
    game = started(5, 7)
    assert game.current_player is game.player_1
    assert game.click_tile(5, 7) is None
    assert game.current_player is game.player_2
    result = game.click_tile(5, 8)
    assert result.points == (3, 1)
    assert game.player_1.peg_y == 3
    assert game.player_2.peg_y == 2
    assert game.tiles[5][7].number == 3
    assert game.tiles[4][6].number == 1
    assert game.tiles[5][7].marked and game.tiles[5][7].mark_color == RED
    assert game.start_label == "Next Round"
    assert result.peg_paths[0][-1] == game.player_1.peg


def test_clicks_ignored_before_begin():
    game = make_game()
    game.start_round()
    assert game.click_tile(0, 0) is None
    assert not game.tiles[0][0].marked


def test_double_points_ability():
    game = started(5, 7)
    assert game.use_ability(1)
    assert game.player_1.ability_1 is False
    game.click_tile(5, 7)
    result = game.click_tile(0, 0)
    assert result.points == (6, 0)
    assert game.player_1.active_ability == -1


def test_nullify_ability():
    game = started(5, 7)
    game.click_tile(0, 0)
    assert game.use_ability(3)
    result = game.click_tile(5, 7)
    assert result.points == (0, 3)


def test_use_ability_without_current_player():
    game = make_game()
    game.start_round()
    assert game.use_ability(2) is False


def test_use_ability_bad_slot():
    with pytest.raises(ValueError):
        started().use_ability(4)


def test_timeout_passes_turn_then_ends_round():
    game = started(5, 7)
    for _ in range(TURN_SECONDS - 1):
        assert game.tick() is None
    assert game.current_player is game.player_1
    game.tick()
    assert game.current_player is game.player_2
    assert game.remaining_time == TURN_SECONDS
    result = None
    for _ in range(TURN_SECONDS):
        result = result or game.tick()
    assert result.points == (0, 0)
    assert game.player_turn is False


def test_game_over_and_winner():
    game = started(5, 7)
    game.player_1.peg_y = TOTAL_POINTS - 2
    game.click_tile(5, 8)
    result = game.click_tile(0, 0)
    assert result.game_over
    assert result.winner == "Ann"
    assert game.winner() == "Ann"


def test_not_over_has_no_winner():
    game = make_game()
    assert game.is_game_over() is False
    assert game.winner() is None


def test_forfeit():
    game = make_game()
    assert game.forfeit() == "Neither"
    game.start_round()
    game.begin()
    assert game.forfeit() == "Bob"
    game.click_tile(0, 0)
    assert game.forfeit() == "Ann"


def test_reset_board_clears_marks():
    game = started(5, 7)
    game.click_tile(5, 7)
    game.click_tile(5, 7)
    game.reset_board()
    assert all(not t.marked and t.number == 0 for row in game.tiles for t in row)


def test_evaluate_without_colour_raises():
    with pytest.raises(RuntimeError):
        make_game().evaluate_round()


def test_wrong_player_types():
    with pytest.raises(TypeError):
        Game(Guesser("A", RED), Guesser("B", RED), Guesser("C", BLUE))