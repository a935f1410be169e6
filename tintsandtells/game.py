"""Rules of a game: rounds, turns, the countdown, scoring and the pegs."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .abilities import (
    DoublePointsStrategy,
    NullifyOpponentPointsStrategy,
    TriplePointsStrategy,
)
from .colors import DARK_GRAY, create_palette
from .players import Guesser, QGiver
from .tiles import ColorTile, ProgressTile, TileType, create_tile

__all__ = [
    "ROWS",
    "COLS",
    "TOTAL_POINTS",
    "NUM_PLAYERS",
    "TILE_SIZE",
    "SPACING",
    "TURN_SECONDS",
    "RoundResult",
    "Game",
    "calculate_points",
    "peg_path",
]

ROWS = 12
COLS = 20
TOTAL_POINTS = 12
NUM_PLAYERS = 2
TILE_SIZE = 43
SPACING = 4
TURN_SECONDS = 30
_ANIMATION_STEPS = 20


def calculate_points(choice: ColorTile | None, true_tile: ColorTile | None) -> int:
    """Score a guess: 3 on the true tile, 1 next to it, otherwise 0."""
    if choice is None or true_tile is None:
        return 0
    if choice.row == true_tile.row and choice.col == true_tile.col:
        return 3
    if abs(choice.row - true_tile.row) <= 1 and abs(choice.col - true_tile.col) <= 1:
        return 1
    return 0


def peg_path(
    start_x: int,
    points: int,
    tile_size: int = TILE_SIZE,
    spacing: int = SPACING,
    total_points: int = TOTAL_POINTS,
) -> list[int]:
    """Return the peg's x position after each animation step of a move.

    The peg moves in twenty steps, never ending past the last progress tile;
    the final entry is where it comes to rest.
    """
    if points < 0:
        raise ValueError(f"points must not be negative: {points}")
    move_per_tile = tile_size + spacing
    total_move = points * move_per_tile
    step = total_move // _ANIMATION_STEPS
    max_x = (total_points - 1) * move_per_tile

    x = start_x
    moved = 0
    path = []
    while True:
        if x >= max_x:
            path.append(max_x)
            return path
        if moved >= total_move:
            path.append(min(x + (total_move - moved), max_x))
            return path
        x += step
        moved += step
        path.append(x)


@dataclass
class RoundResult:
    """What a finished round gave each guesser."""

    points: tuple[int, int]
    true_row: int
    true_col: int
    peg_paths: tuple[list[int], list[int]] = field(default_factory=lambda: ([], []))
    game_over: bool = False
    winner: str | None = None


class Game:
    """One game between a question giver and two guessers."""

    def __init__(
        self,
        giver: QGiver,
        player_1: Guesser,
        player_2: Guesser,
        rng: random.Random | None = None,
    ) -> None:
        if not isinstance(giver, QGiver):
            raise TypeError("the giver must be a QGiver")
        if not isinstance(player_1, Guesser) or not isinstance(player_2, Guesser):
            raise TypeError("both players must be guessers")
        self.giver = giver
        self.player_1 = player_1
        self.player_2 = player_2
        self.rng = rng if rng is not None else random.Random()

        self.game_start = False
        self.game_begin = False
        self.player_turn = False
        self.current_player: Guesser | None = None
        self.remaining_time = TURN_SECONDS
        self.timer_running = False
        self.start_label = "Start Game"
        self.start_enabled = True

        self.double_points = DoublePointsStrategy()
        self.triple_points = TriplePointsStrategy()
        self.nullify = NullifyOpponentPointsStrategy()
        self.abilities = (self.double_points, self.triple_points, self.nullify)

        self.palette = create_palette(ROWS, COLS)
        self.tiles: list[list[ColorTile]] = [
            [self._color_tile(r, c) for c in range(COLS)] for r in range(ROWS)
        ]
        self.progress_tiles: list[list[ProgressTile]] = [
            [self._progress_tile() for _ in range(TOTAL_POINTS)]
            for _ in range(NUM_PLAYERS)
        ]
        self._place_pegs()

    def _color_tile(self, row: int, col: int) -> ColorTile:
        tile = create_tile(TileType.COLOR, TILE_SIZE)
        tile.row = row
        tile.col = col
        tile.color = self.palette[row][col]
        tile.show_number = False
        return tile

    @staticmethod
    def _progress_tile() -> ProgressTile:
        tile = create_tile(TileType.PROGRESS, TILE_SIZE)
        tile.color = DARK_GRAY
        return tile

    def _place_pegs(self) -> None:
        for lane, player in enumerate((self.player_1, self.player_2)):
            player.peg = 0
            player.peg_x = 0
            player.peg_y = lane

    def start_round(self) -> tuple[int, int]:
        """Pick the true colour for the giver, or begin play if already picked.

        Returns the board position of the true colour.
        """
        if self.game_start:
            self.begin()
            return self.giver.true_row, self.giver.true_col
        row = self.rng.randrange(ROWS)
        col = self.rng.randrange(COLS)
        self.giver.assign_true_color(self.palette[row][col], row, col)
        self.start_label = "Begin"
        self.game_start = True
        return row, col

    def begin(self) -> None:
        """Clear the board and give the first guesser the turn."""
        if not self.game_start:
            raise RuntimeError("the giver has not been given a colour yet")
        self.reset_board()
        self.player_turn = True
        self.current_player = self.player_1
        self.start_label = f"{self.player_1.name}'s Turn!"
        self.start_enabled = False
        self.remaining_time = TURN_SECONDS
        self.timer_running = True
        self.game_begin = True

    def _pass_turn(self) -> None:
        self.current_player = self.player_2
        self.player_turn = True
        self.start_label = f"{self.player_2.name}'s Turn!"
        self.start_enabled = False
        self.remaining_time = TURN_SECONDS
        self.timer_running = True

    def click_tile(self, row: int, col: int) -> RoundResult | None:
        """The current guesser picks a tile; returns the result if the round ends."""
        if not self.game_begin or not self.player_turn:
            return None
        tile = self.tiles[row][col]
        self.timer_running = False
        player = self.current_player
        tile.mark_x(player.color)
        player.chosen_tile = tile
        if player is self.player_1:
            self._pass_turn()
            return None
        return self.evaluate_round()

    def tick(self) -> RoundResult | None:
        """Count one second down; on timeout pass the turn or end the round."""
        if not self.timer_running:
            return None
        self.remaining_time -= 1
        if self.remaining_time > 0:
            return None
        self.timer_running = False
        if self.current_player is self.player_1:
            self._pass_turn()
            return None
        self.player_turn = False
        return self.evaluate_round()

    def use_ability(self, slot: int) -> bool:
        """Arm ability 1, 2 or 3 for the current guesser; returns whether it was armed."""
        if slot not in (1, 2, 3):
            raise ValueError(f"no such ability: {slot}")
        if not self.game_start or self.current_player is None:
            return False
        player = self.current_player
        available = {1: player.ability_1, 2: player.ability_2, 3: player.ability_3}[slot]
        if not available:
            return False
        player.active_ability = slot
        player.ability_1 = False
        return True

    def _apply_multiplier(self, player: Guesser, points: int) -> int:
        if player.active_ability == 1:
            return self.double_points.modify_points(points)
        if player.active_ability == 2:
            return self.triple_points.modify_points(points)
        return points

    def evaluate_round(self) -> RoundResult:
        """Score both guesses, move the pegs and reveal the true tile."""
        true_row, true_col = self.giver.true_row, self.giver.true_col
        if true_row is None or true_col is None:
            raise RuntimeError("no true colour has been chosen for this round")
        true_tile = self.tiles[true_row][true_col]

        points_1 = calculate_points(self.player_1.chosen_tile, true_tile)
        points_2 = calculate_points(self.player_2.chosen_tile, true_tile)
        points_1 = self._apply_multiplier(self.player_1, points_1)
        points_2 = self._apply_multiplier(self.player_2, points_2)
        if self.player_1.active_ability == 3:
            points_2 = self.nullify.return_to_zero()
        elif self.player_2.active_ability == 3:
            points_1 = self.nullify.return_to_zero()

        self.player_1.active_ability = -1
        self.player_2.active_ability = -1

        paths: list[list[int]] = []
        for player, points in ((self.player_1, points_1), (self.player_2, points_2)):
            player.peg_y += points
            path = peg_path(player.peg, points) if points > 0 else []
            if path:
                player.peg = path[-1]
            paths.append(path)

        true_tile.number = 3
        true_tile.show_number = True
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                r, c = true_row + dr, true_col + dc
                if (dr or dc) and 0 <= r < ROWS and 0 <= c < COLS:
                    neighbour = self.tiles[r][c]
                    neighbour.number = 1
                    neighbour.show_number = True

        over = self.is_game_over()
        result = RoundResult(
            points=(points_1, points_2),
            true_row=true_row,
            true_col=true_col,
            peg_paths=(paths[0], paths[1]),
            game_over=over,
            winner=self.winner() if over else None,
        )

        self.player_turn = False
        self.start_enabled = True
        self.start_label = "Next Round"
        self.game_start = False
        return result

    def reset_board(self) -> None:
        """Clear scores and marks from every colour tile."""
        for row in self.tiles:
            for tile in row:
                tile.clear()

    def is_game_over(self) -> bool:
        """Whether a peg has reached the last progress tile."""
        last = TOTAL_POINTS - 1
        return self.player_1.peg_y >= last or self.player_2.peg_y >= last

    def winner(self) -> str | None:
        """Name of the winner, or None while the game goes on."""
        if not self.is_game_over():
            return None
        last = TOTAL_POINTS - 1
        if self.player_1.peg_y >= last:
            return self.player_1.name
        if self.player_2.peg_y >= last:
            return self.player_2.name
        return "Everyone!"

    def forfeit(self) -> str:
        """The current guesser gives up; returns the winner's name."""
        if self.current_player is self.player_1:
            return self.player_2.name
        if self.current_player is self.player_2:
            return self.player_1.name
        return "Neither"