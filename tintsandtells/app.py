"""Terminal front end for a game of tints and tells."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from typing import Callable, TextIO

from .colors import BLUE, RED, Color
from .game import COLS, ROWS, TOTAL_POINTS, Game, RoundResult
from .notification import GiverNotification, location_text
from .players import Guesser, PlayerType, QGiver, create_player

__all__ = ["GameWindow", "winner_message", "main"]

_HELP = "Enter a tile such as B7, 1/2/3 to use an ability, or 'forfeit'."
_CONCEAL_LINES = 40
_CELL = re.compile(r"([A-Za-z])\s*(\d+)")


def winner_message(name: str) -> str:
    """Return the announcement that ends a game."""
    return f"Game Over! Winner: {name}"


def _parse_cell(text: str) -> tuple[int, int]:
    match = _CELL.fullmatch(text.strip())
    if match:
        row = ord(match.group(1).upper()) - ord("A")
        col = int(match.group(2)) - 1
        if 0 <= row < ROWS and 0 <= col < COLS:
            return row, col
    raise ValueError(f"no such tile: {text}")


class GameWindow:
    """Runs a game in a terminal, reading answers and writing the boards."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: TextIO | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
        use_color: bool = False,
    ) -> None:
        self._input = input_fn
        self._out = output if output is not None else sys.stdout
        self._rng = rng
        self._clock = clock
        self.use_color = use_color
        self.game: Game | None = None

    def _say(self, text: str = "") -> None:
        print(text, file=self._out)

    def _ask_name(self, prompt: str) -> str:
        while True:
            name = self._input(prompt).strip()
            if name:
                return name

    def run(self) -> int:
        """Ask for the players and play until someone wins, forfeits or input ends."""
        try:
            giver = create_player(PlayerType.QGIVER, self._ask_name("Enter Q Giver Name: "))
            first = create_player(PlayerType.GUESSER, self._ask_name("Enter Player 1 Name: "), RED)
            second = create_player(PlayerType.GUESSER, self._ask_name("Enter Player 2 Name: "), BLUE)
        except (EOFError, KeyboardInterrupt):
            self._say()
            return 0
        assert isinstance(giver, QGiver)
        assert isinstance(first, Guesser) and isinstance(second, Guesser)
        self.game = Game(giver, first, second, self._rng)
        try:
            self._play()
        except (EOFError, KeyboardInterrupt):
            self._say()
        return 0

    def _play(self) -> None:
        game = self.game
        while True:
            self._input(f"[{game.start_label}] Press Enter to start the round: ")
            game.start_round()
            self._notify(game.giver)
            self._input(f"[{game.start_label}] Press Enter once the clue is given: ")
            game.start_round()
            result = self._play_turns()
            if result is None:
                return
            self._report(result)
            if result.game_over:
                self._say(winner_message(result.winner))
                return

    def _notify(self, giver: QGiver) -> None:
        notification = GiverNotification(giver)
        self._say(notification.notice)
        self._input("Press Enter to continue: ")
        screen = notification.show_color_screen()
        swatch = self._paint("      ", screen.color)
        self._say(f"Colour: {screen.color.name()} {swatch}".rstrip())
        self._say(screen.location)
        self._input("Press Enter when ready: ")
        self._say("\n" * _CONCEAL_LINES)

    def _spend(self, seconds: int) -> tuple[RoundResult | None, bool]:
        game = self.game
        for _ in range(seconds):
            player = game.current_player
            result = game.tick()
            if not game.timer_running or game.current_player is not player:
                return result, True
        return None, False

    def _play_turns(self) -> RoundResult | None:
        game = self.game
        while True:
            player = game.current_player
            self._say(self._render_board())
            self._say(f"{game.start_label}  ({game.remaining_time}s left)")
            started = self._clock()
            answer = self._input(f"{player.name}> ").strip()
            result, timed_out = self._spend(int(self._clock() - started))
            if timed_out:
                self._say(f"Time's up for {player.name}")
                if result is not None:
                    return result
                continue
            if not answer:
                continue
            command = answer.lower()
            if command == "forfeit":
                self._say(winner_message(game.forfeit()))
                return None
            if command in ("1", "2", "3"):
                slot = int(command)
                if game.use_ability(slot):
                    self._say(f"{player.name} armed {game.abilities[slot - 1].name}")
                else:
                    self._say("That ability has been used.")
                continue
            try:
                row, col = _parse_cell(answer)
            except ValueError as exc:
                self._say(str(exc))
                self._say(_HELP)
                continue
            result = game.click_tile(row, col)
            if result is not None:
                return result

    def _report(self, result: RoundResult) -> None:
        game = self.game
        self._say(self._render_board())
        self._say(f"True colour: {location_text(result.true_row, result.true_col)}")
        for player, points in zip((game.player_1, game.player_2), result.points):
            self._say(f"{player.name}: +{points} (at {player.peg_y} of {TOTAL_POINTS - 1})")

    def _paint(self, text: str, color: Color) -> str:
        if not self.use_color:
            return text.strip() and text
        return f"\x1b[48;2;{color.red};{color.green};{color.blue}m{text}\x1b[0m"

    def _cell(self, tile) -> str:
        game = self.game
        if tile.marked:
            mark = "X" if tile.mark_color == game.player_1.color else "O"
        elif tile.show_number and tile.number > 0:
            mark = str(tile.number)
        else:
            mark = "."
        return self._paint(f"{mark:>3}", tile.color) if self.use_color else f"{mark:>3}"

    def _render_board(self) -> str:
        header = "   " + "".join(f"{c + 1:>3}" for c in range(COLS))
        lines = [header]
        for r, row in enumerate(self.game.tiles):
            lines.append(f"{chr(ord('A') + r):>2} " + "".join(self._cell(t) for t in row))
        return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Play a game in the terminal."""
    parser = argparse.ArgumentParser(prog="tintsandtells", description="Describe a colour, guess the tile.")
    parser.add_argument("--seed", type=int, default=None, help="seed for choosing true colours")
    parser.add_argument("--color", action="store_true", help="paint the board with ANSI colours")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    return GameWindow(rng=rng, use_color=args.color).run()


if __name__ == "__main__":
    sys.exit(main())