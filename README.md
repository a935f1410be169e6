# Tints and Tells

A colour clue game for three people sharing one terminal.

One player is the **Q-Giver**. The other two are **Guessers**. The board is a
grid of 12 rows (A to L) and 20 columns (1 to 20). Hue changes across the
columns and brightness falls off down the rows.

## Installing and playing

```
pip install .
tintsandtells
```

Options:

* `--seed N` seeds the choice of secret colours, so a game can be replayed.
* `--color` paints the board and the secret colour with ANSI 24-bit colours.
  Without it the board is plain text.

The game first asks for the names of the Q-Giver, Player 1 and Player 2.
Empty names are asked for again. Ending input (Ctrl-D) or pressing Ctrl-C
leaves the game.

## How a round goes

1. Press Enter to start the round. A notice says that only the Q-Giver may
   look at the screen. After another Enter it shows the secret colour as
   `#rrggbb` and its location, such as `Location : C , 7`. Pressing Enter
   once more scrolls the colour off the screen.
2. The Q-Giver describes the colour in words. Press Enter once the clue has
   been given.
3. Each Guesser in turn has 30 seconds. At the prompt they may type:
   * a tile such as `B7` (row letter, then column number),
   * `1`, `2` or `3` to arm an ability,
   * `forfeit` to give up, which hands the win to the other Guesser.

   The time taken to answer counts against the clock. If a Guesser's time has
   run out by the time they answer, the answer is ignored and their turn is
   lost.
4. The round is scored. An exact hit gives 3 points. A tile next to the secret
   one, diagonals included, gives 1 point. The board then shows `3` on the
   secret tile and `1` on its neighbours. Player 1's pick is marked `X` and
   Player 2's pick `O`.

Each Guesser advances along a track of 12 tiles. The score after each round is
shown as `at N of 11`. Player 1 starts at 0 and Player 2 starts at 1. The game
ends when either reaches 11. Player 1 is checked first, so Player 1 wins if
both get there in the same round.

### Abilities

* `1`: **2x Points** doubles that round's score.
* `2`: **3x Points** triples that round's score.
* `3`: **Null Opponent's Points** sets the other Guesser's score for the round
  to zero. If both Guessers arm it, only Player 2's score is cleared.

Arming any ability uses up that Guesser's **2x Points**. **3x Points** and
**Null Opponent's Points** stay available.

## Using the pieces from Python

```python
import random

from tintsandtells.abilities import DoublePointsStrategy, TriplePointsStrategy
from tintsandtells.colors import Color, create_palette, row_letter
from tintsandtells.notification import location_text, notice_text
from tintsandtells.players import PlayerType, create_player
from tintsandtells.colors import RED, BLUE
from tintsandtells.game import Game, calculate_points, peg_path

DoublePointsStrategy().modify_points(3)   # 6
TriplePointsStrategy().modify_points(1)   # 3

palette = create_palette(12, 20)          # 12 rows of 20 Color values
Color.from_hsv(0, 255, 255).name()        # "#ff0000"
row_letter(0)                             # "A"

location_text(2, 6)                       # "Location : C , 7"
notice_text("sam")                        # "ONLY SAM CAN SEE THE SCREEN"

giver = create_player(PlayerType.QGIVER, "Sam")
ann = create_player(PlayerType.GUESSER, "Ann", RED)
bob = create_player(PlayerType.GUESSER, "Bob", BLUE)
game = Game(giver, ann, bob, random.Random(1))
row, col = game.start_round()             # picks the secret tile
game.start_round()                        # begins play
game.click_tile(row, col)                 # Ann's guess
result = game.click_tile(0, 0)            # Bob's guess ends the round
result.points, result.game_over
```

`tintsandtells.game.Game` holds the rules: `start_round`, `begin`,
`click_tile`, `tick` (one second of the countdown), `use_ability`,
`evaluate_round`, `reset_board`, `is_game_over`, `winner` and `forfeit`.
A finished round returns a `RoundResult` with both scores, the secret tile,
each peg's `peg_path` positions, and the winner if the game is over.

`tintsandtells.style` lays both boards out as plain drawable items (`Rect`,
`Line`, `Text`, `Ellipse`) through `BoardView`, `tile_origin`,
`board_labels` and `progress_board_border`.
`tintsandtells.notification.GiverNotification` builds the Q-Giver's two
screens, and `tintsandtells.app.GameWindow` runs the terminal game.

## What this package does not do

There is no graphical window. The layout items from `tintsandtells.style` and
the peg positions from `peg_path` are computed but not drawn by anything in
the package, and the terminal game does not animate the pegs. Keeping the
secret colour from the Guessers relies on them looking away; the terminal only
scrolls it off with blank lines.

## Running the tests

```
pip install ".[test]"
pytest
```