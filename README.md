# bnmo

Building blocks for a small terminal game console. The package keeps a list
of games, a queue of games waiting to be played, a history of played games
and one scoreboard per game. It reads and writes save files. It also has
several mini-games. Each game reads from an `InputReader` and writes through
a `write` callable. The prompts and messages are in Indonesian.

## Installing

```
pip install .
```

## Modules

- `bnmo.scanner`: `InputReader` reads user input, either as whole lines
  (`read_line`), as words (`read_words`, `read_word`) or as numbers
  (`read_int`). It reads from any text stream and uses standard input when no
  stream is given. `read_records(path)` reads the lines of a data file up to
  the closing `.`. `split_words(line)` splits a line at its blanks.
- `bnmo.text`: helpers for ASCII case (`upper_ascii`, `lower_ascii`), digit
  parsing (`parse_int`, which returns `None` for anything other than plain
  digits), `split_name_score`, `pad_right`, `power` and `random_number`.
- `bnmo.structures`: `GameCatalog`, the ordered list of game names.
  `GameQueue` is a bounded FIFO with a capacity of 100 by default. It raises
  `QueueFullError` when full and `QueueEmptyError` when empty. `History` is a
  bounded stack of played games; `recent(n)` returns the newest games first.
- `bnmo.scoreboard`: `Scoreboard` holds player names and scores for one game.
  It holds at most 10 names, and names are compared without regard to ASCII
  case. Adding a new name to a full board raises `ScoreboardFullError`.
  `ScoreboardSet` keeps one board per game.
- `bnmo.session`: `Bnmo(reader, write, data_dir="data")` holds a session and
  offers these commands: `start`, `load`, `save`, `list_games`, `create_game`,
  `delete_game`, `queue_game`, `record_score`, `scoreboard_text`,
  `reset_scoreboard`, `history`, `reset_history` and `quit`.
  `help_text(started)` returns the command list.
- `bnmo.rng`: guess a number from 1 to 100 with `play(reader, write, rng)`.
- `bnmo.hangman`: guess words letter by letter with
  `play(reader, write, rng, path)`. New words can be added to the word file
  before playing. `HangmanRound` holds the state of a single word.
- `bnmo.towerofhanoi`: move every disk to the rightmost pole with
  `play(reader, write)`. `Tower` holds the state of the puzzle, and
  `final_score(disks, moves)` gives the score.
- `bnmo.grid` and `bnmo.snake`: Snake on Meteor on a 5×5 arena whose edges
  wrap around, played with `play(reader, write, rng)`. `SnakeGame` holds the
  state of a game.

## Example

```python
import io
import random
import sys

from bnmo import towerofhanoi
from bnmo.scanner import InputReader

reader = InputReader(io.StringIO("1\n1\n3\n"))
score = towerofhanoi.play(reader, sys.stdout.write)  # one disk, one move: score 2
```

A session uses files in its data directory:

```python
from bnmo.scanner import InputReader
from bnmo.session import Bnmo

session = Bnmo(InputReader(), sys.stdout.write, data_dir="data")
session.start()      # reads data/config.txt
session.list_games()
session.save("mysave")  # writes data/mysave.txt
```

## Save file format

A save file is plain text with one item per line, ending in a single `.`:

```
<number of games>
<game name>
...
<number of history entries>
<game name>            (oldest first)
...
<number of entries in scoreboard of game 1>
<player name> <score>
...
(one block per game)
.
```

`Bnmo.start` reads only the game list from `config.txt`.

## What is not included

- No command to run from the shell, and no interactive command loop. You
  drive a session by calling the `Bnmo` methods yourself.
- No Diner Dash game.
- No "play the game at the front of the queue" or "skip games" step. Scores
  are recorded through `Bnmo.record_score` after you run a game yourself.

## Running the tests

```
pip install .[test]
pytest
```