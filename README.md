# beesolve

Solutions to eleven classic programming-judge problems. Each problem lives in
its own module. The logic is available as plain Python functions. Every
module also has a command that reads the problem's input from standard input
and writes the answer to standard output.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command                | Problem                                                        |
|------------------------|----------------------------------------------------------------|
| `beesolve-consumption` | Group houses by average water consumption per city             |
| `beesolve-marbles`     | Position of queried marbles in the sorted list                 |
| `beesolve-pages`       | Number of pages needed to print a text                         |
| `beesolve-substring`   | Length of the longest common substring of two lines            |
| `beesolve-interleave`  | Interleave the characters of two words                         |
| `beesolve-telephone`   | Which team's relayed message stayed closer to the original     |
| `beesolve-brainfuck`   | Run Brainfuck programs on a wrapping 30 000-cell tape          |
| `beesolve-sheep`       | Sheep thief walking across stars                               |
| `beesolve-paper`       | Whether each requested piece fits on the sheet (`Sim`/`Nao`)   |
| `beesolve-staircase`   | Count the constant-difference "staircases" in a sequence       |
| `beesolve-pequi`       | Distribute pequis among workers as the tray rotates            |

Example:

```
$ printf 'abcdef\nxbcdy\n' | beesolve-substring
3
```

## Library use

```python
from beesolve.substring import longest_common_substring
from beesolve.interleave import interleave
from beesolve.pages import count_pages
from beesolve.brainfuck import run

longest_common_substring("abcdef", "xbcdy")   # 3
interleave("Tpo", "oi")                        # "Topio"
count_pages("a bb ccc", 2, 5)                  # 1
run("++++++++[>++++++++<-]>+.", "")            # "A"
```

Other entry points:

- `beesolve.consumption`: the `House` dataclass, `group_consumption`,
  `average_consumption` and `format_city`.
- `beesolve.marbles`: `find_marbles` (returns `None` for a missing query) and
  `format_case`.
- `beesolve.interleave`: `split_words`.
- `beesolve.telephone`: `judge`, which returns a `Winner` member.
- `beesolve.brainfuck`: the `Interpreter` class with `step`, `run` and
  `output`. An unmatched loop bracket raises `UnterminatedLoopError`.
- `beesolve.sheep`: `steal_sheep` and `attack_summary`.
- `beesolve.paper`: `fits`.
- `beesolve.staircase`: `count_staircases`.
- `beesolve.pequi`: `distribute`.