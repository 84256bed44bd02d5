# cpsolve

Solutions to a handful of well-known competitive-programming problems,
plus the small pieces of reusable machinery they are built on.

Every problem ships as a command that reads the judge's input format from
standard input and writes the answer to standard output. The core logic of
each one is also available as a plain function, so it can be imported and
tested on its own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command                      | What it does |
|------------------------------|--------------|
| `cpsolve-bitpp`              | Reads a count, then that many statements; a statement containing `+` (and no `-`) adds one, one containing `-` (and no `+`) subtracts one. Prints the final value, starting from 0. |
| `cpsolve-eating-game`        | Reads a number of test cases; each is a count followed by that many integers. Prints, per case, how many values equal the maximum. |
| `cpsolve-elephant`           | Reads a distance and prints the fewest steps of length 1 to 5 needed to cover it. |
| `cpsolve-football`           | Reads one line and prints `YES` if some character repeats seven or more times in a row, else `NO`. |
| `cpsolve-social-experiment`  | Reads a number of test cases; for each `n` prints `n` when it is 2 or 3, otherwise `n` modulo 2. |
| `cpsolve-team`               | Reads a count, then that many rows of digits; prints how many rows have a digit sum of at least 2. |
| `cpsolve-trippi-troppi`      | Reads a number of test cases of three words each and prints the first letters of the three words. |
| `cpsolve-watermelon`         | Reads a weight and prints `Yes` if it is even and not 2, else `No`. |
| `cpsolve-word-abbreviation`  | Reads a count, then that many words; words longer than ten characters become first letter, inner length, last letter. |

Each command accepts `-h`/`--help` and no other options.

Examples:

```
$ echo 13 | cpsolve-elephant
3

$ printf '4\nword\nlocalization\ninternationalization\npneumonoultramicroscopicsilicovolcanoconiosis\n' | cpsolve-word-abbreviation
word
l10n
i18n
p43s

$ echo 8 | cpsolve-watermelon
Yes
```

## Library

```python
from cpsolve.dsu import DisjointSet
from cpsolve.accounts import accounts_merge
from cpsolve.search import binary_search
from cpsolve.scanner import Scanner
from cpsolve.elephant import min_steps
from cpsolve.word_abbreviation import abbreviate

ds = DisjointSet(5)
ds.union(0, 1)         # True: two sets were joined
ds.union(1, 0)         # False: already in the same set
ds.find(0) == ds.find(1)

binary_search([1, 3, 5, 7], 5)   # 2
binary_search([1, 3, 5, 7], 4)   # None

merged = accounts_merge([
    ["John", "johnsmith@example.com", "john_newyork@example.com"],
    ["John", "johnsmith@example.com", "john00@example.com"],
    ["Mary", "mary@example.com"],
])
# Each entry is a name followed by that person's e-mails in sorted order.

scanner = Scanner("3\nalpha beta\n")
scanner.token(int)     # 3
scanner.token()        # "alpha"

min_steps(12)          # 3
abbreviate("localization")  # "l10n"
```

### Modules

- `cpsolve.dsu`: `DisjointSet(n)`, a union-find structure over `0 .. n-1`
  with path compression and union by size. `find(i)` returns a set's
  representative and `union(i, j)` returns whether two sets were joined.
  Out-of-range elements raise `IndexError`.
- `cpsolve.accounts`: `accounts_merge(accounts)`, which joins accounts that
  share an e-mail address. The order of the merged accounts is not fixed.
- `cpsolve.search`: `binary_search(arr, target)`, which returns an index of
  `target` in a sorted sequence, or `None` if it is not there.
- `cpsolve.scanner`: `Scanner`, built from a string or a text stream, which
  reads whitespace-separated tokens with `token(kind)` (raising `EOFError`
  once the input is exhausted) or whole lines with `line()`.
- `cpsolve.bitpp`: `execute(statements)`.
- `cpsolve.eating_game`: `count_ties(values)`.
- `cpsolve.elephant`: `min_steps(distance)`.
- `cpsolve.football`: `is_dangerous(situation)`.
- `cpsolve.social_experiment`: `answer(n)`.
- `cpsolve.team`: `count_solved(rows)`.
- `cpsolve.trippi_troppi`: `initials(words)`.
- `cpsolve.watermelon`: `can_split(weight)`.
- `cpsolve.word_abbreviation`: `abbreviate(word)`.

Each problem module also has a `main(argv=None)` function, which is what
the matching command runs.

## Limits

Account merging and binary search are library functions only; there is no
command that reads their input from standard input.