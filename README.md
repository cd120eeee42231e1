# levaffinity

Levenshtein edit distance between two strings, and an *affinity* score that
turns that distance into a similarity: `1 - distance / longer length`.
Text is compared character by character (code point by code point), so
accented letters, Japanese, Arabic or Chinese text work the same way as
ASCII. Byte strings are supported too.

## Installation

```
pip install .
```

## Distance and affinity

```python
from levaffinity.distance import distance, affinity

d = distance("identificar", "identify", True)     # 4
score = affinity(len("identificar"), len("identify"), d)
print(f"{score * 100:.4f}%")                      # 63.6364%

distance("こんにちは", "こんばんは")                 # 2
distance("notre", "nôtre")                        # 1
distance("你好", "您好")                           # 1
distance(b"Hello", b"hello")                      # 0
```

`distance(str1, str2, case_sensitive=False)` returns the minimum number of
single-character insertions, deletions and substitutions needed to turn one
string into the other.

- Both arguments must be `str`, or both `bytes`; anything else raises
  `TypeError`.
- If either value is empty, the result is the length of the other.
- Unless `case_sensitive` is true, each character is lower-cased before
  comparing. A `str` character whose lower-case form is more than one
  character long is left as it is; `bytes` are lowered as ASCII.

`affinity(length1, length2, edit_distance)` returns
`1 - edit_distance / max(length1, length2)`. It raises `ValueError` if any
argument is negative, and returns `nan` when both lengths are zero.

## Matching a word against many items

`levaffinity.batch` compares one word against every item of a collection.
Comparisons are always case insensitive. Items can be anything: `key` is a
function that returns the text to compare for an item; when `key` is `None`
the item itself is compared.

Each result is a frozen dataclass `Match` with the fields `item`, `text`,
`distance` and `affinity`.

```python
from levaffinity.batch import iter_matches, match_all, apply_matches

settings = ["config_path", "log_level", "password_salt", "db_password"]

for match in iter_matches("password_alt", settings):
    print(match.text, match.distance, f"{match.affinity:.4f}")

results = match_all("projet_name", settings)          # two threads by default
best = max(results, key=lambda m: m.affinity)

scores = {}
count = apply_matches(
    "password_alt",
    settings,
    None,
    lambda m: scores.__setitem__(m.text, m.affinity),
    workers=2,
)
```

- `iter_matches(word, items, key=None)` yields a `Match` for each item, in
  order.
- `match_all(word, items, key=None, workers=2)` returns a list of all
  matches in the order of `items`. The items are split into `workers`
  contiguous slices (the last slice takes the remainder), each scored in its
  own thread.
- `apply_matches(word, items, key, callback, workers=1)` calls `callback`
  with each `Match` and returns the number of items processed. With more than
  one worker, callbacks for different slices may run concurrently.

Both `match_all` and `apply_matches` raise `ValueError` if `workers` is
less than 1.

## Command line

Compare two strings:

```
levaffinity compare identificar identify --case-sensitive
```

```
Distance: 4
Affinity: 63.6364%
```

Without `-c`/`--case-sensitive` the comparison ignores case.

Score candidates against a word (always case insensitive):

```
levaffinity search password_alt password_salt db_password smtp_password
```

Each candidate prints a line such as
`Distance: 1, Affinity: 92.3077%. password_salt`.

Options of `search`:

- `-f FILE`, `--file FILE` — also read candidates from a file, one per line,
  blank lines skipped; `-` reads standard input.
- `-w N`, `--workers N` — number of threads (default 1).
- `-t`, `--time` — print the elapsed time of the scoring.

When no candidates are given at all, `search` scores the word against a
built-in list of sample configuration key names (`levaffinity.cli.SAMPLE_KEYS`).

## What it does not do

Strings are compared as sequences of code points: there is no Unicode
normalisation, so a precomposed letter and the same letter written with a
combining accent count as different. Results are not sorted or filtered by
any threshold; that is left to the caller.