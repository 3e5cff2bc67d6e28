# contestkit

Solvers for a collection of competitive programming problems. Each solver is
a plain Python function you can call directly, and each group of problems also
ships a command that reads the usual contest input from standard input and
writes the answers to standard output.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the functions

```python
from contestkit.round1029 import fits_in_window, interleaved_permutation
from contestkit.round1032 import has_repeated_inner

fits_in_window([0, 1, 1, 0], 2)   # True
interleaved_permutation(5)        # [1, 3, 5, 4, 2]
has_repeated_inner("abca")        # True: the inner "a" repeats an end
```

Modules and their functions:

| Module | Functions |
| --- | --- |
| `contestkit.round1029` | `can_zero_out`, `fits_in_window`, `interleaved_permutation`, `count_cool_segments` |
| `contestkit.round1030` | `binary_prefix`, `reversal_operations` |
| `contestkit.round1031` | `count_purchases`, `can_reach`, `max_gold` |
| `contestkit.round1032` | `min_travel`, `has_repeated_inner`, `min_max_after_cross`, `sort_pair`, `digit_score` |
| `contestkit.rook_tours` | `count_tours` |
| `contestkit.elevator` | `reachable_floors` |
| `contestkit.tree_colorings` | `count_colorings` |

Every module also has `main(argv=None)`, which reads problem input from
standard input and prints the answers.

## Commands

The round commands take the letter of the problem to solve, then read the
number of test cases followed by each case on standard input:

```
contestkit-round1029 a < input.txt     # problems a, b, c, d
contestkit-round1030 a < input.txt     # problems a, b, c, d (b, c and d share a solver)
contestkit-round1031 a < input.txt     # problems a, b, c
contestkit-round1032 a < input.txt     # problems a, b, c, d, e, f
```

The other commands take no problem argument:

```
contestkit-rook-tours < input.txt       # one tour count per grid
contestkit-elevator < input.txt         # prints reachable/total as "count/(n-1)"
contestkit-tree-colorings < input.txt
```

`contestkit-tree-colorings` prints a line `here` for each tree it reads and
stops after the first tree for which `count_colorings` gives a count.

Run any command with `--help` to see its options.

## Limits

For partitioning an array into segments, the package offers only the greedy
count of `count_cool_segments`; it has no exhaustive search for the largest
possible partition.