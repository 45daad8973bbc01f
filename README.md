# iteradapt

Lazy iterator adaptors and sources for Python, covering ground that `itertools` leaves
open: merge joins, peeking several items ahead, putting items back, fixed-size tuples and
windows, finding the minimum and maximum in one pass, permutations that discover the
length of their source as they go, and more.

Every adaptor is an ordinary Python iterator. Most of them also have a `size_hint()`
method returning `(lower, upper)` bounds on the number of items still to come; the upper
bound is `None` when it is unknown.

## Installation

```
pip install iteradapt
```

There are no runtime dependencies. To run the test suite, install the `test` extra
(`pytest` and `hypothesis`) and run `pytest`.

## A short tour

Merge-join two ascending sequences with a three-way comparison (negative, zero or
positive):

```python
from iteradapt.merge_join import merge_join_by

pairs = list(merge_join_by([1, 3, 4, 6], [2, 3, 4, 5], lambda l, r: (l > r) - (l < r)))
# [Left(value=1), Right(value=2), Both(left=3, right=3),
#  Both(left=4, right=4), Right(value=5), Left(value=6)]
```

`MergeJoinBy` also has `count()`, `last()` and `nth(n)`.

Peek ahead without consuming:

```python
from iteradapt.multipeek import multipeek
from iteradapt.peek_nth import peek_nth

mp = multipeek([1, 2, 3])
mp.peek(), mp.peek()      # (1, 2): each peek moves a cursor forward
next(mp)                  # 1, and the peek cursor is reset

it = peek_nth([1, 2, 3])
it.peek_nth(2)            # 3
next(it)                  # 1
```

`peek` and `peek_nth` return a `default` (normally `None`) past the end.

Put values back in front:

```python
from iteradapt.put_back_n import put_back_n

pb = put_back_n(range(1, 5))
next(pb)
pb.put_back(1)
pb.put_back(0)
list(pb)                  # [0, 1, 2, 3, 4]
```

Take items while a predicate holds, without losing the first one that fails:

```python
from iteradapt.peeking import Peekable, peeking_take_while

it = Peekable([1, 2, 5, 3])
list(peeking_take_while(it, lambda x: x < 4))   # [1, 2]
next(it)                                        # 5
```

`peeking_take_while` accepts any iterator with a `peeking_next(accept)` method:
`Peekable`, `MultiPeek`, `PeekNth` and `PutBackN` all have one. `peeking_next` returns
the next item if `accept(item)` is true and raises `StopIteration` otherwise.

Group items into tuples and windows:

```python
from iteradapt.tuples import tuples, tuple_windows, circular_tuple_windows

t = tuples(range(5), 3)
list(t)                                     # [(0, 1, 2)]
list(t.into_buffer())                       # [3, 4]
list(tuple_windows(range(4), 2))            # [(0, 1), (1, 2), (2, 3)]
list(circular_tuple_windows([1, 2, 3], 2))  # [(1, 2), (2, 3), (3, 1)]
```

Combinatorics:

```python
from iteradapt.permutations import permutations
from iteradapt.powerset import powerset

list(powerset(range(3)))
# [[], [0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]]
permutations(range(4), 2).count()   # 12
```

Find the minimum and maximum in one pass:

```python
from iteradapt.minmax import minmax

minmax([3, 1, 4, 1, 5])   # MinMax(min=1, max=5)
minmax([]).into_option()  # None
```

The minimum is the first of the smallest items and the maximum the last of the largest.
`minmax_by_key` and `minmax_by` take a key function or a three-way comparison.

Work with a stream of results:

```python
from iteradapt.process_results import Err, Ok, ResultError, process_results

process_results([Ok(1), Ok(0), Ok(3)], max)      # 3

try:
    process_results([Ok(2), Err("overflow")], max)
except ResultError as exc:
    exc.error                                    # 'overflow'
```

The processor sees the `Ok` values up to the first `Err`; if there was one,
`ResultError` carrying it is raised after the processor returns.

## Modules

- `iteradapt.size_hint`: arithmetic on `(lower, upper)` size hints (`add`, `add_scalar`,
  `sub_scalar`, `mul`, `mul_scalar`, `pow_scalar_base`, `max_hint`, `min_hint`) and `of`,
  the best known hint for any iterable. Bounds saturate at 2**64 - 1; an upper bound that
  would overflow becomes `None`.
- `iteradapt.merge_join`: `merge_join_by` and the `Left`, `Right` and `Both` values.
- `iteradapt.zip_longest`: `zip_longest(a, b)`, yielding `Both` while both sides have
  items, then `Left` or `Right`.
- `iteradapt.zip_eq`: `zip_eq(i, j)`, which raises `LengthMismatchError` (a `ValueError`)
  when one input ends before the other.
- `iteradapt.multizip`: `multizip(iterables)` zips any number of iterables into tuples;
  `multiunzip(iterable, n)` splits `n`-tuples into `n` lists and raises `ValueError` on a
  row of the wrong length.
- `iteradapt.minmax`: `minmax`, `minmax_by_key`, `minmax_by`, returning `NoElements`,
  `OneElement` or `MinMax`, each with `into_option()`.
- `iteradapt.peeking`: `PeekingNext`, `Peekable` and `peeking_take_while`.
- `iteradapt.multipeek`: `multipeek`, with `peek`, `reset_peek` and `peeking_next`.
- `iteradapt.peek_nth`: `peek_nth`, with `peek`, `peek_nth` and `peeking_next`.
- `iteradapt.put_back_n`: `put_back_n`, with `put_back` and `peeking_next`.
- `iteradapt.pad_using`: `pad_using(iterable, minimum, filler)` appends
  `filler(index)` until at least `minimum` items have been yielded.
- `iteradapt.repeat_n`: `repeat_n(element, n)`, which also supports `len()`.
- `iteradapt.permutations`: `permutations(iterable, k)` yields lists; `count()` raises
  `OverflowError` when the count exceeds 2**64 - 1.
- `iteradapt.powerset`: `powerset(iterable)` yields every subset as a list, smallest first.
- `iteradapt.process_results`: `Ok`, `Err`, `ResultError`, `ProcessResults` (with
  `fold`) and `process_results`.
- `iteradapt.rciter`: `rciter(iterable)` returns a handle whose `clone()` gives more
  handles on the same underlying iterator.
- `iteradapt.tee`: `tee(iterable)` returns two iterators that each yield every item.
- `iteradapt.sources`: `repeat_call(function)`, `unfold(initial_state, f)` (where `f`
  returns `(item, next_state)` or `None` to stop) and `iterate(initial_value, f)`.
- `iteradapt.tuples`: `tuples`, `tuple_windows` and `circular_tuple_windows`; the tuple
  size must be at least 1.
- `iteradapt.unique`: `unique` and `unique_by`, both with `count()`.
- `iteradapt.with_position`: `with_position(iterable)` yields `(Position, item)` pairs,
  where `Position` is `FIRST`, `MIDDLE`, `LAST` or `ONLY`.

## What it does not do

This is a library of separate modules; the top-level `iteradapt` package exports nothing,
so import each adaptor from its module. There is no method-chaining wrapper and no command
line tool.