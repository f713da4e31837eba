# arraykit

Small, dependency-free implementations of classic array, sorting and string
algorithms. Functions that rearrange a sequence work in place and return
`None`.

## Installation

```
pip install .
```

## Modules

### `arraykit.sorting`

- `bubble_sort(values)`: stable ascending sort, in place; stops early once a pass makes no swap.
- `insertion_sort(values)`: stable ascending sort, in place.
- `selection_sort(values)`: ascending sort, in place, swapping in the smallest remaining element each step (not stable).
- `format_array(values)`: the values as text, separated by single spaces.

```python
from arraykit.sorting import bubble_sort, format_array

data = [4, 1, 5, 2, 3]
bubble_sort(data)
print(format_array(data))  # 1 2 3 4 5
```

### `arraykit.strings`

- `check_inclusion(s1, s2)`: whether some permutation of `s1` occurs as a
  substring of `s2`. Both strings must hold only lower-case ASCII letters,
  otherwise `ValueError` is raised. An empty `s2` never matches.
- `reverse_words(s)`: the space-separated words of `s` in reverse order,
  joined by single spaces; leading, trailing and repeated spaces are dropped.
  Raises `ValueError` if `s` holds no words.

```python
from arraykit.strings import check_inclusion, reverse_words

check_inclusion("ab", "eidbaooo")     # True
reverse_words("  the sky  is blue ")  # "blue is sky the"
```

### `arraykit.basics`

- `average(values)`: the arithmetic mean; `ValueError` on an empty sequence.
- `is_sorted(values)`: whether the values are in non-decreasing order.
- `copy_array(values)`: a new list with the same elements.
- `count_even_odd(values)`: an `EvenOddCount` named tuple with fields `even` and `odd`.
- `linear_search(values, target)`: the index of the first element equal to `target`, or `None`.
- `reverse_in_place(values)`: reverses the sequence in place.
- `smallest(values)`: the smallest element; `ValueError` on an empty input.
- `total(values)`: the sum of the elements.

```python
from arraykit.basics import count_even_odd, linear_search

count_even_odd([1, 2, 3, 4, 5, 6])   # EvenOddCount(even=3, odd=3)
linear_search([10, 25, 3, 7], 3)     # 2
linear_search([10, 25, 3, 7], 99)    # None
```

### `arraykit.two_pointers`

- `max_area(heights)`: the "container with most water" problem; 0 for fewer than two lines.
- `sort_colors(nums)`: single-pass in-place sort of 0s, 1s and 2s; any other value is treated as a 2.
- `merge_sorted(a, m, b, n)`: merges the first `n` items of sorted `b` into
  `a`, whose first `m` items are sorted and which has room for `n` more.
  Raises `ValueError` if the counts are negative or do not fit.
- `next_permutation(values)`: the next lexicographic permutation, in place;
  the last permutation wraps round to the first.
- `max_profit(prices)`: the best profit from one buy and a later sell, 0 if
  none is possible; `ValueError` on an empty list.

```python
from arraykit.two_pointers import max_area, max_profit, next_permutation

max_area([1, 8, 6, 2, 5, 4, 8, 3, 7])  # 49
max_profit([7, 1, 5, 3, 6, 4])         # 5

values = [1, 2, 3]
next_permutation(values)               # values is now [1, 3, 2]
```

## What it does not do

arraykit is a library only. It has no command-line program and does not read
input or print results; call the functions from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```