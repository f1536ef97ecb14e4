# leetsolve

A collection of solutions to classic algorithm puzzles. Each puzzle has its
own module, and many come in more than one approach (brute force, hash
table, two pointers, binary search, dynamic programming) so you can compare
them side by side. There are no third-party dependencies.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

Every solution is a plain function that takes Python values and returns
Python values.

```python
from leetsolve.two_sum import two_sum
from leetsolve.integer_to_roman import int_to_roman
from leetsolve.roman_to_integer import roman_to_int
from leetsolve.zigzag_conversion import convert
from leetsolve.regular_expression_matching import is_match

two_sum([2, 7, 11, 15], 9)          # [0, 1]
int_to_roman(1994)                  # "MCMXCIV"
roman_to_int("LVIII")               # 58
convert("PAYPALISHIRING", 3)        # "PAHNAPLSIIGYIR"
is_match("aab", "c*a*b")            # True
```

Linked-list puzzles use the `ListNode` dataclass together with the helpers
`to_list` (an iterable of ints to a list, `None` when empty) and `to_vector`
(a non-empty list back to a Python list; `None` raises `ValueError`):

```python
from leetsolve.listnode import to_list, to_vector
from leetsolve.add_two_numbers import add_two_numbers

result = add_two_numbers(to_list([2, 4, 3]), to_list([5, 6, 4]))
to_vector(result)                   # [7, 0, 8]
```

`ListNode` also has `append(elem)` to add a node at the end, and iterating a
node yields its values.

## Modules

- Arrays and hashing
  - `two_sum`: `two_sum_brute_force`, `two_sum_two_pass_hashmap`, `two_sum`
  - `contains_duplicate`: `contains_duplicate`
  - `group_anagrams`: `group_anagrams` (lower-case `a`–`z` words only)
  - `valid_anagram`: `is_anagram`
  - `top_k_frequent_elements`: `top_k_frequent`
  - `product_of_array_except_self`: `product_except_self`,
    `product_except_self_on`, `product_except_self_on2`
  - `longest_consecutive_sequence`: `longest_consecutive`
  - `encode_and_decode_strings`: `encode`, `decode` (length-prefixed
    `<length>#<string>` entries)
- Two pointers
  - `container_with_most_water`: `max_area`, `max_area_brute_force`
  - `three_sum`: `three_sum`
  - `three_sum_closest`: `three_sum_closest`
  - `valid_palindrome`: `is_palindrome`, `is_palindrome_str_clone`
- Strings
  - `longest_common_prefix`: `longest_common_prefix`,
    `longest_common_prefix_horizontal`, `longest_common_prefix_vertical`,
    `longest_common_prefix_divide_and_conquer`,
    `longest_common_prefix_binary_search`, `longest_common_prefix_trie`,
    and the `Trie` class (`insert`, `search_longest_prefix`)
  - `longest_palindromic_substring`: `longest_palindrome_check_all`,
    `longest_palindrome_dynamic`, `longest_palindrome_center_expand`,
    `longest_palindrome_manachers`
  - `longest_substring`: `length_of_longest_substring`
  - `zigzag_conversion`: `convert`, `convert_pretty_but_inefficient`
  - `string_to_integer`: `my_atoi` (clamped to the 32-bit signed range)
  - `regular_expression_matching`: `is_match`, `is_match_brute` (literals,
    `.` and `*`, matching the whole text)
- Numbers
  - `reverse_integer`: `reverse` (0 when the result leaves 32 bits)
  - `palindrome_number`: `is_palindrome`
  - `integer_to_roman`: `int_to_roman`, `int_to_roman_not_fast`
  - `roman_to_integer`: `roman_to_int`
  - `median_of_two_sorted_arrays`: `find_median_sorted_arrays`,
    `find_median_sorted_arrays_binary_search`,
    `find_median_sorted_arrays_better_binary_search`
- Linked lists: `listnode`, `add_two_numbers`
- Helpers: `string_utils.remove_non_alphanumeric`

## Behaviour worth knowing

The approaches within a module do not always agree outside the usual inputs:

- `longest_common_prefix_horizontal` shrinks its candidate while the string
  still contains it, starting from the first string itself, so it returns `""`.
- `three_sum_closest` starts its best guess at 0 and only replaces it with a
  sum closer to the target than 0 is.
- `product_except_self_on` returns `[0]` for a single element, and
  `product_except_self_on2` gives 0 where there are no other elements.
- `convert_pretty_but_inefficient` drops any `#` in its input.
- `longest_palindrome_check_all` returns the leftmost longest palindrome,
  `longest_palindrome_dynamic` the rightmost.

Inputs a function cannot work with, such as empty lists where a value is
needed or a `k` larger than the number of distinct values, raise `ValueError`.

## What this package does not do

It is a library of functions only: there is no command-line program and
nothing reads input files or stores results.