# kata_kit

Small, self-contained solutions to classic programming puzzles, grouped by theme.
The library has no runtime dependencies.

## Installing

```
pip install .
pip install ".[test]"   # with the test tools
```

## Modules

- `kata_kit.bigint`: arithmetic on non-negative decimal digit strings.
  `add_strings` and `sum_strings` add two digit strings, `multiply` multiplies
  them (product without leading zeros), `increment_string` increments the
  number at the end of a string keeping its zero padding (or appends `"1"`),
  and `up_array` adds one to a number given as a list of digits. Non-digit
  input raises `ValueError`.
- `kata_kit.numeric`: number puzzles: `multiplication_table`,
  `boolean_order` (count of true parenthesisations), `determinant`,
  `is_narcissistic`, `off_switches`, `smallest_possible_sum`, `digital_root`,
  `persistence`, `dig_pow`, `next_bigger`, `add_without_plus` (32-bit
  wrapping addition with bitwise operations), `group_by_commas` and
  `parse_int` (English number phrases such as `"two hundred and forty-six"`).
- `kata_kit.text`: string transforms: `to_camel_case`, `count_chars`,
  `duplicate_encode`, `is_valid_message`, `reverse_letters`, `spin_words`,
  `split_pairs`, `strip_comments`, `tower_builder`, `duplicate_count`,
  `highest_scoring_word`, `is_pangram`, `sort_inner_content`, `to_weird_case`,
  `reverse_words`.
- `kata_kit.calculator`: arithmetic spelled as calls, such as
  `seven(times(five()))`. The digit functions `zero` to `nine` return their
  value, or apply an `Operation` built by `plus`, `minus`, `times` or
  `divided_by`; division truncates toward zero.
- `kata_kit.sequences`: list helpers: `contains_all`, `find_odd`,
  `move_zeroes`, `sort_odd`, `unique_in_order`, `longest_consec`, and
  `make_looper`, which returns a function yielding the characters of a
  string in a loop.
- `kata_kit.greeter`: `Dinglemouse`, with chainable `set_age`, `set_sex` and
  `set_name`, whose `hello()` mentions the details in the order they were
  first set.
- `kata_kit.linked_list`: `Node` (iterable over its values) and `parse`, which
  turns `"1 -> 2 -> 3 -> null"` into a chain of nodes, and `"null"` into
  `None`.

## Examples

```python
from kata_kit.bigint import multiply, increment_string
from kata_kit.calculator import seven, times, five
from kata_kit.greeter import Dinglemouse
from kata_kit.linked_list import parse
from kata_kit.numeric import parse_int
from kata_kit.text import spin_words

multiply("12", "34")                # "408"
increment_string("foo099")          # "foo100"
seven(times(five()))                # 35
parse_int("two hundred forty-six")  # 246
spin_words("Hey fellow warriors")   # "Hey wollef sroirraw"
list(parse("1 -> 2 -> 3 -> null"))  # [1, 2, 3]
Dinglemouse().set_name("Bob").set_age(27).hello()
# "Hello. My name is Bob. I am 27."
```

## What it does not do

The package is a library only: it has no command-line program, and every
puzzle is reached by importing its function from Python.

## Running the tests

```
pytest
```