# pushswap

A library for the push_swap sorting puzzle. A list of distinct integers sits
on stack **a** and stack **b** starts empty. The goal is to sort **a** in
ascending order using only these operations:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of a, b, or both |
| `pa`, `pb` | move the top element of b onto a, or the top of a onto b |
| `ra`, `rb`, `rr` | rotate a, b, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate a, b, or both: the bottom element comes to the top |

Each operation writes its name as a line to an output stream, unless it is
called with `does_print=False`. Every call is counted, so you can measure
what a strategy costs.

## Modules

- `pushswap.stack`: `Node` (a value and its rank) and `Stack`.
  - `Stack` is a double-ended stack that you iterate from top to bottom.
  - It provides `push`, `pop`, `append`, `swap`, `rotate` and
    `reverse_rotate`.
  - It answers questions about its contents: `is_sorted`, `min_value`,
    `max_value`, `min_index`, `max_index` and `position`.
  - `assign_indexes` gives each node its rank. `disorder` is the share of
    node pairs that are inverted. `has_duplicate` checks for repeated values.
  - `values` and `indexes` list the nodes' contents.
- `pushswap.parse`: turns argument strings into a `Stack`.
  - `parse_args` skips arguments that start with `--`.
  - It raises `ParseError` (a `ValueError`) for a malformed number, a value
    outside the 32-bit int range, or a value given twice.
  - `is_valid_number` and `parse_int` are the checks it relies on.
- `pushswap.operations`: `PushSwap`, `Bench`, `Strategy`, `isqrt` and `max_bits`.
  - `PushSwap` holds stacks `a` and `b` and performs the eleven operations.
  - It counts each operation in a `Bench`.
  - When it is built, it assigns indexes to `a` and records the disorder of `a`.
  - `rotate_to_top` brings a position to the top of a stack by the shorter
    direction.
  - `Strategy` names `SIMPLE`, `MEDIUM`, `COMPLEX` and `ADAPTIVE`.
- `pushswap.sort`: the sorting routines.
  - `sort_two`, `sort_three`, `sort_four` and `sort_five` handle small stacks.
  - `sort_simple` is a selection sort, O(n²).
  - `sort_medium` is a range-chunked sort, O(n·√n). It hands stacks of five
    or fewer to `sort_simple`.
- `pushswap.report`: builds the text of reports.
  - `format_benchmark` returns the benchmark summary. It returns an empty
    string when bench mode is off.
  - `format_disorder` and `strategy_label` format the parts of that summary.
  - `error_message` returns `"Error\n"`.
- `pushswap.libft`: small general-purpose helpers.
  - `chars`: ASCII classification and case conversion.
  - `numbers`: `atoi`, which clamps to the int range, and `itoa`.
  - `linked`: `LinkedList`, a singly linked list.
  - `text`: string helpers such as `split`, `strtrim`, `substr`, `strlcpy`
    and `strncmp`.
  - `memory`: byte-buffer helpers on `bytearray`.
  - `output`: `put_*` writers and a small `printf` / `format_printf`.

## Example

```python
import io

from pushswap.operations import PushSwap, Strategy
from pushswap.parse import parse_args
from pushswap.report import format_benchmark
from pushswap.sort import sort_medium

stack = parse_args(["3", "-1", "7", "0", "12", "5", "2"])

out = io.StringIO()
ps = PushSwap(stack, out, Strategy.MEDIUM, True)
sort_medium(ps)

print(out.getvalue())        # one operation per line: "pb", "ra", ...
print(ps.a.values())         # [-1, 0, 2, 3, 5, 7, 12]
print(format_benchmark(ps))  # disorder, strategy and operation counts
```

## What the package does not do

- There is no `push_swap` command. The package is a library only. Reading
  `sys.argv`, picking a strategy and printing `error_message()` to standard
  error are left to the caller.
- `Strategy.COMPLEX` and `Strategy.ADAPTIVE` do not have sorting routines of
  their own. Their only use is to label the benchmark report.

## Running the tests

Install the package with its `test` extra, then run `pytest` from the project
directory.