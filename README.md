# drillbook

Classic programming drills written as a small, plain Python library with no
third-party dependencies. Each module covers one family of exercises; most
also have a command-line entry point that reads standard input.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module                 | Contents |
|------------------------|----------|
| `drillbook.patterns`   | `left_pyramid`, `right_pyramid`, `parity_triangle`, `countdown_rows`, `square_product`, `square_product_expression`, `alternating_sum` |
| `drillbook.text`       | `innings_summary` / `InningsSummary`, `count_characters` / `CharacterCounts`, `characters_of`, `repeat_per_character`, `concatenate` |
| `drillbook.stack`      | `BoundedStack` with `StackOverflowError` and `StackUnderflowError` |
| `drillbook.brackets`   | `is_matching_pair`, `is_balanced` |
| `drillbook.heaps`      | `max_ticket_revenue`, `sorted_prefix_sums`, `minimum_merge_cost`, `order_by_first_desc_second_asc`, `order_by_first_asc_second_desc`, `deque_demo` |
| `drillbook.prefix`     | `PrefixSums` for constant-time inclusive, 1-based range sums |
| `drillbook.multistage` | `shortest_distances`, `cheapest_route` and the `Route` result |
| `drillbook.sieve`      | `primes_up_to`, `every_nth` |

## Library examples

```python
from drillbook.brackets import is_balanced
from drillbook.heaps import minimum_merge_cost
from drillbook.stack import BoundedStack, StackOverflowError
from drillbook.sieve import primes_up_to

is_balanced("[{()}]")          # True
is_balanced("[(])")            # False

minimum_merge_cost([1, 2, 3])  # 9

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
stack.is_full()                # True
try:
    stack.push(3)
except StackOverflowError:
    pass
stack.pop()                    # 2

primes_up_to(30)               # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
```

`is_balanced` treats every character that is not an opening bracket as a
closer that must match the bracket on top of the stack, and brackets still
open at the end of the text are not an error: `is_balanced("((")` is `True`.

Range sums:

```python
from drillbook.prefix import PrefixSums

sums = PrefixSums([4, 1, 7, 3])
sums.range_sum(1, 3)           # 12
sums.range_sum(0, 2)           # raises IndexError
```

Cricket innings, where `1`-`6` are runs and `W` is a wicket:

```python
from drillbook.text import innings_summary

str(innings_summary("1264W1W"))  # '1.1 Overs 14 Runs 2 Wickets.'
```

Multistage graphs are square adjacency matrices with `None` for a missing
edge. `shortest_distances` gives every node's distance to the last node
(`math.inf` where it cannot be reached); `cheapest_route` returns a `Route`
with `cost` and 0-based `nodes`, and its string form lists the nodes 1-based,
joined by `->`. It raises `ValueError` if the last node cannot be reached.

## Commands

Each command reads from standard input and prints its answers:

- `drillbook-text` — a count followed by that many innings records; prints one summary per record.
- `drillbook-stack` — an interactive menu (`1` push, `2` pop, `0` end) on a three-slot stack.
- `drillbook-brackets` — one word; prints `YES` if balanced, `NO` otherwise.
- `drillbook-prefix` — `n q`, then `n` numbers, then `q` pairs `l r`; prints each range sum.
- `drillbook-multistage [distance|route]` — `distance` (the default) reads a node number and prints its distance to node 7 in a built-in eight-node graph; `route` prints the cheapest route through a built-in four-node graph.
- `drillbook-sieve [--limit N] [--step K]` — prints every `K`-th prime (default 100) up to `N` (default 100,000,000). The default limit needs a few hundred megabytes of memory; pass a smaller `--limit` for a quick run.

For example:

```
echo "[{()}]" | drillbook-brackets
printf '4 2\n4 1 7 3\n1 3\n2 4\n' | drillbook-prefix
drillbook-multistage route
```

## What it does not do

`drillbook.patterns` and `drillbook.heaps` have no commands; their functions
return lists, numbers and strings for the caller to print. The multistage
command works only on its built-in graphs and does not read a graph from input.