# contestalgos

Classic programming-contest algorithms as plain Python functions. Each one
takes ordinary Python data (lists, tuples, strings, integers) and returns the
answer. There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

### `contestalgos.graphs`

- `longest_path_from(edges, start)`: for a directed acyclic graph given as
  `(from, to)` pairs, returns `(length, end)` of the longest path from `start`;
  among ends at the same distance the smallest node wins, and with no outgoing
  edges the result is `(0, start)`.
- `camera_cities(names, routes)`: the cities whose removal disconnects the map
  (articulation points), sorted by name. Raises `ValueError` for a route naming
  an unknown city.
- `count_articulation_points(n, edges)`: number of articulation points among
  nodes `1..n`, found by a search started from node 1.
- `most_reachable_node(n, adjacency)`: the node in `1..n` that reaches the most
  nodes, the smallest on ties; `adjacency[i - 1]` lists the successors of node
  `i`. Returns 0 when `n` is 0.
- `is_bipartite(n, edges)`: whether an undirected graph on `1..n` can be
  two-coloured.
- `longest_chain(n, edges)`: number of nodes on the longest downward chain in a
  directed graph on `1..n`.
- `can_travel(edges, start, end, days)`: whether a walk of exactly `days` roads
  of an undirected graph leads from `start` to `end`.
- `max_trip_profit(costs, start, ends, days)`: best total profit of a walk of
  `days` steps from `start` that finishes in one of `ends`;
  `costs[i - 1][j - 1]` is the profit of going from city `i` to city `j`.

### `contestalgos.search`

- `min_lock_presses(start, target, forbidden=())`: fewest single-wheel turns
  on a four-digit lock from `start` to `target` without passing through a
  forbidden code, or `-1`. Raises `ValueError` for a state that is not four
  digits 0-9.
- `one_char_difference(a, b)`: whether two equal-length words differ in
  exactly one position.
- `word_ladder_distance(dictionary, source, target)`: fewest one-letter changes
  through dictionary words; raises `ValueError` when `target` cannot be reached.

### `contestalgos.dp`

- `super_sale(items, capacities)`: total price taken by shoppers with the given
  carrying capacities, from `(price, weight)` items, each shopper taking each
  item at most once.
- `min_pebbles(board)`: fewest pebbles left on a board of `'o'` and `'-'`
  after jumping.
- `cubic_coin_ways(amount)`: ways to pay with coins worth 1, 8, 27, ...
- `coin_change_ways(amount)`: ways to pay with 1, 5, 10, 25 and 50 cent coins.
- `prime_sum_ways(n, k)`: ways to write `n` as a sum of `k` distinct primes.
- `max_interceptions(heights)`: length of the longest strictly decreasing
  subsequence.
- `treasure_dive(total_time, coefficient, treasures)`: returns a `DivePlan`
  with `gold` (the best total) and `treasures` (the `(depth, gold)` pairs
  chosen, in input order). Each treasure costs `3 * depth * coefficient` time.

### `contestalgos.grids`

- `count_ships(grid)`: number of connected groups of non-`'.'` cells that still
  hold at least one `'x'` (`'@'` marks a hit part).
- `hex_winner(board)`: `'B'` if black stones (`'b'`) join the top row to the
  bottom row on a hexagonal board, otherwise `'W'`.

### `contestalgos.strings`

- `prefix_function(s)`: the KMP prefix (failure) table.
- `power_of_string(s)`: `len(s)` divided, rounded down, by the shortest period
  found from the prefix table; raises `ValueError` for an empty string.
- `extend_to_palindrome(s)`: `s` with the fewest characters appended to make a
  palindrome.
- `finger_for(char)`: the finger (1-10) that types a key, or `None`.
- `longest_typeable_words(lost_fingers, words)`: the longest words that can be
  typed without the lost fingers, sorted; typeable words where one is a prefix
  of another are merged, keeping the longer.

### `contestalgos.numeric`

- `solve_equation(p, q, r, s, t, u)`: a root in `[0, 1]` of
  `p*e^-x + q*sin x + r*cos x + s*tan x + t*x^2 + u` by bisection, or `None`
  when the ends share a sign.
- `crossed_ladders_width(x, y, c)`: street width at which ladders of lengths
  `x` and `y` cross at height `c`.
- `shortest_subsequence_length(values, target)`: length of the shortest
  contiguous run summing to at least `target`, or 0.
- `min_max_capacity(vessels, containers)`: smallest container capacity that
  takes all vessels, in order, into at most `containers` containers.
- `team_sum(n)`: `n * 2^(n-1)` modulo 1000000007 (0 for `n = 0`).
- `kth_permutation(s, n)`: the `n`-th (zero-based) permutation of the sorted
  characters of `s`; raises `ValueError` when `n` is out of range.

## Example

```python
from contestalgos.strings import extend_to_palindrome
from contestalgos.dp import coin_change_ways

extend_to_palindrome("abc")   # "abcba"
coin_change_ways(11)          # 4
```

## What it does not do

There is no command-line program: nothing here reads contest-style input files
or prints formatted answers. Call the functions from Python with the data
already parsed.