# algokit

A compact collection of classic algorithms written in plain Python, with no
dependencies outside the standard library.

## Installation

```
pip install .
```

Install with `pip install .[test]` to run the test suite with `pytest`.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.textalgo` | `failure_function`, `kmp_search`, `z_function`, `manacher`, `longest_palindrome_length`, `inverse_bwt` |
| `algokit.transforms` | `fft_convolve`, `ntt_convolve`, `walsh_hadamard`, `xor_convolve` |
| `algokit.numbertheory` | `lucas_binomial`, `sum_of_two_squares_count`, `burnside_orbits`, `min_grid_product` |
| `algokit.shortest_path` | `spfa`, `has_negative_cycle`, `NegativeCycleError` |
| `algokit.dominator` | `DominatorTree` |
| `algokit.dlx` | `DancingLinks` (exact cover and minimum repeated cover) |
| `algokit.flow` | `Dinic`, `ISAP`, `MinCostMaxFlow` |
| `algokit.lichao` | `LiChaoTree`, `solve_tree_jumps` |
| `algokit.rectangles` | `max_rectangle_area` |

## Examples

```python
from algokit.textalgo import kmp_search, longest_palindrome_length
from algokit.transforms import ntt_convolve, xor_convolve

kmp_search("abababa", "aba")               # [0, 2, 4]
longest_palindrome_length("abcdcbd")       # 5 ("bcdcb")

ntt_convolve([1, 2], [3, 4])               # [3, 10, 8], modulo 998244353
xor_convolve([1, 2], [3, 4])               # [11, 10]
```

`spfa(n, edges, source)` takes `(u, v, weight)` triples and returns a list of
distances, with `math.inf` for unreachable nodes; it raises
`NegativeCycleError` when a negative cycle is reachable from the source.

`DominatorTree(n, source)` collects edges with `add_edge` and `build()`
returns the immediate dominator of every node, `None` for the source and for
nodes it cannot reach.

`DancingLinks(rows, columns)` collects cells with `add`; `exact_cover()`
returns the sorted chosen rows or `None`, and `min_repeat_cover()` returns the
smallest number of rows covering every column, or `None`.

### Flow networks

Each network takes the number `n` of ordinary nodes `0 .. n-1`; the source is
node `n` and the sink node `n + 1`, also available as the `source` and `sink`
attributes:

```python
from algokit.flow import Dinic

net = Dinic(2)
net.add_edge(net.source, 0, 5)
net.add_edge(0, 1, 3)
net.add_edge(1, net.sink, 4)
net.max_flow()          # 3
```

`Dinic.max_flow` may be called again after adding edges; it returns only the
additional flow. `ISAP.max_flow` computes the flow once.
`MinCostMaxFlow.solve()` returns a `(flow, cost)` pair.

## Command-line tools

Two problem solvers read whitespace-separated integers from a file named on
the command line, or from standard input:

```
algokit-tree-jumps < input.txt
algokit-rectangles < input.txt
```

`algokit-tree-jumps` reads `n`, the arrays `a` and `b`, and `n - 1` tree
edges with 1-based node numbers, roots the tree at node 1, and prints on one
line the cheapest cost from every node down to a leaf, where a jump from `u`
to a descendant `v` costs `a[u] * b[v]`.

`algokit-rectangles` reads a count followed by that many steps for the first
staircase, then a count and the steps for the second, and prints the largest
rectangle area with a corner on each staircase.

## What it does not do

`algokit.textalgo` only inverts a Burrows-Wheeler transform; there is no
function that computes the forward transform.